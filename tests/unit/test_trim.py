"""Unit tests for the trim operation."""

import math

import pytest

from draftcore.core.intersection import find_intersections
from draftcore.core.trim import trim, trim_circle, trim_line
from draftcore.domain import Arc, Circle, Line, Point, Rectangle


def _line(x1, y1, x2, y2) -> Line:
    return Line(start=Point(x1, y1), end=Point(x2, y2), layer="L")


class TestTrimLine:
    """Tests for trim_line."""

    def test_keep_start_side(self) -> None:
        line = _line(0, 0, 10, 0)
        cutter = _line(5, -5, 5, 5)
        result = trim_line(line, cutter, Point(5, 0), Point(2, 0))
        assert result is not None
        assert result.id == line.id
        assert (result.start, result.end) == (Point(0, 0), Point(5, 0))

    def test_keep_end_side(self) -> None:
        line = _line(0, 0, 10, 0)
        result = trim_line(line, _line(5, -5, 5, 5), Point(5, 0), Point(8, 0))
        assert result is not None
        assert (result.start, result.end) == (Point(5, 0), Point(10, 0))

    def test_cut_point_off_segment(self) -> None:
        line = _line(0, 0, 10, 0)
        assert trim_line(line, _line(15, -5, 15, 5), Point(15, 0), Point(2, 0)) is None

    def test_cut_at_endpoint_is_noop(self) -> None:
        line = _line(0, 0, 10, 0)
        assert trim_line(line, _line(10, -5, 10, 5), Point(10, 0), Point(2, 0)) is None
        assert trim_line(line, _line(0, -5, 0, 5), Point(0, 0), Point(2, 0)) is None

    def test_idempotent(self) -> None:
        """Trimming an already trimmed line at the same point changes nothing."""
        line = _line(0, 0, 10, 0)
        cutter = _line(5, -5, 5, 5)
        once = trim_line(line, cutter, Point(5, 0), Point(2, 0))
        assert once is not None
        assert trim_line(once, cutter, Point(5, 0), Point(2, 0)) is None

    def test_entity_method(self) -> None:
        line = _line(0, 0, 10, 0)
        result = line.trim(_line(5, -5, 5, 5), Point(5, 0), Point(8, 0))
        assert result is not None
        assert result.start == Point(5, 0)


class TestTrimCircle:
    """Tests for trim_circle."""

    def test_keeps_clicked_half(self) -> None:
        """A horizontal cutter through the center leaves the upper half."""
        circle = Circle(center=Point(0, 0), radius=5, layer="L", color=0xFF112233, line_width=2.0)
        cutter = _line(-10, 0, 10, 0)
        points = find_intersections(cutter, circle)
        result = trim_circle(circle, cutter, points, Point(0, 5))
        assert len(result) == 1
        arc = result[0]
        assert isinstance(arc, Arc)
        assert arc.start_angle == pytest.approx(0.0)
        assert arc.end_angle == pytest.approx(math.pi)
        assert arc.radius == 5
        assert arc.center == circle.center
        assert arc.id != circle.id
        assert arc.layer == circle.layer
        assert arc.color == circle.color
        assert arc.line_width == circle.line_width
        assert arc.is_selected is False

    def test_keeps_lower_half(self) -> None:
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        cutter = _line(-10, 0, 10, 0)
        result = trim_circle(circle, cutter, find_intersections(cutter, circle), Point(0, -5))
        assert len(result) == 1
        assert result[0].start_angle == pytest.approx(math.pi)
        assert result[0].end_angle == pytest.approx(0.0, abs=1e-9)

    def test_needs_two_points(self) -> None:
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        assert trim_circle(circle, _line(5, -5, 5, 5), [Point(5, 0)], Point(0, 5)) == []

    def test_coincident_points_rejected(self) -> None:
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        assert trim_circle(circle, _line(5, -5, 5, 5), [Point(5, 0), Point(5, 0)], Point(0, 5)) == []

    def test_entity_method(self) -> None:
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        cutter = _line(-10, 0, 10, 0)
        result = circle.trim(cutter, find_intersections(cutter, circle), Point(0, 5))
        assert len(result) == 1


class TestTrimDispatch:
    def test_line_uses_nearest_intersection(self) -> None:
        line = _line(0, 0, 10, 0)
        rect = Rectangle(top_left=Point(3, -1), bottom_right=Point(7, 1), layer="L")
        points = find_intersections(rect, line)
        result = trim(line, rect, points, Point(8, 0))
        assert len(result) == 1
        assert result[0].start == Point(7, 0)
        assert result[0].end == Point(10, 0)

    def test_no_intersections(self) -> None:
        assert trim(_line(0, 0, 10, 0), _line(0, 5, 10, 5), [], Point(1, 0)) == []

    def test_unsupported_variant(self) -> None:
        rect = Rectangle(top_left=Point(0, 0), bottom_right=Point(10, 10), layer="L")
        cutter = _line(5, -5, 5, 15)
        assert trim(rect, cutter, find_intersections(cutter, rect), Point(1, 1)) == []
