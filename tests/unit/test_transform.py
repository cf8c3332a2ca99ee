"""Unit tests for move, rotate, scale, mirror and offset copies."""

import math

import pytest

from draftcore.core.transform import (
    mirror,
    mirror_point,
    offset_copy,
    rotate,
    rotate_point,
    scale,
    translate,
)
from draftcore.domain import Arc, Circle, Ellipse, Line, Point, Polyline, Rectangle, Spline
from draftcore.exceptions import GeometryError


def _approx_point(point: Point, x: float, y: float) -> None:
    assert point.x == pytest.approx(x, abs=1e-9)
    assert point.y == pytest.approx(y, abs=1e-9)


class TestPointTransforms:
    def test_rotate_quarter_turn(self) -> None:
        _approx_point(rotate_point(Point(2, 1), Point(1, 1), math.pi / 2), 1, 2)

    def test_mirror_across_diagonal(self) -> None:
        assert mirror_point(Point(3, 0), Point(0, 0), Point(1, 1)) == Point(0, 3)

    def test_mirror_degenerate_axis(self) -> None:
        assert mirror_point(Point(3, 4), Point(1, 1), Point(1, 1)) == Point(3, 4)


class TestTranslate:
    def test_translate_keeps_id(self) -> None:
        line = Line(start=Point(0, 0), end=Point(1, 1), layer="L")
        moved = translate(line, 2, 3)
        assert moved.id == line.id
        assert (moved.start, moved.end) == (Point(2, 3), Point(3, 4))

    def test_translate_polyline_and_spline(self) -> None:
        poly = Polyline(points=(Point(0, 0), Point(1, 0)), layer="L")
        spline = Spline(control_points=(Point(0, 0), Point(1, 1)), layer="L")
        assert translate(poly, 1, 1).points == (Point(1, 1), Point(2, 1))
        assert translate(spline, 0, -1).control_points == (Point(0, -1), Point(1, 0))


class TestOffsetCopy:
    def test_copy_gets_new_id(self) -> None:
        line = Line(start=Point(0, 0), end=Point(4, 0), layer="L", is_selected=True)
        copy = offset_copy(line, 0, 3)
        assert copy.id != line.id
        assert (copy.start, copy.end) == (Point(0, 3), Point(4, 3))
        assert not copy.is_selected
        assert copy.layer == line.layer
        assert line.start == Point(0, 0)

    def test_arc_keeps_angles(self) -> None:
        arc = Arc(center=Point(0, 0), radius=2, start_angle=0.5, end_angle=2.0, layer="L")
        copy = offset_copy(arc, -1, 1)
        assert copy.center == Point(-1, 1)
        assert (copy.start_angle, copy.end_angle) == (0.5, 2.0)


class TestRotate:
    def test_rotate_line(self) -> None:
        line = Line(start=Point(1, 0), end=Point(2, 0), layer="L")
        rotated = rotate(line, Point(0, 0), math.pi / 2)
        _approx_point(rotated.start, 0, 1)
        _approx_point(rotated.end, 0, 2)

    def test_rotate_arc_shifts_angles(self) -> None:
        arc = Arc(center=Point(1, 0), radius=2, start_angle=0.0, end_angle=math.pi / 2, layer="L")
        rotated = rotate(arc, Point(0, 0), math.pi)
        _approx_point(rotated.center, -1, 0)
        assert rotated.start_angle == pytest.approx(math.pi)
        assert rotated.end_angle == pytest.approx(3 * math.pi / 2)

    def test_rotate_rectangle_gives_bounding_box(self) -> None:
        rect = Rectangle(top_left=Point(0, 0), bottom_right=Point(4, 2), layer="L")
        rotated = rotate(rect, Point(0, 0), math.pi / 2)
        _approx_point(rotated.top_left, -2, 0)
        _approx_point(rotated.bottom_right, 0, 4)

    def test_rotate_ellipse_moves_center_only(self) -> None:
        ellipse = Ellipse(center=Point(3, 0), radius_x=4, radius_y=1, layer="L")
        rotated = rotate(ellipse, Point(0, 0), math.pi / 2)
        _approx_point(rotated.center, 0, 3)
        assert (rotated.radius_x, rotated.radius_y) == (4, 1)


class TestScale:
    def test_scale_circle(self) -> None:
        circle = Circle(center=Point(2, 0), radius=1, layer="L")
        scaled = scale(circle, Point(0, 0), 3.0)
        assert scaled.center == Point(6, 0)
        assert scaled.radius == pytest.approx(3.0)

    def test_scale_ellipse_radii(self) -> None:
        ellipse = Ellipse(center=Point(0, 0), radius_x=2, radius_y=1, layer="L")
        scaled = scale(ellipse, Point(0, 0), 0.5)
        assert (scaled.radius_x, scaled.radius_y) == (1.0, 0.5)

    def test_non_positive_factor(self) -> None:
        line = Line(start=Point(0, 0), end=Point(1, 1), layer="L")
        with pytest.raises(GeometryError, match="positive"):
            scale(line, Point(0, 0), 0.0)


class TestMirror:
    def test_mirror_arc_keeps_ccw_sweep(self) -> None:
        """Mirroring the upper half arc across the x-axis gives the lower half."""
        arc = Arc(center=Point(0, 0), radius=5, start_angle=0.0, end_angle=math.pi / 2, layer="L")
        mirrored = mirror(arc, Point(0, 0), Point(1, 0))
        assert mirrored.start_angle == pytest.approx(3 * math.pi / 2)
        assert mirrored.end_angle == pytest.approx(0.0, abs=1e-9)
        assert mirrored.sweep == pytest.approx(math.pi / 2)
        _approx_point(mirrored.start_point, 0, -5)

    def test_mirror_rectangle_normalizes_corners(self) -> None:
        rect = Rectangle(top_left=Point(1, 1), bottom_right=Point(3, 2), layer="L")
        mirrored = mirror(rect, Point(0, 0), Point(0, 1))
        assert mirrored.top_left == Point(-3, 1)
        assert mirrored.bottom_right == Point(-1, 2)

    def test_mirror_arc_degenerate_axis(self) -> None:
        arc = Arc(center=Point(0, 0), radius=5, start_angle=0.0, end_angle=1.0, layer="L")
        assert mirror(arc, Point(2, 2), Point(2, 2)) == arc
