"""Unit tests for intersection routines.

Tests cover:
- Infinite-line versus segment-bounded line intersections
- Line/circle and circle/circle intersections
- Entity-level dispatch, including arcs, rectangles and polylines
- Degenerate inputs (parallel, concentric, zero-length)
"""

import math

import pytest

from draftcore.core.intersection import (
    circle_circle_intersection,
    find_intersections,
    line_circle_intersection,
    line_line_intersection,
    line_rectangle_intersection,
    segment_circle_intersection,
    segment_segment_intersection,
)
from draftcore.domain import Arc, Circle, Ellipse, Line, Point, Polyline, Rectangle, Spline


def _sorted(points):
    return sorted((round(p.x, 9), round(p.y, 9)) for p in points)


class TestLineIntersections:
    """Tests for line/line routines."""

    def test_crossing_lines(self) -> None:
        hit = line_line_intersection(Point(0, 0), Point(10, 0), Point(5, -5), Point(5, 5))
        assert hit == Point(5, 0)

    def test_infinite_lines_meet_outside_segments(self) -> None:
        hit = line_line_intersection(Point(0, 0), Point(1, 0), Point(5, 1), Point(5, 2))
        assert hit is not None
        assert hit.x == pytest.approx(5.0)
        assert hit.y == pytest.approx(0.0)

    def test_segments_do_not_meet(self) -> None:
        assert segment_segment_intersection(Point(0, 0), Point(1, 0), Point(5, 1), Point(5, 2)) is None

    def test_segments_meet_at_shared_end(self) -> None:
        hit = segment_segment_intersection(Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 10))
        assert hit == Point(10, 0)

    def test_parallel_lines(self) -> None:
        assert line_line_intersection(Point(0, 0), Point(10, 0), Point(0, 1), Point(10, 1)) is None

    def test_collinear_lines(self) -> None:
        assert line_line_intersection(Point(0, 0), Point(10, 0), Point(2, 0), Point(5, 0)) is None

    def test_zero_length_segment_on_other(self) -> None:
        hit = line_line_intersection(Point(3, 0), Point(3, 0), Point(0, 0), Point(10, 0))
        assert hit == Point(3, 0)

    def test_zero_length_segment_off_other(self) -> None:
        assert line_line_intersection(Point(3, 1), Point(3, 1), Point(0, 0), Point(10, 0)) is None


class TestCircleIntersections:
    """Tests for routines involving circles."""

    def test_line_through_circle(self) -> None:
        points = line_circle_intersection(Point(-10, 0), Point(-8, 0), Point(0, 0), 5)
        assert _sorted(points) == [(-5.0, 0.0), (5.0, 0.0)]

    def test_segment_bounded(self) -> None:
        points = segment_circle_intersection(Point(0, 0), Point(10, 0), Point(0, 0), 5)
        assert _sorted(points) == [(5.0, 0.0)]

    def test_tangent_line(self) -> None:
        points = line_circle_intersection(Point(-10, 5), Point(10, 5), Point(0, 0), 5)
        assert len(points) == 1
        assert points[0].x == pytest.approx(0.0)

    def test_line_misses_circle(self) -> None:
        assert line_circle_intersection(Point(-10, 6), Point(10, 6), Point(0, 0), 5) == []

    def test_two_circles(self) -> None:
        """Circles of radius 5 at (0,0) and (8,0) meet at x=4, y=+-3."""
        points = circle_circle_intersection(Point(0, 0), 5, Point(8, 0), 5)
        assert _sorted(points) == [(4.0, -3.0), (4.0, 3.0)]

    def test_tangent_circles(self) -> None:
        points = circle_circle_intersection(Point(0, 0), 5, Point(10, 0), 5)
        assert len(points) == 1
        assert points[0].x == pytest.approx(5.0)

    def test_concentric_circles(self) -> None:
        assert circle_circle_intersection(Point(0, 0), 5, Point(0, 0), 3) == []

    def test_disjoint_and_nested_circles(self) -> None:
        assert circle_circle_intersection(Point(0, 0), 1, Point(10, 0), 1) == []
        assert circle_circle_intersection(Point(0, 0), 10, Point(1, 0), 1) == []


class TestRectangleIntersections:
    def test_segment_across_rectangle(self) -> None:
        points = line_rectangle_intersection(Point(-5, 5), Point(15, 5), Point(0, 0), Point(10, 10))
        assert _sorted(points) == [(0.0, 5.0), (10.0, 5.0)]

    def test_corner_reported_once(self) -> None:
        points = line_rectangle_intersection(Point(-5, -5), Point(0, 0), Point(0, 0), Point(10, 10))
        assert points == [Point(0, 0)]


class TestFindIntersections:
    """Tests for entity-level intersection dispatch."""

    def test_two_lines_use_infinite_lines(self) -> None:
        a = Line(start=Point(0, 0), end=Point(10, 0), layer="L")
        b = Line(start=Point(5, 5), end=Point(5, 3), layer="L")
        assert find_intersections(a, b) == [Point(5, 0)]

    def test_line_and_circle_bounded(self) -> None:
        line = Line(start=Point(0, 0), end=Point(10, 0), layer="L")
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        assert _sorted(find_intersections(line, circle)) == [(5.0, 0.0)]

    def test_circles(self) -> None:
        a = Circle(center=Point(0, 0), radius=5, layer="L")
        b = Circle(center=Point(8, 0), radius=5, layer="L")
        assert _sorted(find_intersections(a, b)) == [(4.0, -3.0), (4.0, 3.0)]

    def test_arc_filters_by_sweep(self) -> None:
        """Upper half arc keeps only the upper crossing of a vertical line."""
        arc = Arc(center=Point(0, 0), radius=5, start_angle=0.0, end_angle=math.pi, layer="L")
        line = Line(start=Point(0, -10), end=Point(0, 10), layer="L")
        assert _sorted(find_intersections(line, arc)) == [(0.0, 5.0)]

    def test_symmetric(self) -> None:
        arc = Arc(center=Point(0, 0), radius=5, start_angle=0.0, end_angle=math.pi, layer="L")
        circle = Circle(center=Point(8, 0), radius=5, layer="L")
        assert _sorted(find_intersections(arc, circle)) == _sorted(find_intersections(circle, arc))
        assert _sorted(find_intersections(arc, circle)) == [(4.0, 3.0)]

    def test_rectangle_and_line(self) -> None:
        rect = Rectangle(top_left=Point(0, 0), bottom_right=Point(10, 10), layer="L")
        line = Line(start=Point(-5, 5), end=Point(15, 5), layer="L")
        assert _sorted(find_intersections(line, rect)) == [(0.0, 5.0), (10.0, 5.0)]

    def test_polyline_and_circle(self) -> None:
        poly = Polyline(points=(Point(-10, 0), Point(0, 0), Point(0, 10)), layer="L")
        circle = Circle(center=Point(0, 0), radius=5, layer="L")
        assert _sorted(find_intersections(poly, circle)) == [(-5.0, 0.0), (0.0, 5.0)]

    def test_polyline_shared_vertex_deduplicated(self) -> None:
        poly = Polyline(points=(Point(0, 0), Point(5, 0), Point(10, 0)), layer="L")
        line = Line(start=Point(5, -5), end=Point(5, 5), layer="L")
        assert find_intersections(poly, line) == [Point(5, 0)]

    def test_ellipse_and_spline_unsupported(self) -> None:
        line = Line(start=Point(-10, 0), end=Point(10, 0), layer="L")
        ellipse = Ellipse(center=Point(0, 0), radius_x=5, radius_y=3, layer="L")
        spline = Spline(control_points=(Point(0, -5), Point(0, 5)), layer="L")
        assert find_intersections(line, ellipse) == []
        assert find_intersections(spline, line) == []
