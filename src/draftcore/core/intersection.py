"""Intersection routines between entities.

Every routine is pure and returns zero, one or two points (up to one per
edge for rectangles and polylines). Geometric degeneracy such as parallel
lines, concentric circles or zero-length segments yields no points rather
than an error.

Two families are kept apart on purpose:
- infinite-line routines (``line_line_intersection``, ``line_circle_intersection``)
  used by extend
- segment-bounded routines (``segment_segment_intersection``,
  ``segment_circle_intersection``) used by trim and snapping
"""

import math
from typing import NamedTuple, assert_never

from draftcore.core.geometry import EPSILON, dedupe_points, is_point_on_arc, is_point_on_segment
from draftcore.domain import (
    Arc,
    Circle,
    Ellipse,
    Entity,
    Line,
    Point,
    Polyline,
    Rectangle,
    Spline,
)

CENTER_EPSILON = 1e-10


def _is_degenerate(start: Point, end: Point) -> bool:
    return start.distance_to(end) < EPSILON


def _point_segment_case(
    a1: Point, a2: Point, b1: Point, b2: Point
) -> tuple[bool, Point | None]:
    """Handle segments of zero length as points.

    Returns:
        (handled, result) where ``handled`` is False when neither input is degenerate
    """
    a_point = _is_degenerate(a1, a2)
    b_point = _is_degenerate(b1, b2)
    if a_point and b_point:
        return True, a1 if a1.distance_to(b1) < EPSILON else None
    if a_point:
        return True, a1 if is_point_on_segment(a1, b1, b2, EPSILON) else None
    if b_point:
        return True, b1 if is_point_on_segment(b1, a1, a2, EPSILON) else None
    return False, None


def _solve_lines(a1: Point, a2: Point, b1: Point, b2: Point) -> tuple[float, float] | None:
    v1 = a2 - a1
    v2 = b2 - b1
    denominator = v1.cross(v2)
    if abs(denominator) < CENTER_EPSILON:
        return None
    offset = b1 - a1
    t = offset.cross(v2) / denominator
    u = offset.cross(v1) / denominator
    return t, u


def line_line_intersection(a1: Point, a2: Point, b1: Point, b2: Point) -> Point | None:
    """Intersection of the two infinite lines through ``a1-a2`` and ``b1-b2``.

    Args:
        a1: A point on the first line
        a2: Another point on the first line
        b1: A point on the second line
        b2: Another point on the second line

    Returns:
        The crossing point, or None for parallel or collinear lines. A
        zero-length input is treated as a point and tested against the other
        segment.

    Examples:
        >>> line_line_intersection(Point(0, 0), Point(10, 0), Point(5, -5), Point(5, 5))
        Point(x=5.0, y=0.0)
    """
    handled, result = _point_segment_case(a1, a2, b1, b2)
    if handled:
        return result

    solution = _solve_lines(a1, a2, b1, b2)
    if solution is None:
        return None
    t, _ = solution
    return a1 + (a2 - a1) * t


def segment_segment_intersection(a1: Point, a2: Point, b1: Point, b2: Point) -> Point | None:
    """Intersection of two segments, or None if they do not cross.

    Segment ends are inclusive within a small epsilon.
    """
    handled, result = _point_segment_case(a1, a2, b1, b2)
    if handled:
        return result

    solution = _solve_lines(a1, a2, b1, b2)
    if solution is None:
        return None
    t, u = solution
    if -EPSILON <= t <= 1 + EPSILON and -EPSILON <= u <= 1 + EPSILON:
        return a1 + (a2 - a1) * t
    return None


def _line_circle(
    start: Point,
    end: Point,
    center: Point,
    radius: float,
    bounded: bool,
) -> list[Point]:
    d = end - start
    f = start - center

    a = d.dot(d)
    if a < EPSILON * EPSILON:
        # Zero-length segment: a single point either on the circle or not
        return [start] if abs(f.length - radius) <= EPSILON else []

    b = 2 * f.dot(d)
    c = f.dot(f) - radius * radius

    discriminant = b * b - 4 * a * c
    if discriminant < -EPSILON:
        return []
    discriminant = max(0.0, discriminant)
    root = math.sqrt(discriminant)

    roots = [(-b - root) / (2 * a)]
    if discriminant > EPSILON:
        roots.append((-b + root) / (2 * a))

    points = [start + d * t for t in roots if not bounded or -EPSILON <= t <= 1 + EPSILON]
    return dedupe_points(points)


def segment_circle_intersection(
    seg_start: Point, seg_end: Point, center: Point, radius: float
) -> list[Point]:
    """Points where a segment crosses a circle (0, 1 or 2)."""
    return _line_circle(seg_start, seg_end, center, radius, bounded=True)


def line_circle_intersection(
    line_start: Point, line_end: Point, center: Point, radius: float
) -> list[Point]:
    """Points where the infinite line through two points crosses a circle."""
    return _line_circle(line_start, line_end, center, radius, bounded=False)


def circle_circle_intersection(
    center1: Point, radius1: float, center2: Point, radius2: float
) -> list[Point]:
    """Intersection of two circles via the radical line.

    Returns:
        No points for concentric, disjoint or nested circles, one point for
        tangent circles, two points otherwise

    Examples:
        >>> circle_circle_intersection(Point(0, 0), 5, Point(8, 0), 5)
        [Point(x=4.0, y=3.0), Point(x=4.0, y=-3.0)]
    """
    distance = center1.distance_to(center2)

    if distance < CENTER_EPSILON:
        return []
    if distance > radius1 + radius2 + CENTER_EPSILON:
        return []
    if distance + min(radius1, radius2) < max(radius1, radius2) - CENTER_EPSILON:
        return []

    a = (radius1 * radius1 - radius2 * radius2 + distance * distance) / (2 * distance)
    direction = (center2 - center1) * (1 / distance)
    base = center1 + direction * a
    h = math.sqrt(max(0.0, radius1 * radius1 - a * a))

    if h < EPSILON:
        return [base]

    perpendicular = Point(-direction.y, direction.x)
    return [base + perpendicular * h, base - perpendicular * h]


def line_rectangle_intersection(
    seg_start: Point, seg_end: Point, top_left: Point, bottom_right: Point
) -> list[Point]:
    """Points where a segment crosses the edges of an axis-aligned rectangle.

    A crossing through a corner is reported once.
    """
    top_right = Point(bottom_right.x, top_left.y)
    bottom_left = Point(top_left.x, bottom_right.y)
    edges = [
        (top_left, top_right),
        (top_right, bottom_right),
        (bottom_right, bottom_left),
        (bottom_left, top_left),
    ]
    hits = [segment_segment_intersection(seg_start, seg_end, a, b) for a, b in edges]
    return dedupe_points([hit for hit in hits if hit is not None])


class _Segment(NamedTuple):
    start: Point
    end: Point


class _Round(NamedTuple):
    center: Point
    radius: float
    start_angle: float | None = None
    end_angle: float | None = None

    def contains(self, point: Point) -> bool:
        if self.start_angle is None or self.end_angle is None:
            return True
        return is_point_on_arc(
            point, self.center, self.radius, self.start_angle, self.end_angle, 1e-6
        )


def _pieces(entity: Entity) -> list[_Segment | _Round] | None:
    """Decompose an entity into segments and circular pieces.

    Returns:
        The pieces, or None for variants without intersection support
    """
    match entity:
        case Line():
            return [_Segment(entity.start, entity.end)]
        case Circle():
            return [_Round(entity.center, entity.radius)]
        case Arc():
            return [_Round(entity.center, entity.radius, entity.start_angle, entity.end_angle)]
        case Rectangle():
            return [_Segment(a, b) for a, b in entity.edges]
        case Polyline():
            return [_Segment(a, b) for a, b in entity.segments]
        case Ellipse() | Spline():
            return None
        case _:
            assert_never(entity)


def _piece_intersections(first: _Segment | _Round, second: _Segment | _Round) -> list[Point]:
    match first, second:
        case _Segment(), _Segment():
            hit = segment_segment_intersection(first.start, first.end, second.start, second.end)
            return [hit] if hit is not None else []
        case _Segment(), _Round():
            points = segment_circle_intersection(first.start, first.end, second.center, second.radius)
            return [p for p in points if second.contains(p)]
        case _Round(), _Segment():
            return _piece_intersections(second, first)
        case _Round(), _Round():
            points = circle_circle_intersection(
                first.center, first.radius, second.center, second.radius
            )
            return [p for p in points if first.contains(p) and second.contains(p)]
    return []


def find_intersections(a: Entity, b: Entity) -> list[Point]:
    """Intersection points between two entities.

    Two lines intersect as infinite lines; every other pairing is bounded by
    the actual geometry (segments, arc sweeps, rectangle and polyline edges).
    Pairs involving an ellipse or a spline have no intersections. The result
    is the same set whichever way round the arguments are given.

    Args:
        a: First entity
        b: Second entity

    Returns:
        Distinct intersection points
    """
    if isinstance(a, Line) and isinstance(b, Line):
        hit = line_line_intersection(a.start, a.end, b.start, b.end)
        return [hit] if hit is not None else []

    pieces_a = _pieces(a)
    pieces_b = _pieces(b)
    if pieces_a is None or pieces_b is None:
        return []

    points: list[Point] = []
    for first in pieces_a:
        for second in pieces_b:
            points.extend(_piece_intersections(first, second))
    return dedupe_points(points, 1e-7)
