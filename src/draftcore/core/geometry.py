"""Geometric helpers shared by the editing algorithms.

This module provides core mathematical utilities for:
- Projection of a point onto a segment (clamped and unclamped)
- Point-on-segment and nearest-point-on-curve queries
- Tangent points from an external point to a circle
- Grid rounding and point deduplication

All functions are pure and stateless.
"""

import math

from draftcore.domain import Point
from draftcore.domain.angles import angle_of, is_angle_in_sweep, point_at_angle

EPSILON = 1e-9
LENGTH_EPSILON = 1e-6


def projection_parameter(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Parameter ``t`` of the projection of ``point`` onto the line through a segment.

    ``t == 0`` at ``seg_start`` and ``t == 1`` at ``seg_end``. Degenerate
    segments give 0.
    """
    direction = seg_end - seg_start
    length_sq = direction.dot(direction)
    if length_sq < EPSILON * EPSILON:
        return 0.0
    return (point - seg_start).dot(direction) / length_sq


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance)

    Examples:
        >>> nearest, dist = nearest_point_on_segment(Point(1, 1), Point(0, 0), Point(2, 0))
        >>> nearest, dist
        (Point(x=1.0, y=0.0), 1.0)
    """
    t = max(0.0, min(1.0, projection_parameter(point, seg_start, seg_end)))
    nearest = seg_start + (seg_end - seg_start) * t
    return nearest, point.distance_to(nearest)


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to a line segment."""
    return nearest_point_on_segment(point, seg_start, seg_end)[1]


def is_point_on_segment(
    point: Point,
    seg_start: Point,
    seg_end: Point,
    tolerance: float = LENGTH_EPSILON,
) -> bool:
    """Check collinearity and betweenness via ``|AP| + |PB| == |AB|``."""
    total = seg_start.distance_to(point) + point.distance_to(seg_end)
    return abs(total - seg_start.distance_to(seg_end)) <= tolerance


def is_point_on_arc(
    point: Point,
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    tolerance: float = EPSILON,
) -> bool:
    """Check that a point is on the circle and inside the arc's CCW sweep."""
    if abs(point.distance_to(center) - radius) > tolerance:
        return False
    if radius < tolerance:
        return True
    return is_angle_in_sweep(angle_of(center, point), start_angle, end_angle, tolerance)


def nearest_point_on_circle(point: Point, center: Point, radius: float) -> Point:
    """Closest point on a circle; the center maps to the +x quadrant."""
    offset = point - center
    length = offset.length
    if length < EPSILON:
        return Point(center.x + radius, center.y)
    return center + offset * (radius / length)


def nearest_point_on_arc(
    point: Point,
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
) -> Point:
    """Closest point on an arc: the radial projection if it lies on the sweep,
    otherwise the nearer arc endpoint."""
    candidate = nearest_point_on_circle(point, center, radius)
    if is_angle_in_sweep(angle_of(center, candidate), start_angle, end_angle):
        return candidate
    start = point_at_angle(center, radius, start_angle)
    end = point_at_angle(center, radius, end_angle)
    return start if point.distance_squared_to(start) <= point.distance_squared_to(end) else end


def nearest_point_on_ellipse(
    point: Point,
    center: Point,
    radius_x: float,
    radius_y: float,
    iterations: int = 6,
) -> Point:
    """Closest point on an axis-aligned ellipse.

    Works in the first quadrant on the absolute offset and iterates on the
    parametric angle, stepping along the local osculating circle; the
    signs of the offset are restored on the result. Converges in a few
    iterations for any eccentricity.

    Both radii must be positive.
    """
    dx, dy = point.x - center.x, point.y - center.y
    px, py = abs(dx), abs(dy)
    a, b = radius_x, radius_y

    tx = ty = math.sqrt(0.5)
    for _ in range(iterations):
        x, y = a * tx, b * ty
        # Center of curvature (evolute) at the current estimate
        ex = (a * a - b * b) * tx**3 / a
        ey = (b * b - a * a) * ty**3 / b
        r = math.hypot(x - ex, y - ey)
        q = math.hypot(px - ex, py - ey)
        if q < EPSILON:
            break
        tx = min(1.0, max(0.0, ((px - ex) * r / q + ex) / a))
        ty = min(1.0, max(0.0, ((py - ey) * r / q + ey) / b))
        norm = math.hypot(tx, ty)
        tx, ty = tx / norm, ty / norm

    return Point(center.x + math.copysign(a * tx, dx), center.y + math.copysign(b * ty, dy))


def nearest_point_on_polyline(point: Point, vertices: list[Point]) -> tuple[Point, float]:
    """Closest point on a chain of segments.

    Raises:
        ValueError: If fewer than 2 vertices are given
    """
    if len(vertices) < 2:
        raise ValueError(f"Expected at least 2 vertices, got {len(vertices)}")

    return min(
        (nearest_point_on_segment(point, a, b) for a, b in zip(vertices, vertices[1:])),
        key=lambda candidate: candidate[1],
    )


def tangent_points(point: Point, center: Point, radius: float) -> list[Point]:
    """Points of tangency on a circle for lines through ``point``.

    Returns:
        No points if ``point`` is inside the circle, ``point`` itself if it lies
        on the circle, otherwise the two tangency points
    """
    distance = point.distance_to(center)
    if distance < radius:
        return []
    if abs(distance - radius) < 1e-10:
        return [point]

    base = angle_of(center, point)
    offset = math.asin(radius / distance)
    # Tangency angles measured from the center are base +- (pi/2 - offset)
    spread = math.pi / 2 - offset
    return [
        point_at_angle(center, radius, base + spread),
        point_at_angle(center, radius, base - spread),
    ]


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap_to_grid(point: Point, grid_size: float) -> Point:
    """Nearest grid node to ``point``."""
    return Point(
        round_half_away(point.x / grid_size) * grid_size,
        round_half_away(point.y / grid_size) * grid_size,
    )


def dedupe_points(points: list[Point], tolerance: float = EPSILON) -> list[Point]:
    """Drop points within ``tolerance`` of an earlier point, keeping order."""
    unique: list[Point] = []
    for point in points:
        if all(point.distance_to(kept) > tolerance for kept in unique):
            unique.append(point)
    return unique
