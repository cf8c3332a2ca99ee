"""Angle convention shared by every entity and algorithm.

Angles are radians, counter-clockwise, with 0 along the positive x-axis. An
arc sweeps counter-clockwise from its start angle to its end angle; equal
angles (modulo 2*pi) describe a full circle, never a zero-length arc.
"""

import math

from draftcore.domain.point import Point

TWO_PI = 2.0 * math.pi
ANGLE_EPSILON = 1e-9


def normalize_angle(angle: float) -> float:
    """Normalize an angle into ``[0, 2*pi)``.

    Examples:
        >>> normalize_angle(-math.pi / 2) == 3 * math.pi / 2
        True
    """
    normalized = math.fmod(angle, TWO_PI)
    if normalized < 0:
        normalized += TWO_PI
    if normalized >= TWO_PI:
        normalized -= TWO_PI
    return normalized


def angles_equal(a: float, b: float, epsilon: float = ANGLE_EPSILON) -> bool:
    """Check whether two angles denote the same direction."""
    diff = abs(normalize_angle(a) - normalize_angle(b))
    return diff < epsilon or TWO_PI - diff < epsilon


def angular_distance(a: float, b: float) -> float:
    """Shortest unsigned angle between two directions, in ``[0, pi]``."""
    diff = abs(normalize_angle(a) - normalize_angle(b))
    return min(diff, TWO_PI - diff)


def ccw_sweep(start: float, end: float, epsilon: float = ANGLE_EPSILON) -> float:
    """Counter-clockwise sweep from ``start`` to ``end``.

    Returns:
        Sweep in ``(0, 2*pi]``. Angles equal modulo 2*pi give a full turn.
    """
    if angles_equal(start, end, epsilon):
        return TWO_PI
    sweep = normalize_angle(end) - normalize_angle(start)
    if sweep <= 0:
        sweep += TWO_PI
    return sweep


def is_angle_in_sweep(
    angle: float,
    start: float,
    end: float,
    epsilon: float = ANGLE_EPSILON,
) -> bool:
    """Check whether ``angle`` lies on the CCW sweep from ``start`` to ``end``.

    Both sweep ends are inclusive within ``epsilon``.
    """
    sweep = ccw_sweep(start, end, epsilon)
    relative = normalize_angle(angle - start)
    return relative <= sweep + epsilon or TWO_PI - relative <= epsilon


def angle_of(center: Point, point: Point) -> float:
    """Direction of ``point`` seen from ``center``, in ``(-pi, pi]``."""
    return math.atan2(point.y - center.y, point.x - center.x)


def point_at_angle(center: Point, radius: float, angle: float) -> Point:
    """Point on the circle of ``radius`` around ``center`` at ``angle``."""
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))
