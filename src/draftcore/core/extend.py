"""Extend operation.

Grows one end of a line or an arc until it meets a boundary. The end that
moves is the one nearer the click point; only the first boundary the target
can be extended to is consulted. Other variants have a fixed shape and are
never extended.
"""

from collections.abc import Sequence
from typing import assert_never

import structlog

from draftcore.core.geometry import is_point_on_arc, is_point_on_segment
from draftcore.core.intersection import (
    circle_circle_intersection,
    line_circle_intersection,
    line_line_intersection,
    segment_circle_intersection,
)
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
from draftcore.domain.angles import (
    TWO_PI,
    angle_of,
    angular_distance,
    is_angle_in_sweep,
    normalize_angle,
)

logger = structlog.get_logger(__name__)

DIRECTION_EPSILON = 1e-9
MIN_EXTENSION_SQ = 1e-8
ARC_EPSILON = 1e-5

BOUNDARY_TYPES = (Line, Circle, Arc, Rectangle, Polyline)


def _first_boundary(boundaries: Sequence[Entity], target: Entity) -> Entity | None:
    for boundary in boundaries:
        if boundary.id != target.id and isinstance(boundary, BOUNDARY_TYPES):
            return boundary
    return None


def _edges(boundary: Rectangle | Polyline) -> list[tuple[Point, Point]]:
    return boundary.edges if isinstance(boundary, Rectangle) else boundary.segments


def _line_candidates(line: Line, boundary: Entity) -> list[Point]:
    """Crossings of the infinite line through ``line`` with a boundary."""
    match boundary:
        case Line():
            hit = line_line_intersection(line.start, line.end, boundary.start, boundary.end)
            return [hit] if hit is not None else []
        case Circle():
            return line_circle_intersection(line.start, line.end, boundary.center, boundary.radius)
        case Arc():
            return [
                p
                for p in line_circle_intersection(line.start, line.end, boundary.center, boundary.radius)
                if is_point_on_arc(
                    p, boundary.center, boundary.radius, boundary.start_angle, boundary.end_angle, ARC_EPSILON
                )
            ]
        case Rectangle() | Polyline():
            points = []
            for a, b in _edges(boundary):
                hit = line_line_intersection(line.start, line.end, a, b)
                if hit is not None and is_point_on_segment(hit, a, b):
                    points.append(hit)
            return points
    return []


def extend_line(line: Line, boundaries: Sequence[Entity], click_point: Point) -> Line | None:
    """Move the line end nearer ``click_point`` onto the first compatible boundary.

    Args:
        line: Line to extend
        boundaries: Candidate boundaries, in priority order
        click_point: Point picked on the line, selecting the end to move

    Returns:
        The lengthened line with the same id, or None if no boundary is reached
        beyond the moving end
    """
    boundary = _first_boundary(boundaries, line)
    if boundary is None:
        logger.debug("No compatible boundary", target=line.id)
        return None

    if line.start.distance_squared_to(line.end) < 1e-12:
        return None

    extend_start = click_point.distance_squared_to(line.start) < click_point.distance_squared_to(line.end)
    moving, fixed = (line.start, line.end) if extend_start else (line.end, line.start)
    along = fixed - moving

    best: Point | None = None
    for candidate in _line_candidates(line, boundary):
        offset = candidate - moving
        # Must lie past the moving end, away from the fixed end
        if offset.dot(along) > -DIRECTION_EPSILON:
            continue
        if offset.dot(offset) < MIN_EXTENSION_SQ:
            continue
        if best is None or candidate.distance_squared_to(moving) < best.distance_squared_to(moving):
            best = candidate

    if best is None:
        logger.debug("No extension beyond endpoint", target=line.id, boundary=boundary.id)
        return None

    logger.debug("Line extended", target=line.id, boundary=boundary.id, to=best.to_tuple())
    return line.with_changes(start=best) if extend_start else line.with_changes(end=best)


def _arc_candidates(arc: Arc, boundary: Entity) -> list[float]:
    """Angles on the arc's circle where a boundary crosses it."""
    center, radius = arc.center, arc.radius
    match boundary:
        case Line():
            points = line_circle_intersection(boundary.start, boundary.end, center, radius)
        case Circle():
            points = circle_circle_intersection(center, radius, boundary.center, boundary.radius)
        case Arc():
            if center.distance_to(boundary.center) < ARC_EPSILON and abs(radius - boundary.radius) < ARC_EPSILON:
                # Same circle: the boundary arc's ends are the meeting points
                return [normalize_angle(boundary.start_angle), normalize_angle(boundary.end_angle)]
            points = [
                p
                for p in circle_circle_intersection(center, radius, boundary.center, boundary.radius)
                if is_point_on_arc(
                    p, boundary.center, boundary.radius, boundary.start_angle, boundary.end_angle, ARC_EPSILON
                )
            ]
        case Rectangle() | Polyline():
            points = []
            for a, b in _edges(boundary):
                points.extend(segment_circle_intersection(a, b, center, radius))
        case _:
            points = []
    return [angle_of(center, p) for p in points]


def extend_arc(arc: Arc, boundaries: Sequence[Entity], click_point: Point) -> Arc | None:
    """Sweep the arc end nearer ``click_point`` onward to the first compatible boundary.

    The start end grows clockwise and the end grows counter-clockwise. A
    crossing already inside the sweep would shorten the arc and is ignored,
    so a full-circle arc cannot be extended.

    Returns:
        The extended arc with the same id and normalized angles, or None
    """
    if arc.radius < ARC_EPSILON:
        return None

    boundary = _first_boundary(boundaries, arc)
    if boundary is None:
        logger.debug("No compatible boundary", target=arc.id)
        return None

    extend_start = click_point.distance_to(arc.start_point) < click_point.distance_to(arc.end_point)
    current = arc.start_angle if extend_start else arc.end_angle

    best_angle: float | None = None
    best_change = TWO_PI
    for candidate in _arc_candidates(arc, boundary):
        if angular_distance(candidate, current) < ARC_EPSILON:
            continue
        if is_angle_in_sweep(candidate, arc.start_angle, arc.end_angle, ARC_EPSILON):
            continue
        change = normalize_angle(current - candidate) if extend_start else normalize_angle(candidate - current)
        if change < best_change:
            best_change = change
            best_angle = normalize_angle(candidate)

    if best_angle is None:
        logger.debug("No extension beyond endpoint", target=arc.id, boundary=boundary.id)
        return None

    logger.debug("Arc extended", target=arc.id, boundary=boundary.id, angle=best_angle)
    if extend_start:
        return arc.with_changes(start_angle=best_angle)
    return arc.with_changes(end_angle=best_angle)


def extend(target: Entity, boundaries: Sequence[Entity], click_point: Point) -> Entity | None:
    """Extend any entity; variants with a fixed shape return None."""
    match target:
        case Line():
            return extend_line(target, boundaries, click_point)
        case Arc():
            return extend_arc(target, boundaries, click_point)
        case Circle() | Rectangle() | Ellipse() | Polyline() | Spline():
            return None
        case _:
            assert_never(target)
