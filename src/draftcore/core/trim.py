"""Trim operation.

Trimming cuts a target at its intersections with a cutter and keeps the
portion the user clicked. It never modifies the target: it returns the
replacement entities, and the caller swaps them into the document with
``Document.replace_entity``.
"""

import uuid
from collections.abc import Sequence
from typing import assert_never

import structlog

from draftcore.core.geometry import is_point_on_segment
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
from draftcore.domain.angles import TWO_PI, angle_of, normalize_angle

logger = structlog.get_logger(__name__)

ON_SEGMENT_TOLERANCE = 1e-6
MIN_LENGTH_SQ = 1e-10
MIN_SWEEP = 1e-6


def trim_line(line: Line, cutter: Entity, intersection: Point, click_point: Point) -> Line | None:
    """Cut a line at ``intersection`` and keep the part on the clicked side.

    Args:
        line: Line to trim
        cutter: Entity the line was cut against
        intersection: Cut point, which must lie on the segment
        click_point: Point picked on the portion to keep

    Returns:
        The kept segment with the line's id, or None if the point is off the
        segment or the result would be empty or unchanged
    """
    if not is_point_on_segment(intersection, line.start, line.end, ON_SEGMENT_TOLERANCE):
        logger.debug("Cut point not on line", target=line.id, cutter=cutter.id)
        return None

    if click_point.distance_squared_to(line.start) < click_point.distance_squared_to(line.end):
        new_start, new_end = line.start, intersection
    else:
        new_start, new_end = intersection, line.end

    if new_start.distance_squared_to(new_end) < MIN_LENGTH_SQ:
        logger.debug("Trim leaves zero length", target=line.id)
        return None
    if new_start == line.start and new_end == line.end:
        logger.debug("Trim leaves line unchanged", target=line.id)
        return None

    logger.debug("Line trimmed", target=line.id, cutter=cutter.id, at=intersection.to_tuple())
    return line.with_changes(start=new_start, end=new_end)  # type: ignore[return-value]


def _strictly_between(angle: float, start: float, end: float) -> bool:
    if start < end:
        return start < angle < end
    return angle > start or angle < end


def trim_circle(
    circle: Circle,
    cutter: Entity,
    intersections: Sequence[Point],
    click_point: Point,
) -> list[Entity]:
    """Open a circle between two cut points, keeping the clicked arc.

    The first two intersections are used. The kept arc runs counter-clockwise
    between them through the click angle.

    Returns:
        A single new Arc (fresh id, same layer and style, unselected), or an
        empty list if fewer than two points are given or the sweep is degenerate
    """
    if len(intersections) < 2:
        logger.debug("Circle trim needs two cut points", target=circle.id, count=len(intersections))
        return []

    first = normalize_angle(angle_of(circle.center, intersections[0]))
    second = normalize_angle(angle_of(circle.center, intersections[1]))
    click = normalize_angle(angle_of(circle.center, click_point))

    if _strictly_between(click, first, second):
        start, end = first, second
    else:
        start, end = second, first

    sweep = end - start
    if sweep < 0:
        sweep += TWO_PI
    if abs(sweep) < MIN_SWEEP or abs(TWO_PI - sweep) < MIN_SWEEP:
        logger.debug("Circle trim sweep is degenerate", target=circle.id, sweep=sweep)
        return []

    arc = Arc(
        id=str(uuid.uuid4()),
        center=circle.center,
        radius=circle.radius,
        start_angle=start,
        end_angle=end,
        layer=circle.layer,
        color=circle.color,
        line_width=circle.line_width,
        is_selected=False,
    )
    logger.debug("Circle trimmed", target=circle.id, cutter=cutter.id, arc=arc.id, sweep=round(sweep, 6))
    return [arc]


def trim(
    entity: Entity,
    cutter: Entity,
    intersections: Sequence[Point],
    click_point: Point,
) -> list[Entity]:
    """Trim any entity, returning its replacements.

    Lines are cut at the intersection nearest the click. Variants without
    trim support return an empty list.
    """
    match entity:
        case Line():
            if not intersections:
                return []
            nearest = min(intersections, key=lambda p: p.distance_squared_to(click_point))
            result = trim_line(entity, cutter, nearest, click_point)
            return [result] if result is not None else []
        case Circle():
            return trim_circle(entity, cutter, intersections, click_point)
        case Rectangle() | Arc() | Ellipse() | Polyline() | Spline():
            return []
        case _:
            assert_never(entity)
