"""Hit testing and boundary distance queries.

Queries run in document space. ``hit_test`` maps the screen-space pointer
back through the inverse view transform and scales the screen tolerance to
document units, so a zoomed-in view picks more precisely.
"""

import math
from typing import assert_never

from draftcore.core._spline import flatten_spline
from draftcore.core.geometry import (
    EPSILON,
    distance_to_segment,
    nearest_point_on_arc,
    nearest_point_on_circle,
    nearest_point_on_ellipse,
    nearest_point_on_polyline,
    nearest_point_on_segment,
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
    Transform,
)
from draftcore.domain.angles import angle_of, is_angle_in_sweep

DEFAULT_SPLINE_TOLERANCE = 0.25
POINT_RADIUS = 1e-5
SWEEP_EPSILON = 1e-5


def nearest_point(
    entity: Entity,
    point: Point,
    spline_tolerance: float = DEFAULT_SPLINE_TOLERANCE,
) -> Point | None:
    """Closest point on an entity's boundary.

    Args:
        entity: Entity to query
        point: Query point in document space
        spline_tolerance: Flattening tolerance for splines

    Returns:
        Closest boundary point, or None for ellipses (no closed form)
    """
    match entity:
        case Line():
            return nearest_point_on_segment(point, entity.start, entity.end)[0]
        case Circle():
            return nearest_point_on_circle(point, entity.center, entity.radius)
        case Rectangle():
            corners = list(entity.corners)
            return nearest_point_on_polyline(point, corners + corners[:1])[0]
        case Arc():
            return nearest_point_on_arc(
                point, entity.center, entity.radius, entity.start_angle, entity.end_angle
            )
        case Ellipse():
            return None
        case Polyline():
            return nearest_point_on_polyline(point, list(entity.points))[0]
        case Spline():
            return nearest_point_on_polyline(point, flatten_spline(entity, spline_tolerance))[0]
        case _:
            assert_never(entity)


def _ellipse_distance(ellipse: Ellipse, point: Point) -> float:
    rx, ry = ellipse.radius_x, ellipse.radius_y
    center = ellipse.center

    if rx < EPSILON and ry < EPSILON:
        return point.distance_to(center)
    if rx < EPSILON:
        return distance_to_segment(point, Point(center.x, center.y - ry), Point(center.x, center.y + ry))
    if ry < EPSILON:
        return distance_to_segment(point, Point(center.x - rx, center.y), Point(center.x + rx, center.y))

    return point.distance_to(nearest_point_on_ellipse(point, center, rx, ry))


def distance_to_entity(
    entity: Entity,
    point: Point,
    spline_tolerance: float = DEFAULT_SPLINE_TOLERANCE,
) -> float:
    """Distance from a document-space point to an entity's boundary.

    Ellipses are measured to the true closest point on the curve.
    """
    if isinstance(entity, Ellipse):
        return _ellipse_distance(entity, point)

    closest = nearest_point(entity, point, spline_tolerance)
    return point.distance_to(closest) if closest is not None else math.inf


def hit_test(
    entity: Entity,
    point: Point,
    transform: Transform,
    tolerance: float,
    spline_tolerance: float = DEFAULT_SPLINE_TOLERANCE,
) -> bool:
    """Check whether a screen-space point lies on an entity's rendered boundary.

    Args:
        entity: Entity to test
        point: Pointer position in screen space
        transform: Document-to-screen transform
        tolerance: Hit distance in screen units
        spline_tolerance: Flattening tolerance for splines (document units)

    Returns:
        True if the pointer is within ``tolerance`` of the boundary. Arcs
        need the pointer within ``tolerance`` of their circle and inside
        their sweep; splines also count as hit near a control point.
    """
    if abs(transform.determinant) < 1e-12:
        return False

    local = transform.inverse().apply(point)
    local_tolerance = tolerance / transform.scale

    if isinstance(entity, Arc):
        if abs(local.distance_to(entity.center) - entity.radius) > local_tolerance:
            return False
        if entity.radius < POINT_RADIUS:
            return True
        return is_angle_in_sweep(
            angle_of(entity.center, local), entity.start_angle, entity.end_angle, SWEEP_EPSILON
        )

    if isinstance(entity, Spline) and any(
        local.distance_to(cp) <= local_tolerance for cp in entity.control_points
    ):
        return True

    return distance_to_entity(entity, local, spline_tolerance) <= local_tolerance
