"""Rigid and similarity edits of entities.

Each function returns a copy carrying the same id, except ``offset_copy``
which places a new entity beside its source. Rectangles stay
axis-aligned: rotating or mirroring one yields the bounding box of its
transformed corners. Ellipse orientation is not modelled, so rotation and
mirroring move only an ellipse's center.
"""

import math
from collections.abc import Callable
from dataclasses import replace
from typing import assert_never

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
    new_entity_id,
)
from draftcore.domain.angles import angle_of, normalize_angle
from draftcore.exceptions import GeometryError


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate a point counter-clockwise about ``center``."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(center.x + dx * cos_a - dy * sin_a, center.y + dx * sin_a + dy * cos_a)


def mirror_point(point: Point, axis_start: Point, axis_end: Point) -> Point:
    """Reflect a point across the line through ``axis_start`` and ``axis_end``.

    A zero-length axis leaves the point unchanged.
    """
    direction = axis_end - axis_start
    length_sq = direction.dot(direction)
    if length_sq < 1e-18:
        return point
    t = (point - axis_start).dot(direction) / length_sq
    foot = axis_start + direction * t
    return foot * 2 - point


def _bounding_rectangle(rect: Rectangle, corners: list[Point]) -> Entity:
    xs = [p.x for p in corners]
    ys = [p.y for p in corners]
    return rect.with_changes(
        top_left=Point(min(xs), min(ys)),
        bottom_right=Point(max(xs), max(ys)),
    )


def _map_points(entity: Entity, fn: Callable[[Point], Point]) -> Entity:
    """Apply ``fn`` to every defining point; radii and angles are untouched."""
    match entity:
        case Line():
            return entity.with_changes(start=fn(entity.start), end=fn(entity.end))
        case Circle() | Arc() | Ellipse():
            return entity.with_changes(center=fn(entity.center))
        case Rectangle():
            return entity.with_changes(top_left=fn(entity.top_left), bottom_right=fn(entity.bottom_right))
        case Polyline():
            return entity.with_changes(points=tuple(fn(p) for p in entity.points))
        case Spline():
            return entity.with_changes(control_points=tuple(fn(p) for p in entity.control_points))
        case _:
            assert_never(entity)


def translate(entity: Entity, dx: float, dy: float) -> Entity:
    """Move an entity by ``(dx, dy)``."""
    offset = Point(dx, dy)
    return _map_points(entity, lambda p: p + offset)


def offset_copy(entity: Entity, dx: float, dy: float) -> Entity:
    """Displaced copy of an entity with a fresh id, left unselected.

    The source entity is untouched; callers add the copy to the document.
    """
    return replace(translate(entity, dx, dy), id=new_entity_id(), is_selected=False)


def rotate(entity: Entity, center: Point, angle: float) -> Entity:
    """Rotate an entity counter-clockwise by ``angle`` radians about ``center``."""
    match entity:
        case Rectangle():
            return _bounding_rectangle(entity, [rotate_point(c, center, angle) for c in entity.corners])
        case Arc():
            return entity.with_changes(
                center=rotate_point(entity.center, center, angle),
                start_angle=normalize_angle(entity.start_angle + angle),
                end_angle=normalize_angle(entity.end_angle + angle),
            )
        case _:
            return _map_points(entity, lambda p: rotate_point(p, center, angle))


def scale(entity: Entity, base: Point, factor: float) -> Entity:
    """Scale an entity uniformly about ``base``.

    Raises:
        GeometryError: If ``factor`` is not positive
    """
    if factor <= 0:
        raise GeometryError(f"Scale factor must be positive, got {factor}")

    scaled = _map_points(entity, lambda p: base + (p - base) * factor)
    match scaled:
        case Circle() | Arc():
            return scaled.with_changes(radius=entity.radius * factor)  # type: ignore[union-attr]
        case Ellipse():
            return scaled.with_changes(
                radius_x=scaled.radius_x * factor,
                radius_y=scaled.radius_y * factor,
            )
        case _:
            return scaled


def mirror(entity: Entity, axis_start: Point, axis_end: Point) -> Entity:
    """Reflect an entity across the line through two points.

    Arcs keep a counter-clockwise sweep: the reflected start and end angles
    swap roles.
    """

    def reflect(point: Point) -> Point:
        return mirror_point(point, axis_start, axis_end)

    match entity:
        case Rectangle():
            return _bounding_rectangle(entity, [reflect(c) for c in entity.corners])
        case Arc():
            if axis_start.distance_squared_to(axis_end) < 1e-18:
                return entity
            theta = angle_of(axis_start, axis_end)
            return entity.with_changes(
                center=reflect(entity.center),
                start_angle=normalize_angle(2 * theta - entity.end_angle),
                end_angle=normalize_angle(2 * theta - entity.start_angle),
            )
        case _:
            return _map_points(entity, reflect)
