"""Characteristic points of entities.

Each variant exposes its significant points in a fixed order, and the same
points tagged with the snap kind they produce. The snap engine reads the kind
from the tag, never from the position in the list.
"""

from typing import assert_never

from draftcore.domain import (
    Arc,
    CharacteristicPoint,
    Circle,
    Ellipse,
    Entity,
    Line,
    Point,
    Polyline,
    Rectangle,
    SnapKind,
    Spline,
    SplineKind,
)


def _quadrants(center: Point, rx: float, ry: float) -> dict[str, Point]:
    return {
        "east": Point(center.x + rx, center.y),
        "west": Point(center.x - rx, center.y),
        "north": Point(center.x, center.y + ry),
        "south": Point(center.x, center.y - ry),
    }


def _chain_points(points: tuple[Point, ...], interior: SnapKind | None, label: str) -> list[CharacteristicPoint]:
    last = len(points) - 1
    return [
        CharacteristicPoint(p, SnapKind.ENDPOINT, "Endpoint")
        if i in (0, last)
        else CharacteristicPoint(p, interior, label)
        for i, p in enumerate(points)
    ]


def classified_points(entity: Entity) -> list[CharacteristicPoint]:
    """Characteristic points of an entity, each tagged with its snap kind.

    Order per variant:
        Line: start, end, midpoint
        Circle: center, +x, -x, +y, -y quadrants
        Rectangle: top-left, top-right, bottom-right, bottom-left, center
        Arc: center, start, sweep midpoint, end
        Ellipse: center, +x, +y, -x, -y quadrants
        Polyline: vertices
        Spline: control points (Bezier handles carry no snap kind)
    """
    match entity:
        case Line():
            return [
                CharacteristicPoint(entity.start, SnapKind.ENDPOINT, "Endpoint"),
                CharacteristicPoint(entity.end, SnapKind.ENDPOINT, "Endpoint"),
                CharacteristicPoint(entity.midpoint, SnapKind.MIDPOINT, "Midpoint"),
            ]
        case Circle():
            q = _quadrants(entity.center, entity.radius, entity.radius)
            return [CharacteristicPoint(entity.center, SnapKind.CENTER, "Center")] + [
                CharacteristicPoint(q[name], SnapKind.QUADRANT, "Quadrant")
                for name in ("east", "west", "north", "south")
            ]
        case Rectangle():
            return [
                CharacteristicPoint(corner, SnapKind.ENDPOINT, "Corner") for corner in entity.corners
            ] + [CharacteristicPoint(entity.center, SnapKind.CENTER, "Center")]
        case Arc():
            return [
                CharacteristicPoint(entity.center, SnapKind.CENTER, "Center"),
                CharacteristicPoint(entity.start_point, SnapKind.ENDPOINT, "Endpoint"),
                CharacteristicPoint(entity.mid_point, SnapKind.MIDPOINT, "Midpoint"),
                CharacteristicPoint(entity.end_point, SnapKind.ENDPOINT, "Endpoint"),
            ]
        case Ellipse():
            q = _quadrants(entity.center, entity.radius_x, entity.radius_y)
            return [CharacteristicPoint(entity.center, SnapKind.CENTER, "Center")] + [
                CharacteristicPoint(q[name], SnapKind.QUADRANT, "Quadrant")
                for name in ("east", "north", "west", "south")
            ]
        case Polyline():
            return _chain_points(entity.points, SnapKind.ENDPOINT, "Vertex")
        case Spline():
            if entity.kind is SplineKind.CATMULL_ROM:
                return _chain_points(entity.control_points, SnapKind.ENDPOINT, "Vertex")
            # Anchors sit at every third control point
            return [
                cp
                if cp.kind is SnapKind.ENDPOINT or i % 3 != 0
                else CharacteristicPoint(cp.point, SnapKind.ENDPOINT, "Anchor")
                for i, cp in enumerate(_chain_points(entity.control_points, None, "Handle"))
            ]
        case _:
            assert_never(entity)


def characteristic_points(entity: Entity) -> list[Point]:
    """Characteristic points of an entity in the variant's fixed order."""
    return [cp.point for cp in classified_points(entity)]
