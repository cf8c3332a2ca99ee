"""Snap target types.

This module defines the values produced by snapping:
- SnapKind: Category of a snap target, with its fixed resolution priority
- CharacteristicPoint: A significant point on an entity tagged with its kind
- SnapResult: A resolved snap candidate
"""

from dataclasses import dataclass
from enum import Enum

from draftcore.domain.point import Point


class SnapKind(str, Enum):
    """Category of a snap target.

    When several candidates are in range, the kind with the higher
    ``priority`` wins; explicit geometric anchors outrank interpolated ones.
    """

    GRID = "grid"
    ENDPOINT = "endpoint"
    MIDPOINT = "midpoint"
    CENTER = "center"
    QUADRANT = "quadrant"
    INTERSECTION = "intersection"
    PERPENDICULAR = "perpendicular"
    TANGENT = "tangent"
    NEAREST = "nearest"

    @property
    def priority(self) -> int:
        return SNAP_PRIORITY[self]


SNAP_PRIORITY: dict[SnapKind, int] = {
    SnapKind.GRID: 0,
    SnapKind.NEAREST: 1,
    SnapKind.MIDPOINT: 2,
    SnapKind.QUADRANT: 3,
    SnapKind.CENTER: 4,
    SnapKind.TANGENT: 5,
    SnapKind.PERPENDICULAR: 6,
    SnapKind.ENDPOINT: 7,
    SnapKind.INTERSECTION: 8,
}


@dataclass(frozen=True, slots=True)
class CharacteristicPoint:
    """A geometrically significant point on an entity.

    Attributes:
        point: Location in document space
        kind: Snap kind this point produces, or None if it is not a snap anchor
            (e.g. an off-curve Bezier handle)
        label: Human readable name shown next to the snap marker
    """

    point: Point
    kind: SnapKind | None
    label: str


@dataclass(frozen=True, slots=True)
class SnapResult:
    """A snap candidate.

    Attributes:
        position: Snapped location in document space
        kind: Snap kind
        label: Human readable description ("Endpoint", "Grid", ...)
        source_entity_id: Id of the entity that produced the snap, if any.
            Intersections belong to two entities and carry None.
    """

    position: Point
    kind: SnapKind
    label: str
    source_entity_id: str | None = None

    @property
    def priority(self) -> int:
        return self.kind.priority

    def distance_to(self, point: Point) -> float:
        return self.position.distance_to(point)
