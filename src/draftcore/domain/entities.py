"""Drawable entity types.

This module defines the closed set of primitives a drawing is made of:
- Line: A straight segment
- Circle: A full circle
- Rectangle: An axis-aligned rectangle given by two opposite corners
- Arc: A counter-clockwise circular arc
- Ellipse: An axis-aligned ellipse
- Polyline: An open chain of segments
- Spline: A smooth curve through or along control points

Entities are frozen value records. Editing one produces a new instance that
keeps the same ``id`` (copy-on-write); the document holds the current
instance for each id. The ``Entity`` union names every variant, and the
algorithms in ``draftcore.core`` dispatch over it with ``match``.
"""

import math
import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from draftcore.domain.angles import ccw_sweep, normalize_angle, point_at_angle
from draftcore.domain.point import Point, Transform
from draftcore.exceptions import (
    EntityDeserializationError,
    InvalidEntityError,
    UnknownEntityTypeError,
)

if TYPE_CHECKING:
    from draftcore.domain.snap import CharacteristicPoint

DEFAULT_COLOR = 0xFF000000
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_HIT_TOLERANCE = 5.0


def new_entity_id() -> str:
    """Generate a fresh entity id."""
    return str(uuid.uuid4())


class SplineKind(Enum):
    """Spline interpolation scheme.

    The value is the integer index used in persisted records.
    """

    BEZIER = 0
    CATMULL_ROM = 1


@dataclass(frozen=True, slots=True, kw_only=True)
class _EntityBase:
    """Fields and capabilities shared by every entity variant.

    Attributes:
        layer: Id of the owning layer
        id: Stable unique identifier, kept across edits
        color: 32-bit ARGB stroke color
        line_width: Stroke width, strictly positive
        is_selected: Selection flag
    """

    TYPE: ClassVar[str] = ""

    layer: str
    id: str = field(default_factory=new_entity_id)
    color: int = DEFAULT_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    is_selected: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.color <= 0xFFFFFFFF:
            raise InvalidEntityError(self.TYPE, f"color {self.color:#x} is not 32-bit ARGB")
        if not self.line_width > 0:
            raise InvalidEntityError(self.TYPE, f"line width must be positive, got {self.line_width}")
        self._check_geometry()

    def _check_geometry(self) -> None:
        pass

    def with_changes(self, **changes: Any) -> "Entity":
        """Return a copy with the given fields replaced.

        The copy keeps this entity's id.

        Raises:
            InvalidEntityError: If ``id`` is among the changes or the new
                geometry is invalid
        """
        if "id" in changes:
            raise InvalidEntityError(self.TYPE, "id cannot be changed")
        return replace(self, **changes)  # type: ignore[return-value]

    def hit_test(
        self,
        point: Point,
        transform: Transform | None = None,
        tolerance: float = DEFAULT_HIT_TOLERANCE,
    ) -> bool:
        """Check whether a screen-space point lies on the rendered boundary.

        Args:
            point: Pointer position in screen space
            transform: Document-to-screen transform (identity if None)
            tolerance: Hit distance in screen units

        Returns:
            True if the point is within ``tolerance`` of the boundary
        """
        from draftcore.core.hit_test import hit_test

        return hit_test(self, point, transform or Transform.identity(), tolerance)  # type: ignore[arg-type]

    def distance_to(self, point: Point) -> float:
        """Distance from a document-space point to the entity boundary."""
        from draftcore.core.hit_test import distance_to_entity

        return distance_to_entity(self, point)  # type: ignore[arg-type]

    def characteristic_points(self) -> list[Point]:
        """Geometrically significant points, in the variant's fixed order."""
        from draftcore.core.points import characteristic_points

        return characteristic_points(self)  # type: ignore[arg-type]

    def classified_points(self) -> "list[CharacteristicPoint]":
        """Characteristic points paired with the snap kind each produces."""
        from draftcore.core.points import classified_points

        return classified_points(self)  # type: ignore[arg-type]

    def extend(self, boundaries: Sequence["Entity"], click_point: Point) -> "Entity | None":
        """Grow the end nearest ``click_point`` until it meets a boundary.

        Returns:
            The extended copy, or None when this variant cannot be extended or
            no boundary is reachable
        """
        from draftcore.core.extend import extend

        return extend(self, boundaries, click_point)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a persisted entity record.

        Returns:
            Dictionary with the shared fields and the variant geometry
        """
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.TYPE,
            "layer": self.layer,
            "color": self.color,
            "lineWidth": self.line_width,
            "isSelected": self.is_selected,
        }
        data.update(self._geometry_dict())
        return data

    def _geometry_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    @staticmethod
    def _common_fields(data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "id": str(data["id"]),
            "layer": str(data["layer"]),
            "color": int(data["color"]),
            "line_width": float(data["lineWidth"]),
            "is_selected": bool(data["isSelected"]),
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class Line(_EntityBase):
    """A straight segment from ``start`` to ``end``."""

    TYPE: ClassVar[str] = "line"

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point:
        return self.start.midpoint(self.end)

    def trim(self, cutter: "Entity", intersection: Point, click_point: Point) -> "Line | None":
        """Cut this line at ``intersection`` and keep the clicked portion.

        Returns:
            The kept segment, or None if the trim is invalid or a no-op
        """
        from draftcore.core.trim import trim_line

        return trim_line(self, cutter, intersection, click_point)

    def _geometry_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Line":
        return cls(
            start=Point.from_dict(data["start"]),
            end=Point.from_dict(data["end"]),
            **cls._common_fields(data),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Circle(_EntityBase):
    """A full circle."""

    TYPE: ClassVar[str] = "circle"

    center: Point
    radius: float

    def _check_geometry(self) -> None:
        if self.radius < 0:
            raise InvalidEntityError(self.TYPE, f"radius must be >= 0, got {self.radius}")

    def trim(
        self,
        cutter: "Entity",
        intersections: Sequence[Point],
        click_point: Point,
    ) -> "list[Entity]":
        """Open this circle between two intersections, keeping the clicked arc.

        Returns:
            A single new Arc, or an empty list if the trim is invalid
        """
        from draftcore.core.trim import trim_circle

        return trim_circle(self, cutter, intersections, click_point)

    def _geometry_dict(self) -> dict[str, Any]:
        return {"center": self.center.to_dict(), "radius": self.radius}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Circle":
        return cls(
            center=Point.from_dict(data["center"]),
            radius=float(data["radius"]),
            **cls._common_fields(data),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Rectangle(_EntityBase):
    """An axis-aligned rectangle spanned by two opposite corners."""

    TYPE: ClassVar[str] = "rectangle"

    top_left: Point
    bottom_right: Point

    @property
    def top_right(self) -> Point:
        return Point(self.bottom_right.x, self.top_left.y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.top_left.x, self.bottom_right.y)

    @property
    def center(self) -> Point:
        return self.top_left.midpoint(self.bottom_right)

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in drawing order: top-left, top-right, bottom-right, bottom-left."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    @property
    def edges(self) -> list[tuple[Point, Point]]:
        """The four sides as (start, end) pairs."""
        corners = self.corners
        return [(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def _geometry_dict(self) -> dict[str, Any]:
        return {
            "topLeft": self.top_left.to_dict(),
            "bottomRight": self.bottom_right.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Rectangle":
        return cls(
            top_left=Point.from_dict(data["topLeft"]),
            bottom_right=Point.from_dict(data["bottomRight"]),
            **cls._common_fields(data),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Arc(_EntityBase):
    """A circular arc swept counter-clockwise from ``start_angle`` to ``end_angle``.

    Equal start and end angles (modulo 2*pi) describe a full circle.
    """

    TYPE: ClassVar[str] = "arc"

    center: Point
    radius: float
    start_angle: float
    end_angle: float

    def _check_geometry(self) -> None:
        if self.radius < 0:
            raise InvalidEntityError(self.TYPE, f"radius must be >= 0, got {self.radius}")

    @property
    def sweep(self) -> float:
        """Counter-clockwise angular extent in ``(0, 2*pi]``."""
        return ccw_sweep(self.start_angle, self.end_angle)

    @property
    def is_full_circle(self) -> bool:
        return math.isclose(self.sweep, 2 * math.pi)

    @property
    def start_point(self) -> Point:
        return point_at_angle(self.center, self.radius, self.start_angle)

    @property
    def end_point(self) -> Point:
        return point_at_angle(self.center, self.radius, self.end_angle)

    @property
    def mid_angle(self) -> float:
        return normalize_angle(self.start_angle) + self.sweep / 2.0

    @property
    def mid_point(self) -> Point:
        return point_at_angle(self.center, self.radius, self.mid_angle)

    def _geometry_dict(self) -> dict[str, Any]:
        return {
            "center": self.center.to_dict(),
            "radius": self.radius,
            "startAngle": self.start_angle,
            "endAngle": self.end_angle,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Arc":
        return cls(
            center=Point.from_dict(data["center"]),
            radius=float(data["radius"]),
            start_angle=float(data["startAngle"]),
            end_angle=float(data["endAngle"]),
            **cls._common_fields(data),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Ellipse(_EntityBase):
    """An axis-aligned ellipse. Orientation is not modelled."""

    TYPE: ClassVar[str] = "ellipse"

    center: Point
    radius_x: float
    radius_y: float

    def _check_geometry(self) -> None:
        if self.radius_x < 0 or self.radius_y < 0:
            raise InvalidEntityError(
                self.TYPE, f"radii must be >= 0, got ({self.radius_x}, {self.radius_y})"
            )

    def _geometry_dict(self) -> dict[str, Any]:
        return {
            "center": self.center.to_dict(),
            "radiusX": self.radius_x,
            "radiusY": self.radius_y,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Ellipse":
        return cls(
            center=Point.from_dict(data["center"]),
            radius_x=float(data["radiusX"]),
            radius_y=float(data["radiusY"]),
            **cls._common_fields(data),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Polyline(_EntityBase):
    """An open chain of straight segments through ``points``."""

    TYPE: ClassVar[str] = "polyline"

    points: tuple[Point, ...]

    def _check_geometry(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        if len(self.points) < 2:
            raise InvalidEntityError(self.TYPE, f"needs at least 2 points, got {len(self.points)}")

    @property
    def segments(self) -> list[tuple[Point, Point]]:
        return list(zip(self.points, self.points[1:]))

    def _geometry_dict(self) -> dict[str, Any]:
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Polyline":
        return cls(
            points=tuple(Point.from_dict(p) for p in data["points"]),
            **cls._common_fields(data),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Spline(_EntityBase):
    """A smooth curve defined by control points.

    Bezier splines use the points as anchors and handles (anchor, handle,
    handle, anchor, ...). Catmull-Rom splines pass through every point, with
    ``tension`` controlling how tight the curve is.
    """

    TYPE: ClassVar[str] = "spline"

    control_points: tuple[Point, ...]
    kind: SplineKind = SplineKind.BEZIER
    tension: float = 0.5

    def _check_geometry(self) -> None:
        object.__setattr__(self, "control_points", tuple(self.control_points))
        if len(self.control_points) < 2:
            raise InvalidEntityError(
                self.TYPE, f"needs at least 2 control points, got {len(self.control_points)}"
            )
        if not 0.0 <= self.tension <= 1.0:
            raise InvalidEntityError(self.TYPE, f"tension must be in [0, 1], got {self.tension}")

    def _geometry_dict(self) -> dict[str, Any]:
        return {
            "controlPoints": [p.to_dict() for p in self.control_points],
            "splineType": self.kind.value,
            "tension": self.tension,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Spline":
        return cls(
            control_points=tuple(Point.from_dict(p) for p in data["controlPoints"]),
            kind=SplineKind(int(data.get("splineType", SplineKind.BEZIER.value))),
            tension=float(data.get("tension", 0.5)),
            **cls._common_fields(data),
        )


Entity = Line | Circle | Rectangle | Arc | Ellipse | Polyline | Spline

ENTITY_TYPES: dict[str, type[Entity]] = {
    cls.TYPE: cls for cls in (Line, Circle, Rectangle, Arc, Ellipse, Polyline, Spline)
}


def entity_from_dict(data: Mapping[str, Any]) -> Entity:
    """Deserialize any entity record, dispatching on its ``type`` field.

    Args:
        data: Persisted entity record

    Returns:
        The decoded entity

    Raises:
        UnknownEntityTypeError: If ``type`` names no known variant
        EntityDeserializationError: If a field is missing or malformed
    """
    if not isinstance(data, Mapping):
        raise EntityDeserializationError(f"expected a mapping, got {type(data).__name__}")

    raw_id = data.get("id")
    entity_id = str(raw_id) if raw_id is not None else None

    if "type" not in data:
        raise EntityDeserializationError("missing field 'type'", entity_id)

    entity_cls = ENTITY_TYPES.get(data["type"])
    if entity_cls is None:
        raise UnknownEntityTypeError(data["type"], entity_id)

    try:
        return entity_cls.from_dict(data)
    except KeyError as exc:
        raise EntityDeserializationError(f"missing field {exc}", entity_id) from exc
    except (TypeError, ValueError, InvalidEntityError) as exc:
        raise EntityDeserializationError(str(exc), entity_id) from exc
