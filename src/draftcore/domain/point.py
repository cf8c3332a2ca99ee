"""Core geometric value types.

This module defines the fundamental value types shared by every entity:
- Point: An immutable 2D point / vector in document units
- Transform: An immutable 2D affine map between document and screen space
"""

import math
from dataclasses import dataclass
from typing import Any

from draftcore.exceptions import GeometryError


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D document space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in document units
        y: Y coordinate in document units
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        """Dot product, treating both points as vectors."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the 2D cross product."""
        return self.x * other.y - self.y * other.x

    @property
    def length(self) -> float:
        """Euclidean length of the point as a vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared_to(self, other: "Point") -> float:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def midpoint(self, other: "Point") -> "Point":
        """Point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a ``{"x", "y"}`` record.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from a ``{"x", "y"}`` record.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Transform:
    """A 2D affine transform.

    Maps ``(x, y)`` to ``(a*x + c*y + tx, b*x + d*y + ty)``. Hit testing uses
    it to relate document space to screen space.

    Attributes:
        a: X scale / rotation component
        b: Y shear / rotation component
        c: X shear / rotation component
        d: Y scale / rotation component
        tx: X translation
        ty: Y translation
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> "Transform":
        return cls(tx=dx, ty=dy)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "Transform":
        return cls(a=sx, d=sx if sy is None else sy)

    def then(self, other: "Transform") -> "Transform":
        """Compose: apply this transform first, then ``other``."""
        return Transform(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def scale(self) -> float:
        """Uniform scale factor (square root of the area scale)."""
        return math.sqrt(abs(self.determinant))

    def apply(self, point: Point) -> Point:
        """Map a point through the transform."""
        return Point(
            self.a * point.x + self.c * point.y + self.tx,
            self.b * point.x + self.d * point.y + self.ty,
        )

    def inverse(self) -> "Transform":
        """Return the inverse transform.

        Raises:
            GeometryError: If the transform is singular
        """
        det = self.determinant
        if abs(det) < 1e-12:
            raise GeometryError("Cannot invert a singular transform")

        a = self.d / det
        b = -self.b / det
        c = -self.c / det
        d = self.a / det
        return Transform(
            a=a,
            b=b,
            c=c,
            d=d,
            tx=-(a * self.tx + c * self.ty),
            ty=-(b * self.tx + d * self.ty),
        )
