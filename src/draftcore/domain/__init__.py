"""Domain models for draftcore.

This module contains the value types a drawing is made of. All models are:

- Immutable (frozen dataclasses); edits return new instances
- Serializable to plain JSON-compatible records
- Independent of any rendering or input layer

Key classes:
- Point, Transform: Document-space coordinates and the screen mapping
- Line, Circle, Rectangle, Arc, Ellipse, Polyline, Spline: The entity variants
- Entity: Union of every entity variant
- Layer, Document: The drawing and its layers
- SnapKind, SnapResult, CharacteristicPoint: Snap targets
"""

from draftcore.domain.document import Document, Layer
from draftcore.domain.entities import (
    ENTITY_TYPES,
    Arc,
    Circle,
    Ellipse,
    Entity,
    Line,
    Polyline,
    Rectangle,
    Spline,
    SplineKind,
    entity_from_dict,
    new_entity_id,
)
from draftcore.domain.point import Point, Transform
from draftcore.domain.snap import SNAP_PRIORITY, CharacteristicPoint, SnapKind, SnapResult

__all__: list[str] = [
    # Geometry values
    "Point",
    "Transform",
    # Entities
    "ENTITY_TYPES",
    "Arc",
    "Circle",
    "Ellipse",
    "Entity",
    "Line",
    "Polyline",
    "Rectangle",
    "Spline",
    "SplineKind",
    "entity_from_dict",
    "new_entity_id",
    # Document
    "Document",
    "Layer",
    # Snapping
    "SNAP_PRIORITY",
    "CharacteristicPoint",
    "SnapKind",
    "SnapResult",
]
