"""Document and layer models.

A Document is an immutable snapshot of a drawing: its entities in paint order
(last is topmost), its layers, and its grid preferences. Every edit returns a
new Document; the previous one stays valid, which is what undo relies on.
"""

import uuid
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from draftcore.domain.entities import DEFAULT_COLOR, Entity, entity_from_dict
from draftcore.exceptions import InvalidDocumentError

DEFAULT_LAYER_NAME = "Default"
DEFAULT_DOCUMENT_NAME = "Untitled Drawing"
DEFAULT_GRID_SIZE = 10.0


@dataclass(frozen=True, slots=True)
class Layer:
    """A named group of entities with shared visibility.

    Attributes:
        id: Unique layer identifier
        name: Display name
        color: 32-bit ARGB layer color
        is_visible: Whether the layer's entities take part in hit testing and snapping
    """

    id: str
    name: str
    color: int = DEFAULT_COLOR
    is_visible: bool = True

    @classmethod
    def create(cls, name: str, color: int = DEFAULT_COLOR) -> "Layer":
        """Create a visible layer with a fresh id."""
        return cls(id=str(uuid.uuid4()), name=name, color=color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "isVisible": self.is_visible,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Layer":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            color=int(data["color"]),
            is_visible=bool(data["isVisible"]),
        )


def _default_layers() -> tuple[Layer, ...]:
    return (Layer.create(DEFAULT_LAYER_NAME),)


@dataclass(frozen=True, slots=True)
class Document:
    """An immutable drawing.

    Attributes:
        entities: Entities in paint order; later entities are hit first
        layers: Layers in display order, never empty
        active_layer_id: Layer receiving new entities
        grid_size: Grid spacing in document units, strictly positive
        show_grid: Whether the grid is drawn
        snap_to_grid: Whether grid snapping is offered
        id: Document identifier
        name: Display name
    """

    entities: tuple[Entity, ...] = ()
    layers: tuple[Layer, ...] = field(default_factory=_default_layers)
    active_layer_id: str = ""
    grid_size: float = DEFAULT_GRID_SIZE
    show_grid: bool = True
    snap_to_grid: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = DEFAULT_DOCUMENT_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "entities", tuple(self.entities))
        object.__setattr__(self, "layers", tuple(self.layers))
        if not self.layers:
            raise InvalidDocumentError("a document needs at least one layer")
        if not self.grid_size > 0:
            raise InvalidDocumentError(f"grid size must be positive, got {self.grid_size}")
        if self.get_layer(self.active_layer_id) is None:
            object.__setattr__(self, "active_layer_id", self.layers[0].id)

    @classmethod
    def create(cls, name: str = DEFAULT_DOCUMENT_NAME) -> "Document":
        """Create an empty document with a single default layer."""
        return cls(name=name)

    # Read helpers

    @property
    def active_layer(self) -> Layer:
        return self.get_layer(self.active_layer_id) or self.layers[0]

    @property
    def visible_entities(self) -> list[Entity]:
        visible = {layer.id for layer in self.layers if layer.is_visible}
        return [entity for entity in self.entities if entity.layer in visible]

    @property
    def selected_entities(self) -> list[Entity]:
        return [entity for entity in self.entities if entity.is_selected]

    def get_entity(self, entity_id: str) -> Entity | None:
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        return None

    def get_layer(self, layer_id: str) -> Layer | None:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    # Entity edits

    def add_entity(self, entity: Entity) -> "Document":
        """Append an entity on top of the paint order."""
        return replace(self, entities=self.entities + (entity,))

    def remove_entity(self, entity_id: str) -> "Document":
        return replace(self, entities=tuple(e for e in self.entities if e.id != entity_id))

    def update_entity(self, entity: Entity) -> "Document":
        """Swap in a new version of an entity, matched by id, keeping its position."""
        return replace(
            self,
            entities=tuple(entity if e.id == entity.id else e for e in self.entities),
        )

    def replace_entity(self, entity_id: str, replacements: Sequence[Entity]) -> "Document":
        """Remove an entity and insert ``replacements`` at its position.

        Unknown ids leave the document unchanged.
        """
        for index, entity in enumerate(self.entities):
            if entity.id == entity_id:
                entities = self.entities[:index] + tuple(replacements) + self.entities[index + 1 :]
                return replace(self, entities=entities)
        return self

    # Layer edits

    def add_layer(self, layer: Layer) -> "Document":
        return replace(self, layers=self.layers + (layer,))

    def remove_layer(self, layer_id: str) -> "Document":
        """Remove a layer together with its entities.

        Removing the last remaining layer is a no-op. If the active layer is
        removed, the first remaining layer becomes active.
        """
        if len(self.layers) <= 1 or self.get_layer(layer_id) is None:
            return self

        layers = tuple(layer for layer in self.layers if layer.id != layer_id)
        active = self.active_layer_id if self.active_layer_id != layer_id else layers[0].id
        return replace(
            self,
            layers=layers,
            entities=tuple(e for e in self.entities if e.layer != layer_id),
            active_layer_id=active,
        )

    def update_layer(self, layer: Layer) -> "Document":
        return replace(
            self,
            layers=tuple(layer if existing.id == layer.id else existing for existing in self.layers),
        )

    def set_active_layer(self, layer_id: str) -> "Document":
        return replace(self, active_layer_id=layer_id)

    # Selection

    def clear_selection(self) -> "Document":
        return replace(
            self,
            entities=tuple(
                e.with_changes(is_selected=False) if e.is_selected else e for e in self.entities
            ),
        )

    def select_entity(self, entity_id: str, additive: bool = False) -> "Document":
        """Select one entity; without ``additive`` everything else is deselected."""
        return self.select_entities([entity_id], additive=additive)

    def select_entities(self, entity_ids: Iterable[str], additive: bool = False) -> "Document":
        wanted = set(entity_ids)
        entities = []
        for entity in self.entities:
            selected = entity.id in wanted or (additive and entity.is_selected)
            if selected != entity.is_selected:
                entity = entity.with_changes(is_selected=selected)
            entities.append(entity)
        return replace(self, entities=tuple(entities))

    def with_changes(self, **changes: Any) -> "Document":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a persisted document record."""
        return {
            "id": self.id,
            "name": self.name,
            "entities": [entity.to_dict() for entity in self.entities],
            "layers": [layer.to_dict() for layer in self.layers],
            "activeLayerId": self.active_layer_id,
            "gridSize": self.grid_size,
            "showGrid": self.show_grid,
            "snapToGrid": self.snap_to_grid,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        """Deserialize a persisted document record.

        Raises:
            EntityDeserializationError: If an entity record is malformed
            InvalidDocumentError: If the document has no layers or a bad grid size
            KeyError: If a document field is missing
        """
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            entities=tuple(entity_from_dict(item) for item in data["entities"]),
            layers=tuple(Layer.from_dict(item) for item in data["layers"]),
            active_layer_id=str(data["activeLayerId"]),
            grid_size=float(data["gridSize"]),
            show_grid=bool(data["showGrid"]),
            snap_to_grid=bool(data["snapToGrid"]),
        )
