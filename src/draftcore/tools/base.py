"""Shared machinery for interactive editing tools.

A tool turns a sequence of pointer clicks into a document edit. It keeps only
transient selection state between clicks; documents come in and go out as
immutable values.
"""

from draftcore.config.settings import GeometryConfig
from draftcore.domain import Document, Entity, Point, Transform


class Tool:
    """Base class for click-driven tools.

    Attributes:
        transform: Document-to-screen transform of the view receiving clicks
        tolerance: Pick distance in screen units
    """

    def __init__(
        self,
        geometry: GeometryConfig | None = None,
        transform: Transform | None = None,
    ) -> None:
        self.geometry = geometry or GeometryConfig()
        self.transform = transform or Transform.identity()

    @property
    def tolerance(self) -> float:
        return self.geometry.hit_tolerance

    @property
    def status_message(self) -> str:
        raise NotImplementedError

    def pointer_down(self, point: Point, document: Document) -> Document:
        """Handle a click at a screen-space point and return the resulting document."""
        raise NotImplementedError

    def cancel(self) -> None:
        """Step back one state."""
        raise NotImplementedError

    def reset(self) -> None:
        """Drop all transient state."""
        raise NotImplementedError

    def to_document(self, point: Point) -> Point:
        """Map a screen-space click into document space."""
        return self.transform.inverse().apply(point)

    def hits(self, point: Point, document: Document, exclude: str | None = None) -> list[Entity]:
        """Visible entities under a screen-space point, topmost first."""
        return [
            entity
            for entity in reversed(document.visible_entities)
            if entity.id != exclude
            and entity.hit_test(point, self.transform, self.tolerance)
        ]
