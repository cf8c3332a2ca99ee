"""Extend tool: pick a boundary, then any number of entities to extend to it."""

from enum import Enum

import structlog

from draftcore.config.settings import GeometryConfig
from draftcore.domain import Document, Entity, Point, Transform
from draftcore.tools.base import Tool

logger = structlog.get_logger(__name__)


class ExtendState(str, Enum):
    SELECT_BOUNDARY = "select_boundary"
    SELECT_TARGET = "select_target"


STATUS_MESSAGES: dict[ExtendState, str] = {
    ExtendState.SELECT_BOUNDARY: "Select boundary entity",
    ExtendState.SELECT_TARGET: "Select entity to extend",
}


class ExtendTool(Tool):
    """Boundary-first extend.

    After a boundary is chosen, every click on a line or arc extends the end
    nearest the click. The boundary stays selected until ``cancel``.
    """

    def __init__(
        self,
        geometry: GeometryConfig | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(geometry, transform)
        self.state = ExtendState.SELECT_BOUNDARY
        self.boundary: Entity | None = None

    @property
    def status_message(self) -> str:
        return STATUS_MESSAGES[self.state]

    def reset(self) -> None:
        self.state = ExtendState.SELECT_BOUNDARY
        self.boundary = None

    def cancel(self) -> None:
        self.reset()

    def pointer_down(self, point: Point, document: Document) -> Document:
        if self.state is ExtendState.SELECT_BOUNDARY:
            hits = self.hits(point, document)
            if hits:
                self.boundary = hits[0]
                self.state = ExtendState.SELECT_TARGET
                logger.debug("Boundary selected", boundary=self.boundary.id)
            return document

        extended = self.preview(point, document)
        if extended is None:
            return document

        logger.info("Entity extended", target=extended.id, boundary=self.boundary.id if self.boundary else None)
        return document.update_entity(extended)

    def preview(self, point: Point, document: Document) -> Entity | None:
        """The entity a click at ``point`` would produce, without applying it."""
        if self.boundary is None:
            return None
        boundary = document.get_entity(self.boundary.id) or self.boundary
        click = self.to_document(point)
        for entity in self.hits(point, document, exclude=boundary.id):
            extended = entity.extend([boundary], click)
            if extended is not None:
                return extended
        return None
