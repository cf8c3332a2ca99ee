"""Trim tool: cutter, then target, then the portion to keep."""

from enum import Enum

import structlog

from draftcore.config.settings import GeometryConfig
from draftcore.core.hit_test import distance_to_entity
from draftcore.core.intersection import find_intersections
from draftcore.core.trim import trim
from draftcore.domain import Document, Entity, Point, Transform
from draftcore.tools.base import Tool

logger = structlog.get_logger(__name__)

ON_TARGET_TOLERANCE = 1e-6


class TrimState(str, Enum):
    SELECT_CUTTER = "select_cutter"
    SELECT_TARGET = "select_target"
    SELECT_PORTION = "select_portion"


STATUS_MESSAGES: dict[TrimState, str] = {
    TrimState.SELECT_CUTTER: "Select cutting entity",
    TrimState.SELECT_TARGET: "Select entity to trim",
    TrimState.SELECT_PORTION: "Click on the portion to keep",
}


class TrimTool(Tool):
    """Three-click trim.

    1. Pick the cutting entity.
    2. Pick a different entity that the cutter crosses.
    3. Click the portion of that entity to keep.

    The third click replaces the target in the document and resets the tool,
    whether or not the trim produced anything.
    """

    def __init__(
        self,
        geometry: GeometryConfig | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(geometry, transform)
        self.state = TrimState.SELECT_CUTTER
        self.cutter: Entity | None = None
        self.target: Entity | None = None
        self.intersections: list[Point] = []

    @property
    def status_message(self) -> str:
        return STATUS_MESSAGES[self.state]

    def reset(self) -> None:
        self.state = TrimState.SELECT_CUTTER
        self.cutter = None
        self.target = None
        self.intersections = []

    def cancel(self) -> None:
        if self.state is TrimState.SELECT_PORTION:
            self.state = TrimState.SELECT_TARGET
            self.target = None
            self.intersections = []
        elif self.state is TrimState.SELECT_TARGET:
            self.reset()

    def pointer_down(self, point: Point, document: Document) -> Document:
        match self.state:
            case TrimState.SELECT_CUTTER:
                self._select_cutter(point, document)
                return document
            case TrimState.SELECT_TARGET:
                self._select_target(point, document)
                return document
            case TrimState.SELECT_PORTION:
                return self._apply(point, document)

    def _select_cutter(self, point: Point, document: Document) -> None:
        hits = self.hits(point, document)
        if not hits:
            logger.debug("No cutter under pointer", point=point.to_tuple())
            return
        self.cutter = hits[0]
        self.state = TrimState.SELECT_TARGET
        logger.debug("Cutter selected", cutter=self.cutter.id)

    def _select_target(self, point: Point, document: Document) -> None:
        if self.cutter is None:
            self.reset()
            return
        for entity in self.hits(point, document, exclude=self.cutter.id):
            points = [
                p
                for p in find_intersections(self.cutter, entity)
                if distance_to_entity(entity, p) <= ON_TARGET_TOLERANCE
            ]
            if points:
                self.target = entity
                self.intersections = points
                self.state = TrimState.SELECT_PORTION
                logger.debug("Trim target selected", target=entity.id, intersections=len(points))
                return
        logger.debug("No trimmable entity under pointer", point=point.to_tuple())

    def _apply(self, point: Point, document: Document) -> Document:
        cutter = self.cutter
        target = document.get_entity(self.target.id) if self.target is not None else None
        intersections = self.intersections
        self.reset()

        if cutter is None or target is None:
            logger.debug("Trim target no longer in document")
            return document

        replacements = trim(target, cutter, intersections, self.to_document(point))
        if not replacements:
            logger.debug("Trim produced no change", target=target.id)
            return document

        logger.info("Entity trimmed", target=target.id, replacements=[e.id for e in replacements])
        return document.replace_entity(target.id, replacements)
