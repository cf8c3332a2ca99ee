"""Document reader for loading drawing files.

This module provides the DocumentReader class for loading JSON drawing
files into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path

import structlog

from draftcore.domain import Document, Entity
from draftcore.exceptions import DocumentError, DocumentLoadError, EntityError

logger = structlog.get_logger(__name__)


class DocumentReader:
    """Loads drawing documents from JSON files.

    Example:
        reader = DocumentReader(Path("drawing.json"))
        document = reader.load()
        for entity in reader.iter_entities():
            print(entity.id)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the document reader.

        Args:
            path: Path to the JSON drawing file
        """
        self._path = path
        self._document: Document | None = None

    def load(self) -> Document:
        """Load and decode the document file.

        Returns:
            The decoded document

        Raises:
            DocumentLoadError: If the file is missing, is not valid JSON, or
                holds a malformed document or entity record
        """
        if not self._path.exists():
            raise DocumentLoadError(str(self._path), "file not found")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise DocumentLoadError(str(self._path), str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(str(self._path), f"invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise DocumentLoadError(str(self._path), "top-level value must be an object")

        try:
            self._document = Document.from_dict(data)
        except KeyError as exc:
            raise DocumentLoadError(str(self._path), f"missing field {exc}") from exc
        except (TypeError, ValueError, EntityError, DocumentError) as exc:
            raise DocumentLoadError(str(self._path), str(exc)) from exc

        logger.debug(
            "Document loaded",
            path=str(self._path),
            entities=len(self._document.entities),
            layers=len(self._document.layers),
        )
        return self._document

    @property
    def document(self) -> Document:
        """Return the loaded document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document

    @property
    def entity_count(self) -> int:
        """Return the number of entities in the loaded document."""
        return len(self.document.entities)

    def iter_entities(self) -> Iterator[Entity]:
        """Iterate over entities in paint order.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        yield from self.document.entities
