"""Document writer for saving drawing files.

This module provides the DocumentWriter class for writing documents as
JSON with the persisted record layout.
"""

import json
import os
import tempfile
from pathlib import Path

import structlog

from draftcore.domain import Document
from draftcore.exceptions import DocumentSaveError

logger = structlog.get_logger(__name__)


class DocumentWriter:
    """Writes documents to JSON files.

    The file is written to a temporary sibling and moved into place, so an
    interrupted save never leaves a truncated drawing behind.

    Example:
        writer = DocumentWriter(Path("drawing.json"))
        writer.save(document)
    """

    def __init__(self, path: Path, indent: int | None = 2) -> None:
        """Initialize the document writer.

        Args:
            path: Destination path
            indent: JSON indentation (None for compact output)
        """
        self._path = path
        self._indent = indent

    def save(self, document: Document) -> None:
        """Serialize and write a document.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        text = json.dumps(document.to_dict(), indent=self._indent)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(text)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise DocumentSaveError(str(self._path), str(exc)) from exc

        logger.debug("Document saved", path=str(self._path), entities=len(document.entities))

    @staticmethod
    def get_edited_path(input_path: Path) -> Path:
        """Generate the default output path for an edited drawing.

        Converts: drawing.json -> drawing-edited.json

        Args:
            input_path: Original drawing path

        Returns:
            Path with -edited suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-edited{input_path.suffix}"
