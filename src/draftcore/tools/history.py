"""Bounded undo/redo history of whole documents."""

from collections import deque

from draftcore.domain import Document

DEFAULT_CAPACITY = 50


class DocumentHistory:
    """Two bounded stacks of document snapshots.

    Documents are immutable, so a snapshot is just a reference. When a stack
    is full the oldest snapshot is dropped.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._undo: deque[Document] = deque(maxlen=capacity)
        self._redo: deque[Document] = deque(maxlen=capacity)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record(self, document: Document) -> None:
        """Remember ``document`` as the state before an edit and clear redo."""
        self._undo.append(document)
        self._redo.clear()

    def undo(self, current: Document) -> Document:
        """Return the previous document, or ``current`` if there is none."""
        if not self._undo:
            return current
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: Document) -> Document:
        """Return the next document, or ``current`` if there is none."""
        if not self._redo:
            return current
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
