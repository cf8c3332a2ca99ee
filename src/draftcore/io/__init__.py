"""Document I/O layer for draftcore.

This module handles reading and writing drawing files. Documents are stored
as JSON using the persisted record layout of each entity and layer.

Key classes:
- DocumentReader: Load drawing files
- DocumentWriter: Save drawing files
"""

from draftcore.io.reader import DocumentReader
from draftcore.io.writer import DocumentWriter

__all__ = [
    "DocumentReader",
    "DocumentWriter",
]
