"""Interactive editing tools for draftcore.

Tools hold the transient state of multi-click edits and apply the core
operations to documents.

Key classes:
- TrimTool: Cutter, target, portion-to-keep trim
- ExtendTool: Boundary-first extend
- DocumentHistory: Bounded undo/redo of whole documents

Key functions:
- create_tool: Build a tool from its ToolKind
"""

from draftcore.tools.base import Tool
from draftcore.tools.extend import ExtendState, ExtendTool
from draftcore.tools.history import DocumentHistory
from draftcore.tools.registry import TOOL_CLASSES, ToolKind, create_tool
from draftcore.tools.trim import TrimState, TrimTool

__all__ = [
    "TOOL_CLASSES",
    "DocumentHistory",
    "ExtendState",
    "ExtendTool",
    "Tool",
    "ToolKind",
    "TrimState",
    "TrimTool",
    "create_tool",
]
