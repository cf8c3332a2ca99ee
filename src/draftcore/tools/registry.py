"""Tool lookup table."""

from enum import Enum

from draftcore.config.settings import DraftSettings, get_default_settings
from draftcore.domain import Transform
from draftcore.tools.base import Tool
from draftcore.tools.extend import ExtendTool
from draftcore.tools.trim import TrimTool


class ToolKind(str, Enum):
    TRIM = "trim"
    EXTEND = "extend"


TOOL_CLASSES: dict[ToolKind, type[Tool]] = {
    ToolKind.TRIM: TrimTool,
    ToolKind.EXTEND: ExtendTool,
}


def create_tool(
    kind: ToolKind,
    settings: DraftSettings | None = None,
    transform: Transform | None = None,
) -> Tool:
    """Build a fresh tool of the given kind.

    Every call returns a new instance; tools are never cached.
    """
    settings = settings or get_default_settings()
    return TOOL_CLASSES[kind](settings.geometry, transform)
