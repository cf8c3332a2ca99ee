"""Configuration management for draftcore.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Pick and flattening tolerances
- SnapSettings: Snapping switches and snap radius
- LoggingConfig: Logging settings
- DraftSettings: Main application settings
"""

from draftcore.config.settings import (
    DraftSettings,
    GeometryConfig,
    LoggingConfig,
    SnapSettings,
    get_default_settings,
)

__all__ = [
    "DraftSettings",
    "GeometryConfig",
    "LoggingConfig",
    "SnapSettings",
    "get_default_settings",
]
