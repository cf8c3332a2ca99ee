"""Configuration settings for draftcore."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from draftcore.domain.snap import SnapKind


def _all_kinds_enabled() -> dict[SnapKind, bool]:
    return {kind: True for kind in SnapKind}


class GeometryConfig(BaseModel):
    """Tolerances used by interactive geometry operations.

    Screen-space values are in pixels and are divided by the view scale
    before use in document space.
    """

    hit_tolerance: float = Field(
        default=5.0,
        gt=0.0,
        le=50.0,
        description="Pick distance for tools (screen units)",
    )
    spline_flatten_tolerance: float = Field(
        default=0.25,
        ge=0.01,
        le=10.0,
        description="Maximum deviation when flattening splines (document units)",
    )


class SnapSettings(BaseModel):
    """Snapping preferences.

    Immutable; toggling a kind returns a new instance.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(
        default=True,
        description="Master switch for snapping",
    )
    enabled_kinds: dict[SnapKind, bool] = Field(
        default_factory=_all_kinds_enabled,
        description="Per-kind switches; kinds missing from the map are enabled",
    )
    snap_distance: float = Field(
        default=10.0,
        gt=0.0,
        description="Snap radius (screen units)",
    )

    def is_kind_enabled(self, kind: SnapKind) -> bool:
        """Check whether snapping is on and ``kind`` is switched on."""
        return self.enabled and self.enabled_kinds.get(kind, True)

    def with_kind_toggled(self, kind: SnapKind) -> "SnapSettings":
        """Return a copy with ``kind`` flipped."""
        kinds = dict(self.enabled_kinds)
        kinds[kind] = not kinds.get(kind, True)
        return self.model_copy(update={"enabled_kinds": kinds})


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if None)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class DraftSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    snap: SnapSettings = Field(default_factory=SnapSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DraftSettings:
    """Get default application settings."""
    return DraftSettings()
