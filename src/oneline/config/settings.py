"""Configuration settings for oneline."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MIN_POINT_SPACING = 3.0
DEFAULT_SMOOTHING_FACTOR = 0.3


class PathConfig(BaseModel):
    """Configuration for sampling a drawn path.

    The input layer delivers pointer positions far more often than the rules
    need them. Points closer than ``min_point_spacing`` to the last recorded
    point are dropped, and accepted points are pulled toward the previous one
    by ``smoothing_factor`` to damp sampling jitter.
    """

    min_point_spacing: float = Field(
        default=DEFAULT_MIN_POINT_SPACING,
        gt=0.0,
        le=50.0,
        description="Minimum distance between recorded points (board units)",
    )
    smoothing_factor: float = Field(
        default=DEFAULT_SMOOTHING_FACTOR,
        ge=0.0,
        lt=1.0,
        description="How strongly a new point is pulled toward the previous one (0 = none)",
    )


class CatalogConfig(BaseModel):
    """Configuration for locating puzzle documents."""

    puzzle_dir: Path | None = Field(
        default=None,
        description="Directory of puzzle JSON files (None = bundled puzzles)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class OneLineSettings(BaseModel):
    """Main application settings."""

    path: PathConfig = Field(default_factory=PathConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OneLineSettings:
    """Get default application settings."""
    return OneLineSettings()
