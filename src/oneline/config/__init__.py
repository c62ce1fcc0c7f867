"""Configuration management for oneline.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PathConfig: Path sampling settings
- CatalogConfig: Puzzle directory settings
- LoggingConfig: Logging settings
- OneLineSettings: Main application settings
"""

from oneline.config.settings import (
    DEFAULT_MIN_POINT_SPACING,
    DEFAULT_SMOOTHING_FACTOR,
    CatalogConfig,
    LoggingConfig,
    OneLineSettings,
    PathConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_MIN_POINT_SPACING",
    "DEFAULT_SMOOTHING_FACTOR",
    "CatalogConfig",
    "LoggingConfig",
    "OneLineSettings",
    "PathConfig",
    "get_default_settings",
]
