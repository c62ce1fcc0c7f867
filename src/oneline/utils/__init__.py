"""Utility functions for oneline.

This module provides utility functions including:

- Logging setup and configuration
"""

from oneline.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
