"""Command-line interface for oneline.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Regression check of every reference solution (non-zero exit on failure)
- Puzzle listing with metadata
- Solution order display for hints
- Validation of a drawn path file
"""

from oneline.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
