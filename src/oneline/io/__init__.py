"""Puzzle I/O layer for oneline.

This module handles turning puzzle documents into domain models. It is the
only place the schema of the JSON format is known.

Key responsibilities:
- Validate raw puzzle documents
- Convert documents to domain models
- Load puzzle directories in id order

Key classes:
- PuzzleCatalog: Load and look up puzzles from a directory
"""

from oneline.io.catalog import PuzzleCatalog, bundled_puzzle_dir
from oneline.io.loader import (
    PointDocument,
    PuzzleDocument,
    format_validation_errors,
    load_puzzle_file,
    parse_puzzle,
)

__all__ = [
    "PuzzleCatalog",
    "PointDocument",
    "PuzzleDocument",
    "bundled_puzzle_dir",
    "format_validation_errors",
    "load_puzzle_file",
    "parse_puzzle",
]
