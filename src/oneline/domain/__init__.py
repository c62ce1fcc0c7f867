"""Domain models for oneline.

This module contains the core domain models representing puzzles and the
elements on their boards. All models are:

- Immutable (frozen dataclasses)
- Serializable back to the puzzle document form
- Independent of the loader's schema layer

Key classes:
- Point: A 2D board coordinate
- Dot, Shape, RedArea: Board elements
- Puzzle: A puzzle definition with derived metadata
"""

from oneline.domain.elements import BoardElement, Dot, ElementType, RedArea, Shape
from oneline.domain.point import Point
from oneline.domain.puzzle import Puzzle, PuzzleMetadata

__all__: list[str] = [
    # Enums
    "ElementType",
    # Core types
    "Point",
    "Dot",
    "Shape",
    "RedArea",
    "BoardElement",
    "Puzzle",
    "PuzzleMetadata",
]
