"""Puzzle representation and metadata.

This module defines the puzzle domain model: the board extent, its ordered
elements, an optional reference solution and the metadata derived once at
load time.
"""

from dataclasses import dataclass, field
from typing import Any

from oneline.domain.elements import BoardElement, Dot, RedArea, Shape
from oneline.domain.point import Point


@dataclass(frozen=True, slots=True)
class PuzzleMetadata:
    """Static counts derived from a puzzle's elements.

    Attributes:
        dot_count: Number of dots on the board
        shape_count: Number of shapes on the board
        red_area_count: Number of red areas on the board
        has_solution_path: True if a reference path with at least 2 points exists
    """

    dot_count: int
    shape_count: int
    red_area_count: int
    has_solution_path: bool

    @classmethod
    def compute(
        cls,
        elements: tuple[BoardElement, ...],
        solution_path: tuple[Point, ...] | None,
    ) -> "PuzzleMetadata":
        """Derive metadata from elements and solution path.

        Args:
            elements: Board elements in document order
            solution_path: Reference path, if any

        Returns:
            PuzzleMetadata instance
        """
        return cls(
            dot_count=sum(1 for e in elements if isinstance(e, Dot)),
            shape_count=sum(1 for e in elements if isinstance(e, Shape)),
            red_area_count=sum(1 for e in elements if isinstance(e, RedArea)),
            has_solution_path=solution_path is not None and len(solution_path) >= 2,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "dotCount": self.dot_count,
            "shapeCount": self.shape_count,
            "redAreaCount": self.red_area_count,
            "hasSolutionPath": self.has_solution_path,
        }


@dataclass(frozen=True, slots=True)
class Puzzle:
    """A single puzzle definition.

    Instances are produced by ``oneline.io.loader.parse_puzzle`` and are never
    partially populated. Metadata is computed on construction when omitted.

    Attributes:
        id: Puzzle id
        name: Display name
        difficulty: Difficulty rating
        board_width: Width of the coordinate space all points live in
        board_height: Height of the coordinate space all points live in
        elements: Board elements in document order
        solution_path: Optional reference path
        start_hint: Optional suggested starting point
        metadata: Derived counts
    """

    id: int
    name: str
    difficulty: float
    board_width: float
    board_height: float
    elements: tuple[BoardElement, ...]
    solution_path: tuple[Point, ...] | None = None
    start_hint: Point | None = None
    metadata: PuzzleMetadata = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "metadata",
            PuzzleMetadata.compute(self.elements, self.solution_path),
        )

    @property
    def dots(self) -> tuple[Dot, ...]:
        """Dots in document order."""
        return tuple(e for e in self.elements if isinstance(e, Dot))

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """Shapes in document order."""
        return tuple(e for e in self.elements if isinstance(e, Shape))

    @property
    def red_areas(self) -> tuple[RedArea, ...]:
        """Red areas in document order."""
        return tuple(e for e in self.elements if isinstance(e, RedArea))

    def element_by_id(self, element_id: int) -> BoardElement | None:
        """Look up an element by id.

        Args:
            element_id: Id to search for

        Returns:
            The element, or None if no element has that id
        """
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the puzzle document form.

        Returns:
            Dictionary accepted by ``parse_puzzle``
        """
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "difficulty": self.difficulty,
            "boardWidth": self.board_width,
            "boardHeight": self.board_height,
            "elements": [e.to_dict() for e in self.elements],
        }
        if self.solution_path is not None:
            data["solutionPath"] = [p.to_dict() for p in self.solution_path]
        if self.start_hint is not None:
            data["startHint"] = self.start_hint.to_dict()
        return data
