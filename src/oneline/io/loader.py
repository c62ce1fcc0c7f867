"""Puzzle document loading.

Raw puzzle documents (parsed JSON) are validated against a Pydantic schema
and converted to immutable domain models. A document either converts fully
or raises ``PuzzleSchemaError``; no partially populated puzzle is returned.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)

from oneline.core.geometry import bounding_box
from oneline.domain import BoardElement, Dot, Point, Puzzle, RedArea, Shape
from oneline.exceptions import PuzzleLoadError, PuzzleSchemaError

logger = logging.getLogger(__name__)


def _require_number(value: Any) -> Any:
    # Booleans are ints in Python but never valid coordinates.
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError("Input should be a number")
    return value


Number = Annotated[float, BeforeValidator(_require_number)]


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)


class PointDocument(_Document):
    """A ``{x, y}`` coordinate."""

    x: Number
    y: Number

    def to_domain(self) -> Point:
        return Point(self.x, self.y)


class DotDocument(_Document):
    id: StrictInt
    type: Literal["dot"]
    position: PointDocument
    radius: Number = Field(gt=0)

    def to_domain(self) -> Dot:
        return Dot(id=self.id, position=self.position.to_domain(), radius=self.radius)


class ShapeDocument(_Document):
    id: StrictInt
    type: Literal["shape"]
    position: PointDocument
    vertices: list[PointDocument] = Field(min_length=3)

    def to_domain(self) -> Shape:
        return Shape(
            id=self.id,
            position=self.position.to_domain(),
            vertices=tuple(v.to_domain() for v in self.vertices),
        )


class RedAreaDocument(_Document):
    id: StrictInt
    type: Literal["red-area"]
    position: PointDocument
    vertices: list[PointDocument] = Field(min_length=3)

    def to_domain(self) -> RedArea:
        return RedArea(
            id=self.id,
            position=self.position.to_domain(),
            vertices=tuple(v.to_domain() for v in self.vertices),
        )


ElementDocument = Annotated[
    DotDocument | ShapeDocument | RedAreaDocument,
    Field(discriminator="type"),
]


class PuzzleDocument(_Document):
    """Schema of a complete puzzle document."""

    id: StrictInt
    name: StrictStr
    difficulty: Number
    board_width: Number = Field(alias="boardWidth", gt=0)
    board_height: Number = Field(alias="boardHeight", gt=0)
    elements: list[ElementDocument] = Field(min_length=1)
    solution_path: list[PointDocument] | None = Field(default=None, alias="solutionPath")
    start_hint: PointDocument | None = Field(default=None, alias="startHint")

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "PuzzleDocument":
        seen: set[int] = set()
        for element in self.elements:
            if element.id in seen:
                raise ValueError(f"Duplicate element id {element.id}")
            seen.add(element.id)
        return self

    def to_domain(self) -> Puzzle:
        elements: tuple[BoardElement, ...] = tuple(e.to_domain() for e in self.elements)
        solution_path = (
            tuple(p.to_domain() for p in self.solution_path)
            if self.solution_path is not None
            else None
        )
        return Puzzle(
            id=self.id,
            name=self.name,
            difficulty=self.difficulty,
            board_width=self.board_width,
            board_height=self.board_height,
            elements=elements,
            solution_path=solution_path,
            start_hint=self.start_hint.to_domain() if self.start_hint else None,
        )


def _element_extent(element: BoardElement) -> tuple[float, float, float, float]:
    if isinstance(element, Dot):
        x, y, r = element.position.x, element.position.y, element.radius
        return (x - r, y - r, x + r, y + r)
    return bounding_box(element.vertices)


def _warn_out_of_bounds(puzzle: Puzzle) -> None:
    # Logged, not rejected.
    for element in puzzle.elements:
        min_x, min_y, max_x, max_y = _element_extent(element)
        if min_x < 0 or min_y < 0 or max_x > puzzle.board_width or max_y > puzzle.board_height:
            logger.warning(
                "Element outside board: puzzle=%s element=%s extent=(%g, %g, %g, %g)",
                puzzle.id,
                element.id,
                min_x,
                min_y,
                max_x,
                max_y,
            )


def format_validation_errors(error: ValidationError) -> list[str]:
    """Flatten a ValidationError into `"loc.path: message"` strings."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<document>"
        messages.append(f"{location}: {detail['msg']}")
    return messages


def parse_puzzle(raw: Any) -> Puzzle:
    """Validate a raw puzzle document and build a Puzzle.

    Args:
        raw: Parsed JSON document (normally a dict)

    Returns:
        Fully validated Puzzle with computed metadata

    Raises:
        PuzzleSchemaError: If any field or element is missing or malformed
    """
    puzzle_id = raw.get("id") if isinstance(raw, dict) else None

    try:
        document = PuzzleDocument.model_validate(raw)
    except ValidationError as e:
        errors = format_validation_errors(e)
        raise PuzzleSchemaError(puzzle_id, errors[0], errors) from e

    puzzle = document.to_domain()
    _warn_out_of_bounds(puzzle)
    logger.debug(
        "Puzzle parsed: id=%s dots=%d shapes=%d red_areas=%d",
        puzzle.id,
        puzzle.metadata.dot_count,
        puzzle.metadata.shape_count,
        puzzle.metadata.red_area_count,
    )
    return puzzle


def load_puzzle_file(path: Path) -> Puzzle:
    """Read and parse a single puzzle JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Parsed Puzzle

    Raises:
        PuzzleLoadError: If the file cannot be read or is not valid JSON
        PuzzleSchemaError: If the document does not match the schema
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PuzzleLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise PuzzleLoadError(str(path), f"invalid JSON: {e}") from e

    return parse_puzzle(raw)
