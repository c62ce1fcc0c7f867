"""Reference solution replay.

Helpers for the puzzle's own ``solution_path``: checking that it solves the
puzzle, and deriving the order in which it first reaches each element (used
by the hint subsystem, never by validation).
"""

from dataclasses import dataclass

from oneline.core.collision import is_point_in_shape, segment_touches_dot
from oneline.core.path import line_from_points
from oneline.core.rules import validate
from oneline.domain import BoardElement, Dot, Puzzle, Shape

NO_SOLUTION_PATH = "No solution path defined"


@dataclass(frozen=True)
class SolutionCheck:
    """Outcome of replaying a puzzle's reference solution.

    Attributes:
        valid: True if the reference path satisfies every rule
        errors: Reasons the path fails, empty when valid
    """

    valid: bool
    errors: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return "; ".join(self.errors)


def validate_solution_path(puzzle: Puzzle) -> SolutionCheck:
    """Check that a puzzle's reference solution solves it.

    Args:
        puzzle: Puzzle to check

    Returns:
        SolutionCheck; a missing or single-point path is invalid
    """
    if not puzzle.metadata.has_solution_path or puzzle.solution_path is None:
        return SolutionCheck(valid=False, errors=(NO_SOLUTION_PATH,))

    result = validate(line_from_points(puzzle.solution_path), puzzle)
    return SolutionCheck(valid=result.is_valid, errors=tuple(result.failure_reasons()))


def elements_in_solution_order(puzzle: Puzzle) -> list[BoardElement]:
    """Elements in the order the reference solution first reaches them.

    Dots are reached when a segment touches them; shapes when either end
    of a segment lies inside them. Red areas never appear.

    Args:
        puzzle: Puzzle with a reference solution

    Returns:
        First-touch ordered elements, empty without a usable solution path
    """
    path = puzzle.solution_path
    if path is None or len(path) < 2:
        return []

    ordered: list[BoardElement] = []
    seen: set[int] = set()

    for seg_start, seg_end in zip(path, path[1:]):
        for element in puzzle.elements:
            if element.id in seen:
                continue

            if isinstance(element, Dot):
                reached = segment_touches_dot(seg_start, seg_end, element)
            elif isinstance(element, Shape):
                reached = is_point_in_shape(seg_start, element) or is_point_in_shape(
                    seg_end, element
                )
            else:
                reached = False

            if reached:
                ordered.append(element)
                seen.add(element.id)

    return ordered
