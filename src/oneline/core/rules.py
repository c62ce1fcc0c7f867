"""Rule validation engine.

Two evaluation modes share the collision predicates:

- ``validate`` reduces a complete line to a ``ValidationResult``.
- ``check_incremental`` inspects a single new segment while the stroke is
  still being drawn, so the caller can stop a stroke early.

Shape re-entry is inferred differently in the two modes. Full validation
sums boundary crossings per shape and flags more than two; this is a
topological approximation, not a guarantee, and can misjudge
self-intersecting paths or tangential touches. The incremental check only
asks whether the new end point lies inside an already-visited shape. The two
can disagree at the margins, e.g. for a segment grazing a boundary without
ending inside.

Rule outcomes are always returned as data. Nothing here raises for a
violation or an incomplete path.
"""

from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from oneline.core.collision import (
    count_shape_crossings,
    is_point_in_shape,
    segment_crosses_red_area,
    segment_enters_shape,
    segment_touches_dot,
)
from oneline.core.path import Line, Segment, segments
from oneline.domain import Dot, Puzzle, Shape

# A clean entry and exit crosses a shape's boundary twice.
MAX_SHAPE_CROSSINGS = 2


class ViolationKind(str, Enum):
    """Terminal rule failures."""

    RED_AREA = "red-area"
    SHAPE_REENTRY = "shape-reentry"


@dataclass(frozen=True)
class ValidationResult:
    """Snapshot produced by one ``validate`` call.

    Attributes:
        visited_dots: Ids of dots touched by any segment
        visited_shapes: Ids of shapes with at least one boundary crossing
        shape_crossings: Total boundary crossings per shape id
        all_dots_visited: Every dot was touched
        all_shapes_entered_once: Every shape visited and none re-entered
        red_area_violation: Some segment crossed or sat inside a red area
        shape_reentry_violation: Some shape collected more than 2 crossings
        is_valid: The line solves the puzzle
    """

    visited_dots: frozenset[int]
    visited_shapes: frozenset[int]
    shape_crossings: Mapping[int, int]
    all_dots_visited: bool
    all_shapes_entered_once: bool
    red_area_violation: bool
    shape_reentry_violation: bool
    is_valid: bool

    @property
    def violation_kind(self) -> ViolationKind | None:
        """The violation to report, red areas taking precedence."""
        if self.red_area_violation:
            return ViolationKind.RED_AREA
        if self.shape_reentry_violation:
            return ViolationKind.SHAPE_REENTRY
        return None

    def missing_dots(self, puzzle: Puzzle) -> list[int]:
        """Sorted ids of dots the line has not touched."""
        return sorted(d.id for d in puzzle.dots if d.id not in self.visited_dots)

    def missing_shapes(self, puzzle: Puzzle) -> list[int]:
        """Sorted ids of shapes the line never entered."""
        return sorted(s.id for s in puzzle.shapes if s.id not in self.visited_shapes)

    def failure_reasons(self) -> list[str]:
        """Human-readable reasons the line is not a solution.

        Returns:
            Empty list for a valid line
        """
        if self.is_valid:
            return []

        reasons: list[str] = []
        if not self.all_dots_visited:
            reasons.append("Not all dots visited")
        if not self.all_shapes_entered_once:
            reasons.append("Not all shapes entered once")
        if self.red_area_violation:
            reasons.append("Crosses red area")
        if self.shape_reentry_violation:
            reasons.append("Shape entered twice")
        return reasons


@dataclass(frozen=True, slots=True)
class IncrementalCheck:
    """Outcome of checking one freshly drawn segment."""

    violation: bool
    kind: ViolationKind | None = None


NO_VIOLATION = IncrementalCheck(violation=False)


def validate(line: Line, puzzle: Puzzle) -> ValidationResult:
    """Validate a line against every rule of a puzzle.

    Walks the line's segments in order. Dots are visited once touched,
    red-area violations are sticky, and boundary crossings are summed per
    shape. After the walk a shape with any crossing is visited and one with
    more than ``MAX_SHAPE_CROSSINGS`` counts as re-entered.

    Args:
        line: Line to validate (active or not)
        puzzle: Puzzle whose rules apply

    Returns:
        A new ValidationResult; equal inputs always give equal results
    """
    dots = puzzle.dots
    shapes = puzzle.shapes
    red_areas = puzzle.red_areas

    visited_dots: set[int] = set()
    crossings: dict[int, int] = {shape.id: 0 for shape in shapes}
    red_area_violation = False

    for seg_start, seg_end in segments(line):
        for dot in dots:
            if segment_touches_dot(seg_start, seg_end, dot):
                visited_dots.add(dot.id)

        for red_area in red_areas:
            if segment_crosses_red_area(seg_start, seg_end, red_area):
                red_area_violation = True

        for shape in shapes:
            crossings[shape.id] += count_shape_crossings(seg_start, seg_end, shape)

    visited_shapes = frozenset(sid for sid, count in crossings.items() if count > 0)
    shape_reentry_violation = any(count > MAX_SHAPE_CROSSINGS for count in crossings.values())

    all_dots_visited = len(visited_dots) == len(dots)
    all_shapes_entered_once = len(visited_shapes) == len(shapes) and not shape_reentry_violation

    is_valid = (
        all_dots_visited
        and (not shapes or all_shapes_entered_once)
        and not red_area_violation
        and not shape_reentry_violation
    )

    return ValidationResult(
        visited_dots=frozenset(visited_dots),
        visited_shapes=visited_shapes,
        shape_crossings=MappingProxyType(crossings),
        all_dots_visited=all_dots_visited,
        all_shapes_entered_once=all_shapes_entered_once,
        red_area_violation=red_area_violation,
        shape_reentry_violation=shape_reentry_violation,
        is_valid=is_valid,
    )


def check_incremental(
    segment: Segment,
    puzzle: Puzzle,
    visited_shapes: Set[int],
) -> IncrementalCheck:
    """Check a newly drawn segment for an immediate violation.

    Priority order:
    1. The segment crosses a red area or has an endpoint inside one.
    2. The segment's end point lies inside a shape already in
       ``visited_shapes``.

    Args:
        segment: The segment just added to the line
        puzzle: Puzzle whose rules apply
        visited_shapes: Shapes entered so far in this stroke (not modified)

    Returns:
        IncrementalCheck describing the first violation found, if any
    """
    seg_start, seg_end = segment

    for red_area in puzzle.red_areas:
        if segment_crosses_red_area(seg_start, seg_end, red_area):
            return IncrementalCheck(violation=True, kind=ViolationKind.RED_AREA)

    for shape in puzzle.shapes:
        if shape.id in visited_shapes and is_point_in_shape(seg_end, shape):
            return IncrementalCheck(violation=True, kind=ViolationKind.SHAPE_REENTRY)

    return NO_VIOLATION


def newly_touched_dots(
    segment: Segment,
    dots: Iterable[Dot],
    already_visited: Set[int],
) -> list[int]:
    """Ids of dots the segment touches that were not visited before.

    Args:
        segment: Segment to test
        dots: Candidate dots
        already_visited: Dot ids the caller has already recorded

    Returns:
        Newly touched ids in candidate order
    """
    seg_start, seg_end = segment
    return [
        dot.id
        for dot in dots
        if dot.id not in already_visited and segment_touches_dot(seg_start, seg_end, dot)
    ]


def newly_entered_shapes(
    segment: Segment,
    shapes: Iterable[Shape],
    already_visited: Set[int],
) -> list[int]:
    """Ids of shapes whose boundary the segment crosses for the first time.

    Args:
        segment: Segment to test
        shapes: Candidate shapes
        already_visited: Shape ids the caller has already recorded

    Returns:
        Newly entered ids in candidate order
    """
    seg_start, seg_end = segment
    return [
        shape.id
        for shape in shapes
        if shape.id not in already_visited and segment_enters_shape(seg_start, seg_end, shape)
    ]
