"""Per-stroke drawing session.

``DrawingSession`` threads the line, the visited sets and any violation
through a stroke's input events. It is immutable: every event returns a new
session, so the caller owns exactly one current value and abandoning a
stroke is simply dropping it. Rendering and feedback state (animations,
visit timestamps) belong to the presentation layer and are not kept here.
"""

import logging
from dataclasses import dataclass, field, replace

from oneline.config import PathConfig
from oneline.core.collision import is_point_in_shape
from oneline.core.path import Line, add_point, create_line, end_line, last_segment, start_line
from oneline.core.rules import (
    ValidationResult,
    ViolationKind,
    check_incremental,
    newly_entered_shapes,
    newly_touched_dots,
    validate,
)
from oneline.domain import Point, Puzzle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawingSession:
    """Immutable state of one stroke on one puzzle.

    Attributes:
        puzzle: Puzzle being solved
        config: Path sampling settings
        line: Points recorded so far
        visited_dots: Dots touched during the stroke
        visited_shapes: Shapes entered during the stroke
        exited_shapes: Entered shapes the line has since left; landing
            inside one of these again is a re-entry
        violation: Terminal violation, if one occurred
    """

    puzzle: Puzzle
    config: PathConfig = field(default_factory=PathConfig)
    line: Line = field(default_factory=create_line)
    visited_dots: frozenset[int] = frozenset()
    visited_shapes: frozenset[int] = frozenset()
    exited_shapes: frozenset[int] = frozenset()
    violation: ViolationKind | None = None

    @classmethod
    def for_puzzle(cls, puzzle: Puzzle, config: PathConfig | None = None) -> "DrawingSession":
        """Create an idle session for a puzzle."""
        return cls(puzzle=puzzle, config=config or PathConfig())

    @property
    def is_drawing(self) -> bool:
        return self.line.is_active

    @property
    def has_violation(self) -> bool:
        return self.violation is not None

    @property
    def remaining_dots(self) -> list[int]:
        """Sorted ids of dots not yet touched."""
        return sorted(d.id for d in self.puzzle.dots if d.id not in self.visited_dots)

    @property
    def remaining_shapes(self) -> list[int]:
        """Sorted ids of shapes not yet entered."""
        return sorted(s.id for s in self.puzzle.shapes if s.id not in self.visited_shapes)

    def begin(self, point: Point) -> "DrawingSession":
        """Start a stroke at ``point``.

        A session with a violation must be reset first; until then this
        returns the session unchanged.
        """
        if self.has_violation:
            return self

        return replace(
            self,
            line=start_line(point),
            visited_dots=frozenset(),
            visited_shapes=frozenset(),
            exited_shapes=frozenset(),
        )

    def extend(self, point: Point) -> "DrawingSession":
        """Feed a sampled point into the stroke.

        Points are ignored when no stroke is active, after a violation, or
        when the spacing filter drops them. For an accepted point the new
        segment is checked for violations first; only a clean segment
        contributes newly touched dots and entered shapes.

        Args:
            point: Raw sampled point in board coordinates

        Returns:
            Updated session
        """
        if not self.is_drawing or self.has_violation:
            return self

        line = add_point(
            self.line,
            point,
            min_spacing=self.config.min_point_spacing,
            smoothing=self.config.smoothing_factor,
        )
        if len(line) == len(self.line):
            return self

        segment = last_segment(line)
        if segment is None:
            return replace(self, line=line)

        # Only shapes already left count as visited for the re-entry test;
        # points drawn inside the shape currently being crossed are fine.
        check = check_incremental(segment, self.puzzle, self.exited_shapes)
        if check.violation:
            logger.debug(
                "Stroke violation: puzzle=%s kind=%s points=%d",
                self.puzzle.id,
                check.kind.value if check.kind else None,
                len(line),
            )
            return replace(self, line=line, violation=check.kind)

        new_dots = newly_touched_dots(segment, self.puzzle.dots, self.visited_dots)
        new_shapes = newly_entered_shapes(segment, self.puzzle.shapes, self.visited_shapes)
        visited_shapes = self.visited_shapes | frozenset(new_shapes)

        seg_end = segment[1]
        left = frozenset(
            shape.id
            for shape in self.puzzle.shapes
            if shape.id in visited_shapes and not is_point_in_shape(seg_end, shape)
        )

        return replace(
            self,
            line=line,
            visited_dots=self.visited_dots | frozenset(new_dots),
            visited_shapes=visited_shapes,
            exited_shapes=self.exited_shapes | left,
        )

    def finish(self) -> tuple["DrawingSession", ValidationResult | None]:
        """End the stroke and validate the full line.

        Returns:
            The ended session and its ValidationResult. When no stroke was
            active the session is returned unchanged with ``None``.
        """
        if not self.is_drawing:
            return self, None

        line = end_line(self.line)
        result = validate(line, self.puzzle)
        violation = self.violation or result.violation_kind

        logger.debug(
            "Stroke finished: puzzle=%s valid=%s violation=%s",
            self.puzzle.id,
            result.is_valid,
            violation.value if violation else None,
        )
        return replace(self, line=line, violation=violation), result

    def reset(self) -> "DrawingSession":
        """Discard the stroke and any violation."""
        return DrawingSession(puzzle=self.puzzle, config=self.config)
