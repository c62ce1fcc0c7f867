"""Batch regression over reference solutions.

Every shipped puzzle must be solvable by its own ``solution_path``. This
module runs that check across a puzzle set and reports per-puzzle results.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from oneline.core.solution import validate_solution_path
from oneline.domain import Puzzle


@dataclass(frozen=True)
class RegressionEntry:
    """Result for a single puzzle."""

    puzzle_id: int
    name: str
    valid: bool
    errors: tuple[str, ...] = ()


@dataclass
class RegressionReport:
    """Results for a whole puzzle set."""

    entries: list[RegressionEntry] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when every reference solution is valid."""
        return all(entry.valid for entry in self.entries)

    @property
    def failures(self) -> list[RegressionEntry]:
        return [entry for entry in self.entries if not entry.valid]

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


def run_regression(
    puzzles: Iterable[Puzzle],
    logger: structlog.stdlib.BoundLogger | None = None,
) -> RegressionReport:
    """Validate each puzzle's reference solution.

    Args:
        puzzles: Puzzles to check, in reporting order
        logger: Structured logger for per-puzzle events (module logger if None)

    Returns:
        RegressionReport with one entry per puzzle
    """
    log = logger if logger is not None else structlog.get_logger(__name__)
    report = RegressionReport()

    for puzzle in puzzles:
        check = validate_solution_path(puzzle)
        report.entries.append(
            RegressionEntry(
                puzzle_id=puzzle.id,
                name=puzzle.name,
                valid=check.valid,
                errors=check.errors,
            )
        )
        if check.valid:
            log.debug("Solution valid", puzzle=puzzle.id)
        else:
            log.warning("Solution invalid", puzzle=puzzle.id, errors=list(check.errors))

    log.info(
        "Regression finished",
        total=len(report.entries),
        failed=len(report.failures),
    )
    return report
