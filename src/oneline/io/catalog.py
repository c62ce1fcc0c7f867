"""Puzzle catalog backed by a directory of JSON documents.

Each ``*.json`` file in the directory holds one puzzle document. The catalog
parses them on first access and keeps them ordered by puzzle id.
"""

import logging
from collections.abc import Iterator
from importlib import resources
from pathlib import Path

from oneline.domain import Puzzle
from oneline.exceptions import PuzzleLoadError, PuzzleNotFoundError
from oneline.io.loader import load_puzzle_file

logger = logging.getLogger(__name__)


def bundled_puzzle_dir() -> Path:
    """Directory holding the puzzles shipped with the package."""
    return Path(str(resources.files("oneline") / "data" / "puzzles"))


class PuzzleCatalog:
    """Ordered collection of puzzles loaded from disk.

    Example:
        catalog = PuzzleCatalog()
        for puzzle in catalog:
            print(puzzle.id, puzzle.name)
    """

    def __init__(self, puzzle_dir: Path | None = None) -> None:
        """Initialize the catalog.

        Args:
            puzzle_dir: Directory of puzzle JSON files (bundled set if None)
        """
        self._puzzle_dir = puzzle_dir if puzzle_dir is not None else bundled_puzzle_dir()
        self._puzzles: list[Puzzle] | None = None

    @property
    def puzzle_dir(self) -> Path:
        return self._puzzle_dir

    def load(self) -> list[Puzzle]:
        """Parse every puzzle file in the directory.

        Returns:
            Puzzles ordered by id

        Raises:
            PuzzleLoadError: If the directory is missing, empty, or two files
                share a puzzle id
            PuzzleSchemaError: If any document is malformed
        """
        if self._puzzles is not None:
            return self._puzzles

        if not self._puzzle_dir.is_dir():
            raise PuzzleLoadError(str(self._puzzle_dir), "not a directory")

        files = sorted(self._puzzle_dir.glob("*.json"))
        if not files:
            raise PuzzleLoadError(str(self._puzzle_dir), "no puzzle files found")

        by_id: dict[int, Puzzle] = {}
        for path in files:
            puzzle = load_puzzle_file(path)
            if puzzle.id in by_id:
                raise PuzzleLoadError(str(path), f"duplicate puzzle id {puzzle.id}")
            by_id[puzzle.id] = puzzle

        self._puzzles = [by_id[pid] for pid in sorted(by_id)]
        logger.info("Loaded %d puzzles from %s", len(self._puzzles), self._puzzle_dir)
        return self._puzzles

    def all(self) -> list[Puzzle]:
        """All puzzles ordered by id."""
        return list(self.load())

    def get(self, puzzle_id: int) -> Puzzle:
        """Get a puzzle by id.

        Raises:
            PuzzleNotFoundError: If no puzzle has that id
        """
        for puzzle in self.load():
            if puzzle.id == puzzle_id:
                return puzzle
        raise PuzzleNotFoundError(puzzle_id)

    def next_after(self, puzzle_id: int) -> Puzzle | None:
        """The puzzle following ``puzzle_id``, or None at the end or if unknown."""
        puzzles = self.load()
        for index, puzzle in enumerate(puzzles):
            if puzzle.id == puzzle_id:
                return puzzles[index + 1] if index + 1 < len(puzzles) else None
        return None

    def __len__(self) -> int:
        return len(self.load())

    def __iter__(self) -> Iterator[Puzzle]:
        return iter(self.load())
