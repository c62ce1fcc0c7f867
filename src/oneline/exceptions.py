"""Exception hierarchy for oneline.

Only malformed input raises. Rule violations and incomplete paths are
reported as data by the validation engine.
"""


class OneLineError(Exception):
    """Base exception for all oneline errors."""

    pass


class PuzzleError(OneLineError):
    """Errors related to puzzle definitions."""

    pass


class PuzzleSchemaError(PuzzleError):
    """A puzzle document does not match the expected schema."""

    def __init__(self, puzzle_id: object, reason: str, errors: list[str] | None = None) -> None:
        self.puzzle_id = puzzle_id
        self.reason = reason
        self.errors = errors or []
        label = f"puzzle {puzzle_id}" if puzzle_id is not None else "puzzle"
        super().__init__(f"Invalid {label}: {reason}")


class PuzzleLoadError(PuzzleError):
    """Error reading puzzle documents from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load puzzles from '{path}': {reason}")


class PuzzleNotFoundError(PuzzleError):
    """Requested puzzle not found in the catalog."""

    def __init__(self, puzzle_id: int) -> None:
        self.puzzle_id = puzzle_id
        super().__init__(f"Puzzle {puzzle_id} not found")


class PathError(OneLineError):
    """Errors related to drawn path input."""

    pass


class PathFileError(PathError):
    """A path document could not be read or is malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path file '{path}': {reason}")
