"""CLI application entry point for oneline.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import TypeAdapter, ValidationError

from oneline import __version__
from oneline.cli.output import (
    console,
    print_catalog_info,
    print_error,
    print_header,
    print_puzzle_table,
    print_regression,
    print_solution_order,
    print_step,
    print_verdict,
)
from oneline.config import CatalogConfig, LoggingConfig, OneLineSettings
from oneline.core import elements_in_solution_order, line_from_points, run_regression, validate
from oneline.domain import Point
from oneline.exceptions import OneLineError, PathFileError, PuzzleSchemaError
from oneline.io import PointDocument, PuzzleCatalog
from oneline.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="oneline",
    help="Validate one-stroke line puzzles and their reference solutions.",
    add_completion=False,
    no_args_is_help=True,
)

_POINT_LIST = TypeAdapter(list[PointDocument])

PuzzleDirArgument = Annotated[
    Path | None,
    typer.Argument(
        help="Directory of puzzle JSON files (default: bundled puzzles)",
        show_default=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]oneline[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Validate one-stroke line puzzles and their reference solutions."""
    settings = LoggingConfig(log_file=log_file, log_level=log_level)
    ctx.obj = configure_logging(
        log_file=settings.log_file,
        console_level=settings.log_level,
        file_level=settings.file_log_level,
    )


def _report_error(error: OneLineError) -> None:
    details = None
    if isinstance(error, PuzzleSchemaError) and len(error.errors) > 1:
        details = "\n  ".join(error.errors[1:])
    print_error(str(error), details)


def _settings_for(puzzle_dir: Path | None) -> OneLineSettings:
    return OneLineSettings(catalog=CatalogConfig(puzzle_dir=puzzle_dir))


def _open_catalog(settings: OneLineSettings) -> PuzzleCatalog:
    catalog = PuzzleCatalog(settings.catalog.puzzle_dir)
    catalog.load()
    return catalog


@app.command()
def check(
    ctx: typer.Context,
    puzzle_dir: PuzzleDirArgument = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only set the exit status",
        ),
    ] = False,
) -> None:
    """Validate every puzzle's reference solution against its own rules.

    Exits with status 1 if any reference solution fails.

    Example:
        oneline check ./puzzles
    """
    settings = _settings_for(puzzle_dir)

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading puzzles")

        catalog = _open_catalog(settings)

        if not quiet:
            print_catalog_info(str(catalog.puzzle_dir), len(catalog))
            print_step("Validating solution paths")

        report = run_regression(catalog, logger=ctx.obj)

        if not quiet:
            print_regression(report)

    except OneLineError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    raise typer.Exit(code=report.exit_code)


@app.command()
def info(puzzle_dir: PuzzleDirArgument = None) -> None:
    """List puzzles with their board size and element counts."""
    settings = _settings_for(puzzle_dir)

    try:
        catalog = _open_catalog(settings)
    except OneLineError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    print_puzzle_table(catalog.all())


@app.command()
def order(
    puzzle_id: Annotated[int, typer.Argument(help="Puzzle id")],
    puzzle_dir: PuzzleDirArgument = None,
) -> None:
    """Show the order in which the reference solution reaches each element."""
    settings = _settings_for(puzzle_dir)

    try:
        puzzle = _open_catalog(settings).get(puzzle_id)
    except OneLineError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    print_solution_order(puzzle, elements_in_solution_order(puzzle))


@app.command()
def verify(
    puzzle_id: Annotated[int, typer.Argument(help="Puzzle id")],
    path_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file holding an array of {x, y} points",
            show_default=False,
        ),
    ],
    puzzle_dir: PuzzleDirArgument = None,
) -> None:
    """Validate a drawn path against a puzzle.

    Exits with status 0 if the path solves the puzzle, 1 otherwise.
    """
    settings = _settings_for(puzzle_dir)

    try:
        puzzle = _open_catalog(settings).get(puzzle_id)
        points = _read_path_file(path_file)
    except OneLineError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    result = validate(line_from_points(points), puzzle)
    print_verdict(puzzle, result)

    if not result.is_valid:
        raise typer.Exit(code=1)


def _read_path_file(path: Path) -> list[Point]:
    """Read a JSON array of points.

    Args:
        path: Path to the JSON document

    Returns:
        Points in file order

    Raises:
        PathFileError: If the file is unreadable or not an array of points
    """
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PathFileError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise PathFileError(str(path), f"invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise PathFileError(str(path), "expected an array of points")

    try:
        documents = _POINT_LIST.validate_python(raw)
    except ValidationError as e:
        index = e.errors()[0]["loc"][0]
        raise PathFileError(str(path), f"point {index} is malformed") from e
    return [document.to_domain() for document in documents]


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
