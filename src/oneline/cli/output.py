"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from oneline.core import RegressionReport, ValidationResult
from oneline.domain import BoardElement, Puzzle

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]oneline[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_catalog_info(puzzle_dir: str, count: int) -> None:
    """Print where puzzles were loaded from.

    Args:
        puzzle_dir: Directory the catalog read
        count: Number of puzzles loaded
    """
    line = Text("  ")
    line.append(puzzle_dir)
    console.print(line)
    console.print(f"  {count} puzzles")


def print_regression(report: RegressionReport) -> None:
    """Print one line per puzzle and a summary.

    Args:
        report: Regression results
    """
    for entry in report.entries:
        label = Text()
        label.append(f"Puzzle {entry.puzzle_id} ({entry.name})")
        if entry.valid:
            console.print(Text(f"  {SYM_OK} ", style="green") + label + Text(": Valid"))
        else:
            reason = "; ".join(entry.errors)
            console.print(Text(f"  {SYM_ERR} ", style="red") + label + Text(f": {reason}"))

    failed = len(report.failures)
    if report.passed:
        console.print(f"\n[bold green]{SYM_OK} All puzzles valid[/bold green]")
    else:
        console.print(
            f"\n[bold red]{SYM_ERR} {failed} of {len(report.entries)} "
            "puzzles have invalid solution paths[/bold red]"
        )


def print_puzzle_table(puzzles: list[Puzzle]) -> None:
    """Print a summary table of puzzles.

    Args:
        puzzles: Puzzles to list, in display order
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Difficulty", justify="right")
    table.add_column("Board")
    table.add_column("Dots", justify="right")
    table.add_column("Shapes", justify="right")
    table.add_column("Red areas", justify="right")
    table.add_column("Solution")

    for puzzle in puzzles:
        meta = puzzle.metadata
        table.add_row(
            str(puzzle.id),
            puzzle.name,
            f"{puzzle.difficulty:g}",
            f"{puzzle.board_width:g}×{puzzle.board_height:g}",
            str(meta.dot_count),
            str(meta.shape_count),
            str(meta.red_area_count),
            SYM_OK if meta.has_solution_path else "-",
        )

    console.print(table)


def print_solution_order(puzzle: Puzzle, elements: list[BoardElement]) -> None:
    """Print the elements a reference solution reaches, in order.

    Args:
        puzzle: Puzzle the order belongs to
        elements: First-touch ordered elements
    """
    console.print(f"\n[bold]Puzzle {puzzle.id}[/bold] {SYM_DOT} {puzzle.name}")
    if not elements:
        console.print("  No solution path defined")
        return

    for index, element in enumerate(elements, start=1):
        pos = element.position
        console.print(
            f"  {index}. {element.element_type.value} {element.id} "
            f"{SYM_DOT} ({pos.x:g}, {pos.y:g})"
        )


def print_verdict(puzzle: Puzzle, result: ValidationResult) -> None:
    """Print the outcome of validating a drawn path.

    Args:
        puzzle: Puzzle the path was checked against
        result: Validation result
    """
    if result.is_valid:
        console.print(f"\n[bold green]{SYM_OK} Solved[/bold green] puzzle {puzzle.id}")
        return

    console.print(f"\n[bold red]{SYM_ERR} Not solved[/bold red] puzzle {puzzle.id}")
    for reason in result.failure_reasons():
        console.print(f"  {SYM_DOT} {reason}")

    missing_dots = result.missing_dots(puzzle)
    missing_shapes = result.missing_shapes(puzzle)
    if missing_dots:
        console.print(f"  Dots remaining: {', '.join(map(str, missing_dots))}")
    if missing_shapes:
        console.print(f"  Shapes remaining: {', '.join(map(str, missing_shapes))}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
