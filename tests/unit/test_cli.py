"""Unit tests for the command line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from oneline import __version__
from oneline.cli import app
from oneline.utils.logging import HANDLER_TAG

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers the CLI attached to the root logger."""
    yield
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if getattr(h, HANDLER_TAG, False)]:
        root_logger.removeHandler(handler)
        handler.close()


def write_json(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def flat(output: str) -> str:
    """Collapse console wrapping so long messages can be matched."""
    return " ".join(output.split())


@pytest.fixture
def unsolved_dir(tmp_path):
    """A puzzle directory whose only puzzle has no reference solution."""
    puzzle_dir = tmp_path / "puzzles"
    puzzle_dir.mkdir()
    write_json(
        puzzle_dir / "p.json",
        {
            "id": 1,
            "name": "Unsolved",
            "difficulty": 1,
            "boardWidth": 400,
            "boardHeight": 600,
            "elements": [
                {"id": 1, "type": "dot", "position": {"x": 100, "y": 100}, "radius": 20}
            ],
        },
    )
    return puzzle_dir


class TestCheckCommand:
    """Tests for `oneline check`."""

    def test_bundled_puzzles_pass(self):
        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert "All puzzles valid" in result.output
        assert "Puzzle 1 (First Touch): Valid" in result.output

    def test_failing_directory(self, unsolved_dir):
        result = runner.invoke(app, ["check", str(unsolved_dir)])

        assert result.exit_code == 1
        assert "No solution path defined" in result.output
        assert "1 of 1 puzzles have invalid solution paths" in result.output

    def test_quiet_only_sets_status(self, unsolved_dir):
        result = runner.invoke(app, ["check", "--quiet", str(unsolved_dir)])

        assert result.exit_code == 1
        assert "invalid solution paths" not in result.output

    def test_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "absent")])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_log_file_written(self, tmp_path):
        log_file = tmp_path / "oneline.log"

        result = runner.invoke(app, ["--log-file", str(log_file), "check", "--quiet"])

        assert result.exit_code == 0
        assert "Regression finished" in log_file.read_text(encoding="utf-8")


class TestInfoAndOrderCommands:
    """Tests for `oneline info` and `oneline order`."""

    def test_info_lists_puzzles(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Corridor" in result.output
        assert "Dogleg" in result.output

    def test_order(self):
        result = runner.invoke(app, ["order", "4"])

        assert result.exit_code == 0
        assert "1. dot 1" in result.output
        assert "2. dot 3" in result.output
        assert "red-area" not in result.output

    def test_order_without_solution(self, unsolved_dir):
        result = runner.invoke(app, ["order", "1", str(unsolved_dir)])

        assert result.exit_code == 0
        assert "No solution path defined" in result.output

    def test_order_unknown_puzzle(self):
        result = runner.invoke(app, ["order", "99"])

        assert result.exit_code == 1
        assert "Puzzle 99 not found" in result.output


class TestVerifyCommand:
    """Tests for `oneline verify`."""

    def test_solving_path(self, tmp_path):
        path_file = tmp_path / "path.json"
        write_json(path_file, [{"x": 60, "y": 300}, {"x": 340, "y": 300}])

        result = runner.invoke(app, ["verify", "1", str(path_file)])

        assert result.exit_code == 0
        assert "Solved" in result.output

    def test_incomplete_path(self, tmp_path):
        path_file = tmp_path / "path.json"
        write_json(path_file, [{"x": 60, "y": 300}, {"x": 150, "y": 300}])

        result = runner.invoke(app, ["verify", "1", str(path_file)])

        assert result.exit_code == 1
        assert "Not solved" in result.output
        assert "Not all dots visited" in result.output
        assert "Dots remaining: 2" in result.output

    def test_malformed_path_file(self, tmp_path):
        path_file = tmp_path / "path.json"
        write_json(path_file, {"x": 1, "y": 2})

        result = runner.invoke(app, ["verify", "1", str(path_file)])

        assert result.exit_code == 1
        assert "expected an array of points" in flat(result.output)

    def test_malformed_point(self, tmp_path):
        path_file = tmp_path / "path.json"
        write_json(path_file, [{"x": 1, "y": 2}, {"x": 3}])

        result = runner.invoke(app, ["verify", "1", str(path_file)])

        assert result.exit_code == 1
        assert "point 1 is malformed" in flat(result.output)

    def test_non_numeric_coordinates(self, tmp_path):
        """Booleans and numeric strings are not coordinates."""
        path_file = tmp_path / "path.json"
        write_json(path_file, [{"x": True, "y": "50"}, {"x": "nan", "y": False}])

        result = runner.invoke(app, ["verify", "1", str(path_file)])

        assert result.exit_code == 1
        assert "Invalid path file" in flat(result.output)
        assert "point 0 is malformed" in flat(result.output)

    def test_nan_coordinate(self, tmp_path):
        path_file = tmp_path / "path.json"
        path_file.write_text('[{"x": 60, "y": 300}, {"x": NaN, "y": 300}]', encoding="utf-8")

        result = runner.invoke(app, ["verify", "1", str(path_file)])

        assert result.exit_code == 1
        assert "point 1 is malformed" in flat(result.output)


class TestSchemaErrorDetails:
    """Tests for reporting every schema error of a rejected puzzle."""

    def test_all_errors_shown(self, tmp_path):
        puzzle_dir = tmp_path / "puzzles"
        puzzle_dir.mkdir()
        write_json(
            puzzle_dir / "bad.json",
            {
                "id": 4,
                "difficulty": 1,
                "boardWidth": "wide",
                "boardHeight": 600,
                "elements": [
                    {"id": 1, "type": "dot", "position": {"x": 100, "y": 100}, "radius": 20}
                ],
            },
        )

        result = runner.invoke(app, ["check", str(puzzle_dir)])

        assert result.exit_code == 1
        output = flat(result.output)
        assert "Invalid puzzle 4" in output
        assert "name" in output
        assert "boardWidth" in output


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
