"""CLI tests — typer entry point and the two terminal renderers."""

from __future__ import annotations

import sys

import pytest
from loguru import logger
from rich.console import Console
from typer.testing import CliRunner

from main import app
from numberpuzzle.backend.models.grid import PuzzleGrid
from numberpuzzle.frontend.cli.rich.app import render_grid as rich_render_grid
from numberpuzzle.frontend.cli.rich.app import run as rich_run
from numberpuzzle.frontend.cli.vanilla.app import render_grid

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    # setup_logging() binds sinks to the runner's captured streams
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("numberpuzzle")


# -- rendering ----------------------------------------------------------------


def test_vanilla_render_solved_3x3() -> None:
    text = render_grid(PuzzleGrid.create(3), color=False)
    assert text.splitlines() == [
        "+---+---+---+",
        "| 1 | 2 | 3 |",
        "+---+---+---+",
        "| 4 | 5 | 6 |",
        "+---+---+---+",
        "| 7 | 8 |   |",
        "+---+---+---+",
    ]


def test_vanilla_render_pads_wide_numbers() -> None:
    text = render_grid(PuzzleGrid.create(4), color=False)
    lines = text.splitlines()
    assert lines[0] == "+----+----+----+----+"
    assert lines[7] == "| 13 | 14 | 15 |    |"


def test_vanilla_render_highlights_correct_tiles() -> None:
    grid = PuzzleGrid.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    text = render_grid(grid, color=True)
    assert "\033[32;1m 1 \033[0m" in text
    assert "\033[32;1m 6 \033[0m" not in text


def test_rich_render_has_one_row_per_grid_row() -> None:
    table = rich_render_grid(PuzzleGrid.create(5))
    assert table.row_count == 5
    assert len(table.columns) == 5


def test_rich_run_with_scripted_console(monkeypatch: pytest.MonkeyPatch) -> None:
    console = Console(record=True, width=80, force_terminal=False)
    answers = iter(["0"])
    monkeypatch.setattr(console, "input", lambda prompt="": next(answers))
    assert rich_run(3, seed=1, console=console) == 0
    output = console.export_text()
    assert "Welcome to the Sliding Puzzle Game!" in output
    assert "Thanks for playing! Goodbye." in output


# -- typer entry point --------------------------------------------------------


def test_cli_quit() -> None:
    result = runner.invoke(app, ["--seed", "1", "--no-color"], input="0\n")
    assert result.exit_code == 0
    assert "Current Puzzle (3x3):" in result.output
    assert "Thanks for playing! Goodbye." in result.output


def test_cli_clamps_size() -> None:
    result = runner.invoke(app, ["-s", "1", "--seed", "2", "--no-color"], input="0\n")
    assert result.exit_code == 0
    assert "Current Puzzle (3x3):" in result.output


def test_cli_size_option() -> None:
    result = runner.invoke(app, ["-s", "5", "--seed", "2", "--no-color"], input="0\n")
    assert result.exit_code == 0
    assert "Current Puzzle (5x5):" in result.output


def test_cli_no_shuffle_then_change_level() -> None:
    result = runner.invoke(
        app,
        ["--seed", "3", "--shuffle-moves", "0", "--no-color"],
        input="8\n-1\n4\n0\n",
    )
    assert result.exit_code == 0
    assert "Current Puzzle (4x4):" in result.output
    assert "| 13 | 14 | 15 |    |" in result.output


def test_cli_bad_input_exits_with_error() -> None:
    result = runner.invoke(app, ["--seed", "4"], input="hello\n")
    assert result.exit_code == 1
    assert "Oops! That input isn't valid. Exiting the game." in result.output


def test_cli_rich_frontend() -> None:
    result = runner.invoke(app, ["-f", "rich", "--seed", "5"], input="0\n")
    assert result.exit_code == 0
    assert "Thanks for playing! Goodbye." in result.output


def test_cli_rejects_negative_shuffle_moves() -> None:
    result = runner.invoke(app, ["--shuffle-moves", "-5"])
    assert result.exit_code != 0
