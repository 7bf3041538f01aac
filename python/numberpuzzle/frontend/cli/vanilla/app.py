"""Vanilla terminal frontend — no third-party rendering.

Uses only ``print``/``input`` and ANSI codes, reading one command per line
like the classic console version of the game.
"""

from __future__ import annotations

import random

from numberpuzzle.backend.engine.gameplay import GamePlay
from numberpuzzle.backend.models.grid import PuzzleGrid
from numberpuzzle.frontend.cli.session import ConsoleSession, MessageKind


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_R = "\033[0m"       # reset


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: PuzzleGrid, color: bool = True) -> str:
    """Return a text representation of the grid, empty cell left blank."""
    width = len(str(grid.size * grid.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * grid.size)
    green, reset = (_G, _R) if color else ("", "")

    lines: list[str] = [sep]
    for r, row in enumerate(grid.cells):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(" " * cell_w)
            elif grid.is_tile_correct(r, c):
                cells.append(f"{green} {val:>{width}} {reset}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _say(message: str, kind: MessageKind, color: bool) -> None:
    code = {MessageKind.ERROR: _Y, MessageKind.SUCCESS: _G}.get(kind)
    print(f"{code}{message}{_R}" if color and code else message)


def _show(grid: PuzzleGrid, color: bool) -> None:
    title = f"Current Puzzle ({grid.size}x{grid.size}):"
    print()
    print(f"{_C}{title}{_R}" if color else title)
    print(render_grid(grid, color))


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    seed: int | None = None,
    shuffle_moves: int | None = None,
    color: bool = True,
) -> int:
    """Play in the plain terminal; return the exit code."""
    game = GamePlay(size, random.Random(seed), shuffle_moves)
    session = ConsoleSession(
        game,
        ask=input,
        say=lambda message, kind: _say(message, kind, color),
        show=lambda grid: _show(grid, color),
    )
    return session.run()
