"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
session loop and backend as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from numberpuzzle.backend.engine.gameplay import GamePlay
from numberpuzzle.backend.models.grid import PuzzleGrid
from numberpuzzle.frontend.cli.session import ConsoleSession, MessageKind


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: PuzzleGrid) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.size * grid.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.cells):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("")
            elif grid.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _show(console: Console, grid: PuzzleGrid) -> None:
    border = "bold green" if grid.is_solved() else "bright_blue"
    panel = Panel(
        Align.center(render_grid(grid)),
        title=f"[bold cyan]Sliding Puzzle  {grid.size}×{grid.size}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
        expand=False,
    )
    console.print()
    console.print(panel)


_STYLES = {
    MessageKind.INFO: "",
    MessageKind.ERROR: "yellow",
    MessageKind.SUCCESS: "bold green",
}


def _say(console: Console, message: str, kind: MessageKind) -> None:
    if kind is MessageKind.SUCCESS:
        message = f"★ {message} ★"
    console.print(Text(message, style=_STYLES[kind]))


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    seed: int | None = None,
    shuffle_moves: int | None = None,
    console: Console | None = None,
) -> int:
    """Play in a Rich-styled terminal; return the exit code."""
    console = console or Console()
    game = GamePlay(size, random.Random(seed), shuffle_moves)
    session = ConsoleSession(
        game,
        ask=lambda prompt: console.input(Text(prompt, style="bold cyan")),
        say=lambda message, kind: _say(console, message, kind),
        show=lambda grid: _show(console, grid),
    )
    return session.run()
