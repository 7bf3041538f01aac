#!/usr/bin/env python3
"""Number Puzzle.

Usage::

    python main.py                    # plain terminal, 3×3
    python main.py -f rich -s 4       # Rich terminal, 4×4
    python main.py --seed 7 -v        # reproducible shuffle, debug logging
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from numberpuzzle.backend.config import DEFAULT_SIZE, MIN_SIZE  # noqa: E402
from numberpuzzle.logger import setup_logging  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "numberpuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "numberpuzzle.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Terminal frontend to play in.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, clamp=True,
        help=f"Grid size (at least {MIN_SIZE}; smaller values are raised).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle. Omit for a time-based seed.",
    ),
    shuffle_moves: Optional[int] = typer.Option(
        None, "--shuffle-moves",
        min=0,
        help="Random moves per shuffle. Defaults to size*size*100.",
    ),
    no_color: bool = typer.Option(
        False, "--no-color",
        help="Disable ANSI colours in the vanilla frontend.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity to stderr.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Also write a debug log to this file.",
    ),
) -> None:
    """Number Puzzle — slide the tiles back into order."""
    setup_logging("DEBUG" if verbose else "WARNING", log_file)
    logger.bind(component="session").info(
        "starting {} frontend, {}x{}, seed={}", frontend.value, size, size, seed
    )

    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.vanilla:
        code = mod.run(size=size, seed=seed, shuffle_moves=shuffle_moves, color=not no_color)
    else:
        code = mod.run(size=size, seed=seed, shuffle_moves=shuffle_moves)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
