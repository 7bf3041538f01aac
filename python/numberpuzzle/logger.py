"""Loguru sink setup shared by the CLI frontends.

Library modules only ever ``logger.bind(component=...)``; sinks are
installed once by the entry point.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

PALETTE = {
    "grid": "blue",
    "generator": "magenta",
    "gameplay": "green",
    "session": "cyan",
}


def formatter(record) -> str:
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<10}</> | "
        "<level>{level: <7}</level> | "
        "<level>{message}</level>\n{exception}"
    )


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Replace loguru's default sink with the game's stderr (and file) sinks."""
    logger.remove()
    logger.enable("numberpuzzle")
    logger.add(sys.stderr, level=level, format=formatter, colorize=True)
    if log_file is not None:
        logger.add(log_file, level="DEBUG", format=formatter, colorize=False)
