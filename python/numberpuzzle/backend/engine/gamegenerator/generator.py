"""Generates solvable number puzzles."""

from __future__ import annotations

import random

from loguru import logger

from numberpuzzle.backend.config import SHUFFLE_FACTOR
from numberpuzzle.backend.models.grid import PuzzleGrid

log = logger.bind(component="generator")


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> PuzzleGrid:
        """Return the goal-state grid (tiles in order, empty bottom-right)."""
        return PuzzleGrid.create(size)

    @staticmethod
    def shuffle_moves(size: int) -> int:
        return size * size * SHUFFLE_FACTOR

    @staticmethod
    def scramble(
        grid: PuzzleGrid,
        rng: random.Random | None = None,
        num_moves: int | None = None,
    ) -> None:
        """Reset *grid* and shuffle it in-place."""
        if num_moves is None:
            num_moves = GameGenerator.shuffle_moves(grid.size)
        grid.reset()
        grid.shuffle(num_moves, rng)

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        num_moves: int | None = None,
    ) -> PuzzleGrid:
        """Return a random *solvable* grid of the given size.

        The result may occasionally be the solved grid itself; that is a
        valid shuffle and is not retried.
        """
        grid = GameGenerator.solved(size)
        GameGenerator.scramble(grid, rng, num_moves)
        log.info("generated {}x{} puzzle", size, size)
        return grid
