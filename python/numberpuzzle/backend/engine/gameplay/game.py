"""Core gameplay logic — applies tile moves and manages levels."""

from __future__ import annotations

import random

from loguru import logger

from numberpuzzle.backend.config import MIN_SIZE
from numberpuzzle.backend.engine.gamegenerator import GameGenerator
from numberpuzzle.backend.errors import PuzzleError
from numberpuzzle.backend.models.grid import PuzzleGrid

log = logger.bind(component="gameplay")

# Reserved command values typed in place of a tile number.
QUIT = 0
CHANGE_LEVEL = -1
PLAY_AGAIN = 1


def parse_command(text: str) -> int:
    """Parse a line of user input into a command or tile number.

    Raises ``ValueError`` if *text* is not an integer.
    """
    return int(text.strip())


class GamePlay:
    """Orchestrates a single game session.

    Owns the current grid and the random source used for every shuffle in
    the session. A level change replaces the grid; replay reuses it.
    """

    def __init__(
        self,
        size: int,
        rng: random.Random | None = None,
        num_moves: int | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.num_moves = num_moves
        self.grid = GameGenerator.generate(size, self.rng, num_moves)

    @classmethod
    def from_grid(
        cls, grid: PuzzleGrid, rng: random.Random | None = None
    ) -> GamePlay:
        """Create a session around an existing grid (e.g. a test layout)."""
        obj = object.__new__(cls)
        obj.rng = rng or random.Random()
        obj.num_moves = None
        obj.grid = grid
        return obj

    @property
    def size(self) -> int:
        return self.grid.size

    # -- moves ----------------------------------------------------------------

    def move(self, value: int) -> None:
        """Slide tile *value* into the empty cell.

        ``TileNotFoundError`` and ``NotAdjacentError`` propagate unchanged.
        """
        try:
            self.grid.move_tile(value)
        except PuzzleError as exc:
            log.debug("rejected move: {}", exc)
            raise
        if self.is_won:
            log.info("{}x{} puzzle solved", self.size, self.size)

    @property
    def is_won(self) -> bool:
        return self.grid.is_solved()

    # -- levels ---------------------------------------------------------------

    def replay(self) -> None:
        """Start over on the current level."""
        GameGenerator.scramble(self.grid, self.rng, self.num_moves)
        log.info("replaying {}x{} puzzle", self.size, self.size)

    def change_level(self, size: int) -> int:
        """Switch to a fresh grid of *size*, clamped up to the minimum.

        Returns the size actually used.
        """
        if size < MIN_SIZE:
            log.debug("clamping requested size {} to {}", size, MIN_SIZE)
            size = MIN_SIZE
        self.grid = GameGenerator.generate(size, self.rng, self.num_moves)
        log.info("changed level to {}x{}", size, size)
        return size
