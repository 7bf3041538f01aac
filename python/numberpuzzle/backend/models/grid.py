"""Grid model for the number puzzle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

from loguru import logger

from numberpuzzle.backend.config import MIN_SIZE, SHUFFLE_FACTOR
from numberpuzzle.backend.errors import (
    InvalidGridError,
    InvalidSizeError,
    NotAdjacentError,
    TileNotFoundError,
)

log = logger.bind(component="grid")


class Direction(IntEnum):
    """Direction the *empty cell* travels, numbered as drawn by shuffle."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def _check_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size < MIN_SIZE:
        raise InvalidSizeError(size, MIN_SIZE)
    return size


@dataclass
class PuzzleGrid:
    """An N×N sliding puzzle.

    Cells are stored as a 2D list of ints, 0 is the empty cell.
    ``empty_pos`` caches the coordinates of the 0 and is kept in sync by
    every mutating method.
    """

    size: int
    cells: list[list[int]]
    empty_pos: tuple[int, int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create(cls, size: int) -> PuzzleGrid:
        """Return a new grid of *size* in the solved state."""
        size = _check_size(size)
        grid = cls(
            size=size,
            cells=[[0] * size for _ in range(size)],
            empty_pos=(size - 1, size - 1),
        )
        grid.reset()
        return grid

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> PuzzleGrid:
        """Create a grid from an explicit row-major layout.

        Example::

            PuzzleGrid.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
        """
        size = _check_size(len(rows))
        if any(len(row) != size for row in rows):
            raise InvalidGridError(f"Expected {size} columns in every row.")

        values = sorted(v for row in rows for v in row)
        if values != list(range(size * size)):
            raise InvalidGridError(
                f"A {size}×{size} grid must hold each of 0..{size * size - 1} "
                f"exactly once."
            )

        cells = [list(row) for row in rows]
        empty_pos = next(
            (r, c)
            for r, row in enumerate(cells)
            for c, v in enumerate(row)
            if v == 0
        )
        return cls(size=size, cells=cells, empty_pos=empty_pos)

    # -- mutation -------------------------------------------------------------

    def reset(self) -> None:
        """Fill the grid with 1..N²-1 in row-major order, empty cell last."""
        n = self.size
        for r in range(n):
            for c in range(n):
                self.cells[r][c] = r * n + c + 1
        self.cells[n - 1][n - 1] = 0
        self.empty_pos = (n - 1, n - 1)
        log.debug("reset {}x{} grid to solved state", n, n)

    def shuffle(
        self, num_moves: int | None = None, rng: random.Random | None = None
    ) -> None:
        """Slide the empty cell in *num_moves* random directions.

        Every draw that would leave the grid is skipped but still counts as
        one of the *num_moves*, so corners shuffle slightly less. Only legal
        slides are applied, which keeps the result solvable.
        """
        if num_moves is None:
            num_moves = self.size * self.size * SHUFFLE_FACTOR
        if num_moves < 0:
            raise ValueError(f"num_moves must be >= 0, got {num_moves}.")
        randrange = (rng or random).randrange

        applied = 0
        for _ in range(num_moves):
            dr, dc = Direction(randrange(4)).offset
            er, ec = self.empty_pos
            nr, nc = er + dr, ec + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                self._swap_empty((nr, nc))
                applied += 1

        log.debug(
            "shuffled {}x{} grid: {} of {} draws applied",
            self.size, self.size, applied, num_moves,
        )

    def move_tile(self, value: int) -> None:
        """Slide tile *value* into the empty cell.

        Raises ``TileNotFoundError`` if no cell holds *value* and
        ``NotAdjacentError`` if the empty cell is not directly above, below,
        left or right of it. The grid is untouched in both cases.
        """
        pos = self.find_tile(value)
        if pos is None or value == 0:
            raise TileNotFoundError(value)

        r, c = pos
        # up, down, left, right
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.size and 0 <= nc < self.size and self.cells[nr][nc] == 0:
                self._swap_empty(pos)
                log.debug("moved tile {} from {} to {}", value, pos, (nr, nc))
                return

        raise NotAdjacentError(value, pos)

    # -- queries --------------------------------------------------------------

    @property
    def empty_row(self) -> int:
        return self.empty_pos[0]

    @property
    def empty_col(self) -> int:
        return self.empty_pos[1]

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def find_tile(self, value: int) -> tuple[int, int] | None:
        for r, row in enumerate(self.cells):
            for c, v in enumerate(row):
                if v == value:
                    return r, c
        return None

    def is_solved(self) -> bool:
        """Check if every tile is in its goal position."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.cells[r][c] == 0
                if self.cells[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.cells[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    def flat(self) -> list[int]:
        return [v for row in self.cells for v in row]

    def copy(self) -> PuzzleGrid:
        return PuzzleGrid(
            size=self.size,
            cells=[row[:] for row in self.cells],
            empty_pos=self.empty_pos,
        )

    # -- helpers --------------------------------------------------------------

    def _swap_empty(self, target: tuple[int, int]) -> None:
        er, ec = self.empty_pos
        tr, tc = target
        self.cells[er][ec], self.cells[tr][tc] = (
            self.cells[tr][tc],
            self.cells[er][ec],
        )
        self.empty_pos = (tr, tc)


# -- functional facade --------------------------------------------------------


def create(size: int) -> PuzzleGrid:
    return PuzzleGrid.create(size)


def reset(grid: PuzzleGrid) -> None:
    grid.reset()


def shuffle(
    grid: PuzzleGrid, num_moves: int | None = None, rng: random.Random | None = None
) -> None:
    grid.shuffle(num_moves, rng)


def move_tile(grid: PuzzleGrid, value: int) -> None:
    grid.move_tile(value)


def is_solved(grid: PuzzleGrid) -> bool:
    return grid.is_solved()
