"""Errors raised by the puzzle engine.

None of these are fatal: every operation validates before it mutates, so
the grid is still in its last valid state when one of them propagates.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for engine errors."""


class InvalidSizeError(PuzzleError, ValueError):
    def __init__(self, size: object, minimum: int) -> None:
        self.size = size
        self.minimum = minimum
        super().__init__(f"Grid size must be an integer >= {minimum}, got {size!r}.")


class InvalidGridError(PuzzleError, ValueError):
    """An explicit grid layout is not a permutation of 0..N²-1."""


class TileNotFoundError(PuzzleError, LookupError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Tile {value} not found on the board.")


class NotAdjacentError(PuzzleError):
    def __init__(self, value: int, position: tuple[int, int]) -> None:
        self.value = value
        self.position = position
        super().__init__(
            f"Tile {value} at {position} is not adjacent to the empty space."
        )
