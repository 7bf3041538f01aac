from numberpuzzle.backend.models.grid import Direction, PuzzleGrid

__all__ = ["Direction", "PuzzleGrid"]
