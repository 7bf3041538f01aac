"""Game-wide constants."""

MIN_SIZE = 3
DEFAULT_SIZE = 3

# Random moves per cell when shuffling from the solved state.
SHUFFLE_FACTOR = 100
