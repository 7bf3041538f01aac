"""Number puzzle: an N×N sliding-tile game for the terminal."""

from loguru import logger

__version__ = "1.0.0"

# Silent when used as a library; the CLI turns logging on via setup_logging().
logger.disable("numberpuzzle")
