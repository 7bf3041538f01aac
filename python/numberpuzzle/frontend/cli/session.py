"""Console session loop shared by the CLI frontends.

The loop only talks to the outside world through three callables, so the
vanilla and Rich frontends differ only in how they prompt and draw:

* ``ask(prompt) -> str`` reads one line (may raise ``EOFError``)
* ``say(message, kind)`` prints a line of text of the given ``MessageKind``
* ``show(grid)`` draws the grid

Input is read as whitespace-separated numbers: blank lines are skipped and
a line holding several numbers is consumed one number per prompt.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from loguru import logger

from numberpuzzle.backend.config import MIN_SIZE
from numberpuzzle.backend.engine.gameplay import (
    CHANGE_LEVEL,
    PLAY_AGAIN,
    QUIT,
    GamePlay,
    parse_command,
)
from numberpuzzle.backend.errors import NotAdjacentError, TileNotFoundError
from numberpuzzle.backend.models.grid import PuzzleGrid

log = logger.bind(component="session")


class MessageKind(StrEnum):
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"


INSTRUCTIONS = (
    "Welcome to the Sliding Puzzle Game!",
    "Instructions:",
    " - Move tiles by entering the number adjacent to the empty space.",
    f" - Enter {QUIT} to quit the game.",
    f" - Enter {CHANGE_LEVEL} to change the puzzle size (level) during play.",
)

MOVE_PROMPT = (
    f"Enter a tile number to move ({QUIT} to quit, {CHANGE_LEVEL} to change level): "
)
SIZE_PROMPT = f"Enter new grid size (minimum {MIN_SIZE}): "
WIN_PROMPT = (
    f"Enter {PLAY_AGAIN} to play again, {CHANGE_LEVEL} to change level, "
    f"or {QUIT} to quit: "
)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_INTERRUPTED = 130


class ConsoleSession:
    """Drives one interactive game until the player quits."""

    def __init__(
        self,
        game: GamePlay,
        ask: Callable[[str], str],
        say: Callable[[str, MessageKind], None],
        show: Callable[[PuzzleGrid], None],
    ) -> None:
        self.game = game
        self.ask = ask
        self.say = say
        self.show = show
        self._pending: list[str] = []

    def run(self) -> int:
        """Play until the player quits; return the process exit code."""
        for line in INSTRUCTIONS:
            self.say(line, MessageKind.INFO)
        try:
            return self._loop()
        except KeyboardInterrupt:
            self.say("", MessageKind.INFO)
            self.say("Interrupted. Goodbye.", MessageKind.INFO)
            return EXIT_INTERRUPTED

    # -- loop -----------------------------------------------------------------

    def _loop(self) -> int:
        while True:
            self.show(self.game.grid)
            value = self._read_int(
                MOVE_PROMPT, "Oops! That input isn't valid. Exiting the game."
            )
            if value is None:
                return EXIT_BAD_INPUT

            if value == QUIT:
                self.say("Thanks for playing! Goodbye.", MessageKind.INFO)
                return EXIT_OK

            if value == CHANGE_LEVEL:
                if not self._change_level():
                    return EXIT_BAD_INPUT
                continue

            try:
                self.game.move(value)
            except TileNotFoundError:
                self.say(
                    f"Tile {value} not found on the board. Please try again.",
                    MessageKind.ERROR,
                )
                continue
            except NotAdjacentError:
                self.say(
                    "Invalid move: The selected tile is not adjacent to the "
                    "empty space.",
                    MessageKind.ERROR,
                )
                continue

            if self.game.is_won:
                exit_code = self._on_win()
                if exit_code is not None:
                    return exit_code

    def _on_win(self) -> int | None:
        """Handle the play-again prompt; an int return ends the session."""
        self.show(self.game.grid)
        self.say("Congratulations! You solved the puzzle!", MessageKind.SUCCESS)
        choice = self._read_int(WIN_PROMPT, "Invalid input. Exiting the game.")
        if choice is None:
            return EXIT_BAD_INPUT
        if choice == QUIT:
            return EXIT_OK
        if choice == CHANGE_LEVEL:
            return None if self._change_level() else EXIT_BAD_INPUT
        if choice == PLAY_AGAIN:
            self.game.replay()
        else:
            # Any other number leaves the solved grid in play.
            log.debug("ignoring play-again choice {}", choice)
        return None

    def _change_level(self) -> bool:
        size = self._read_int(SIZE_PROMPT, "Invalid input. Exiting the game.")
        if size is None:
            return False
        self.game.change_level(size)
        return True

    # -- input ----------------------------------------------------------------

    def _next_token(self, prompt: str) -> str:
        while not self._pending:
            self._pending.extend(self.ask(prompt).split())
        return self._pending.pop(0)

    def _read_int(self, prompt: str, error: str) -> int | None:
        try:
            return parse_command(self._next_token(prompt))
        except (EOFError, ValueError):
            log.warning("unreadable input at prompt {!r}", prompt.strip())
            self._pending.clear()
            self.say(error, MessageKind.ERROR)
            return None
