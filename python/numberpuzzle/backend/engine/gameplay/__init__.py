from numberpuzzle.backend.engine.gameplay.game import (
    CHANGE_LEVEL,
    PLAY_AGAIN,
    QUIT,
    GamePlay,
    parse_command,
)

__all__ = ["CHANGE_LEVEL", "PLAY_AGAIN", "QUIT", "GamePlay", "parse_command"]
