"""Common GameState enum for skydrop games.

A session is either running or over. The transition from RUNNING to
GAME_OVER happens exactly once; there is no way back other than starting a
new session.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        RUNNING: Active gameplay, frames are being scheduled
        GAME_OVER: Lives exhausted, the game-over overlay is shown

    Usage:
        from skydrop.games.game_state import GameState

        class MyLoop:
            def __init__(self):
                self._state = GameState.RUNNING

            @property
            def state(self) -> GameState:
                return self._state
    """
    RUNNING = "running"
    GAME_OVER = "game_over"
