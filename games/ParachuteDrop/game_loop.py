"""
Per-frame orchestration for Parachute Drop.

Each frame either advances the world (entities first, then the airplane)
or, once the player has no lives left, performs the one-time switch to
GAME_OVER: draw the overlay and stop asking for frames.
"""
from typing import Callable, Optional

from skydrop.games import GameState
from skydrop.logging import get_logger, emit_record
from skydrop.scheduling import Cancellable, FrameScheduler
from games.ParachuteDrop.pool import EntityPool
from games.ParachuteDrop.score import ScoreState
from games.ParachuteDrop.spawner import Spawner

log = get_logger('game_loop')


class GameLoop:
    """
    Frame loop for one session.

    Args:
        frames: Scheduler providing frame callbacks
        pool: Falling entities to advance every frame
        spawner: Airplane to sweep every frame
        score: Terminal predicate
        on_game_over: Called exactly once when the game ends
    """

    def __init__(
        self,
        frames: FrameScheduler,
        pool: EntityPool,
        spawner: Spawner,
        score: ScoreState,
        on_game_over: Optional[Callable[[], None]] = None,
    ):
        self.frames = frames
        self.pool = pool
        self.spawner = spawner
        self.score = score
        self._on_game_over = on_game_over
        self._state = GameState.RUNNING
        self._handle: Optional[Cancellable] = None
        self._started = False
        self._cancelled = False
        self.frame_count = 0

    @property
    def state(self) -> GameState:
        return self._state

    def start(self) -> None:
        """Request the first frame."""
        if self._started:
            return
        self._started = True
        self._handle = self.frames.request_next_frame(self.frame)

    def cancel(self) -> None:
        """Stop requesting frames (shutdown or restart)."""
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def frame(self) -> None:
        """Run one frame."""
        self._handle = None
        if self._cancelled or self._state is GameState.GAME_OVER:
            return

        if not self.score.is_alive():
            self._game_over()
            return

        self._handle = self.frames.request_next_frame(self.frame)
        self.frame_count += 1

        removed = self.pool.advance_all()
        if removed:
            log.trace("Frame %d resolved %d entities", self.frame_count, len(removed))
        self.spawner.sweep()

    def _game_over(self) -> None:
        self._state = GameState.GAME_OVER
        log.info("Game over! Final score: %d", self.score.score)
        emit_record('session', {
            'type': 'game_over',
            'score': self.score.score,
            'frames': self.frame_count,
        })
        if self._on_game_over is not None:
            self._on_game_over()
