"""
Spawner: the airplane that sweeps across the sky dropping parachutists.

The airplane moves left every frame and wraps back to the right edge. On
its own randomized timer it drops a parachutist from its centre, but only
while it is far enough inside the screen for the drop to be catchable.
"""
import random
from typing import Callable, Optional

from skydrop.logging import get_logger
from skydrop.scheduling import IntervalTimer, PeriodicTask
from games.ParachuteDrop.entity import Body, SpriteView
from games.ParachuteDrop.pool import EntityPool
from games.ParachuteDrop.score import ScoreState
from games.ParachuteDrop.config import (
    SWEEP_SPEED,
    FALL_SPEED,
    SPAWN_DELAY_MIN_MS,
    SPAWN_DELAY_MAX_MS,
)

log = get_logger('spawner')


def random_delay_ms(
    rng: random.Random,
    low: int = SPAWN_DELAY_MIN_MS,
    high: int = SPAWN_DELAY_MAX_MS,
) -> int:
    """Uniform whole-millisecond delay in [low, high)."""
    return low + int(rng.random() * (high - low))


class Spawner:
    """
    Sweeping airplane that feeds the entity pool.

    Args:
        body: Airplane position and size
        view: Sprite drawn on the spawner layer
        canvas_width: Width of the play area
        falling_width: Width of the entities it drops
        pool: Pool receiving new entities
        score: Spawning stops once the game is over
        timer: Timer driving the randomized spawn schedule
        sweep_speed: Pixels moved left per frame
        fall_speed: Speed given to new entities
        rng: Random source for spawn delays
    """

    def __init__(
        self,
        body: Body,
        view: SpriteView,
        canvas_width: float,
        falling_width: float,
        pool: EntityPool,
        score: ScoreState,
        timer: IntervalTimer,
        sweep_speed: float = SWEEP_SPEED,
        fall_speed: float = FALL_SPEED,
        rng: Optional[random.Random] = None,
    ):
        self.body = body
        self.view = view
        self.canvas_width = canvas_width
        self.falling_width = falling_width
        self.pool = pool
        self.timer = timer
        self.sweep_speed = sweep_speed
        self.fall_speed = fall_speed
        self._score = score
        self._rng = rng or random.Random()
        self._task: Optional[PeriodicTask] = None

    @property
    def window(self) -> tuple:
        """(min_x, max_x) of positions allowed to spawn."""
        half = self.body.width / 2
        return (-half, self.canvas_width - half - self.falling_width)

    def in_window(self) -> bool:
        low, high = self.window
        return low <= self.body.x <= high

    def render(self) -> None:
        self.view.draw(self.body)

    def tick(self) -> None:
        """Drop an entity from the airplane's centre if inside the window."""
        if not self._score.is_alive() or not self.in_window():
            return
        self.pool.spawn(
            self.body.x + self.body.width / 2,
            self.body.y + self.body.height / 2,
            self.fall_speed,
        )

    def sweep(self) -> None:
        """Move one frame to the left, wrapping at the left edge."""
        self.view.erase(self.body)
        self.body.x -= self.sweep_speed
        if self.body.x <= -self.body.width:
            self.body.x = self.canvas_width
        self.render()

    def start(self) -> None:
        """Start the spawn schedule; the first tick runs immediately."""
        if self._task is not None:
            return
        self._task = PeriodicTask(
            'spawner',
            body=self.tick,
            arm=self._arm,
            keep_running=self._score.is_alive,
        )
        self._task.start()

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()

    @property
    def running(self) -> bool:
        return self._task is not None and self._task.running

    def _arm(self, run: Callable[[], None]):
        delay = random_delay_ms(self._rng)
        log.trace("Next spawn in %d ms", delay)
        return self.timer.after(delay, run)
