"""
Score and lives tracking for Parachute Drop.

ScoreState is the only owner of the score/lives counters. Both counters
move in one direction only (score up, lives down) and freeze the moment
lives reach zero, which is what makes the game-over transition happen
exactly once.

Examples:
    >>> state = ScoreState(lives=1)
    >>> state.record_catch()
    >>> state.record_miss()
    >>> state.is_alive()
    False
    >>> state.record_catch()
    >>> state.score
    1
"""
from typing import Callable, List

from models import ScoreSnapshot
from skydrop.graphics import RenderLayer
from skydrop.logging import get_logger, emit_record
from games.ParachuteDrop.config import (
    INITIAL_LIVES,
    STATS_PANEL,
    STATS_SCORE_POS,
    STATS_LIVES_POS,
    PANEL_COLOR,
    PANEL_ALPHA,
    TEXT_COLOR,
)

log = get_logger('score')

ScoreListener = Callable[['ScoreState'], None]


class ScoreState:
    """Score/lives counters with an alive predicate.

    All mutation goes through record_miss() and record_catch(); both are
    no-ops once the game is over. Listeners registered with subscribe()
    are called after every change that actually happened.

    Args:
        lives: Starting lives (must be positive)
    """

    def __init__(self, lives: int = INITIAL_LIVES):
        if lives <= 0:
            raise ValueError(f'Starting lives must be positive, got {lives}')
        self._score = 0
        self._lives = lives
        self._listeners: List[ScoreListener] = []

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    def is_alive(self) -> bool:
        return self._lives > 0

    def snapshot(self) -> ScoreSnapshot:
        """Get an immutable copy of the counters."""
        return ScoreSnapshot(score=self._score, lives=self._lives)

    def subscribe(self, listener: ScoreListener) -> None:
        """Call listener(self) after every effective change."""
        self._listeners.append(listener)

    def record_miss(self) -> None:
        """Lose a life. Ignored once the game is over."""
        if not self.is_alive():
            return
        self._lives -= 1
        log.info("Missed! Lives left: %d", self._lives)
        emit_record('session', {'type': 'miss', 'score': self._score, 'lives': self._lives})
        self._notify()

    def record_catch(self) -> None:
        """Add a point. Ignored once the game is over."""
        if not self.is_alive():
            return
        self._score += 1
        log.info("Caught! Score: %d", self._score)
        emit_record('session', {'type': 'catch', 'score': self._score, 'lives': self._lives})
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)


class StatsOverlay:
    """Translucent score/lives panel in the top-left corner.

    Subscribes to the score state and redraws on every change.
    """

    def __init__(self, layer: RenderLayer, score: ScoreState):
        self.layer = layer
        self._score = score
        score.subscribe(lambda _state: self.render())

    def render(self) -> None:
        self.layer.clear()
        self.layer.fill_rect(*STATS_PANEL, PANEL_COLOR, PANEL_ALPHA)
        self.layer.fill_text(f"Score: {self._score.score}", *STATS_SCORE_POS, TEXT_COLOR)
        self.layer.fill_text(f"Lives: {self._score.lives}", *STATS_LIVES_POS, TEXT_COLOR)
