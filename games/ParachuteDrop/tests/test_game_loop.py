"""Tests for the per-frame game loop."""
from unittest.mock import Mock, patch

import pytest

from skydrop.games import GameState
from games.ParachuteDrop.game_loop import GameLoop
from games.ParachuteDrop.score import ScoreState


@pytest.fixture
def spawner():
    return Mock()


@pytest.fixture
def on_game_over():
    return Mock()


@pytest.fixture
def loop(frames, pool, spawner, score, on_game_over):
    return GameLoop(frames, pool, spawner, score, on_game_over)


class TestGameLoopRunning:
    """Test frames while the player is alive."""

    def test_initial_state(self, loop):
        assert loop.state is GameState.RUNNING

    def test_start_requests_first_frame(self, loop, frames):
        loop.start()
        loop.start()
        assert frames.requests == 1

    def test_frame_order(self, frames, score):
        """Next frame is requested before the pool advances, then the spawner sweeps."""
        calls = []
        frames.request_next_frame = Mock(side_effect=lambda cb: calls.append('request'))
        pool = Mock()
        pool.advance_all.side_effect = lambda: calls.append('advance') or []
        spawner = Mock()
        spawner.sweep.side_effect = lambda: calls.append('sweep')

        GameLoop(frames, pool, spawner, score).frame()

        assert calls == ['request', 'advance', 'sweep']

    def test_entities_advance_each_frame(self, loop, frames, pool):
        entity = pool.spawn(100, 0, 1.5)
        loop.start()
        for _ in range(4):
            frames.run_next()
        assert entity.body.y == 6.0
        assert loop.frame_count == 4

    def test_cancel_stops_frames(self, loop, frames, spawner):
        loop.start()
        loop.cancel()
        frames.run_next()
        spawner.sweep.assert_not_called()
        assert frames.pending == []


class TestGameOver:
    """Test the single game-over transition."""

    def kill(self, score):
        for _ in range(3):
            score.record_miss()

    def test_transition_on_next_frame(self, loop, frames, score, on_game_over, spawner):
        loop.start()
        self.kill(score)
        frames.run_next()

        assert loop.state is GameState.GAME_OVER
        on_game_over.assert_called_once_with()
        spawner.sweep.assert_not_called()
        assert frames.pending == []

    def test_transition_is_idempotent(self, loop, score, on_game_over):
        self.kill(score)
        loop.frame()
        loop.frame()
        loop.frame()
        on_game_over.assert_called_once_with()
        assert loop.state is GameState.GAME_OVER

    def test_last_life_lost_mid_frame(self, frames, pool, spawner, on_game_over):
        """The frame that loses the last life finishes; the next one ends the game."""
        score = ScoreState(lives=1)
        loop = GameLoop(frames, pool, spawner, score, on_game_over)
        loop.start()

        with patch.object(pool, 'advance_all', side_effect=lambda: score.record_miss() or []):
            frames.run_next()
        on_game_over.assert_not_called()
        spawner.sweep.assert_called_once()

        frames.run_next()
        on_game_over.assert_called_once_with()

    def test_game_over_record(self, loop, score):
        self.kill(score)
        with patch('games.ParachuteDrop.game_loop.emit_record') as emit:
            loop.frame()
        module, record = emit.call_args.args
        assert module == 'session'
        assert record['type'] == 'game_over'
        assert record['score'] == 0
