"""Tests for ScoreState and the stats overlay."""
from unittest.mock import Mock, patch

import pytest
from pydantic import ValidationError

from models import ScoreSnapshot
from games.ParachuteDrop.score import ScoreState, StatsOverlay


class TestScoreStateInitial:
    """Test initial counters."""

    def test_starts_with_zero_score_and_three_lives(self):
        state = ScoreState()
        assert state.score == 0
        assert state.lives == 3
        assert state.is_alive()

    def test_custom_lives(self):
        assert ScoreState(lives=5).lives == 5

    @pytest.mark.parametrize('lives', [0, -1])
    def test_non_positive_lives_rejected(self, lives):
        with pytest.raises(ValueError):
            ScoreState(lives=lives)


class TestScoreStateTransitions:
    """Test record_miss / record_catch."""

    def test_catch_increments_score(self, score):
        score.record_catch()
        assert score.score == 1
        assert score.lives == 3

    def test_miss_decrements_lives(self, score):
        score.record_miss()
        assert score.lives == 2
        assert score.score == 0

    def test_three_misses_end_the_game(self, score):
        for _ in range(3):
            score.record_miss()
        assert score.lives == 0
        assert not score.is_alive()

        score.record_miss()
        assert score.lives == 0

    def test_catch_after_game_over_ignored(self, score):
        score.record_catch()
        for _ in range(3):
            score.record_miss()
        score.record_catch()
        assert score.score == 1

    def test_counters_are_monotonic(self, score):
        """Score never drops and lives never rise, whatever the call order."""
        calls = [score.record_catch, score.record_miss, score.record_catch,
                 score.record_catch, score.record_miss, score.record_miss,
                 score.record_catch, score.record_miss]
        last_score, last_lives = score.score, score.lives
        for call in calls:
            call()
            assert score.score >= last_score
            assert score.lives <= last_lives
            assert score.lives >= 0
            last_score, last_lives = score.score, score.lives

    def test_records_emitted(self, score):
        with patch('games.ParachuteDrop.score.emit_record') as emit:
            score.record_catch()
            score.record_miss()
        assert emit.call_args_list[0].args == ('session', {'type': 'catch', 'score': 1, 'lives': 3})
        assert emit.call_args_list[1].args == ('session', {'type': 'miss', 'score': 1, 'lives': 2})


class TestScoreStateObservers:
    """Test subscribe() and snapshot()."""

    def test_listener_called_on_change(self, score):
        listener = Mock()
        score.subscribe(listener)
        score.record_catch()
        listener.assert_called_once_with(score)

    def test_listener_not_called_after_game_over(self):
        state = ScoreState(lives=1)
        state.record_miss()
        listener = Mock()
        state.subscribe(listener)
        state.record_miss()
        state.record_catch()
        listener.assert_not_called()

    def test_snapshot(self, score):
        score.record_catch()
        score.record_miss()
        snap = score.snapshot()
        assert snap == ScoreSnapshot(score=1, lives=2)
        assert snap.alive

    def test_snapshot_is_frozen(self, score):
        snap = score.snapshot()
        with pytest.raises(ValidationError):
            snap.score = 10

    def test_snapshot_rejects_negative(self):
        with pytest.raises(ValidationError):
            ScoreSnapshot(score=0, lives=-1)


class TestStatsOverlay:
    """Test the stats panel redraws with the score."""

    def test_render_draws_panel_and_text(self, score):
        layer = Mock()
        overlay = StatsOverlay(layer, score)
        overlay.render()

        layer.clear.assert_called_once()
        layer.fill_rect.assert_called_once()
        texts = [c.args[0] for c in layer.fill_text.call_args_list]
        assert texts == ['Score: 0', 'Lives: 3']

    def test_redraws_on_score_change(self, score):
        layer = Mock()
        StatsOverlay(layer, score)
        score.record_catch()

        texts = [c.args[0] for c in layer.fill_text.call_args_list]
        assert texts == ['Score: 1', 'Lives: 3']
