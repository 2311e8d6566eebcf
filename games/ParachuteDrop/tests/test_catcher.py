"""Tests for the player's boat."""
from unittest.mock import Mock

import pytest

from skydrop.games.input import Direction


class TestCatcherMovement:
    """Test handle_directional_input()."""

    def test_moves_left_by_step(self, catcher):
        catcher.handle_directional_input(Direction.LEFT)
        assert catcher.body.x == pytest.approx(337.5)

    def test_moves_right_by_step(self, catcher):
        catcher.handle_directional_input(Direction.RIGHT)
        assert catcher.body.x == pytest.approx(397.5)

    def test_clamped_at_left_edge(self, catcher):
        for _ in range(50):
            catcher.handle_directional_input(Direction.LEFT)
        assert catcher.body.x == 0

    def test_clamped_at_right_edge(self, catcher):
        for _ in range(50):
            catcher.handle_directional_input(Direction.RIGHT)
        assert catcher.body.x == 800 - 65

    def test_stays_in_bounds_after_every_input(self, catcher):
        moves = [Direction.LEFT] * 20 + [Direction.RIGHT] * 40 + [Direction.LEFT] * 7
        for direction in moves:
            catcher.handle_directional_input(direction)
            assert 0 <= catcher.body.x <= 800 - catcher.body.width

    def test_y_never_changes(self, catcher):
        catcher.handle_directional_input(Direction.LEFT)
        catcher.handle_directional_input(Direction.RIGHT)
        assert catcher.body.y == 180

    def test_input_ignored_after_game_over(self, catcher, score):
        for _ in range(3):
            score.record_miss()
        catcher.handle_directional_input(Direction.LEFT)
        assert catcher.body.x == 367.5


class TestCatcherRendering:
    """Test that moving erases the old position and draws the new one."""

    def test_erase_then_draw(self, catcher):
        calls = []
        catcher.view = Mock()
        catcher.view.erase.side_effect = lambda body: calls.append(('erase', body.x))
        catcher.view.draw.side_effect = lambda body: calls.append(('draw', body.x))

        catcher.handle_directional_input(Direction.RIGHT)

        assert calls == [('erase', 367.5), ('draw', 397.5)]

    def test_pixels_move_on_layer(self, catcher, layer):
        catcher.view.image.fill((255, 0, 0, 255))
        catcher.render()
        assert layer.surface.get_at((370, 185)).a == 255

        for _ in range(2):
            catcher.handle_directional_input(Direction.LEFT)

        assert layer.surface.get_at((370, 185)).a == 0
        assert layer.surface.get_at((310, 185)).a == 255

    def test_no_redraw_after_game_over(self, catcher, score):
        catcher.view = Mock()
        for _ in range(3):
            score.record_miss()
        catcher.handle_directional_input(Direction.RIGHT)
        catcher.view.draw.assert_not_called()
        catcher.view.erase.assert_not_called()
