"""Tests for falling entities."""
from unittest.mock import Mock

import pytest

from models import CatchZone, Size
from games.ParachuteDrop.catcher import Catcher
from games.ParachuteDrop.context import SessionContext
from games.ParachuteDrop.entity import Body
from games.ParachuteDrop.falling import FallingEntity, Outcome


class TestFallingToTheOcean:
    """Test the miss path."""

    def test_falls_by_speed_each_tick(self, make_entity):
        entity = make_entity(100, 0, 1.5)
        assert entity.tick() is Outcome.ACTIVE
        assert entity.body.y == 1.5

    def test_missed_on_167th_tick(self, make_entity, score):
        """x=100 never meets the centred boat; y passes 250 on tick 167."""
        entity = make_entity(100, 0, 1.5)
        for _ in range(166):
            assert entity.tick() is Outcome.ACTIVE

        assert entity.tick() is Outcome.MISSED
        assert entity.body.y == pytest.approx(250.5)
        assert score.lives == 2
        assert score.score == 0

    def test_exactly_at_ocean_level_still_active(self, make_entity):
        entity = make_entity(100, 248.5, 1.5)
        assert entity.tick() is Outcome.ACTIVE
        assert entity.body.y == 250

    def test_ocean_checked_before_catcher(self, view, score):
        """Crossing the ocean is a miss even when overlapping the catch band."""
        catcher = Catcher(
            Body(180, 200, Size(width=65, height=90)), view, 800, 30,
            CatchZone(offset=70, band=3), score,
        )
        context = SessionContext(score=score, catcher=catcher)
        entity = FallingEntity(185, 250, 1.5, Size(width=30, height=30), view, context, 250)

        assert entity.tick() is Outcome.MISSED
        assert score.lives == 2
        assert score.score == 0


class TestCaught:
    """Test the catch path."""

    def test_caught_in_band(self, view, score):
        catcher = Catcher(
            Body(180, 110, Size(width=65, height=20)), view, 800, 30,
            CatchZone(offset=70, band=3), score,
        )
        context = SessionContext(score=score, catcher=catcher)
        entity = FallingEntity(185, 178.5, 1.5, Size(width=30, height=30), view, context, 250)

        assert entity.tick() is Outcome.CAUGHT
        assert entity.body.y == 180
        assert score.score == 1
        assert score.lives == 3

    def test_catch_zone_follows_catcher(self, make_entity, catcher, score):
        """Default boat at y=180 catches in the band starting at 250."""
        entity = make_entity(catcher.body.x + 10, 219, 1.5)
        assert entity.tick() is Outcome.CAUGHT
        assert score.score == 1


class TestTerminalState:
    """Test that entities resolve exactly once."""

    def test_tick_after_terminal_raises(self, make_entity):
        entity = make_entity(100, 250, 1.5)
        assert entity.tick() is Outcome.MISSED
        with pytest.raises(RuntimeError):
            entity.tick()

    def test_outcome_property(self, make_entity):
        entity = make_entity(100, 250, 1.5)
        assert entity.outcome is Outcome.ACTIVE
        entity.tick()
        assert entity.outcome is Outcome.MISSED


class TestFallingRendering:
    """Test drawing; the pool clears the layer between frames."""

    def test_active_entity_drawn_at_new_position(self, context):
        drawn = []
        view = Mock()
        view.draw.side_effect = lambda body: drawn.append(body.y)
        entity = FallingEntity(100, 0, 1.5, Size(width=30, height=30), view, context, 250)
        entity.tick()
        assert drawn == [1.5]
        view.erase.assert_not_called()

    def test_missed_entity_not_drawn(self, context):
        view = Mock()
        entity = FallingEntity(100, 250, 1.5, Size(width=30, height=30), view, context, 250)
        entity.tick()
        view.draw.assert_not_called()

    def test_caught_entity_not_drawn(self, context, catcher):
        view = Mock()
        entity = FallingEntity(catcher.body.x, 219, 1.5, Size(width=30, height=30), view, context, 250)
        assert entity.tick() is Outcome.CAUGHT
        view.draw.assert_not_called()
