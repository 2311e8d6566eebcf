"""Pytest fixtures for Parachute Drop tests."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from typing import Callable, List, Tuple

import pygame
import pytest

from models import CatchZone, Size
from skydrop.graphics import RenderLayer
from skydrop.logging import disable_logging
from skydrop.scheduling import FrameScheduler, IntervalTimer
from games.ParachuteDrop.catcher import Catcher
from games.ParachuteDrop.context import SessionContext
from games.ParachuteDrop.entity import Body, SpriteView
from games.ParachuteDrop.falling import FallingEntity
from games.ParachuteDrop.pool import EntityPool
from games.ParachuteDrop.score import ScoreState

SCREEN = (800, 400)


class FakeHandle:
    """Cancellable handle that just remembers it was cancelled."""

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimer(IntervalTimer):
    """IntervalTimer that only fires when the test says so."""

    def __init__(self):
        self.pending: List[Tuple[float, Callable[[], None], FakeHandle]] = []

    def after(self, delay_ms, callback):
        handle = FakeHandle()
        self.pending.append((delay_ms, callback, handle))
        return handle

    def fire_next(self) -> None:
        _delay, callback, handle = self.pending.pop(0)
        if not handle.cancelled:
            callback()


class FakeFrames(FrameScheduler):
    """FrameScheduler that runs frames on demand."""

    def __init__(self):
        self.pending: List[Tuple[Callable[[], None], FakeHandle]] = []
        self.requests = 0

    def request_next_frame(self, callback):
        handle = FakeHandle()
        self.pending.append((callback, handle))
        self.requests += 1
        return handle

    def run_next(self) -> None:
        callback, handle = self.pending.pop(0)
        if not handle.cancelled:
            callback()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep test output clean."""
    disable_logging()
    yield


@pytest.fixture
def layer():
    return RenderLayer('test', SCREEN)


@pytest.fixture
def sprite():
    return pygame.Surface((30, 30), pygame.SRCALPHA)


@pytest.fixture
def view(layer, sprite):
    return SpriteView(layer, sprite)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def frames():
    return FakeFrames()


@pytest.fixture
def score():
    return ScoreState(lives=3)


@pytest.fixture
def catcher(view, score):
    """Boat centred on an 800px screen with the default catch zone."""
    return Catcher(
        Body(367.5, 180, Size(width=65, height=90)),
        view,
        canvas_width=SCREEN[0],
        step=30,
        catch_zone=CatchZone(offset=70, band=3),
        score=score,
    )


@pytest.fixture
def context(score, catcher):
    return SessionContext(score=score, catcher=catcher)


@pytest.fixture
def make_entity(view, context):
    def factory(x, y, speed):
        return FallingEntity(x, y, speed, Size(width=30, height=30), view, context, 250)
    return factory


@pytest.fixture
def pool(make_entity, layer):
    return EntityPool(make_entity, layer)
