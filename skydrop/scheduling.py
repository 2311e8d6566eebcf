"""
Cooperative scheduling primitives.

Everything in a game session runs on one asyncio event loop: frame
callbacks, one-shot timers and input polling are queued on the same loop, so
no two callbacks ever run at the same time and no locking is needed.
Suspension happens only between callbacks.

Provides:
- IntervalTimer: ``after(ms, callback)`` one-shot timers
- FrameScheduler: ``request_next_frame(callback)`` render-rate callbacks
- PeriodicTask: self re-arming task that stops when its predicate goes false

Usage:
    timer = AsyncioIntervalTimer()
    task = PeriodicTask(
        'spawner',
        body=spawner.tick,
        arm=lambda run: timer.after(random_delay(), run),
        keep_running=score.is_alive,
    )
    task.start()
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Optional, Protocol

from skydrop.logging import get_logger

log = get_logger('scheduling')

DEFAULT_FPS = 60

# Frames presented faster than this fraction of the frame interval are
# treated as "vsync is not blocking".
_VSYNC_MIN_PRESENT_FRACTION = 0.25
_VSYNC_PROBE_FRAMES = 30


class Cancellable(Protocol):
    """Handle returned by schedulers; asyncio.Handle satisfies it."""

    def cancel(self) -> None:
        ...


class IntervalTimer(ABC):
    """One-shot timer capability."""

    @abstractmethod
    def after(self, delay_ms: float, callback: Callable[[], None]) -> Cancellable:
        """Run callback once, delay_ms milliseconds from now."""
        pass


class FrameScheduler(ABC):
    """Render-rate callback capability."""

    @abstractmethod
    def request_next_frame(self, callback: Callable[[], None]) -> Cancellable:
        """Run callback on the next frame."""
        pass


class AsyncioIntervalTimer(IntervalTimer):
    """IntervalTimer backed by ``loop.call_later``.

    Args:
        loop: Event loop to schedule on (default: the running loop)
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def after(self, delay_ms: float, callback: Callable[[], None]) -> Cancellable:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000.0, callback)


class AsyncioFrameScheduler(FrameScheduler):
    """
    FrameScheduler that prefers vsync pacing and falls back to a fixed timer.

    Each frame runs the callback and then calls ``present`` (composite and
    flip). With a vsync display the flip blocks until the vertical blank, so
    the next frame can be queued immediately. Without vsync, or when the
    flip turns out not to block, frames are queued on a fixed
    ``1 / fps`` second timer instead.

    Args:
        present: Called after every frame callback to show the frame
        vsync: Whether the display was opened with vsync
        fps: Target frame rate for the timer fallback
        loop: Event loop to schedule on (default: the running loop)
    """

    def __init__(
        self,
        present: Callable[[], None],
        vsync: bool = False,
        fps: int = DEFAULT_FPS,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._present = present
        self._vsync = vsync
        self._fps = fps
        self._loop = loop
        self._fast_presents = 0

    @property
    def frame_interval(self) -> float:
        """Fallback frame interval in seconds."""
        return 1.0 / self._fps

    @property
    def vsync(self) -> bool:
        """True while frames are paced by the display."""
        return self._vsync

    def request_next_frame(self, callback: Callable[[], None]) -> Cancellable:
        loop = self._loop or asyncio.get_running_loop()
        if self._vsync:
            return loop.call_soon(self._run_frame, callback)
        return loop.call_later(self.frame_interval, self._run_frame, callback)

    def _run_frame(self, callback: Callable[[], None]) -> None:
        callback()

        loop = self._loop or asyncio.get_running_loop()
        started = loop.time()
        self._present()
        if self._vsync:
            self._check_vsync(loop.time() - started)

    def _check_vsync(self, present_time: float) -> None:
        """Drop to the timer fallback if flips never wait for the display."""
        if present_time >= self.frame_interval * _VSYNC_MIN_PRESENT_FRACTION:
            self._fast_presents = 0
            return
        self._fast_presents += 1
        if self._fast_presents >= _VSYNC_PROBE_FRAMES:
            self._vsync = False
            log.warning(
                "Display flips are not vsync-paced; using %.1f ms frame timer",
                self.frame_interval * 1000,
            )


class PeriodicTask:
    """
    Self re-arming task keyed off a shared predicate.

    Each run executes ``body`` and then, if ``keep_running()`` is still
    true, re-arms itself through ``arm``. When the predicate goes false the
    task simply stops re-arming; ``cancel()`` stops it explicitly.

    Args:
        name: Name used in log messages
        body: Work to perform on every run
        arm: Schedules the next run; receives the callable to schedule and
            returns a cancellable handle
        keep_running: Predicate checked after every run
    """

    def __init__(
        self,
        name: str,
        body: Callable[[], None],
        arm: Callable[[Callable[[], None]], Cancellable],
        keep_running: Callable[[], bool],
    ):
        self.name = name
        self._body = body
        self._arm = arm
        self._keep_running = keep_running
        self._handle: Optional[Cancellable] = None
        self._started = False
        self._cancelled = False
        self._finished = False
        self.runs = 0

    @property
    def running(self) -> bool:
        """True between start() and the task stopping or being cancelled."""
        return self._started and not (self._cancelled or self._finished)

    def start(self) -> None:
        """Run the body immediately and begin re-arming."""
        if self._started:
            return
        self._started = True
        self._run()

    def cancel(self) -> None:
        """Stop the task; a pending run is dropped."""
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self) -> None:
        self._handle = None
        if self._cancelled:
            return

        self._body()
        self.runs += 1

        if self._cancelled:
            return
        if self._keep_running():
            self._handle = self._arm(self._run)
        else:
            self._finished = True
            log.debug("Task '%s' stopped after %d runs", self.name, self.runs)
