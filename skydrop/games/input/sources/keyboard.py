"""
Keyboard Input Source - Arrow / A-D key presses as directional input.

This is a shared module used by all games.
"""
import time
from typing import Dict, List

import pygame

from skydrop.games.input.input_event import Direction, InputEvent
from skydrop.games.input.sources.base import InputSource

KEY_BINDINGS: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Converts key-down events for bound keys into InputEvent models.
    Every other event is re-posted to the pygame event queue for the main
    loop (quit, escape, restart).
    """

    def __init__(self, bindings: Dict[int, Direction] = None):
        """Initialize the keyboard input source."""
        self._bindings = dict(bindings or KEY_BINDINGS)
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect directional key presses."""
        passthrough = []
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN and event.key in self._bindings:
                self._event_queue.append(InputEvent(
                    direction=self._bindings[event.key],
                    timestamp=time.monotonic(),
                ))
            elif event.type != pygame.KEYUP:
                passthrough.append(event)

        for event in passthrough:
            pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
