"""
Input Event - Represents a single directional input action.

This is a shared module used by all games.
Uses dataclass for immutability.
"""
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Horizontal movement direction."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Represents one discrete key-down in a horizontal direction. All input
    sources must convert their events to this common format.

    Attributes:
        direction: Requested movement direction
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    direction: Direction
    timestamp: float

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"InputEvent(dir={self.direction.value}, t={self.timestamp:.3f})"
