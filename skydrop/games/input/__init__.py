"""
Input abstraction layer for skydrop games.

Provides unified input handling so game logic only ever sees
directional InputEvents, whatever produced them.
"""

from skydrop.games.input.input_event import Direction, InputEvent
from skydrop.games.input.input_manager import InputManager

__all__ = ['Direction', 'InputEvent', 'InputManager']
