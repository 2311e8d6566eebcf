"""
Input source implementations.
"""

from skydrop.games.input.sources.base import InputSource
from skydrop.games.input.sources.keyboard import KeyboardInputSource, KEY_BINDINGS

__all__ = ['InputSource', 'KeyboardInputSource', 'KEY_BINDINGS']
