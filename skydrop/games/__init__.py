"""
Skydrop Game Framework.

Provides:
- game_state: Standard GameState enum (RUNNING / GAME_OVER)
- input: Directional input events, sources and manager
"""

from skydrop.games.game_state import GameState

__all__ = [
    'GameState',
]
