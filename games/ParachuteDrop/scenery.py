"""
Static scenery and the game-over overlay.
"""
from typing import Tuple

from skydrop.graphics import RenderLayer
from games.ParachuteDrop.config import (
    GAME_OVER_PANEL,
    GAME_OVER_TITLE_POS,
    GAME_OVER_HINT_POS,
    GAME_OVER_TITLE,
    GAME_OVER_HINT,
    PANEL_COLOR,
    PANEL_ALPHA,
    TEXT_COLOR,
)


def _offset(center: Tuple[float, float], dx: float, dy: float) -> Tuple[float, float]:
    return center[0] + dx, center[1] + dy


class GameOverOverlay:
    """Translucent panel centred on the screen with the replay hint."""

    def __init__(self, layer: RenderLayer):
        self.layer = layer

    def render(self) -> None:
        center = (self.layer.width / 2, self.layer.height / 2)
        px, py, pw, ph = GAME_OVER_PANEL
        self.layer.fill_rect(*_offset(center, px, py), pw, ph, PANEL_COLOR, PANEL_ALPHA)
        self.layer.fill_text(GAME_OVER_TITLE, *_offset(center, *GAME_OVER_TITLE_POS), TEXT_COLOR)
        self.layer.fill_text(GAME_OVER_HINT, *_offset(center, *GAME_OVER_HINT_POS), TEXT_COLOR)
