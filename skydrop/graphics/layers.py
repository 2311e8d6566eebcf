"""
Layered render surfaces.

Each logical layer (background, ocean, spawner, catcher, falling entities,
stats) is a persistent transparent surface. Entities erase their previous
rectangle and draw at the new one on their own layer, and the LayerStack
composites all layers onto the display in order once per frame.
"""

import math
from typing import Dict, Iterable, Optional, Tuple

import pygame

Color = Tuple[int, int, int]

TRANSPARENT = (0, 0, 0, 0)
DEFAULT_FONT_SIZE = 20


def covering_rect(x: float, y: float, width: float, height: float) -> pygame.Rect:
    """Smallest integer rect containing the real-valued rect."""
    left = math.floor(x)
    top = math.floor(y)
    return pygame.Rect(left, top, math.ceil(x + width) - left, math.ceil(y + height) - top)


class RenderLayer:
    """
    A single drawing layer.

    Args:
        name: Layer name (for debugging)
        size: (width, height) of the layer in pixels
        font: Font used by fill_text (default: pygame default font)
    """

    def __init__(self, name: str, size: Tuple[int, int], font: Optional[pygame.font.Font] = None):
        self.name = name
        self.surface = pygame.Surface(size, pygame.SRCALPHA)
        self._font = font

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def _get_font(self) -> pygame.font.Font:
        """Get or create font."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, DEFAULT_FONT_SIZE)
        return self._font

    def draw_image(self, image: pygame.Surface, x: float, y: float) -> None:
        self.surface.blit(image, (round(x), round(y)))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.surface.fill(TRANSPARENT, covering_rect(x, y, width, height))

    def clear(self) -> None:
        self.surface.fill(TRANSPARENT)

    def fill_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Color,
        alpha: int = 255,
    ) -> None:
        """Fill a rectangle, blending when alpha < 255."""
        rect = covering_rect(x, y, width, height)
        if alpha >= 255:
            self.surface.fill(color, rect)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill((*color, alpha))
        self.surface.blit(overlay, rect.topleft)

    def fill_text(self, text: str, x: float, y: float, color: Color) -> None:
        """Draw text with its baseline at y."""
        font = self._get_font()
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, (round(x), round(y) - font.get_ascent()))


class LayerStack:
    """
    Ordered set of layers, composited back to front.

    Args:
        size: (width, height) shared by every layer
        names: Layer names, back to front
        font: Font handed to every layer
    """

    def __init__(
        self,
        size: Tuple[int, int],
        names: Iterable[str],
        font: Optional[pygame.font.Font] = None,
    ):
        self.size = size
        self._layers: Dict[str, RenderLayer] = {
            name: RenderLayer(name, size, font) for name in names
        }

    def __getitem__(self, name: str) -> RenderLayer:
        return self._layers[name]

    def __contains__(self, name: str) -> bool:
        return name in self._layers

    @property
    def names(self) -> list:
        return list(self._layers)

    def composite(self, target: pygame.Surface) -> None:
        target.fill((0, 0, 0))
        for layer in self._layers.values():
            target.blit(layer.surface, (0, 0))
