"""
Entity capabilities shared by every visual object.

Entities are composed rather than inherited: each one holds a Body (where
it is and how big it is) and a SpriteView (which image it shows on which
layer), and satisfies the Renderable protocol.
"""
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pygame

from models import BoundingBox, Size
from skydrop.graphics import RenderLayer


@runtime_checkable
class Renderable(Protocol):
    """Anything that can draw itself at its current position."""

    def render(self) -> None:
        ...


@dataclass
class Body:
    """Mutable position plus immutable size.

    Attributes:
        x: Left edge
        y: Top edge
        size: Dimensions, fixed for the entity's lifetime
    """
    x: float
    y: float
    size: Size

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def bounding_box(self) -> BoundingBox:
        """Box at the current position, built fresh on every call."""
        return BoundingBox(x=self.x, y=self.y, width=self.size.width, height=self.size.height)


class SpriteView:
    """Draws one image for a Body on a layer.

    Args:
        layer: Layer the image is drawn on
        image: Image to draw
    """

    def __init__(self, layer: RenderLayer, image: pygame.Surface):
        self.layer = layer
        self.image = image

    def draw(self, body: Body) -> None:
        self.layer.draw_image(self.image, body.x, body.y)

    def erase(self, body: Body) -> None:
        self.layer.clear_rect(body.x, body.y, body.width, body.height)


class Backdrop:
    """Static scenery drawn once (background, ocean)."""

    def __init__(self, body: Body, view: SpriteView):
        self.body = body
        self.view = view

    def render(self) -> None:
        self.view.draw(self.body)
