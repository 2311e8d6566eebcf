"""
Procedural artwork for Parachute Drop.

Drawn onto blank surfaces when no image file is present in the asset
directory. Each function paints the whole surface it is given, so the
artwork scales with the configured size.
"""
from pathlib import Path
from typing import List, Tuple

import pygame

from skydrop.assets import AssetCatalog, AssetSpec
from games.ParachuteDrop.config import (
    BACKGROUND_SIZE,
    OCEAN_SIZE,
    BOAT_SIZE,
    AIRPLANE_SIZE,
    PARACHUTIST_SIZE,
    SKY_TOP_COLOR,
    SKY_BOTTOM_COLOR,
    OCEAN_COLOR,
    WAVE_COLOR,
    HULL_COLOR,
    SAIL_COLOR,
    PLANE_COLOR,
    CANOPY_COLOR,
    JUMPER_COLOR,
)

BACKGROUND = 'background'
OCEAN = 'ocean'
BOAT = 'boat'
AIRPLANE = 'airplane'
PARACHUTIST = 'parachutist'


def draw_background(surface: pygame.Surface) -> None:
    """Vertical sky gradient."""
    width, height = surface.get_size()
    for y in range(height):
        t = y / max(1, height - 1)
        color = tuple(
            int(top + (bottom - top) * t)
            for top, bottom in zip(SKY_TOP_COLOR, SKY_BOTTOM_COLOR)
        )
        pygame.draw.line(surface, color, (0, y), (width, y))


def draw_ocean(surface: pygame.Surface) -> None:
    """Water band with a row of wave crests along the top."""
    width, height = surface.get_size()
    surface.fill(OCEAN_COLOR)
    crest = 24
    for x in range(0, width, crest):
        pygame.draw.arc(surface, WAVE_COLOR, pygame.Rect(x, 2, crest, 12), 0, 3.14159, 2)


def draw_boat(surface: pygame.Surface) -> None:
    """Sailboat: triangular sail above a trapezoid hull."""
    width, height = surface.get_size()
    mast_x = width // 2
    hull_top = int(height * 0.72)

    pygame.draw.line(surface, HULL_COLOR, (mast_x, 2), (mast_x, hull_top), 3)
    pygame.draw.polygon(surface, SAIL_COLOR, [
        (mast_x + 2, 4),
        (mast_x + 2, hull_top - 4),
        (width - 6, hull_top - 4),
    ])
    pygame.draw.polygon(surface, HULL_COLOR, [
        (0, hull_top),
        (width - 1, hull_top),
        (width - 10, height - 1),
        (10, height - 1),
    ])


def draw_airplane(surface: pygame.Surface) -> None:
    """Side view of a small plane flying left."""
    width, height = surface.get_size()
    body = pygame.Rect(0, height // 3, width, height // 3)
    pygame.draw.ellipse(surface, PLANE_COLOR, body)
    pygame.draw.polygon(surface, PLANE_COLOR, [
        (width * 3 // 4, body.top),
        (width - 4, 2),
        (width - 1, body.top),
    ])
    pygame.draw.polygon(surface, PLANE_COLOR, [
        (width // 3, body.centery),
        (width // 2, height - 2),
        (width * 2 // 3, body.centery),
    ])
    pygame.draw.circle(surface, SAIL_COLOR, (width // 6, body.centery - 2), max(2, height // 10))


def draw_parachutist(surface: pygame.Surface) -> None:
    """Canopy with lines down to a small figure."""
    width, height = surface.get_size()
    canopy = pygame.Rect(0, 0, width, height // 2)
    pygame.draw.ellipse(surface, CANOPY_COLOR, canopy)
    surface.fill((0, 0, 0, 0), pygame.Rect(0, canopy.centery, width, canopy.height // 2 + 1))

    jumper_top = int(height * 0.62)
    for anchor_x in (2, width - 3):
        pygame.draw.line(surface, JUMPER_COLOR, (anchor_x, canopy.centery), (width // 2, jumper_top), 1)
    pygame.draw.circle(surface, JUMPER_COLOR, (width // 2, jumper_top + 2), max(2, width // 10))
    pygame.draw.line(surface, JUMPER_COLOR, (width // 2, jumper_top + 4), (width // 2, height - 1), 2)


def asset_specs(screen_size: Tuple[int, int] = BACKGROUND_SIZE) -> List[AssetSpec]:
    """Specs for every image the game uses.

    Background and ocean fallbacks are sized to the screen.
    """
    width, height = screen_size
    return [
        AssetSpec(BACKGROUND, 'bg.png', (width, height), draw_background),
        AssetSpec(OCEAN, 'ocean.png', (width, OCEAN_SIZE[1]), draw_ocean),
        AssetSpec(BOAT, 'boat.png', BOAT_SIZE, draw_boat),
        AssetSpec(AIRPLANE, 'airplane.png', AIRPLANE_SIZE, draw_airplane),
        AssetSpec(PARACHUTIST, 'parachutist.png', PARACHUTIST_SIZE, draw_parachutist),
    ]


def create_catalog(asset_dir: Path, screen_size: Tuple[int, int] = BACKGROUND_SIZE) -> AssetCatalog:
    """Asset catalog for the game, reading images from asset_dir."""
    return AssetCatalog(asset_specs(screen_size), asset_dir=asset_dir)
