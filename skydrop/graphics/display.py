"""
Display acquisition.

Opening the window is the one place where a missing capability can stop the
game: if no video device is usable, RenderSurfaceUnavailable is raised once
at startup and the game never enters its loop.
"""

from typing import Tuple

import pygame

from skydrop.logging import get_logger

log = get_logger('display')


class RenderSurfaceUnavailable(Exception):
    """Raised when no render surface can be created."""
    pass


def open_display(
    size: Tuple[int, int],
    caption: str,
    vsync: bool = True,
) -> Tuple[pygame.Surface, bool]:
    """
    Open the game window.

    Tries a vsync-enabled window first and falls back to a plain one.

    Args:
        size: (width, height) of the window
        caption: Window title
        vsync: Whether to try a vsync-enabled window

    Returns:
        (screen surface, whether vsync is active)

    Raises:
        RenderSurfaceUnavailable: If the display cannot be initialized
    """
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RenderSurfaceUnavailable(f"Display not supported: {exc}") from exc

    pygame.display.set_caption(caption)

    if vsync:
        try:
            screen = pygame.display.set_mode(size, pygame.SCALED, vsync=1)
            log.info("Opened %dx%d display with vsync", *size)
            return screen, True
        except pygame.error as exc:
            log.info("Vsync unavailable (%s), using frame timer", exc)

    try:
        screen = pygame.display.set_mode(size)
    except pygame.error as exc:
        raise RenderSurfaceUnavailable(f"Cannot create {size[0]}x{size[1]} surface: {exc}") from exc

    log.info("Opened %dx%d display", *size)
    return screen, False
