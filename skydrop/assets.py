"""
Asset catalog with an asynchronous readiness barrier.

Every asset is loaded in a worker thread; the catalog's ``ready`` future
resolves once all of them have finished, and the first frame is only
requested after that. Missing image files are replaced by artwork drawn
procedurally at a fallback size, so a checkout without an ``assets/``
directory is still playable.

Usage:
    catalog = AssetCatalog([
        AssetSpec('boat', 'boat.png', (65, 90), draw_boat),
    ], asset_dir=Path('assets'))
    await catalog.load_all()
    catalog.size('boat')  # Size(65x90)
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Tuple

import pygame

from models import Size
from skydrop.logging import get_logger

log = get_logger('assets')


@dataclass(frozen=True)
class AssetSpec:
    """Description of one image asset.

    Attributes:
        name: Key used for lookups
        filename: Image file name inside the asset directory
        fallback_size: (width, height) of the procedural replacement
        draw_fallback: Paints the procedural replacement onto a blank surface
    """
    name: str
    filename: str
    fallback_size: Tuple[int, int]
    draw_fallback: Callable[[pygame.Surface], None]


class AssetCatalog:
    """Read-only image and size lookup, populated by ``load_all()``."""

    def __init__(self, specs: Iterable[AssetSpec], asset_dir: Optional[Path] = None):
        self._specs: Dict[str, AssetSpec] = {spec.name: spec for spec in specs}
        self._asset_dir = Path(asset_dir) if asset_dir else None
        self._images: Dict[str, pygame.Surface] = {}
        self._ready: Optional[asyncio.Future] = None

    @property
    def ready(self) -> asyncio.Future:
        """Future resolved with the catalog once every asset has loaded."""
        if self._ready is None:
            self._ready = asyncio.get_running_loop().create_future()
        return self._ready

    @property
    def is_ready(self) -> bool:
        return len(self._images) == len(self._specs)

    @property
    def names(self) -> list:
        return list(self._specs)

    async def load_all(self) -> 'AssetCatalog':
        """Load every asset concurrently and resolve ``ready``."""
        names = list(self._specs)
        try:
            images = await asyncio.gather(
                *(asyncio.to_thread(self._load_one, self._specs[name]) for name in names)
            )
        except (pygame.error, OSError) as exc:
            if self._ready is not None and not self._ready.done():
                self._ready.set_exception(exc)
            raise

        has_display = pygame.display.get_init() and pygame.display.get_surface() is not None
        for name, image in zip(names, images):
            self._images[name] = image.convert_alpha() if has_display else image

        log.info("Loaded %d assets", len(self._images))
        ready = self.ready
        if not ready.done():
            ready.set_result(self)
        return self

    def _load_one(self, spec: AssetSpec) -> pygame.Surface:
        """Load an image file, or draw its procedural replacement."""
        if self._asset_dir is not None:
            path = self._asset_dir / spec.filename
            if path.exists():
                log.debug("Loading %s from %s", spec.name, path)
                return pygame.image.load(str(path))

        surface = pygame.Surface(spec.fallback_size, pygame.SRCALPHA)
        spec.draw_fallback(surface)
        log.debug("Drew procedural %s at %dx%d", spec.name, *spec.fallback_size)
        return surface

    def image(self, name: str) -> pygame.Surface:
        """Get a loaded image; raises KeyError before loading completes."""
        return self._images[name]

    def size(self, name: str) -> Size:
        width, height = self._images[name].get_size()
        return Size(width=width, height=height)

    def width(self, name: str) -> float:
        return self.size(name).width

    def height(self, name: str) -> float:
        return self.size(name).height
