"""
Ordered collection of the falling entities currently in play.
"""
from typing import Callable, List, Tuple

from skydrop.graphics import RenderLayer
from skydrop.logging import get_logger
from games.ParachuteDrop.falling import FallingEntity, Outcome

log = get_logger('pool')

EntityFactory = Callable[[float, float, float], FallingEntity]


class EntityPool:
    """
    Falling entities in spawn order.

    The pool owns the layer its entities draw on and wipes it once per
    frame before advancing them, so overlapping entities never erase each
    other. Entities that resolve are simply not redrawn.

    Args:
        make_entity: Builds a falling entity from (x, y, speed)
        layer: Layer every entity draws on
    """

    def __init__(self, make_entity: EntityFactory, layer: RenderLayer):
        self._make_entity = make_entity
        self.layer = layer
        self._entities: List[FallingEntity] = []

    def __len__(self) -> int:
        return len(self._entities)

    @property
    def entities(self) -> Tuple[FallingEntity, ...]:
        return tuple(self._entities)

    def spawn(self, x: float, y: float, speed: float) -> FallingEntity:
        """Create an entity at (x, y) and add it to the end of the pool."""
        entity = self._make_entity(x, y, speed)
        self._entities.append(entity)
        log.debug("Spawned entity at (%.1f, %.1f), pool size %d", x, y, len(self._entities))
        return entity

    def advance_all(self) -> List[FallingEntity]:
        """
        Clear the layer and tick every entity once, in insertion order.

        Entities that report a terminal outcome are removed; survivors keep
        their relative order.

        Returns:
            The removed entities, in the order they resolved
        """
        self.layer.clear()
        survivors = []
        removed = []
        for entity in self._entities:
            if entity.tick() is Outcome.ACTIVE:
                survivors.append(entity)
            else:
                removed.append(entity)
        self._entities = survivors
        return removed
