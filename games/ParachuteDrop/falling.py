"""
Falling entity: a parachutist dropped by the airplane.

Every frame a falling entity moves down by its speed and then resolves
against the ocean and the catcher, in that order. Reaching the ocean is a
miss even if the catcher overlaps at the same moment.

The entity pool clears the shared falling layer at the start of each
frame; an entity only draws itself while it is still falling.
"""
from enum import Enum

from models import Size
from skydrop.logging import get_logger
from games.ParachuteDrop.collision import collides
from games.ParachuteDrop.context import SessionContext
from games.ParachuteDrop.entity import Body, SpriteView

log = get_logger('falling')


class Outcome(Enum):
    """Result of advancing a falling entity by one frame."""
    ACTIVE = "active"
    CAUGHT = "caught"
    MISSED = "missed"


class FallingEntity:
    """
    One parachutist.

    Args:
        x: Initial left edge
        y: Initial top edge
        speed: Pixels fallen per frame
        size: Sprite size
        view: Sprite drawn on the falling layer
        context: Session score and catcher
        ocean_level: Entities whose top edge passes this are lost
    """

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        size: Size,
        view: SpriteView,
        context: SessionContext,
        ocean_level: float,
    ):
        self.body = Body(x, y, size)
        self.speed = speed
        self.view = view
        self.context = context
        self.ocean_level = ocean_level
        self._outcome = Outcome.ACTIVE

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    def render(self) -> None:
        self.view.draw(self.body)

    def tick(self) -> Outcome:
        """
        Advance one frame and report the result.

        Returns:
            ACTIVE while still falling, otherwise CAUGHT or MISSED. A
            terminal result is returned once, the score change is already
            recorded and the entity is not drawn again.

        Raises:
            RuntimeError: If called after a terminal result
        """
        if self._outcome is not Outcome.ACTIVE:
            raise RuntimeError(f"Falling entity already resolved as {self._outcome.value}")

        self.body.y += self.speed

        if self.body.y > self.ocean_level:
            self.context.score.record_miss()
            self._outcome = Outcome.MISSED
            return self._outcome

        catcher = self.context.catcher
        zone = catcher.catch_zone
        if collides(self.body.bounding_box, catcher.body.bounding_box, zone.offset, zone.band):
            self.context.score.record_catch()
            self._outcome = Outcome.CAUGHT
            return self._outcome

        self.render()
        return self._outcome
