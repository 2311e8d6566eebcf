"""
Catcher entity: the player's boat.

The boat moves a fixed step left or right per key press and never leaves
the screen. Its catch zone (a thin band below its top edge) is part of its
own geometry, so falling entities ask the boat where to test rather than
hardcoding it.
"""
from models import CatchZone
from skydrop.games.input import Direction
from skydrop.logging import get_logger
from games.ParachuteDrop.entity import Body, SpriteView
from games.ParachuteDrop.score import ScoreState

log = get_logger('catcher')


class Catcher:
    """
    Player-controlled boat.

    Args:
        body: Position and size
        view: Sprite drawn on the catcher layer
        canvas_width: Width of the play area
        step: Pixels moved per directional input
        catch_zone: Catch band relative to the boat's top edge
        score: Score state; input is ignored once the game is over
    """

    def __init__(
        self,
        body: Body,
        view: SpriteView,
        canvas_width: float,
        step: float,
        catch_zone: CatchZone,
        score: ScoreState,
    ):
        self.body = body
        self.view = view
        self.canvas_width = canvas_width
        self.step = step
        self.catch_zone = catch_zone
        self._score = score

    @property
    def max_x(self) -> float:
        return max(0.0, self.canvas_width - self.body.width)

    def render(self) -> None:
        self.view.draw(self.body)

    def handle_directional_input(self, direction: Direction) -> None:
        """Move one step and redraw; ignored after game over."""
        if not self._score.is_alive():
            return

        self.view.erase(self.body)
        if direction is Direction.LEFT:
            self.body.x -= self.step
        elif direction is Direction.RIGHT:
            self.body.x += self.step
        self.body.x = min(max(self.body.x, 0.0), self.max_x)
        self.render()

        log.trace("Moved %s to x=%.1f", direction.value, self.body.x)
