"""
Game data models shared by the scoring and collision code.
"""

from pydantic import BaseModel, Field, ConfigDict


class CatchZone(BaseModel):
    """Vertical catch band of a catcher, relative to its top edge.

    The band is tied to the catcher's artwork: a falling entity only counts
    as caught while its box overlaps the strip
    ``[top + offset, top + offset + band]``.

    Attributes:
        offset: Distance from the catcher's top edge to the start of the band
        band: Height of the band in pixels
    """
    offset: float = Field(..., ge=0)
    band: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class ScoreSnapshot(BaseModel):
    """Validated, immutable copy of the score/lives counters.

    Attributes:
        score: Entities caught so far
        lives: Remaining lives
    """
    score: int = Field(default=0, ge=0)
    lives: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def alive(self) -> bool:
        """True while at least one life remains."""
        return self.lives > 0
