"""
Unified models library for Parachute Drop.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Size, BoundingBox)
- Game: Catch zone geometry and score snapshots

Usage:
    >>> from models import BoundingBox, CatchZone
    >>> from models.primitives import Size
"""

from .primitives import (
    Point2D,
    Size,
    BoundingBox,
)

from .game import (
    CatchZone,
    ScoreSnapshot,
)

__all__ = [
    # Primitives
    "Point2D",
    "Size",
    "BoundingBox",
    # Game
    "CatchZone",
    "ScoreSnapshot",
]
