"""
Shared primitive data types for the game engine.

This module provides the basic geometric types used throughout the
codebase: points, entity sizes and bounding boxes.
"""

from pydantic import BaseModel, Field, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point for positions and offsets.

    Coordinates can be positive, negative, or zero; entities routinely sit
    partly off-screen (the spawner sweeps past the left edge before wrapping).

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.x
        100.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Size(BaseModel):
    """Immutable entity dimensions, taken from the asset it displays.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> Size(width=30, height=30).as_tuple
        (30.0, 30.0)
    """
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def as_tuple(self) -> tuple:
        """Return (width, height) for pygame calls."""
        return (self.width, self.height)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Size({self.width:g}x{self.height:g})"


class BoundingBox(BaseModel):
    """Immutable axis-aligned box defined by top-left corner and dimensions.

    Bounding boxes are a derived view of an entity's position plus its size.
    They are built on demand for collision queries and never stored, so they
    cannot drift out of sync with the entity that produced them.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of the box (must be positive)
        height: Height of the box (must be positive)

    Examples:
        >>> box = BoundingBox(x=100.0, y=100.0, width=50.0, height=20.0)
        >>> box.right
        150.0
    """
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    @computed_field
    @property
    def center(self) -> Point2D:
        """Calculate the center point of the box."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"BoundingBox(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
