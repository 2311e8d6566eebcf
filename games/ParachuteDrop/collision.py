"""
Bounding-box collision test for falling entities against the catcher.
"""
from models import BoundingBox


def collides(a: BoundingBox, b: BoundingBox, vertical_offset: float, vertical_band: float) -> bool:
    """
    Check whether box ``a`` touches the catch band of box ``b``.

    Horizontally this is a plain interval overlap. Vertically ``a`` only
    counts when it overlaps the thin strip
    ``[b.y + vertical_offset, b.y + vertical_offset + vertical_band]``,
    because the catcher's effective catch zone is a narrow line on its
    artwork rather than its whole box.

    Args:
        a: Falling entity box
        b: Catcher box
        vertical_offset: Distance from b's top edge to the catch band
        vertical_band: Height of the catch band

    Returns:
        True if the boxes collide

    Examples:
        >>> entity = BoundingBox(x=185, y=180, width=30, height=30)
        >>> boat = BoundingBox(x=180, y=110, width=65, height=20)
        >>> collides(entity, boat, 70, 3)
        True
    """
    band_top = b.y + vertical_offset
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < band_top + vertical_band
        and a.y + a.height > band_top
    )
