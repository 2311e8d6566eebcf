"""
Rendering capabilities: layered surfaces and display acquisition.
"""

from skydrop.graphics.layers import RenderLayer, LayerStack, covering_rect
from skydrop.graphics.display import RenderSurfaceUnavailable, open_display

__all__ = [
    'RenderLayer',
    'LayerStack',
    'covering_rect',
    'RenderSurfaceUnavailable',
    'open_display',
]
