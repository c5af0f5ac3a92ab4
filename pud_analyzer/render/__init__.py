# pud_analyzer/render/__init__.py
"""Map preview rendering."""
from .colors import (
    tile_color,
    player_color,
    unit_color,
    is_resource_node,
    is_start_location,
)
from .options import RenderOptions
from .pixel_buffer import PixelBuffer, DEFAULT_PNG_NAME, DEFAULT_JPEG_NAME
from .rasterizer import render

__all__ = [
    'tile_color',
    'player_color',
    'unit_color',
    'is_resource_node',
    'is_start_location',
    'RenderOptions',
    'PixelBuffer',
    'DEFAULT_PNG_NAME',
    'DEFAULT_JPEG_NAME',
    'render',
]
