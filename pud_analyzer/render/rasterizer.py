"""Rasterize a decoded map into an RGBA pixel buffer.

The tile layer is built with numpy, one solid block per map cell. Resource
nodes and start locations are then drawn over it with Pillow in the order
they appear in the file, so later units cover earlier ones.
"""
from typing import Optional, Sequence
import logging

import numpy as np
from PIL import Image, ImageDraw

from ..map_description import MapDescription
from .colors import Color, tile_color, unit_color, is_resource_node, is_start_location
from .options import RenderOptions
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

BACKGROUND_COLOR: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

# Marker size in tiles
UNIT_MARKER_TILES = 3
START_LOCATION_RADIUS_SCALE = 0.8
START_LOCATION_MIN_RADIUS = 4
START_LOCATION_ALPHA = 153  # 0.6 opacity

# 8192 x 8192, a 128x128 map at 64 pixels per tile
MAX_RENDER_PIXELS = 1 << 26


def _tile_layer(map_description: MapDescription, tile_size: int) -> np.ndarray:
    """Build the (height, width, 3) tile layer."""
    width, height = map_description.width, map_description.height
    cells = np.empty((width * height, 3), dtype=np.uint8)
    cells[:] = BACKGROUND_COLOR[:3]

    grid: Sequence[int] = map_description.tile_grid
    count = min(len(grid), width * height)
    if count:
        codes = np.asarray(grid[:count], dtype=np.uint32)
        unique_codes, inverse = np.unique(codes, return_inverse=True)
        palette = np.array(
            [tile_color(map_description.era, int(code))[:3] for code in unique_codes],
            dtype=np.uint8,
        )
        cells[:count] = palette[inverse.reshape(-1)]

    if count < width * height:
        logger.debug(f"{width * height - count} cells have no tile data")

    layer = cells.reshape(height, width, 3)
    return np.repeat(np.repeat(layer, tile_size, axis=0), tile_size, axis=1)


def _draw_start_location(draw: ImageDraw.ImageDraw,
                         cx: int,
                         cy: int,
                         tile_size: int,
                         color: Color) -> None:
    radius = max(START_LOCATION_MIN_RADIUS,
                 tile_size * UNIT_MARKER_TILES * START_LOCATION_RADIUS_SCALE)
    fill = (color[0], color[1], color[2], START_LOCATION_ALPHA)

    draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), fill=fill)
    # 2px white ring straddling the edge, then a 1px black ring on its inner half
    outer = radius + 1
    draw.ellipse((cx - outer, cy - outer, cx + outer, cy + outer), outline=WHITE, width=2)
    draw.ellipse((cx - radius, cy - radius, cx + radius, cy + radius), outline=BLACK, width=1)


def _draw_resource(draw: ImageDraw.ImageDraw,
                   cx: int,
                   cy: int,
                   tile_size: int,
                   color: Color) -> None:
    size = max(1, tile_size * UNIT_MARKER_TILES)
    x0 = cx - size // 2
    y0 = cy - size // 2
    draw.rectangle((x0, y0, x0 + size - 1, y0 + size - 1), fill=color, outline=BLACK, width=1)


def render(map_description: MapDescription,
           options: Optional[RenderOptions] = None) -> PixelBuffer:
    """Render a map preview.

    Args:
        map_description: Decoded map
        options: Render settings, defaults to RenderOptions()

    Returns:
        PixelBuffer of (width * tile_pixel_size) x (height * tile_pixel_size)

    Raises:
        ValueError: If the output would exceed MAX_RENDER_PIXELS
    """
    options = options or RenderOptions()
    tile_size = options.tile_pixel_size

    pixel_count = map_description.width * map_description.height * tile_size * tile_size
    if pixel_count > MAX_RENDER_PIXELS:
        raise ValueError(
            f"Map {map_description.dimensions} at {tile_size}px per tile needs "
            f"{pixel_count} pixels, more than the {MAX_RENDER_PIXELS} limit"
        )

    layer = _tile_layer(map_description, tile_size)
    if layer.size == 0:
        logger.warning(f"Map {map_description.dimensions} has no area to render")
        return PixelBuffer(np.zeros(layer.shape[:2] + (4,), dtype=np.uint8))

    canvas = Image.fromarray(layer)
    # RGBA drawing on an RGB image blends translucent fills
    draw = ImageDraw.Draw(canvas, 'RGBA')

    drawn = 0
    for unit in map_description.units:
        resource = is_resource_node(unit.unit_type)
        start = is_start_location(unit.unit_type)
        if resource and not options.show_resources:
            continue
        if start and not options.show_start_locations:
            continue
        if not (resource or start):
            continue

        cx = unit.x * tile_size
        cy = unit.y * tile_size
        color = unit_color(unit.unit_type, unit.player)
        if start:
            _draw_start_location(draw, cx, cy, tile_size, color)
        else:
            _draw_resource(draw, cx, cy, tile_size, color)
        drawn += 1

    logger.debug(
        f"Rendered {canvas.width}x{canvas.height} preview with {drawn} markers"
    )
    return PixelBuffer(np.array(canvas.convert('RGBA')))
