"""Color and classification rules for map previews.

All tables are immutable module constants, safe to share between threads.
"""
from types import MappingProxyType
from typing import Tuple

from ..constants import Era

Color = Tuple[int, int, int, int]

GOLD_MINE = 0x5C
OIL_PATCH = 0x5D
HUMAN_START = 0x5E
ORC_START = 0x5F

RESOURCE_NODE_TYPES = frozenset({GOLD_MINE, OIL_PATCH})
START_LOCATION_TYPES = frozenset({HUMAN_START, ORC_START})

TILE_BASE_MASK = 0xFFF0

# Keyed by base tile, shared by every era
TILE_COLORS = MappingProxyType({
    0x0010: (0x04, 0x38, 0x75, 255),  # Light water
    0x0020: (0x04, 0x34, 0x71, 255),  # Dark water
    0x0030: (0x6d, 0x41, 0x00, 255),  # Light coast
    0x0040: (0x61, 0x38, 0x00, 255),  # Dark coast
    0x0050: (0x28, 0x55, 0x0c, 255),  # Light ground
    0x0060: (0x24, 0x49, 0x04, 255),  # Dark ground
    0x0070: (0x00, 0x4d, 0x00, 255),  # Forest
    0x0080: (0x18, 0x18, 0x18, 255),  # Mountains
    0x0090: (0x51, 0x51, 0x51, 255),  # Human wall
})

ERA_FALLBACK_COLORS = MappingProxyType({
    Era.FOREST: (60, 120, 40, 255),
    Era.WINTER: (200, 200, 220, 255),
    Era.WASTELAND: (150, 100, 60, 255),
    Era.SWAMP: (80, 120, 60, 255),
})

PLAYER_COLORS: Tuple[Color, ...] = (
    (255, 0, 0, 255),      # Red
    (0, 0, 255, 255),      # Blue
    (0, 255, 0, 255),      # Green
    (255, 255, 0, 255),    # Yellow
    (255, 165, 0, 255),    # Orange
    (128, 0, 128, 255),    # Purple
    (255, 255, 255, 255),  # White
    (0, 0, 0, 255),        # Black
)

GOLD_MINE_COLOR: Color = (255, 255, 0, 255)
OIL_PATCH_COLOR: Color = (0, 0, 0, 255)


def tile_color(era: int, tile_id: int) -> Color:
    """Color of a tile code; the shared table wins over the era fallback."""
    color = TILE_COLORS.get(tile_id & TILE_BASE_MASK)
    if color is not None:
        return color
    return ERA_FALLBACK_COLORS.get(era, ERA_FALLBACK_COLORS[Era.FOREST])


def player_color(player: int) -> Color:
    return PLAYER_COLORS[player % len(PLAYER_COLORS)]


def unit_color(unit_type: int, player: int) -> Color:
    """Resource nodes have fixed colors, everything else uses the owner's."""
    if unit_type == GOLD_MINE:
        return GOLD_MINE_COLOR
    if unit_type == OIL_PATCH:
        return OIL_PATCH_COLOR
    return player_color(player)


def is_resource_node(unit_type: int) -> bool:
    return unit_type in RESOURCE_NODE_TYPES


def is_start_location(unit_type: int) -> bool:
    return unit_type in START_LOCATION_TYPES
