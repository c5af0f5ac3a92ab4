"""Decoded, immutable description of a PUD map."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .chunks.unit import Unit
from .constants import Era, SizeClass, DEFAULT_WIDTH, DEFAULT_HEIGHT


@dataclass(frozen=True)
class MapDescription:
    """Everything the decoder extracts from one PUD file.

    tile_grid is row-major (index = y * width + x) and may be shorter or
    longer than width * height when the file is inconsistent.
    """
    format_tag: int
    version: int = 0
    description: str = ""
    era: Era = Era.FOREST
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    size_class: SizeClass = SizeClass.CUSTOM
    tile_grid: Tuple[int, ...] = field(default_factory=tuple)
    units: Tuple[Unit, ...] = field(default_factory=tuple)

    @property
    def era_name(self) -> str:
        return self.era.display_name

    @property
    def dimensions(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def format_tag_hex(self) -> str:
        return f"0x{self.format_tag:X}"

    def tile_at(self, x: int, y: int) -> Optional[int]:
        """Tile code at (x, y), or None outside the map or decoded grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        index = y * self.width + x
        if index >= len(self.tile_grid):
            return None
        return self.tile_grid[index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            'format_tag': self.format_tag,
            'version': self.version,
            'description': self.description,
            'era': self.era_name,
            'width': self.width,
            'height': self.height,
            'size_class': self.size_class.name.lower(),
            'tile_grid': list(self.tile_grid),
            'units': [unit.to_dict() for unit in self.units],
        }
