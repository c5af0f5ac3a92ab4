# pud_analyzer/render/options.py
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Per-call settings for the rasterizer."""
    tile_pixel_size: int = 4
    show_resources: bool = True
    show_start_locations: bool = True

    def __post_init__(self):
        if isinstance(self.tile_pixel_size, bool) or not isinstance(self.tile_pixel_size, int):
            raise ValueError(f"tile_pixel_size must be an integer, got {self.tile_pixel_size!r}")
        if self.tile_pixel_size <= 0:
            raise ValueError(f"tile_pixel_size must be positive, got {self.tile_pixel_size}")
