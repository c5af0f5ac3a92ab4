"""
Tests for map preview rendering and image export
"""

import io
import sys

import numpy as np
import pytest
from PIL import Image

from pud_analyzer import Era, MapDescription, PixelBuffer, RenderOptions, Unit, decode, render
from pud_analyzer.render.pixel_buffer import DEFAULT_JPEG_NAME, DEFAULT_PNG_NAME
from pud_analyzer.render.rasterizer import MAX_RENDER_PIXELS
from tests.pud_builders import build_pud

FOREST_GREEN = (0x28, 0x55, 0x0c, 255)
BACKGROUND = (0, 0, 0, 255)
GOLD = (255, 255, 0, 255)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)

GOLD_MINE = Unit(x=2, y=2, unit_type=0x5C, player=0, alteration=10)
HUMAN_START = Unit(x=10, y=10, unit_type=0x5E, player=1, alteration=0)


def make_map(units=(), width=16, height=16, tiles=None, era=Era.FOREST) -> MapDescription:
    if tiles is None:
        tiles = (0x0050,) * (width * height)
    return MapDescription(
        format_tag=0,
        era=era,
        width=width,
        height=height,
        tile_grid=tuple(tiles),
        units=tuple(units),
    )


class TestTileLayer:
    """Output size and tile pass"""

    def test_output_dimensions(self):
        pixels = render(make_map(width=16, height=8))
        assert (pixels.width, pixels.height) == (64, 32)
        assert pixels.pixels.shape == (32, 64, 4)
        assert pixels.pixels.dtype == np.uint8

    def test_custom_tile_size(self):
        pixels = render(make_map(width=5, height=3), RenderOptions(tile_pixel_size=7))
        assert (pixels.width, pixels.height) == (35, 21)

    def test_tiles_fill_blocks(self):
        tiles = [0x0010, 0x0050, 0x0080, 0x0090]
        pixels = render(make_map(width=2, height=2, tiles=tiles), RenderOptions(tile_pixel_size=3))
        assert pixels.pixel(0, 0) == (0x04, 0x38, 0x75, 255)
        assert pixels.pixel(2, 2) == (0x04, 0x38, 0x75, 255)
        assert pixels.pixel(3, 0) == FOREST_GREEN
        assert pixels.pixel(5, 2) == FOREST_GREEN
        assert pixels.pixel(0, 3) == (0x18, 0x18, 0x18, 255)
        assert pixels.pixel(5, 5) == (0x51, 0x51, 0x51, 255)

    def test_era_fallback_color(self):
        pixels = render(make_map(width=2, height=2, tiles=[0x1234] * 4, era=Era.WINTER))
        assert pixels.pixel(4, 4) == (200, 200, 220, 255)

    def test_short_grid_leaves_background(self):
        pixels = render(make_map(width=4, height=4, tiles=[0x0050] * 5), RenderOptions(tile_pixel_size=2))
        assert pixels.pixel(0, 2) == FOREST_GREEN    # cell 4
        assert pixels.pixel(2, 2) == BACKGROUND      # cell 5
        assert pixels.pixel(7, 7) == BACKGROUND

    def test_absent_grid_is_all_background(self):
        pixels = render(make_map(width=3, height=3, tiles=()))
        assert np.all(pixels.pixels == np.array(BACKGROUND, dtype=np.uint8))

    def test_long_grid_is_clipped(self):
        pixels = render(make_map(width=2, height=1, tiles=[0x0050] * 10), RenderOptions(tile_pixel_size=1))
        assert (pixels.width, pixels.height) == (2, 1)

    def test_empty_map(self):
        pixels = render(make_map(width=0, height=0, tiles=()))
        assert (pixels.width, pixels.height) == (0, 0)
        with pytest.raises(ValueError):
            pixels.encode_png()

    def test_oversized_map_rejected(self):
        huge = MapDescription(format_tag=0, width=65535, height=65535)
        with pytest.raises(ValueError, match='65535x65535'):
            render(huge)

    def test_pixel_limit_includes_tile_size(self):
        small = make_map(width=4, height=4)
        with pytest.raises(ValueError):
            render(small, RenderOptions(tile_pixel_size=5000))

    def test_pixel_limit_is_inclusive(self, monkeypatch):
        monkeypatch.setattr(sys.modules['pud_analyzer.render.rasterizer'], 'MAX_RENDER_PIXELS', 256)
        assert render(make_map(width=4, height=4)).width == 16
        with pytest.raises(ValueError):
            render(make_map(width=4, height=5))

    def test_largest_standard_map_within_limit(self):
        assert 128 * 128 * 64 * 64 <= MAX_RENDER_PIXELS


class TestOverlay:
    """Resource and start location markers"""

    def test_resource_square(self):
        pixels = render(make_map([GOLD_MINE]))
        # 12px square centred on (8, 8), spanning 2..13
        assert pixels.pixel(8, 8) == GOLD
        assert pixels.pixel(2, 8) == BLACK
        assert pixels.pixel(13, 8) == BLACK
        assert pixels.pixel(8, 2) == BLACK
        assert pixels.pixel(1, 8) == FOREST_GREEN
        assert pixels.pixel(14, 8) == FOREST_GREEN

    def test_oil_patch_is_black(self):
        oil = Unit(x=4, y=4, unit_type=0x5D, player=3, alteration=0)
        pixels = render(make_map([oil]))
        assert pixels.pixel(16, 16) == BLACK

    def test_start_location_circle(self):
        pixels = render(make_map([HUMAN_START]))
        r, g, b, a = pixels.pixel(40, 40)
        # Blue at 60% over forest green
        assert a == 255
        assert (r, g, b, a) != FOREST_GREEN
        assert b > 120
        assert r < 40
        row = [pixels.pixel(x, 40) for x in range(46, 54)]
        assert WHITE in row
        assert BLACK in row
        assert pixels.pixel(40, 0) == FOREST_GREEN

    def test_minimum_start_radius(self):
        pixels = render(make_map([Unit(5, 5, 0x5F, 0, 0)]), RenderOptions(tile_pixel_size=1))
        # radius max(4, 2.4) = 4 around (5, 5)
        assert pixels.pixel(5, 5) != FOREST_GREEN
        assert pixels.pixel(5, 15) == FOREST_GREEN

    def test_minimum_resource_size(self):
        pixels = render(make_map([Unit(5, 5, 0x5C, 0, 0)]), RenderOptions(tile_pixel_size=1))
        # 3px square: black border around a single gold pixel
        assert pixels.pixel(5, 5) == GOLD
        assert pixels.pixel(4, 5) == BLACK
        assert pixels.pixel(3, 5) == FOREST_GREEN

    def test_ordinary_units_not_drawn(self):
        units = [Unit(x=3, y=3, unit_type=t, player=0, alteration=0) for t in (0x00, 0x02, 0x5B, 0x60)]
        with_units = render(make_map(units))
        without = render(make_map())
        assert np.array_equal(with_units.pixels, without.pixels)

    def test_later_units_draw_over_earlier(self):
        gold = Unit(x=4, y=4, unit_type=0x5C, player=0, alteration=0)
        oil = Unit(x=4, y=4, unit_type=0x5D, player=0, alteration=0)
        assert render(make_map([gold, oil])).pixel(16, 16) == BLACK
        assert render(make_map([oil, gold])).pixel(16, 16) == GOLD

    def test_units_off_map_are_clipped(self):
        far = Unit(x=500, y=500, unit_type=0x5E, player=0, alteration=0)
        pixels = render(make_map([far]))
        assert np.array_equal(pixels.pixels, render(make_map()).pixels)


class TestOverlayOptions:
    """show_resources / show_start_locations"""

    def test_hiding_resources(self):
        units = [GOLD_MINE, HUMAN_START]
        everything = render(make_map(units))
        no_resources = render(make_map(units), RenderOptions(show_resources=False))
        tiles_only = render(make_map(units), RenderOptions(show_resources=False, show_start_locations=False))

        assert everything.pixel(8, 8) == GOLD
        # Resource region falls back to the tile layer
        assert np.array_equal(no_resources.pixels[0:16, 0:16], tiles_only.pixels[0:16, 0:16])
        # Start location overlay is unchanged
        assert np.array_equal(no_resources.pixels[26:56, 26:56], everything.pixels[26:56, 26:56])

    def test_hiding_start_locations(self):
        units = [GOLD_MINE, HUMAN_START]
        everything = render(make_map(units))
        no_starts = render(make_map(units), RenderOptions(show_start_locations=False))
        tiles_only = render(make_map())

        assert np.array_equal(no_starts.pixels[26:56, 26:56], tiles_only.pixels[26:56, 26:56])
        assert np.array_equal(no_starts.pixels[0:16, 0:16], everything.pixels[0:16, 0:16])

    def test_defaults(self):
        options = RenderOptions()
        assert options.tile_pixel_size == 4
        assert options.show_resources
        assert options.show_start_locations

    @pytest.mark.parametrize('size', [0, -1, 2.5, True])
    def test_invalid_tile_size(self, size):
        with pytest.raises(ValueError):
            RenderOptions(tile_pixel_size=size)


class TestDecodedRender:
    """Rendering straight from decoded bytes"""

    def test_render_decoded_map(self):
        data = build_pud(
            dimensions=(8, 8),
            tiles=[0x0070] * 64,
            units=[(1, 1, 0x5C, 0, 0), (6, 6, 0x5F, 2, 0)],
        )
        pixels = render(decode(data), RenderOptions(tile_pixel_size=2))
        assert (pixels.width, pixels.height) == (16, 16)
        assert pixels.pixel(2, 2) == GOLD
        assert pixels.pixel(15, 0) == (0x00, 0x4d, 0x00, 255)


class TestExport:
    """PNG / JPEG encoding"""

    def test_encode_png(self):
        pixels = render(make_map([GOLD_MINE], width=8, height=4))
        encoded = pixels.encode_png()
        assert encoded.startswith(b'\x89PNG\r\n\x1a\n')
        image = Image.open(io.BytesIO(encoded))
        assert image.size == (32, 16)
        assert image.mode == 'RGBA'
        assert np.array_equal(np.asarray(image), pixels.pixels)

    def test_encode_jpeg(self):
        pixels = render(make_map(width=8, height=4))
        encoded = pixels.encode_jpeg()
        assert encoded.startswith(b'\xff\xd8')
        image = Image.open(io.BytesIO(encoded))
        assert image.size == (32, 16)
        assert image.mode == 'RGB'

    def test_save_by_suffix(self, tmp_path):
        pixels = render(make_map(width=4, height=4))
        png_path = pixels.save(tmp_path / 'out' / 'map.png')
        jpg_path = pixels.save(tmp_path / 'map.JPG')
        assert Image.open(png_path).format == 'PNG'
        assert Image.open(jpg_path).format == 'JPEG'

    def test_save_unknown_suffix(self, tmp_path):
        pixels = render(make_map(width=4, height=4))
        with pytest.raises(ValueError):
            pixels.save(tmp_path / 'map.gif')

    def test_pixel_buffer_shape_checked(self):
        with pytest.raises(ValueError):
            PixelBuffer(np.zeros((4, 4, 3), dtype=np.uint8))

    def test_save_into_directory_uses_default_name(self, tmp_path):
        pixels = render(make_map(width=4, height=4))
        png_path = pixels.save(tmp_path)
        jpg_path = pixels.save(tmp_path, image_format='jpeg')
        assert png_path == tmp_path / DEFAULT_PNG_NAME
        assert jpg_path == tmp_path / DEFAULT_JPEG_NAME
        assert Image.open(png_path).format == 'PNG'
        assert Image.open(jpg_path).format == 'JPEG'

    def test_save_into_directory_unknown_format(self, tmp_path):
        pixels = render(make_map(width=4, height=4))
        with pytest.raises(ValueError):
            pixels.save(tmp_path, image_format='gif')
