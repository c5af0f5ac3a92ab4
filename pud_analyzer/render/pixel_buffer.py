"""RGBA pixel buffer produced by the rasterizer, with image encoding."""
import io
import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_PNG_NAME = 'warcraft2_map.png'
DEFAULT_JPEG_NAME = 'warcraft2_map.jpg'
DEFAULT_JPEG_QUALITY = 80

_SUFFIX_FORMATS = {
    '.png': 'PNG',
    '.jpg': 'JPEG',
    '.jpeg': 'JPEG',
}

_DEFAULT_NAMES = {
    'PNG': DEFAULT_PNG_NAME,
    'JPEG': DEFAULT_JPEG_NAME,
}


class PixelBuffer:
    """height x width x 4 grid of RGBA bytes."""

    def __init__(self, pixels: np.ndarray):
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (height, width, 4) array, got {pixels.shape}")
        self.pixels = np.ascontiguousarray(pixels, dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def to_image(self) -> Image.Image:
        if self.pixels.size == 0:
            return Image.new('RGBA', (self.width, self.height))
        return Image.fromarray(self.pixels)

    def _check_encodable(self) -> None:
        if self.pixels.size == 0:
            raise ValueError(f"Cannot encode an empty {self.width}x{self.height} image")

    def encode_png(self) -> bytes:
        self._check_encodable()
        buffer = io.BytesIO()
        self.to_image().save(buffer, format='PNG')
        return buffer.getvalue()

    def encode_jpeg(self, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
        """Encode as JPEG; the alpha channel is dropped."""
        self._check_encodable()
        buffer = io.BytesIO()
        self.to_image().convert('RGB').save(buffer, format='JPEG', quality=quality)
        return buffer.getvalue()

    def save(self,
             path: Union[str, Path],
             quality: int = DEFAULT_JPEG_QUALITY,
             image_format: str = 'PNG') -> Path:
        """Write the buffer to disk.

        Args:
            path: Target file, format chosen from its suffix. An existing
                directory gets the default export name for `image_format`.
            quality: JPEG quality
            image_format: 'PNG' or 'JPEG', only used for directories

        Returns:
            Path written
        """
        path = Path(path)
        if path.is_dir():
            default_name = _DEFAULT_NAMES.get(image_format.upper())
            if default_name is None:
                raise ValueError(f"Unsupported image format: {image_format}")
            path = path / default_name

        file_format = _SUFFIX_FORMATS.get(path.suffix.lower())
        if file_format is None:
            raise ValueError(f"Unsupported image extension: {path.suffix}")

        encoded = self.encode_png() if file_format == 'PNG' else self.encode_jpeg(quality)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encoded)
        logger.info(f"Wrote {self.width}x{self.height} {file_format} to {path}")
        return path
