# pud_analyzer/chunks/dim.py
from typing import Tuple

from .base import BaseChunk


class DimChunk(BaseChunk):
    """DIM (Map dimensions) chunk parser.

    Two u16 values: width then height, in tiles.
    """

    def parse(self) -> Tuple[int, int]:
        width = self.cursor.read_u16le()
        height = self.cursor.read_u16le()
        return width, height
