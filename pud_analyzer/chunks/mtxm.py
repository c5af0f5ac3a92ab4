# pud_analyzer/chunks/mtxm.py
from typing import Tuple

from .base import BaseChunk


class MtxmChunk(BaseChunk):
    """MTXM (Tile map) chunk parser.

    One u16 tile code per map cell, row-major. Each entry is 2 bytes.
    """

    ENTRY_SIZE = 2

    def parse(self) -> Tuple[int, ...]:
        count = self._entry_count(self.ENTRY_SIZE)
        return self.cursor.read_u16le_array(count)
