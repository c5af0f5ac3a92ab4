# pud_analyzer/chunks/ver.py
from .base import BaseChunk


class VerChunk(BaseChunk):
    """VER (Version) chunk parser."""

    def parse(self) -> int:
        return self.cursor.read_u16le()
