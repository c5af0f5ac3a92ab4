# pud_analyzer/chunks/desc.py
from .base import BaseChunk
from ..constants import DESCRIPTION_SIZE


class DescChunk(BaseChunk):
    """DESC (Description) chunk parser.

    A fixed 32 byte, NUL padded text field.
    """

    def parse(self) -> str:
        return self.cursor.read_fixed_string(DESCRIPTION_SIZE)
