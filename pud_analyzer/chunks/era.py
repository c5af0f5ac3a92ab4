# pud_analyzer/chunks/era.py
import logging

from .base import BaseChunk
from ..constants import Era

logger = logging.getLogger(__name__)


class EraChunk(BaseChunk):
    """ERA / ERAX (Terrain era) chunk parser.

    Both chunks share one layout: a single u16 era value.
    """

    def parse(self) -> Era:
        value = self.cursor.read_u16le()
        era = Era.from_value(value)
        if era != value:
            logger.debug(f"Unknown era value {value}, using {era.display_name}")
        return era
