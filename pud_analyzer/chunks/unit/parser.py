# pud_analyzer/chunks/unit/parser.py
from typing import Tuple
import logging

from ..base import BaseChunk
from .entry import Unit

logger = logging.getLogger(__name__)


class UnitChunk(BaseChunk):
    """UNIT (Unit placement) chunk parser.

    Each entry is 8 bytes, kept in file order.
    """

    def parse(self) -> Tuple[Unit, ...]:
        count = self._entry_count(Unit.SIZE)
        units = tuple(
            Unit.from_bytes(self.cursor.read_bytes(Unit.SIZE))
            for _ in range(count)
        )
        logger.debug(f"Parsed {len(units)} unit placements")
        return units
