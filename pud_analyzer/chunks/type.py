# pud_analyzer/chunks/type.py
import logging

from .base import BaseChunk, InvalidFormatError
from ..constants import PUD_SIGNATURE

logger = logging.getLogger(__name__)


class TypeChunk(BaseChunk):
    """TYPE (File type) chunk parser.

    Starts with the 10 byte signature "WAR2 MAP\\0\\0", followed by a u32
    format tag. Both are read at fixed offsets regardless of the declared
    chunk length.

    The tag sits at payload offset 10, directly after the signature. Some
    readers skip a 12 byte block and take it from offset 12 instead; those
    values will not match the tag reported here.
    """

    def parse(self) -> int:
        """Verify the signature and return the format tag."""
        signature = self.cursor.read_bytes(len(PUD_SIGNATURE))
        if signature != PUD_SIGNATURE:
            logger.debug(f"Unexpected TYPE signature: {signature.hex(' ')}")
            raise InvalidFormatError("bad signature")

        return self.cursor.read_u32le()
