"""Base chunk parser."""
from typing import Any, Optional
import logging

from ..cursor import ByteCursor
from ..scanner import ChunkInfo

logger = logging.getLogger(__name__)


class DecodeError(Exception):
    """Raised when a PUD buffer cannot be decoded."""
    pass


class InvalidFormatError(DecodeError):
    """Raised when the buffer is not a recognized map file."""
    pass


class TruncatedChunkError(DecodeError):
    """Raised when a located chunk runs past the end of the buffer."""

    def __init__(self, tag: bytes, detail: Optional[str] = None):
        name = tag.decode('ascii', 'replace')
        message = f"Truncated {name!r} chunk"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.tag = tag


class BaseChunk:
    """Base class for chunk parsers."""

    def __init__(self, info: ChunkInfo, cursor: ByteCursor):
        """Initialize chunk parser.

        Args:
            info: Location of the chunk in the buffer
            cursor: Cursor positioned at the start of the payload
        """
        self.info = info
        self.cursor = cursor

    @property
    def length(self) -> int:
        return self.info.length

    def parse(self) -> Any:
        """Parse chunk payload.

        Raises:
            OutOfBoundsError: If the payload runs past the buffer
        """
        raise NotImplementedError("Subclasses must implement parse()")

    def _entry_count(self, entry_size: int) -> int:
        """Number of whole entries in the payload.

        A partial trailing entry is dropped with a warning.
        """
        count, leftover = divmod(self.length, entry_size)
        if leftover:
            logger.warning(
                f"{self.info.tag.decode('ascii', 'replace')} chunk size {self.length} "
                f"not divisible by entry size {entry_size}. "
                f"Ignoring {leftover} trailing bytes."
            )
        return count
