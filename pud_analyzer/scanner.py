"""Chunk location for PUD files.

PUD chunks are not guaranteed to follow one another in a predictable order,
so a chunk is found by an unanchored search for its tag anywhere in the
buffer rather than by walking chunk headers. The first occurrence wins.
"""
from dataclasses import dataclass
from typing import Optional, Union
import logging

from construct import Struct, Bytes, Int32ul

from .constants import CHUNK_HEADER_SIZE

logger = logging.getLogger(__name__)

ChunkHeader = Struct(
    "tag" / Bytes(4),
    "length" / Int32ul,
)


@dataclass(frozen=True)
class ChunkInfo:
    """Location of a chunk found in a buffer"""
    tag: bytes
    offset: int
    payload_offset: int
    length: int

    @property
    def end(self) -> int:
        return self.payload_offset + self.length

    def fits(self, data: bytes) -> bool:
        """Check the declared payload lies inside the buffer."""
        return self.end <= len(data)


def normalize_tag(tag: Union[str, bytes]) -> bytes:
    if isinstance(tag, str):
        tag = tag.encode('ascii')
    if len(tag) != 4:
        raise ValueError(f"Chunk tag must be exactly 4 bytes, got {tag!r}")
    return tag


def find_chunk(data: bytes, tag: Union[str, bytes]) -> Optional[ChunkInfo]:
    """Find the first chunk carrying `tag`.

    Candidate offsets run over 0 <= offset < len(data) - 8.

    Returns:
        ChunkInfo for the first match, or None if the tag does not occur
    """
    tag = normalize_tag(tag)
    limit = len(data) - CHUNK_HEADER_SIZE
    if limit <= 0:
        return None

    # A match must start before the limit; its 4 tag bytes may extend 3 past it
    offset = data.find(tag, 0, limit + 3)
    if offset == -1:
        logger.debug(f"Chunk {tag!r} not found")
        return None

    header = ChunkHeader.parse(data[offset:offset + CHUNK_HEADER_SIZE])
    info = ChunkInfo(
        tag=tag,
        offset=offset,
        payload_offset=offset + CHUNK_HEADER_SIZE,
        length=header.length,
    )
    logger.debug(f"Chunk {tag!r} at offset {offset}, {info.length} bytes")
    return info
