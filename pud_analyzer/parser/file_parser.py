"""PUD file parser."""
from typing import Any, Optional, Type, Union
import logging
from pathlib import Path

from ..chunks import (
    BaseChunk,
    DescChunk,
    DimChunk,
    EraChunk,
    InvalidFormatError,
    MtxmChunk,
    TruncatedChunkError,
    TypeChunk,
    UnitChunk,
    VerChunk,
)
from ..constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    TAG_DESC,
    TAG_DIM,
    TAG_ERA,
    TAG_ERAX,
    TAG_MTXM,
    TAG_TYPE,
    TAG_UNIT,
    TAG_VER,
    Era,
    SizeClass,
)
from ..cursor import ByteCursor, BufferLike, OutOfBoundsError
from ..map_description import MapDescription
from ..scanner import ChunkInfo, find_chunk

logger = logging.getLogger(__name__)


class PudFileParser:
    """Decoder for PUD map files.

    Holds no state between calls; every decode is a pure function of the
    input bytes and may run concurrently with others.
    """

    def _locate(self, data: bytes, tag: bytes) -> Optional[ChunkInfo]:
        """Find a chunk and check its payload lies inside the buffer."""
        info = find_chunk(data, tag)
        if info is None:
            return None

        if not info.fits(data):
            available = len(data) - info.payload_offset
            logger.error(
                f"Chunk {tag!r} declares {info.length} bytes but only "
                f"{available} remain. Corrupt file?"
            )
            raise TruncatedChunkError(
                tag, f"declares {info.length} bytes, {available} available"
            )
        return info

    def _parse_chunk(self,
                     data: bytes,
                     info: ChunkInfo,
                     chunk_class: Type[BaseChunk]) -> Any:
        cursor = ByteCursor(data, info.payload_offset)
        try:
            return chunk_class(info, cursor).parse()
        except OutOfBoundsError as e:
            raise TruncatedChunkError(info.tag, str(e)) from e

    def _read_optional(self,
                       data: bytes,
                       tag: bytes,
                       chunk_class: Type[BaseChunk],
                       default: Any) -> Any:
        info = self._locate(data, tag)
        if info is None:
            logger.debug(f"No {tag!r} chunk, using default {default!r}")
            return default
        return self._parse_chunk(data, info, chunk_class)

    def decode(self, data: BufferLike) -> MapDescription:
        """Decode a complete PUD buffer.

        Raises:
            InvalidFormatError: TYPE chunk missing or signature mismatch
            TruncatedChunkError: A located chunk runs past the buffer
        """
        data = bytes(data)

        type_info = self._locate(data, TAG_TYPE)
        if type_info is None:
            raise InvalidFormatError("missing TYPE chunk")
        format_tag = self._parse_chunk(data, type_info, TypeChunk)

        version = self._read_optional(data, TAG_VER, VerChunk, 0)
        description = self._read_optional(data, TAG_DESC, DescChunk, "")

        era_info = self._locate(data, TAG_ERAX) or self._locate(data, TAG_ERA)
        if era_info is not None:
            era = self._parse_chunk(data, era_info, EraChunk)
        else:
            era = Era.FOREST

        width, height = self._read_optional(
            data, TAG_DIM, DimChunk, (DEFAULT_WIDTH, DEFAULT_HEIGHT)
        )
        size_class = SizeClass.from_dimensions(width, height)

        tile_grid = self._read_optional(data, TAG_MTXM, MtxmChunk, ())
        if tile_grid and len(tile_grid) != width * height:
            logger.warning(
                f"Tile map holds {len(tile_grid)} tiles, "
                f"expected {width * height} for a {width}x{height} map"
            )

        units = self._read_optional(data, TAG_UNIT, UnitChunk, ())

        return MapDescription(
            format_tag=format_tag,
            version=version,
            description=description,
            era=era,
            width=width,
            height=height,
            size_class=size_class,
            tile_grid=tile_grid,
            units=units,
        )

    def parse_file(self, file_path: Union[str, Path]) -> MapDescription:
        """Read a PUD file from disk and decode it."""
        with open(file_path, 'rb') as f:
            data = f.read()
        logger.debug(f"Read {len(data)} bytes from {file_path}")
        return self.decode(data)


def decode(data: BufferLike) -> MapDescription:
    """Decode a PUD buffer into a MapDescription."""
    return PudFileParser().decode(data)


def decode_file(file_path: Union[str, Path]) -> MapDescription:
    """Decode a PUD file from disk."""
    return PudFileParser().parse_file(file_path)
