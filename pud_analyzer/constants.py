# pud_analyzer/constants.py
from enum import IntEnum

# Chunk tags are always 4 bytes, space padded
TAG_TYPE = b'TYPE'
TAG_VER = b'VER '
TAG_DESC = b'DESC'
TAG_ERA = b'ERA '
TAG_ERAX = b'ERAX'
TAG_DIM = b'DIM '
TAG_MTXM = b'MTXM'
TAG_UNIT = b'UNIT'

CHUNK_HEADER_SIZE = 8

PUD_SIGNATURE = b'WAR2 MAP\x00\x00'
DESCRIPTION_SIZE = 32

# Legacy dimensions when no DIM chunk is present
DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 32


class Era(IntEnum):
    """Terrain theme of a map."""
    FOREST = 0
    WINTER = 1
    WASTELAND = 2
    SWAMP = 3

    @classmethod
    def from_value(cls, value: int) -> 'Era':
        """Map a raw ERA/ERAX value, anything unknown is Forest."""
        if value in (cls.WINTER, cls.WASTELAND, cls.SWAMP):
            return cls(value)
        return cls.FOREST

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class SizeClass(IntEnum):
    """Standard map sizes, everything else is CUSTOM."""
    CUSTOM = 0
    SMALL = 1    # 64x64
    MEDIUM = 2   # 96x96
    LARGE = 3    # 128x128

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> 'SizeClass':
        return _SIZE_CLASSES.get((width, height), cls.CUSTOM)


_SIZE_CLASSES = {
    (64, 64): SizeClass.SMALL,
    (96, 96): SizeClass.MEDIUM,
    (128, 128): SizeClass.LARGE,
}
