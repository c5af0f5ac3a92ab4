# pud_analyzer/chunks/unit/entry.py
from dataclasses import dataclass, asdict

from construct import Struct, Int16ul, Int8ul

UnitRecord = Struct(
    "x" / Int16ul,
    "y" / Int16ul,
    "unit_type" / Int8ul,
    "player" / Int8ul,
    "alteration" / Int16ul,
)


@dataclass(frozen=True)
class Unit:
    """Single unit placement from the UNIT chunk."""
    x: int           # Tile column
    y: int           # Tile row
    unit_type: int   # Unit type code
    player: int      # Owning player index
    alteration: int  # Resource amount / 2500 for mines and patches, else AI flag

    SIZE = 8

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Unit':
        """Parse a single 8 byte unit record."""
        record = UnitRecord.parse(data)
        return cls(
            x=record.x,
            y=record.y,
            unit_type=record.unit_type,
            player=record.player,
            alteration=record.alteration,
        )

    def to_dict(self) -> dict:
        return asdict(self)
