"""Summary statistics for a decoded map."""
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .map_description import MapDescription
from .render.colors import GOLD_MINE, OIL_PATCH, is_start_location


@dataclass(frozen=True)
class MapStats:
    description: str
    era: str
    dimensions: str
    size_class: str
    version: int
    total_units: int
    gold_mines: int
    oil_patches: int
    start_locations: int
    players: int
    tag: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize(map_description: MapDescription) -> MapStats:
    """Count resource nodes and start locations and format the header fields."""
    gold_mines = 0
    oil_patches = 0
    start_locations = 0
    players = set()

    for unit in map_description.units:
        if unit.unit_type == GOLD_MINE:
            gold_mines += 1
        elif unit.unit_type == OIL_PATCH:
            oil_patches += 1
        elif is_start_location(unit.unit_type):
            start_locations += 1
            players.add(unit.player)

    return MapStats(
        description=map_description.description or 'No description',
        era=map_description.era_name,
        dimensions=map_description.dimensions,
        size_class=map_description.size_class.name.capitalize(),
        version=map_description.version,
        total_units=len(map_description.units),
        gold_mines=gold_mines,
        oil_patches=oil_patches,
        start_locations=start_locations,
        players=len(players),
        tag=map_description.format_tag_hex,
    )
