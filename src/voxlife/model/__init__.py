from .cells import (
    Cell,
    CellIdentity,
    Coordinate,
    Extents,
    Generation,
    cell_id,
    coordinate,
    make_cell,
    parse_cell_id,
)
from .diff import GenerationDiff, diff_generations
from .topology import MOORE_OFFSETS, in_region, neighbors_of, region_coordinates
from .validation import validate_generation

__all__ = [
    "Cell",
    "CellIdentity",
    "Coordinate",
    "Extents",
    "Generation",
    "GenerationDiff",
    "MOORE_OFFSETS",
    "cell_id",
    "coordinate",
    "diff_generations",
    "in_region",
    "make_cell",
    "neighbors_of",
    "parse_cell_id",
    "region_coordinates",
    "validate_generation",
]
