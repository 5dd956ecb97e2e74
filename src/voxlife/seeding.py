from typing import Iterable, Optional

import numpy as np

from .exceptions import InvariantViolation
from .model.cells import Coordinate, Extents, Generation, make_cell
from .model.topology import in_region, region_coordinates

DEFAULT_SEED_RADIUS = 3.0
DEFAULT_SEED_DENSITY = 0.05


def empty_generation(extents: Extents) -> Generation:
    extents = Extents(*extents)
    return Generation(
        extents=extents,
        cells=tuple(make_cell(c) for c in region_coordinates(extents)),
    )


def generation_from_alive(extents: Extents, alive: Iterable[Coordinate]) -> Generation:
    """Deterministic seeding: exactly the given coordinates start alive."""
    extents = Extents(*extents)
    alive_set = set()
    for coord in alive:
        coord = Coordinate(*coord)
        if not in_region(coord, extents):
            raise InvariantViolation("Seed coordinate outside bounding region", coord)
        alive_set.add(coord)
    return Generation(
        extents=extents,
        cells=tuple(make_cell(c, c in alive_set) for c in region_coordinates(extents)),
    )


def random_generation(
    extents: Extents,
    radius: float = DEFAULT_SEED_RADIUS,
    density: float = DEFAULT_SEED_DENSITY,
    rng: Optional[np.random.Generator] = None,
) -> Generation:
    """
    Creates a generation with a sparse random cloud of living cells.

    Only cells closer than `radius` to the origin can start alive, each
    with probability `density`.
    """
    extents = Extents(*extents)
    rng = rng or np.random.default_rng()
    coords = list(region_coordinates(extents))
    points = np.array(coords, dtype=np.float64).reshape(-1, 3)
    # Threshold uniform noise to get the binary state
    noise = rng.random(len(coords))
    alive = (np.linalg.norm(points, axis=1) < radius) & (noise < density)
    return Generation(
        extents=extents,
        cells=tuple(make_cell(c, bool(a)) for c, a in zip(coords, alive)),
    )
