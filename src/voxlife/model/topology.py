import itertools
from typing import Iterator, Tuple

from .cells import Coordinate, Extents

# Every combination of {-1, 0, 1}^3 except the cell itself.
MOORE_OFFSETS: Tuple[Tuple[int, int, int], ...] = tuple(
    offset
    for offset in itertools.product((-1, 0, 1), repeat=3)
    if offset != (0, 0, 0)
)


def neighbors_of(coord: Coordinate) -> Tuple[Coordinate, ...]:
    """
    Returns the 26 Moore neighbours of a coordinate.

    No clamping or wrapping is applied: neighbours of an edge cell may lie
    outside the region, where they are simply never found in an index.
    """
    x, y, z = coord
    return tuple(Coordinate(x + dx, y + dy, z + dz) for dx, dy, dz in MOORE_OFFSETS)


def axis_range(size: int) -> range:
    """Integer positions of an axis of `size` cells centered at the origin."""
    return range(-(size // 2), size - size // 2)


def region_coordinates(extents: Extents) -> Iterator[Coordinate]:
    for x in axis_range(extents[0]):
        for y in axis_range(extents[1]):
            for z in axis_range(extents[2]):
                yield Coordinate(x, y, z)


def in_region(coord: Coordinate, extents: Extents) -> bool:
    return all(c in axis_range(size) for c, size in zip(coord, extents))
