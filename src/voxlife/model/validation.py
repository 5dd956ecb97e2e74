from typing import Set

from ..exceptions import InvariantViolation
from .cells import Coordinate, Generation, cell_id
from .topology import in_region


def validate_generation(generation: Generation) -> None:
    """
    Checks that every coordinate of the bounding region appears in exactly
    one cell of the generation.

    Raises:
        InvariantViolation: on a duplicated, out-of-region or missing
            coordinate, or a cell whose id does not match its coordinate.
    """
    extents = generation.extents
    if any(size <= 0 for size in extents):
        raise InvariantViolation(f"Extents must be positive, got {tuple(extents)}")

    seen: Set[Coordinate] = set()
    for cell in generation.cells:
        coord = Coordinate(*cell.coordinate)
        if cell.id != cell_id(coord):
            raise InvariantViolation(f"Cell id {cell.id!r} does not match its coordinate", coord)
        if coord in seen:
            raise InvariantViolation("Duplicate coordinate", coord)
        if not in_region(coord, extents):
            raise InvariantViolation("Coordinate outside bounding region", coord)
        seen.add(coord)

    # With no duplicates and nothing outside, a short count means a hole.
    if len(seen) != extents.volume:
        raise InvariantViolation(
            f"Generation covers {len(seen)} of {extents.volume} coordinates "
            f"for extents {tuple(extents)}"
        )
