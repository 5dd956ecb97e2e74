from typing import Dict

from ..exceptions import InvariantViolation
from ..model.cells import Cell, CellIdentity, Generation

GenerationIndex = Dict[CellIdentity, Cell]


def build_index(generation: Generation) -> GenerationIndex:
    """
    Maps every cell identity of a generation to its cell.

    The index is always built from the input snapshot of a transition, so
    every next state is computed from the prior generation alone.
    """
    index: GenerationIndex = {}
    for cell in generation.cells:
        if cell.id in index:
            raise InvariantViolation("Duplicate coordinate", cell.coordinate)
        index[cell.id] = cell
    return index


def is_alive(index: GenerationIndex, identity: CellIdentity) -> bool:
    # A miss is a neighbour outside the region and counts as dead.
    cell = index.get(identity)
    return cell is not None and cell.alive
