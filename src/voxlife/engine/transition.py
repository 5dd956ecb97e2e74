from dataclasses import replace

from ..model.cells import Cell, Generation, cell_id
from ..model.topology import neighbors_of
from .index import GenerationIndex, build_index, is_alive
from .rules import DEFAULT_RULE, LifeRule, should_live


def count_alive_neighbors(cell: Cell, index: GenerationIndex) -> int:
    return sum(
        1 for neighbor in neighbors_of(cell.coordinate) if is_alive(index, cell_id(neighbor))
    )


def next_cell(cell: Cell, index: GenerationIndex, rule: LifeRule = DEFAULT_RULE) -> Cell:
    alive_neighbors = count_alive_neighbors(cell, index)
    return replace(
        cell,
        alive=should_live(cell.alive, alive_neighbors, rule),
        alive_neighbor_count=alive_neighbors,
    )


def transition(generation: Generation, rule: LifeRule = DEFAULT_RULE) -> Generation:
    """
    Computes the next generation.

    Every cell is evaluated against the same index of the input generation,
    so the result does not depend on the order of the cells. The input is
    left untouched; the returned generation keeps the input's cell order.

    Raises:
        InvariantViolation: if the input holds the same coordinate twice.
    """
    # 1. Snapshot
    index = build_index(generation)

    # 2. Evaluate
    return generation.with_cells(next_cell(cell, index, rule) for cell in generation.cells)
