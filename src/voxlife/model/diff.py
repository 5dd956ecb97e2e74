from dataclasses import dataclass, field
from typing import FrozenSet

from .cells import CellIdentity, Generation


@dataclass(frozen=True)
class GenerationDiff:
    born: FrozenSet[CellIdentity] = field(default_factory=frozenset)
    died: FrozenSet[CellIdentity] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.born and not self.died


def diff_generations(previous: Generation, current: Generation) -> GenerationDiff:
    """
    Computes which cells became alive and which died between two generations.

    A view only needs to add an object for every `born` id and remove one
    for every `died` id.
    """
    before = {c.id for c in previous.cells if c.alive}
    after = {c.id for c in current.cells if c.alive}
    return GenerationDiff(born=frozenset(after - before), died=frozenset(before - after))
