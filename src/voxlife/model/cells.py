import re
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional, Tuple

CellIdentity = str

_ID_PATTERN = re.compile(r"^\((-?\d+)\)-\((-?\d+)\)-\((-?\d+)\)$")


class Coordinate(NamedTuple):
    x: int
    y: int
    z: int


class Extents(NamedTuple):
    """Size of the simulated cuboid along each axis."""

    x: int
    y: int
    z: int

    @property
    def volume(self) -> int:
        return self.x * self.y * self.z


def coordinate(x: int, y: int, z: int) -> Coordinate:
    return Coordinate(int(x), int(y), int(z))


def cell_id(coord: Coordinate) -> CellIdentity:
    """
    Canonical identity of a coordinate, e.g. "(-1)-(0)-(2)".

    Each component is wrapped in parentheses so that negative values
    never collide with the separator.
    """
    return f"({coord[0]})-({coord[1]})-({coord[2]})"


def parse_cell_id(identity: CellIdentity) -> Coordinate:
    match = _ID_PATTERN.match(identity)
    if match is None:
        raise ValueError(f"Not a cell identity: {identity!r}")
    return Coordinate(*(int(part) for part in match.groups()))


@dataclass(frozen=True)
class Cell:
    id: CellIdentity
    coordinate: Coordinate
    alive: bool = False
    # Diagnostic only, recomputed on every transition.
    alive_neighbor_count: Optional[int] = None


def make_cell(coord: Coordinate, alive: bool = False) -> Cell:
    coord = Coordinate(*coord)
    return Cell(id=cell_id(coord), coordinate=coord, alive=alive)


@dataclass(frozen=True)
class Generation:
    """
    One complete snapshot of the lattice.

    Generations are values: a transition always produces a new instance
    and never touches the cells of the one it was computed from.
    """

    extents: Extents
    cells: Tuple[Cell, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    @property
    def alive_cells(self) -> Tuple[Cell, ...]:
        return tuple(c for c in self.cells if c.alive)

    @property
    def alive_count(self) -> int:
        return sum(1 for c in self.cells if c.alive)

    @property
    def is_extinct(self) -> bool:
        return not any(c.alive for c in self.cells)

    def with_cells(self, cells: Iterable[Cell]) -> "Generation":
        return Generation(extents=self.extents, cells=tuple(cells))
