import numpy as np

from ..engine.rules import DEFAULT_RULE, LifeRule
from ..model.cells import Extents, Generation, make_cell
from ..model.topology import MOORE_OFFSETS, axis_range, region_coordinates


def to_array(generation: Generation) -> np.ndarray:
    """Dense (x, y, z) array of a generation, 1 for alive cells."""
    extents = generation.extents
    grid = np.zeros(tuple(extents), dtype=np.int8)
    origin = [axis_range(n).start for n in extents]
    for cell in generation.cells:
        if cell.alive:
            x, y, z = (c - o for c, o in zip(cell.coordinate, origin))
            grid[x, y, z] = 1
    return grid


def from_array(grid: np.ndarray, extents: Extents) -> Generation:
    extents = Extents(*extents)
    if grid.shape != tuple(extents):
        raise ValueError(f"Shape mismatch: expected {tuple(extents)}, got {grid.shape}")
    flat = grid.reshape(-1)
    return Generation(
        extents=extents,
        cells=tuple(
            make_cell(c, bool(flat[i])) for i, c in enumerate(region_coordinates(extents))
        ),
    )


class GoldenLife3D:
    """
    A dense, synchronous implementation of the same rule using NumPy.
    Serves as the source of truth when validating the sparse engine.
    """

    def __init__(self, extents: Extents, rule: LifeRule = DEFAULT_RULE):
        self.extents = Extents(*extents)
        self.rule = rule
        self.grid = np.zeros(tuple(self.extents), dtype=np.int8)

    def seed(self, initial_state: np.ndarray):
        """Sets the initial state of the grid."""
        if initial_state.shape != tuple(self.extents):
            raise ValueError(
                f"Shape mismatch: expected {tuple(self.extents)}, got {initial_state.shape}"
            )
        self.grid = initial_state.astype(np.int8)

    def neighbor_counts(self) -> np.ndarray:
        # Zero padding gives the open (non-wrapping) boundary.
        padded = np.pad(self.grid, 1, mode="constant")
        nx, ny, nz = self.grid.shape
        counts = np.zeros(self.grid.shape, dtype=np.int16)
        for dx, dy, dz in MOORE_OFFSETS:
            counts += padded[1 + dx : 1 + dx + nx, 1 + dy : 1 + dy + ny, 1 + dz : 1 + dz + nz]
        return counts

    def step(self) -> np.ndarray:
        """
        Advances the simulation by one generation.
        Returns the new state.
        """
        neighbors = self.neighbor_counts()

        alive = self.grid == 1
        survive = (neighbors >= self.rule.lower) & (neighbors <= self.rule.upper)
        born = neighbors == self.rule.upper

        next_grid = np.zeros_like(self.grid)
        next_grid[alive & survive] = 1
        next_grid[~alive & born] = 1

        self.grid = next_grid
        return self.grid.copy()

    def get_state(self) -> np.ndarray:
        return self.grid.copy()


def count_mismatches(generation: Generation, expected: np.ndarray) -> int:
    return int(np.sum(to_array(generation) != expected))
