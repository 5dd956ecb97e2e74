import numpy as np
import pytest
from voxlife.engine.rules import LifeRule
from voxlife.model.cells import Extents
from voxlife.seeding import generation_from_alive, random_generation
from voxlife.truth.golden import GoldenLife3D, count_mismatches, from_array, to_array


def test_array_conversion_round_trip():
    generation = random_generation(
        Extents(4, 5, 6), radius=10.0, density=0.5, rng=np.random.default_rng(1)
    )
    grid = to_array(generation)

    assert grid.shape == (4, 5, 6)
    assert int(grid.sum()) == generation.alive_count
    assert from_array(grid, generation.extents) == generation


def test_to_array_maps_the_origin_to_the_center():
    generation = generation_from_alive(Extents(3, 3, 3), [(0, 0, 0), (-1, -1, -1)])
    grid = to_array(generation)

    assert grid[1, 1, 1] == 1
    assert grid[0, 0, 0] == 1
    assert int(grid.sum()) == 2


def test_seed_rejects_wrong_shape():
    golden = GoldenLife3D(Extents(3, 3, 3))
    with pytest.raises(ValueError, match="Shape mismatch"):
        golden.seed(np.zeros((2, 2, 2)))


def test_reference_boundary_is_open():
    golden = GoldenLife3D(Extents(3, 3, 3))
    grid = np.zeros((3, 3, 3), dtype=np.int8)
    grid[0, :, :] = 1

    golden.seed(grid)
    counts = golden.neighbor_counts()

    # The far face only sees the middle layer, never the opposite face.
    assert counts[2, 1, 1] == 0
    assert counts[1, 1, 1] == 9


def test_count_mismatches():
    generation = generation_from_alive(Extents(2, 2, 2), [(0, 0, 0)])
    expected = np.zeros((2, 2, 2), dtype=np.int8)
    assert count_mismatches(generation, expected) == 1


def test_custom_rule_is_applied():
    golden = GoldenLife3D(Extents(3, 3, 3), LifeRule(lower=1, upper=1))
    grid = np.zeros((3, 3, 3), dtype=np.int8)
    grid[1, 1, 1] = 1

    golden.seed(grid)
    result = golden.step()

    # The lone cell dies; all 26 neighbours see exactly one live cell.
    assert result[1, 1, 1] == 0
    assert int(result.sum()) == 26
