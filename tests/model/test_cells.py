import pytest
from voxlife.model.cells import (
    Coordinate,
    Extents,
    Generation,
    cell_id,
    coordinate,
    make_cell,
    parse_cell_id,
)


def test_cell_id_is_canonical():
    assert cell_id(Coordinate(1, 2, 3)) == "(1)-(2)-(3)"
    assert cell_id(Coordinate(-1, 0, -15)) == "(-1)-(0)-(-15)"
    assert cell_id(coordinate(4, 5, 6)) == cell_id(Coordinate(4, 5, 6))


def test_cell_id_does_not_collide_on_negative_components():
    # A naive "x-y-z" encoding would render both as "1--2-3".
    a = cell_id(Coordinate(1, -2, 3))
    b = cell_id(Coordinate(1, 2, -3))
    assert a != b


@pytest.mark.parametrize(
    "coord",
    [(0, 0, 0), (-1, -1, -1), (15, -15, 7), (123456789, -987654321, 0)],
)
def test_parse_cell_id_inverts_cell_id(coord):
    assert parse_cell_id(cell_id(Coordinate(*coord))) == Coordinate(*coord)


def test_parse_cell_id_rejects_garbage():
    with pytest.raises(ValueError):
        parse_cell_id("1-2-3")


def test_make_cell_derives_identity():
    cell = make_cell(Coordinate(0, -1, 2), alive=True)
    assert cell.id == "(0)-(-1)-(2)"
    assert cell.alive is True
    assert cell.alive_neighbor_count is None


def test_cells_are_immutable():
    cell = make_cell(Coordinate(0, 0, 0))
    with pytest.raises(AttributeError):
        cell.alive = True


def test_generation_summaries():
    cells = (
        make_cell(Coordinate(0, 0, 0), alive=True),
        make_cell(Coordinate(0, 0, 1)),
    )
    generation = Generation(extents=Extents(1, 1, 2), cells=cells)

    assert len(generation) == 2
    assert generation.alive_count == 1
    assert generation.alive_cells == (cells[0],)
    assert not generation.is_extinct
    assert Generation(extents=Extents(1, 1, 1), cells=(cells[1],)).is_extinct
