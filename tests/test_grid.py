import pytest

import maze_config
from maze_errors import DimensionTooLargeError, InvalidInputError, MalformedRecordError
from maze_grid import DOWN, LEFT, RIGHT, UP, Grid


def test_cells_have_row_major_indices():
    grid = Grid(3, 4)
    assert [cell.index for cell in grid] == list(range(1, 13))
    assert grid.cells[2][3].index == 12
    assert (grid.cells[1][2].row, grid.cells[1][2].col) == (1, 2)


def test_adjacent_order_and_boundaries():
    grid = Grid(3, 3)
    centre = grid.cell_at(1, 1)
    assert [c.index for c in centre.adjacent] == [2, 6, 8, 4]

    corner = grid.cell_at(0, 0)
    assert corner.adjacent[UP] is None
    assert corner.adjacent[LEFT] is None
    assert corner.adjacent[RIGHT].index == 2
    assert corner.adjacent[DOWN].index == 4


def test_cell_at_out_of_range_is_none():
    grid = Grid(2, 3)
    for row, col in [(-1, 0), (0, -1), (2, 0), (0, 3), (5, 5)]:
        assert grid.cell_at(row, col) is None


@pytest.mark.parametrize("rows,cols", [(1, 1), (1, 6), (6, 1), (3, 4), (7, 5)])
def test_index_coordinate_round_trip(rows, cols):
    grid = Grid(rows, cols)
    for idx in range(1, rows * cols + 1):
        row, col = grid.index_to_coord(idx)
        assert grid.coord_to_index(row, col) == idx
        assert grid.cell_at_index(idx).index == idx


def test_index_to_coord_matches_ceiling_formula():
    grid = Grid(3, 4)
    assert grid.index_to_coord(1) == (0, 0)
    assert grid.index_to_coord(4) == (0, 3)
    assert grid.index_to_coord(5) == (1, 0)
    assert grid.index_to_coord(12) == (2, 3)


def test_cell_at_index_rejects_invalid():
    grid = Grid(2, 2)
    assert grid.cell_at_index(0) is None
    assert grid.cell_at_index(5) is None
    assert grid.cell_at_index(-1) is None


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2), ("3", 3)])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(InvalidInputError):
        Grid(rows, cols)


def test_too_many_cells(monkeypatch):
    monkeypatch.setattr(maze_config, "MAX_CELLS", 10)
    with pytest.raises(DimensionTooLargeError) as exc:
        Grid(4, 4)
    assert exc.value.limit == 10


def test_link_by_openness_is_symmetric():
    grid = Grid(3, 3)
    for cell, code in zip(grid, "310310110"):
        cell.openness = int(code)
    grid.link_all()

    for cell in grid:
        for other in cell.neighbors:
            assert cell in other.neighbors
    assert [c.index for c in grid.cell_at_index(1).neighbors] == [2, 4]
    assert [c.index for c in grid.cell_at_index(4).neighbors] == [1, 5, 7]
    assert len(grid.edges()) == 8


def test_link_off_grid_is_malformed():
    grid = Grid(1, 2)
    grid.cell_at_index(2).openness = 1
    with pytest.raises(MalformedRecordError):
        grid.link_by_openness(grid.cell_at_index(2))

    grid = Grid(1, 2)
    grid.cell_at_index(1).openness = 2
    with pytest.raises(MalformedRecordError):
        grid.link_all()


def test_carve_sets_bit_on_origin_side():
    grid = Grid(2, 2)
    one, two, three, four = (grid.cell_at_index(i) for i in range(1, 5))

    grid.carve(one, RIGHT)
    grid.carve(four, UP)     # opening recorded on 2 (open below)
    grid.carve(four, LEFT)   # opening recorded on 3 (open right)

    assert one.openness == 1
    assert two.openness == 2
    assert three.openness == 1
    assert four.openness == 0
    assert grid.openness_string() == "1210"
    assert grid.edges() == {frozenset((1, 2)), frozenset((2, 4)), frozenset((3, 4))}


def test_carve_off_grid_raises():
    grid = Grid(1, 1)
    with pytest.raises(InvalidInputError):
        grid.carve(grid.cell_at(0, 0), RIGHT)


def test_occupancy_matrix():
    grid = Grid(2, 2)
    for cell, code in zip(grid, "2210"):
        cell.openness = int(code)
    occ = grid.occupancy_matrix()
    assert occ.shape == (5, 5, 1)
    expected = [
        [0, 0, 0, 0, 0],
        [0, 1, 0, 1, 0],
        [0, 1, 0, 1, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
    ]
    assert occ[:, :, 0].tolist() == expected
    assert grid.cell_centre(4) == (3, 3, 0)
