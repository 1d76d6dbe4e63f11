"""
GridStore tests: addressing through the origin, growth and read interface.
"""

import numpy as np
import pytest

from core import Floor, Wall, FloorType, CELL_EMPTY, CELL_FLOOR, CELL_WALL
from mapping import GridStore


def _contents(grid):
    return {pos: cell for pos, cell in grid.cells()}


def test_initial_extent():
    grid = GridStore()
    assert (grid.width, grid.height) == (3, 3)
    assert grid.origin == (1, 1)
    assert grid.logic_width == 1 and grid.logic_height == 1
    assert grid.to_storage((1, 1)) == (1, 1)
    assert list(grid.cells()) == []


def test_set_get_and_out_of_bounds():
    grid = GridStore()
    floor = Floor(FloorType.BLUE)
    grid.set((1, 1), floor)
    assert grid.get((1, 1)) is floor
    assert grid.get((9, 9)) is None
    with pytest.raises(IndexError):
        grid.set((3, 1), Floor())


def test_no_growth_inside_bounds():
    grid = GridStore()
    assert grid.ensure_capacity((1, 1)) == 0
    assert (grid.width, grid.height) == (3, 3)


@pytest.mark.parametrize("pos, shape, origin", [
    ((1, -1), (5, 3), (1, 3)),   # top: (rows, cols)
    ((3, 1), (3, 5), (1, 1)),    # right
    ((1, 3), (5, 3), (1, 1)),    # bottom
    ((-1, 1), (3, 5), (3, 1)),   # left
])
def test_single_side_growth_preserves_cells(pos, shape, origin):
    grid = GridStore()
    floor, wall = Floor(), Wall()
    grid.set((1, 1), floor)
    grid.set((2, 1), wall)
    before = _contents(grid)

    assert grid.ensure_capacity(pos) == 1
    assert (grid.height, grid.width) == shape
    assert grid.origin == origin
    assert _contents(grid) == before
    assert grid.get((1, 1)) is floor
    assert grid.get((2, 1)) is wall
    # new floor slot and its walls are addressable
    grid.set(pos, Floor())
    for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
        assert grid.contains((pos[0] + dx, pos[1] + dy))


def test_multi_boundary_growth():
    grid = GridStore()
    grid.set((1, 1), Floor(FloorType.CHECKPOINT))
    steps = grid.ensure_capacity((-3, -3))
    assert steps == 4
    assert (grid.width, grid.height) == (7, 7)
    assert grid.origin == (5, 5)
    assert grid.get((1, 1)).floor_type == FloorType.CHECKPOINT
    assert grid.contains((-4, -3)) and grid.contains((-3, -4))


def test_jump_growth_right():
    grid = GridStore()
    assert grid.ensure_capacity((7, 1)) == 3
    assert grid.width == 9
    assert grid.logic_width == 4


def test_grid_stays_rectangular():
    grid = GridStore()
    for pos in [(1, -1), (5, -1), (5, 5), (-3, 5)]:
        grid.ensure_capacity(pos)
        rows = grid.to_string().split("\n")
        assert len(rows) == grid.height
        assert all(len(r.split(" ")) == grid.width for r in rows)


def test_snapshot_and_dump():
    grid = GridStore()
    grid.set((1, 1), Floor())
    grid.set((1, 0), Wall())
    snap = grid.snapshot()
    assert snap.dtype == np.uint8
    expected = np.array([[CELL_EMPTY, CELL_WALL, CELL_EMPTY],
                         [CELL_EMPTY, CELL_FLOOR, CELL_EMPTY],
                         [CELL_EMPTY, CELL_EMPTY, CELL_EMPTY]], dtype=np.uint8)
    assert np.array_equal(snap, expected)
    assert grid.to_string() == ". W .\n. F .\n. . ."


def test_cells_report_logical_positions_after_growth():
    grid = GridStore()
    grid.ensure_capacity((-1, -1))
    grid.set((-1, -1), Floor())
    grid.set((1, 1), Floor(FloorType.BLACK))
    positions = [pos for pos, _ in grid.cells()]
    assert positions == [(-1, -1), (1, 1)]
