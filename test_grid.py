"""Offline tests for the warehouse floor grid.

Run:
  python3 test_grid.py
"""

from grid import Grid, FREE, OBSTACLE, ROWS, COLS


def test_default_size_is_fixed():
    grid = Grid()
    assert (grid.rows, grid.cols) == (ROWS, COLS) == (15, 20)
    assert len(grid.cells) == 15
    assert all(len(row) == 20 for row in grid.cells)
    assert grid.obstacle_count() == 0


def test_bad_dimensions_rejected():
    for rows, cols in [(0, 5), (5, 0), (-1, 3)]:
        try:
            Grid(rows, cols)
        except ValueError:
            pass
        else:
            raise AssertionError(f"Grid({rows}, {cols}) should fail")


def test_is_traversable_checks_bounds_and_obstacles():
    grid = Grid(3, 4)
    grid.cells[1][2] = OBSTACLE   # cell (2, 1)

    assert grid.is_traversable((0, 0))
    assert grid.is_traversable((3, 2))
    assert not grid.is_traversable((2, 1))

    for cell in [(-1, 0), (0, -1), (4, 0), (0, 3), (10, 10)]:
        assert not grid.in_bounds(cell)
        assert not grid.is_traversable(cell)
        assert not grid.is_obstacle(cell)

    assert grid.is_obstacle((2, 1))
    assert not grid.is_obstacle((0, 0))


def test_cells_are_col_row():
    grid = Grid(2, 5)
    grid.toggle_obstacle((4, 1))
    assert grid.cells[1][4] == OBSTACLE
    assert grid.is_obstacle((4, 1))
    assert not grid.in_bounds((1, 4))


def test_toggle_flips_and_ignores_out_of_bounds():
    grid = Grid(3, 3)
    assert grid.toggle_obstacle((1, 1)) is True
    assert grid.cells[1][1] == OBSTACLE
    assert grid.toggle_obstacle((1, 1)) is True
    assert grid.cells[1][1] == FREE

    before = grid.snapshot()
    assert grid.toggle_obstacle((3, 0)) is False
    assert grid.toggle_obstacle((-1, -1)) is False
    assert grid.cells == before


def test_replace_all_swaps_contents():
    grid = Grid(2, 3)
    new_cells = [[0, 1, 0], [1, 1, 0]]
    grid.replace_all(new_cells)
    assert grid.cells == [[0, 1, 0], [1, 1, 0]]
    assert grid.obstacle_count() == 3

    # Grid keeps its own copy
    new_cells[0][0] = 1
    assert grid.cells[0][0] == FREE


def test_replace_all_rejects_mismatch_and_keeps_grid():
    grid = Grid(2, 3)
    grid.toggle_obstacle((0, 0))
    before = grid.snapshot()

    bad_layouts = [
        [[0, 0, 0]],                        # too few rows
        [[0, 0, 0], [0, 0, 0], [0, 0, 0]],  # too many rows
        [[0, 0, 0], [0, 0]],                # short row
        [[0, 0, 0, 0], [0, 0, 0]],          # long row
        [[0, 2, 0], [0, 0, 0]],             # not 0/1
        [[0, 0, 0], [0, -1, 0]],
    ]
    for cells in bad_layouts:
        try:
            grid.replace_all(cells)
        except ValueError:
            pass
        else:
            raise AssertionError(f"replace_all({cells}) should fail")
        assert grid.cells == before


def test_constructor_accepts_cells():
    grid = Grid(2, 2, cells=[[1, 0], [0, 1]])
    assert grid.is_obstacle((0, 0))
    assert grid.is_obstacle((1, 1))
    assert grid.is_traversable((1, 0))


def test_snapshot_is_a_copy():
    grid = Grid(2, 2)
    snap = grid.snapshot()
    snap[0][0] = OBSTACLE
    assert grid.cells[0][0] == FREE


if __name__ == '__main__':
    test_default_size_is_fixed()
    test_bad_dimensions_rejected()
    test_is_traversable_checks_bounds_and_obstacles()
    test_cells_are_col_row()
    test_toggle_flips_and_ignores_out_of_bounds()
    test_replace_all_swaps_contents()
    test_replace_all_rejects_mismatch_and_keeps_grid()
    test_constructor_accepts_cells()
    test_snapshot_is_a_copy()
    print('OK')
