# =============================================================================
# grid.py - The Warehouse Floor
# =============================================================================
# This file stores the warehouse floor as a grid of cells.
# Each cell is one of two types:
#
#   FREE     (0) - floor the robot can drive over
#   OBSTACLE (1) - a blocked cell (shelf, pallet, wall) the robot avoids
#
# The grid is stored as a 2D list: cells[row][col]
# Row 0 is the TOP of the warehouse.
#
# Cells are passed around as (col, row) tuples, matching screen x/y.
# So cell (3, 1) lives at cells[1][3].
#
# The size of the floor never changes after the Grid is built. Layout loads
# swap the contents in place with replace_all(), they never resize.
# =============================================================================

# Cell type numbers
FREE     = 0
OBSTACLE = 1

# Default floor size: an 800x600 window split into 40px cells
ROWS = 15
COLS = 20


class Grid:
    """
    Stores the warehouse floor and answers "can the robot stand here?".
    """

    def __init__(self, rows=ROWS, cols=COLS, cells=None):
        """
        Create an empty floor, or one filled from cells.

        rows  - how many rows tall (default 15)
        cols  - how many columns wide (default 20)
        cells - optional list of rows of FREE/OBSTACLE values to start from
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols

        # 2D grid of cell types - starts all free
        self.cells = [[FREE for _ in range(cols)] for _ in range(rows)]

        if cells is not None:
            self.replace_all(cells)

    def in_bounds(self, cell):
        """True if (col, row) lies on the warehouse floor."""
        col, row = cell
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_traversable(self, cell):
        """
        Returns True if the robot can drive onto this cell.
        Both searches use this as their only test, so nothing else
        needs to repeat the bounds or obstacle checks.
        """
        if not self.in_bounds(cell):
            return False  # outside the warehouse
        col, row = cell
        return self.cells[row][col] == FREE

    def is_obstacle(self, cell):
        """True for an in-bounds OBSTACLE cell."""
        if not self.in_bounds(cell):
            return False
        col, row = cell
        return self.cells[row][col] == OBSTACLE

    def toggle_obstacle(self, cell):
        """
        Flip a cell between FREE and OBSTACLE.
        Clicks that land outside the floor are ignored.
        Returns True if the grid changed.
        """
        if not self.in_bounds(cell):
            return False
        col, row = cell
        self.cells[row][col] = OBSTACLE if self.cells[row][col] == FREE else FREE
        return True

    def replace_all(self, new_cells):
        """
        Swap in a whole new floor (used when a layout file is loaded).

        new_cells must have exactly self.rows rows of self.cols values,
        each FREE or OBSTACLE. Anything else raises ValueError and the
        current floor is kept as it was.
        """
        if len(new_cells) != self.rows:
            raise ValueError(
                f"Layout has {len(new_cells)} rows, expected {self.rows}"
            )

        fresh = []
        for r, row in enumerate(new_cells):
            if len(row) != self.cols:
                raise ValueError(
                    f"Layout row {r} has {len(row)} cells, expected {self.cols}"
                )
            for c, value in enumerate(row):
                if value not in (FREE, OBSTACLE):
                    raise ValueError(
                        f"Cell ({c}, {r}) has value {value!r}, expected 0 or 1"
                    )
            fresh.append(list(row))

        # Only assign once everything has been checked
        self.cells = fresh

    def snapshot(self):
        """Returns a copy of the rows, safe to keep or write out."""
        return [list(row) for row in self.cells]

    def obstacle_count(self):
        """How many cells are currently blocked."""
        return sum(row.count(OBSTACLE) for row in self.cells)
