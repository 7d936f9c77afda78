# =============================================================================
# layout.py - Saving and Loading Warehouse Layouts
# =============================================================================
# A layout file is plain text: one line per grid row, each line holding one
# number per column separated by spaces.
#
#   0 = free floor
#   1 = obstacle
#
# Example (3 rows x 4 cols):
#
#   0 0 1 0
#   0 1 1 0
#   0 0 0 0
#
# There is no header. Loading needs at least rows x cols numbers; anything
# after that is ignored. Any other number than 0 or 1 is rejected rather
# than guessed at, so a bad file never half-loads.
#
# Every problem (missing file, unreadable file, too few numbers, bad values,
# unwritable target) is raised as LayoutIOError. The caller decides what to
# tell the user - nothing in here touches the live grid.
# =============================================================================

import os
import tempfile

from grid import FREE, OBSTACLE


class LayoutIOError(Exception):
    """A layout could not be saved or loaded."""


def format_layout(cells):
    """Turn rows of cell values into the text written to disk."""
    return "".join(" ".join(str(value) for value in row) + "\n" for row in cells)


def parse_layout(text, rows, cols):
    """
    Read rows x cols cell values out of layout text.
    Returns a list of rows ready for Grid.replace_all().
    """
    tokens = text.split()
    needed = rows * cols
    if len(tokens) < needed:
        raise LayoutIOError(
            f"layout has {len(tokens)} values, expected {needed} ({rows}x{cols})"
        )

    cells = []
    for r in range(rows):
        row = []
        for c in range(cols):
            token = tokens[r * cols + c]
            try:
                value = int(token)
            except ValueError:
                raise LayoutIOError(
                    f"cell ({c}, {r}) is {token!r}, not a number"
                ) from None
            if value not in (FREE, OBSTACLE):
                raise LayoutIOError(
                    f"cell ({c}, {r}) is {value}, expected {FREE} or {OBSTACLE}"
                )
            row.append(value)
        cells.append(row)
    return cells


def save_layout(grid, filename):
    """
    Write the grid to filename.

    The text goes to a temporary file in the same folder first and is then
    moved over the target, so a failed save never leaves half a layout.
    """
    folder = os.path.dirname(os.path.abspath(filename))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".layout-", suffix=".tmp", dir=folder)
        with os.fdopen(fd, "w") as f:
            f.write(format_layout(grid.snapshot()))
        os.replace(tmp_path, filename)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise LayoutIOError(f"could not save layout to {filename}: {e}") from e


def load_layout(filename, rows, cols):
    """Read filename and return its rows x cols cell values."""
    try:
        with open(filename, "r") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LayoutIOError(f"could not read layout {filename}: {e}") from e
    return parse_layout(text, rows, cols)
