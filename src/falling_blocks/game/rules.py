from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .grid import Cell, widened, with_cells_set


def occupied_cells(shape: np.ndarray, x: int, y: int) -> List[Cell]:
    """Absolute (x, y, value) for every nonzero cell of `shape` placed at (x, y)."""
    cells: List[Cell] = []
    h, w = shape.shape
    for dy in range(h):
        for dx in range(w):
            value = int(shape[dy, dx])
            if value:
                cells.append((x + dx, y + dy, value))
    return cells


def is_valid_placement(grid: np.ndarray, shape: np.ndarray, x: int, y: int) -> bool:
    """True when every nonzero shape cell lands inside the grid on an empty cell.

    Zero cells of the shape are not checked, so they may hang outside the grid.
    """
    rows, cols = grid.shape
    for cx, cy, _ in occupied_cells(shape, x, y):
        if not (0 <= cx < cols and 0 <= cy < rows):
            return False
        if grid[cy, cx] != 0:
            return False
    return True


def merge(grid: np.ndarray, shape: np.ndarray, x: int, y: int) -> np.ndarray:
    return with_cells_set(grid, occupied_cells(shape, x, y))


def clear_lines(grid: np.ndarray) -> Tuple[np.ndarray, int]:
    """Drop full rows and pad the top with empty ones.

    Returns the new grid and the number of rows removed. Surviving rows keep
    their relative order.
    """
    rows, cols = grid.shape
    full_rows = np.where(np.all(grid != 0, axis=1))[0]
    num = int(full_rows.size)
    if num == 0:
        return grid, 0
    kept = np.delete(grid, full_rows, axis=0)
    new_rows = np.zeros((num, cols), dtype=grid.dtype)
    out = np.vstack((new_rows, kept))
    assert out.shape == (rows, cols)
    out.flags.writeable = False
    return out, num


def project(grid: np.ndarray, shape: np.ndarray, x: int, y: int) -> np.ndarray:
    """Drawable copy of `grid` with the falling piece overlaid.

    The result is writable and belongs to the caller; it is never fed back
    into the game state.
    """
    cells = occupied_cells(shape, x, y)
    view = np.array(grid, dtype=widened(grid.dtype, [v for _, _, v in cells]), copy=True)
    rows, cols = view.shape
    for cx, cy, value in cells:
        if 0 <= cy < rows and 0 <= cx < cols:
            view[cy, cx] = value
    return view
