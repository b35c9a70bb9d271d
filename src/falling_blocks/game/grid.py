from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np


Cell = Tuple[int, int, int]

GRID_DTYPE = np.int8


def freeze(array: np.ndarray) -> np.ndarray:
    """Return a read-only copy of `array`, keeping its dtype."""
    grid = np.array(array, copy=True)
    grid.flags.writeable = False
    return grid


def widened(dtype: np.dtype, values: Iterable[int]) -> np.dtype:
    """`dtype`, promoted just enough to hold every tag in `values`."""
    dtype = np.dtype(dtype)
    if dtype.kind not in "iu":
        return dtype
    for v in values:
        info = np.iinfo(dtype)
        if not info.min <= int(v) <= info.max:
            dtype = np.result_type(dtype, np.min_scalar_type(int(v)))
    return dtype


def empty_grid(rows: int, cols: int) -> np.ndarray:
    """Discrete rows x cols board with every cell empty.

    The grid uses 0 for empty cells and nonzero integers for landed cells.
    """
    if int(rows) <= 0 or int(cols) <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    return freeze(np.zeros((int(rows), int(cols)), dtype=GRID_DTYPE))


def cell_at(grid: np.ndarray, x: int, y: int) -> int:
    return int(grid[y, x])


def with_cells_set(grid: np.ndarray, cells: Iterable[Cell]) -> np.ndarray:
    """Copy of `grid` with every (x, y, value) written; `grid` is left untouched.

    The copy is widened when a tag does not fit the grid's dtype.
    """
    pending: List[Cell] = list(cells)
    out = np.array(grid, dtype=widened(grid.dtype, [v for _, _, v in pending]), copy=True)
    for x, y, value in pending:
        out[y, x] = value
    out.flags.writeable = False
    return out


def format_grid(grid: np.ndarray, filled: str = "#", empty: str = ".") -> str:
    """Plain-text board, one line per row."""
    return "\n".join("".join(filled if v else empty for v in row) for row in grid)
