"""
NumPy utilities for column-major drop boards.

The grid is indexed grid[column, element], element 0 being the bottom.
Cell values: 0 = empty, 1 = first symbol, 2 = second symbol.
Windows are copied out of the grid, never returned as views.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

# Direction vectors (d_col, d_el): →, ↑, ↗, ↘
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


def in_bounds(grid: np.ndarray, col: int, el: int) -> bool:
    """Return True if (col, el) is inside the grid."""
    columns, elements = grid.shape
    return 0 <= col < columns and 0 <= el < elements


def board_full(heights: np.ndarray, elements: int) -> bool:
    """Return True if no column has room left."""
    return bool(np.all(heights >= elements))


def all_equal(line: Optional[np.ndarray]) -> bool:
    """
    Return True if:
    - line is nonempty
    - first value is a placed symbol (not 0)
    - all values equal the first
    """
    if line is None or line.size == 0:
        return False

    first = line[0]
    if first == 0:
        return False

    return bool(np.all(line == first))


def run_from(grid: np.ndarray, col: int, el: int, d_col: int, d_el: int, k: int) -> Optional[np.ndarray]:
    """
    Return the k cells starting at (col, el) and stepping by (d_col, d_el),
    or None if the window leaves the grid.
    """
    end_col = col + (k - 1) * d_col
    end_el = el + (k - 1) * d_el
    if not (in_bounds(grid, col, el) and in_bounds(grid, end_col, end_el)):
        return None

    cols = col + d_col * np.arange(k)
    els = el + d_el * np.arange(k)
    return grid[cols, els].copy()


def find_run(grid: np.ndarray, k: int) -> int:
    """
    Full scan: look for k aligned equal symbols anywhere on the grid.

    Returns the owning cell value, or 0 if there is no run.
    """
    columns, elements = grid.shape
    for col in range(columns):
        for el in range(elements):
            if grid[col, el] == 0:
                continue
            for d_col, d_el in DIRECTIONS:
                if all_equal(run_from(grid, col, el, d_col, d_el, k)):
                    return int(grid[col, el])
    return 0


def find_run_through(grid: np.ndarray, col: int, el: int, k: int) -> int:
    """
    Incremental scan: only windows containing (col, el) are checked.

    Valid when (col, el) is the only cell that changed since the last scan.
    Returns the owning cell value, or 0 if there is no run.
    """
    if not in_bounds(grid, col, el):
        raise ValueError(f"Cell ({col},{el}) is outside a {grid.shape} grid")

    if grid[col, el] == 0:
        return 0

    for d_col, d_el in DIRECTIONS:
        for shift in range(k):
            start_col = col - shift * d_col
            start_el = el - shift * d_el
            if all_equal(run_from(grid, start_col, start_el, d_col, d_el, k)):
                return int(grid[col, el])
    return 0
