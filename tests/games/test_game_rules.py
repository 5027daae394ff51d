"""
Tests for combo_games.games.game_rules
"""

import numpy as np
import pytest

from combo_games.games.game_rules import (
    all_equal,
    board_full,
    find_run,
    find_run_through,
    in_bounds,
    run_from,
)


def make_grid(cells, columns=3, elements=3) -> np.ndarray:
    """Grid with the given {(col, el): value} cells set."""
    grid = np.zeros((columns, elements), dtype=np.int8)
    for (col, el), value in cells.items():
        grid[col, el] = value
    return grid


class TestBounds:

    def test_in_bounds(self):
        grid = make_grid({}, 4, 2)
        assert in_bounds(grid, 3, 1)
        assert not in_bounds(grid, 4, 0)
        assert not in_bounds(grid, 0, 2)
        assert not in_bounds(grid, -1, 0)

    def test_board_full(self):
        assert board_full(np.array([3, 3, 3]), 3)
        assert not board_full(np.array([3, 2, 3]), 3)


class TestAllEqual:

    def test_none_and_empty(self):
        assert not all_equal(None)
        assert not all_equal(np.array([], dtype=np.int8))

    def test_empty_cells_never_match(self):
        assert not all_equal(np.zeros(3, dtype=np.int8))

    def test_same_symbol(self):
        assert all_equal(np.array([2, 2, 2], dtype=np.int8))

    def test_mixed(self):
        assert not all_equal(np.array([1, 1, 2], dtype=np.int8))


class TestRunFrom:

    def test_window_cells(self):
        grid = make_grid({(0, 0): 1, (1, 1): 2, (2, 2): 1})
        assert run_from(grid, 0, 0, 1, 1, 3).tolist() == [1, 2, 1]

    def test_leaving_grid(self):
        grid = make_grid({})
        assert run_from(grid, 1, 0, 1, 0, 3) is None
        assert run_from(grid, 0, 1, 1, -1, 3) is None

    def test_window_is_a_copy(self):
        grid = make_grid({})
        window = run_from(grid, 0, 0, 0, 1, 3)
        window[0] = 1
        assert grid[0, 0] == 0


class TestFindRun:
    """Full scan tests."""

    @pytest.mark.parametrize("cells", [
        [(0, 0), (1, 0), (2, 0)],  # Row
        [(1, 0), (1, 1), (1, 2)],  # Column
        [(0, 0), (1, 1), (2, 2)],  # Rising diagonal
        [(0, 2), (1, 1), (2, 0)],  # Falling diagonal
    ])
    def test_every_direction(self, cells):
        grid = make_grid({c: 2 for c in cells})
        assert find_run(grid, 3) == 2

    def test_no_run(self):
        grid = make_grid({(0, 0): 1, (1, 0): 1, (2, 0): 2})
        assert find_run(grid, 3) == 0

    def test_empty_grid(self):
        assert find_run(make_grid({}), 3) == 0


class TestFindRunThrough:
    """Incremental scan tests."""

    @pytest.mark.parametrize("base", [(0, 0), (1, 1), (2, 2)])
    def test_any_position_in_window(self, base):
        grid = make_grid({(0, 0): 1, (1, 1): 1, (2, 2): 1})
        assert find_run_through(grid, *base, 3) == 1

    def test_ignores_runs_elsewhere(self):
        """Only windows containing the base cell are considered."""
        grid = make_grid({(0, 0): 1, (0, 1): 1, (0, 2): 1, (2, 0): 2})
        assert find_run(grid, 3) == 1
        assert find_run_through(grid, 2, 0, 3) == 0

    def test_empty_base_cell(self):
        assert find_run_through(make_grid({}), 1, 1, 3) == 0

    def test_outside_grid_raises(self):
        with pytest.raises(ValueError):
            find_run_through(make_grid({}), 3, 0, 3)

    def test_wide_board_middle(self):
        grid = make_grid({(1, 0): 2, (2, 0): 2, (3, 0): 2}, columns=5, elements=1)
        assert find_run_through(grid, 2, 0, 3) == 2
