"""
Connect-3 game state.

Players drop symbols onto columns; three aligned symbols (horizontally,
vertically or diagonally) win. The board is a column-major int8 grid:
    0 = empty
    1 = SYMBOLS[0] (computer, the "good guy")
    2 = SYMBOLS[1] (human)

Win detection runs once per state: a full scan for a board given to the
constructor, an incremental scan through the new piece for successors.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from combo_games.core.hashing import fold_hash
from combo_games.core.types import CONNECTABLE, Score
from combo_games.games.game_base import GameStateBase
from combo_games.games.game_rules import board_full, find_run, find_run_through

logger = logging.getLogger(__name__)

SYMBOLS = ("X", "O")
PLACEHOLDER = "."
PRINTHOLDER = " "
PRINTVBAR = "|"
PRINTFOOTER = "-"

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: PRINTHOLDER, 1: SYMBOLS[0], 2: SYMBOLS[1]}

_CELL_VALUES = {SYMBOLS[0]: 1, SYMBOLS[1]: 2}

# Which side owns a run, keyed by cell value
_OUTCOMES = {1: Score.VICTORY, 2: Score.LOSS}


class Connect3State(GameStateBase):
    """Immutable Connect-3 position plus whose turn it is."""

    __slots__ = ('COLUMNS', 'ELEMENTS', '_grid', '_heights', '_turn', 'final_outcome', 'hash_code')

    CONNECTABLE = CONNECTABLE
    SYMBOLS = SYMBOLS
    PLACEHOLDER = PLACEHOLDER

    def __init__(
        self,
        column_count: int = 0,
        element_count: int = 0,
        original: Sequence[Sequence[str]] = (),
        we_are_up: bool = True,
    ):
        """
        Args:
            column_count: columns per board
            element_count: cells per column
            original: starting board, one entry per column, bottom first;
                      each column holds SYMBOLS and may be padded on top
                      with PLACEHOLDER. Missing columns start empty.
            we_are_up: whether the computer moves first
        """
        if column_count < 0 or element_count < 0:
            raise ValueError(f"Negative board size {column_count}x{element_count}")
        if len(original) > column_count:
            raise ValueError(f"{len(original)} columns given for a {column_count}-column board")

        self.COLUMNS = column_count
        self.ELEMENTS = element_count
        self._grid = np.zeros((column_count, element_count), dtype=np.int8)
        self._heights = np.zeros(column_count, dtype=np.int16)

        for col, column in enumerate(original):
            cells = "".join(column).rstrip(PLACEHOLDER)
            if len(cells) > element_count:
                raise ValueError(f"Column {col} holds {len(cells)} pieces (max {element_count})")
            for el, ch in enumerate(cells):
                if not self.valid_char(ch):
                    raise ValueError(f"Invalid symbol {ch!r} at ({col},{el})")
                self._grid[col, el] = _CELL_VALUES[ch]
            self._heights[col] = len(cells)

        self._turn = bool(we_are_up)
        self.final_outcome = self._compute_winner()
        self._cache_hash()

    @classmethod
    def successor(cls, base_state: "Connect3State", column: int) -> "Connect3State":
        """Drop the mover's symbol on top of a column."""
        if not 0 <= column < base_state.COLUMNS:
            raise ValueError(f"Column {column} out of range (0-{base_state.COLUMNS - 1})")
        if base_state.game_over():
            raise ValueError(f"Game is already over: {base_state}")
        if not base_state.has_space_at(column):
            raise ValueError(f"Column {column} is full")

        el = int(base_state._heights[column])

        s = cls.__new__(cls)
        s.COLUMNS = base_state.COLUMNS
        s.ELEMENTS = base_state.ELEMENTS
        s._grid = base_state._grid.copy()
        s._heights = base_state._heights.copy()
        s._grid[column, el] = base_state._symbol_value()
        s._heights[column] = el + 1
        s._turn = not base_state._turn
        s.final_outcome = s._compute_winner(column, el)
        s._cache_hash()
        return s

    def game_id(self) -> str:
        return "connect3"

    @staticmethod
    def valid_char(character: str) -> bool:
        """PLACEHOLDER is *not* valid."""
        return character in _CELL_VALUES

    def has_space_at(self, column: int) -> bool:
        if not 0 <= column < self.COLUMNS:
            raise ValueError(f"Column {column} out of range (0-{self.COLUMNS - 1})")
        return int(self._heights[column]) < self.ELEMENTS

    def next_symbol(self) -> str:
        """Symbol the player to move will drop."""
        return SYMBOLS[0] if self._turn else SYMBOLS[1]

    def column(self, column: int) -> str:
        """A column's symbols, bottom first."""
        if not 0 <= column < self.COLUMNS:
            raise ValueError(f"Column {column} out of range (0-{self.COLUMNS - 1})")
        height = int(self._heights[column])
        return "".join(CELL_STRINGS[v] for v in self._grid[column, :height].tolist())

    def _symbol_value(self) -> int:
        return 1 if self._turn else 2

    def game_over(self) -> bool:
        return self.final_outcome != Score.TIE or board_full(self._heights, self.ELEMENTS)

    def score_game(self) -> Score:
        return self.final_outcome

    def computers_turn(self) -> bool:
        return self._turn

    def successors(self) -> List["Connect3State"]:
        if self.game_over():
            return []
        result = [
            Connect3State.successor(self, col)
            for col in range(self.COLUMNS)
            if self._heights[col] < self.ELEMENTS
        ]
        logger.debug("%d successors", len(result))
        return result

    def apply(self, move: int) -> "Connect3State":
        if self.game_over():
            raise ValueError("Game is already over")
        return Connect3State.successor(self, move)

    def assign(self, other: "Connect3State") -> "Connect3State":
        if (other.COLUMNS, other.ELEMENTS) != (self.COLUMNS, self.ELEMENTS):
            raise ValueError(
                f"Cannot assign a {other.COLUMNS}x{other.ELEMENTS} board "
                f"to a {self.COLUMNS}x{self.ELEMENTS} board"
            )
        if other is not self:
            self._grid = other._grid.copy()
            self._heights = other._heights.copy()
            self._turn = other._turn
            self.final_outcome = other.final_outcome
            self.hash_code = other.hash_code
        return self

    @staticmethod
    def are_subsequent(first: "Connect3State", next_state: "Connect3State") -> bool:
        return Connect3State._added_column(first, next_state) >= 0

    @staticmethod
    def diff(first: "Connect3State", next_state: "Connect3State") -> int:
        """Return the column that received a piece."""
        column = Connect3State._added_column(first, next_state)
        if column < 0:
            raise ValueError("States are not one move apart")
        return column

    @staticmethod
    def _added_column(first: "Connect3State", next_state: "Connect3State") -> int:
        """Column holding the one new piece, or -1."""
        if (first.COLUMNS, first.ELEMENTS) != (next_state.COLUMNS, next_state.ELEMENTS):
            return -1
        if first._turn == next_state._turn or first.game_over():
            return -1

        grown = np.flatnonzero(next_state._heights != first._heights)
        if len(grown) != 1:
            return -1

        col = int(grown[0])
        el = int(first._heights[col])
        if next_state._heights[col] != el + 1:
            return -1
        if next_state._grid[col, el] != first._symbol_value():
            return -1

        # Everything else unchanged
        changed = np.argwhere(first._grid != next_state._grid)
        if len(changed) != 1:
            return -1
        return col

    def _compute_winner(self, base_col: int = -1, base_el: int = -1) -> Score:
        """
        Score the board; TIE means nobody has three in a row.
        Only runs through (base_col, base_el) are checked when it is given.
        """
        if base_col < 0:
            owner = find_run(self._grid, CONNECTABLE)
        else:
            owner = find_run_through(self._grid, base_col, base_el, CONNECTABLE)
        return _OUTCOMES.get(owner, Score.TIE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Connect3State):
            return NotImplemented
        return self._turn == other._turn and np.array_equal(self._grid, other._grid)

    __hash__ = GameStateBase.__hash__

    def __str__(self) -> str:
        lines = []
        for el in range(self.ELEMENTS - 1, -1, -1):
            cells = (CELL_STRINGS[v] for v in self._grid[:, el].tolist())
            lines.append(PRINTVBAR + PRINTVBAR.join(cells) + PRINTVBAR)
        lines.append(PRINTFOOTER * (2 * self.COLUMNS + 1))
        return "\n".join(lines)

    def __repr__(self) -> str:
        columns = [self.column(c) for c in range(self.COLUMNS)]
        return f"Connect3State({self.COLUMNS}, {self.ELEMENTS}, {columns!r}, we_are_up={self._turn})"

    def _cache_hash(self) -> None:
        """Must run after every change to _grid or _turn."""
        self.hash_code = fold_hash(self._grid, self._turn)
