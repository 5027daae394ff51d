"""
Crossout game state.

Tiles numbered 1..N sit in a tray. A move crosses out one tile, or two
distinct tiles, whose values sum to at most MAX_SUM. The player left
without a move loses.

The tray is a bool array: tray[i] is True while tile i + 1 is present.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from combo_games.core.hashing import fold_hash
from combo_games.core.types import MAX_TAKEN, MIN_TAKEN, Score
from combo_games.games.game_base import GameStateBase

logger = logging.getLogger(__name__)


class CrossoutState(GameStateBase):
    """Immutable Crossout position plus whose turn it is."""

    __slots__ = ('MAX_SUM', '_tray', '_turn', 'hash_code')

    MIN_TAKEN = MIN_TAKEN
    MAX_TAKEN = MAX_TAKEN

    def __init__(
        self,
        greedy_divide: int,
        high_value: int,
        we_are_up: bool = True,
        crossed: Iterable[int] = (),
    ):
        if high_value < 0:
            raise ValueError(f"Tile count must be non-negative: {high_value}")
        self.MAX_SUM = int(greedy_divide)
        self._tray = np.ones(high_value, dtype=bool)
        for tile in crossed:
            if not 1 <= tile <= high_value:
                raise ValueError(f"Tile {tile} out of range (1-{high_value})")
            self._tray[tile - 1] = False
        self._turn = bool(we_are_up)
        self._cache_hash()

    @classmethod
    def successor(
        cls,
        base_state: "CrossoutState",
        first_theft: int,
        second_theft: int = 0,
    ) -> "CrossoutState":
        """
        Cross out tile first_theft and, if non-zero, tile second_theft.
        Tiles are numbered from 1.
        """
        tray = base_state._tray.copy()

        for tile in (first_theft, second_theft) if second_theft else (first_theft,):
            if not 1 <= tile <= len(tray):
                raise ValueError(f"Tile {tile} out of range (1-{len(tray)})")
            if not tray[tile - 1]:
                raise ValueError(f"Tile {tile} is already crossed out")
            tray[tile - 1] = False

        s = cls.__new__(cls)
        s.MAX_SUM = base_state.MAX_SUM
        s._tray = tray
        s._turn = not base_state._turn
        s._cache_hash()
        return s

    def game_id(self) -> str:
        return "crossout"

    @property
    def high_value(self) -> int:
        return len(self._tray)

    def present_tiles(self) -> List[int]:
        """Values of the tiles still in the tray, ascending."""
        return (np.flatnonzero(self._tray) + 1).tolist()

    def game_over(self) -> bool:
        # Smallest present tile decides whether any move is legal
        reachable = min(len(self._tray), self.MAX_SUM)
        return reachable <= 0 or not np.any(self._tray[:reachable])

    def score_game(self) -> Score:
        if not self.game_over():
            return Score.TIE
        return Score.LOSS if self._turn else Score.VICTORY

    def computers_turn(self) -> bool:
        return self._turn

    def successors(self) -> List["CrossoutState"]:
        logger.debug("Calculating successors for %s", self)

        tray = self._tray
        result = []
        for first in range(1, min(len(tray), self.MAX_SUM) + 1):
            if not tray[first - 1]:
                continue
            result.append(CrossoutState.successor(self, first))
            for second in range(1, len(tray) + 1):
                if first + second > self.MAX_SUM:
                    break
                if second != first and tray[second - 1]:
                    result.append(CrossoutState.successor(self, first, second))
        return result

    def apply(self, move: Tuple[int, ...]) -> "CrossoutState":
        """Cross out the tiles listed in move (one or two values)."""
        if not MIN_TAKEN <= len(move) <= MAX_TAKEN:
            raise ValueError(f"A move crosses {MIN_TAKEN}-{MAX_TAKEN} tiles, got {list(move)}")
        if any(tile < 1 for tile in move):
            raise ValueError(f"Tiles are numbered from 1, got {list(move)}")
        if sum(move) > self.MAX_SUM:
            raise ValueError(f"Tiles {list(move)} sum past {self.MAX_SUM}")
        if len(move) == 2 and move[0] == move[1]:
            raise ValueError(f"Tile {move[0]} listed twice")
        return CrossoutState.successor(self, *move)

    def assign(self, other: "CrossoutState") -> "CrossoutState":
        if other.MAX_SUM != self.MAX_SUM:
            raise ValueError(f"Cannot assign MAX_SUM {other.MAX_SUM} state to MAX_SUM {self.MAX_SUM}")
        if other is not self:
            self._tray = other._tray.copy()
            self._turn = other._turn
            self.hash_code = other.hash_code
        return self

    @staticmethod
    def are_subsequent(first: "CrossoutState", next_state: "CrossoutState") -> bool:
        if (
            first.MAX_SUM != next_state.MAX_SUM
            or len(first._tray) != len(next_state._tray)
            or first._turn == next_state._turn
        ):
            return False

        # Nothing may come back
        if np.any(next_state._tray & ~first._tray):
            return False

        crossed = np.flatnonzero(first._tray & ~next_state._tray) + 1
        return MIN_TAKEN <= len(crossed) <= MAX_TAKEN and int(crossed.sum()) <= first.MAX_SUM

    @staticmethod
    def diff(first: "CrossoutState", next_state: "CrossoutState") -> List[int]:
        """Return the sorted values of the tiles crossed between the states."""
        if not CrossoutState.are_subsequent(first, next_state):
            raise ValueError(f"Not one move apart: {first} -> {next_state}")
        return (np.flatnonzero(first._tray != next_state._tray) + 1).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossoutState):
            return NotImplemented
        return (
            self.MAX_SUM == other.MAX_SUM
            and self._turn == other._turn
            and np.array_equal(self._tray, other._tray)
        )

    __hash__ = GameStateBase.__hash__

    def __str__(self) -> str:
        tiles = " ".join(str(t) for t in self.present_tiles())
        return f"It is the {self._turn_word()}'s turn and the pins are: {tiles}"

    def __repr__(self) -> str:
        crossed = (np.flatnonzero(~self._tray) + 1).tolist()
        return (
            f"CrossoutState({self.MAX_SUM}, {self.high_value}, "
            f"we_are_up={self._turn}, crossed={crossed})"
        )

    def _cache_hash(self) -> None:
        """Must run after every change to _tray or _turn."""
        self.hash_code = fold_hash(self._tray.astype(np.int8), self._turn, self.MAX_SUM)
