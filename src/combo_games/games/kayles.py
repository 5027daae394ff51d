"""
Kayles game state.

Pins stand in groups; a move knocks down 1 or 2 adjacent pins from one
group. Knocking pins out of the middle splits the group in two. Whoever
takes the last pin wins.

Pin groups are stored as an int16 array. Empty groups may linger after a
move; identity ignores them and the group order.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from combo_games.core.hashing import fold_hash
from combo_games.core.types import MAX_TAKEN, MIN_TAKEN, Score
from combo_games.games.game_base import GameStateBase

logger = logging.getLogger(__name__)

# Move descriptor: (group, offset, count_taken)
KaylesMove = Tuple[int, int, int]


class KaylesState(GameStateBase):
    """Immutable Kayles position plus whose turn it is."""

    __slots__ = ('_pins', '_turn', 'hash_code')

    MIN_TAKEN = MIN_TAKEN
    MAX_TAKEN = MAX_TAKEN

    def __init__(self, starting_pins: Sequence[int] = (), we_are_up: bool = True):
        pins = np.array(starting_pins, dtype=np.int16).reshape(-1)
        if np.any(pins < 0):
            raise ValueError(f"Pin counts must be non-negative: {list(starting_pins)}")
        self._pins = pins
        self._turn = bool(we_are_up)
        self._cache_hash()

    @classmethod
    def successor(
        cls,
        base_state: "KaylesState",
        group: int,
        count_taken: int,
        target_offset: int,
    ) -> "KaylesState":
        """
        Knock down count_taken pins of a group, starting target_offset pins
        from its left edge. The group shrinks, or splits when both sides
        keep pins.
        """
        pins = base_state._pins
        if not 0 <= group < len(pins):
            raise ValueError(f"Group {group} out of range (0-{len(pins) - 1})")

        size = int(pins[group])
        if not MIN_TAKEN <= count_taken <= MAX_TAKEN:
            raise ValueError(f"Cannot take {count_taken} pins (allowed {MIN_TAKEN}-{MAX_TAKEN})")
        if target_offset < 0 or target_offset + count_taken > size:
            raise ValueError(
                f"Taking {count_taken} at offset {target_offset} leaves group {group} of {size}"
            )

        left = target_offset
        right = size - target_offset - count_taken

        if left and right:
            new_pins = np.concatenate((pins[:group], [left, right], pins[group + 1:]))
        else:
            new_pins = pins.copy()
            new_pins[group] = left + right

        s = cls.__new__(cls)
        s._pins = new_pins.astype(np.int16)
        s._turn = not base_state._turn
        s._cache_hash()
        return s

    def game_id(self) -> str:
        return "kayles"

    @property
    def pins(self) -> Tuple[int, ...]:
        """Pin count of every group, in board order."""
        return tuple(int(p) for p in self._pins)

    def groups_of_pins(self) -> int:
        return len(self._pins)

    def pins_in_group(self, group: int) -> int:
        """Pins standing in a group, or -1 if the group doesn't exist."""
        if not 0 <= group < len(self._pins):
            return -1
        return int(self._pins[group])

    def game_over(self) -> bool:
        return not np.any(self._pins)

    def score_game(self) -> Score:
        if not self.game_over():
            return Score.TIE
        # No pins left on our turn: the opponent took the last one
        return Score.LOSS if self._turn else Score.VICTORY

    def computers_turn(self) -> bool:
        return self._turn

    def successors(self) -> List["KaylesState"]:
        result = []
        for group, size in enumerate(self._pins.tolist()):
            for offset in range(size):
                for taken in range(MIN_TAKEN, MAX_TAKEN + 1):
                    if offset + taken <= size:
                        result.append(KaylesState.successor(self, group, taken, offset))

        logger.debug("%d successors for %s", len(result), self)
        return result

    def apply(self, move: KaylesMove) -> "KaylesState":
        group, offset, taken = move
        return KaylesState.successor(self, group, taken, offset)

    def assign(self, other: "KaylesState") -> "KaylesState":
        if other is not self:
            self._pins = other._pins.copy()
            self._turn = other._turn
            self.hash_code = other.hash_code
        return self

    def canonical(self) -> Tuple[int, ...]:
        """Non-empty groups, sorted: the position as a multiset."""
        return tuple(sorted(int(p) for p in self._pins if p > 0))

    @staticmethod
    def are_subsequent(first: "KaylesState", next_state: "KaylesState") -> bool:
        return len(KaylesState.diff(first, next_state)) == 3

    @staticmethod
    def diff(first: "KaylesState", next_state: "KaylesState") -> KaylesMove | Tuple[()]:
        """
        Find (group, offset, count_taken) leading from first to next_state.

        Groups are compared in board order first. A next_state that only
        equals a successor (empty groups dropped, groups reordered) is
        matched against first.successors(). An edge removal is reported as
        taken from the right end of the group. Returns () if the states are
        not one move apart.
        """
        move = KaylesState._board_diff(first, next_state)
        if move or first._turn == next_state._turn:
            return move

        for child in first.successors():
            if child == next_state:
                return KaylesState._board_diff(first, child)
        return ()

    @staticmethod
    def _board_diff(first: "KaylesState", next_state: "KaylesState") -> KaylesMove | Tuple[()]:
        """Move between two states whose groups line up in board order, or ()."""
        if first._turn == next_state._turn:
            return ()

        before = first._pins.tolist()
        after = next_state._pins.tolist()

        # Index of the first group that differs
        group = 0
        while group < len(before) and group < len(after) and before[group] == after[group]:
            group += 1
        if group == len(before):
            return ()

        size = before[group]

        if len(after) == len(before):
            taken = size - after[group]
            if before[group + 1:] != after[group + 1:]:
                return ()
            if MIN_TAKEN <= taken <= MAX_TAKEN:
                return (group, after[group], taken)
            return ()

        if len(after) == len(before) + 1:
            left, right = after[group], after[group + 1]
            taken = size - left - right
            if before[group + 1:] != after[group + 2:]:
                return ()
            if left > 0 and right > 0 and MIN_TAKEN <= taken <= MAX_TAKEN:
                return (group, left, taken)
            return ()

        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KaylesState):
            return NotImplemented
        return self._turn == other._turn and self.canonical() == other.canonical()

    __hash__ = GameStateBase.__hash__

    def __str__(self) -> str:
        groups = " ".join(str(p) for p in self._pins.tolist())
        return f"It is the {self._turn_word()}'s turn and the pin groups are: {groups}"

    def __repr__(self) -> str:
        return f"KaylesState({self.pins!r}, we_are_up={self._turn})"

    def _cache_hash(self) -> None:
        """Must run after every change to _pins or _turn."""
        self.hash_code = fold_hash(self.canonical(), self._turn)
