"""
Depth-limited minimax with alpha-beta pruning.

The computer maximises, the human minimises. Positions are memoised in a
transposition table keyed by the state itself, so lookups go through the
state's cached hash and fall back to equality on collisions.
"""

from __future__ import annotations

import logging
from typing import Dict, NamedTuple, Optional, Tuple

from combo_games.core.types import Score
from combo_games.games.game_base import GameStateBase

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    value: int
    depth: int  # Remaining depth the value was searched with


class TranspositionTable:
    """Exact minimax values keyed by state."""

    __slots__ = ('_entries', 'hits')

    def __init__(self):
        self._entries: Dict[GameStateBase, _Entry] = {}
        self.hits = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, state: GameStateBase) -> bool:
        return state in self._entries

    def lookup(self, state: GameStateBase, depth: int) -> Optional[int]:
        """Return a stored value searched at least as deep, or None."""
        entry = self._entries.get(state)
        if entry is None or entry.depth < depth:
            return None
        self.hits += 1
        return entry.value

    def store(self, state: GameStateBase, value: int, depth: int) -> None:
        entry = self._entries.get(state)
        if entry is None or entry.depth <= depth:
            self._entries[state] = _Entry(value, depth)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0


def minimax(
    state: GameStateBase,
    depth: int,
    alpha: int = Score.LOSS,
    beta: int = Score.VICTORY,
    table: Optional[TranspositionTable] = None,
) -> int:
    """
    Value of a state from the computer's point of view.

    Terminal states score themselves; a non-terminal state at depth 0
    counts as TIE. Only exact values are stored in the table: those found
    inside the (alpha, beta) window, and LOSS or VICTORY, which no bound
    can improve on.
    """
    if state.game_over():
        return int(state.score_game())
    if depth <= 0:
        return int(Score.TIE)

    if table is not None:
        cached = table.lookup(state, depth)
        if cached is not None:
            return cached

    lo, hi = alpha, beta
    maximising = state.computers_turn()
    best = int(Score.LOSS) if maximising else int(Score.VICTORY)

    for child in state.successors():
        value = minimax(child, depth - 1, alpha, beta, table)
        if maximising:
            best = max(best, value)
            alpha = max(alpha, best)
        else:
            best = min(best, value)
            beta = min(beta, best)
        if alpha >= beta:
            break

    exact = lo < best < hi or best in (Score.LOSS, Score.VICTORY)
    if table is not None and exact:
        table.store(state, best, depth)

    return best


def choose_successor(
    state: GameStateBase,
    depth: int,
    table: Optional[TranspositionTable] = None,
) -> Tuple[GameStateBase, int]:
    """
    Pick the best successor for whoever is to move.

    Ties go to the first successor in enumeration order.

    Returns:
        (successor, value) with value from the computer's point of view
    """
    children = state.successors()
    if not children:
        raise ValueError(f"No moves from a finished game: {state}")

    if table is None:
        table = TranspositionTable()

    maximising = state.computers_turn()
    best_child, best_value = children[0], None

    for child in children:
        value = minimax(child, depth - 1, table=table)
        if (
            best_value is None
            or (maximising and value > best_value)
            or (not maximising and value < best_value)
        ):
            best_child, best_value = child, value

    logger.debug(
        "Chose value %d among %d successors (%d table entries, %d hits)",
        best_value, len(children), len(table), table.hits,
    )
    return best_child, best_value
