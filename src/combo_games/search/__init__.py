"""
Search module - game-tree search over any game state.

Modules:
    minimax - depth-limited minimax with alpha-beta and a transposition table
"""

from combo_games.search.minimax import (
    TranspositionTable,
    minimax,
    choose_successor,
)

__all__ = [
    "TranspositionTable",
    "minimax",
    "choose_successor",
]
