"""
Combo Games - game-state engines for two-player combinatorial games.

Every state is an immutable value with successor enumeration, terminal
scoring, and a stable hash, so a single minimax driver can search any
of the games with a transposition table.

Quick Start:
    from combo_games import KaylesState, choose_successor

    state = KaylesState([3, 4, 5], we_are_up=True)
    move, value = choose_successor(state, depth=8)

Modules:
    core    - Score type, move constants, position hashing
    games   - Kayles, Crossout and Connect-3 states
    search  - Depth-limited minimax with alpha-beta and a transposition table
    utils   - Game registry, play configuration, state factory
    cli     - Interactive play against the computer
"""

from combo_games.core import Score
from combo_games.games import (
    GameStateBase,
    KaylesState,
    CrossoutState,
    Connect3State,
)
from combo_games.search import TranspositionTable, minimax, choose_successor

__version__ = "1.0.0"

__all__ = [
    # States
    "GameStateBase",
    "KaylesState",
    "CrossoutState",
    "Connect3State",
    # Search
    "TranspositionTable",
    "minimax",
    "choose_successor",
    # Types
    "Score",
]
