"""
Games module - game-state implementations.
"""

from combo_games.games.game_base import GameStateBase
from combo_games.games.game_rules import in_bounds, board_full, all_equal, find_run, find_run_through
from combo_games.games.kayles import KaylesState
from combo_games.games.crossout import CrossoutState
from combo_games.games.connect3 import Connect3State

__all__ = [
    "GameStateBase",
    "KaylesState",
    "CrossoutState",
    "Connect3State",
    "in_bounds",
    "board_full",
    "all_equal",
    "find_run",
    "find_run_through",
]
