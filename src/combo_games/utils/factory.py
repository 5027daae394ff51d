"""
Factory functions for creating initial game states.
"""

from typing import Any

from combo_games.games.game_base import GameStateBase
from combo_games.utils.config import DEFAULT_PARAMS, GAMES, Config


def create_state(game_name: str, computer_first: bool = True, **params: Any) -> GameStateBase:
    """
    Create the initial state of a game.

    Args:
        game_name: Key from GAMES registry (e.g., "kayles")
        computer_first: Whether the computer makes the first move
        **params: Overrides for DEFAULT_PARAMS[game_name]

    Returns:
        Fresh initial state
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    merged = dict(DEFAULT_PARAMS[game_name])
    merged.update({k: v for k, v in params.items() if v is not None})

    if game_name == "kayles":
        return GAMES[game_name](merged["pins"], computer_first)
    if game_name == "crossout":
        return GAMES[game_name](merged["max_sum"], merged["high_value"], computer_first)
    return GAMES[game_name](merged["columns"], merged["elements"], (), computer_first)


def create_from_config(config: Config) -> GameStateBase:
    """Create the initial state described by a Config."""
    return create_state(config.game_name, config.computer_first, **config.params)
