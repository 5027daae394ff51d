"""
Configuration and game registry.
"""

from typing import Any, Dict, Optional

from combo_games.games import Connect3State, CrossoutState, KaylesState


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "kayles": KaylesState,
    "crossout": CrossoutState,
    "connect3": Connect3State,
}

# Starting parameters per game
DEFAULT_PARAMS: Dict[str, Dict[str, Any]] = {
    "kayles": {"pins": (3, 4, 5)},
    "crossout": {"high_value": 9, "max_sum": 9},
    "connect3": {"columns": 4, "elements": 4},
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_SEARCH_DEPTH = 8


class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "kayles",
        depth: int = DEFAULT_SEARCH_DEPTH,
        computer_first: bool = True,
        params: Optional[Dict[str, Any]] = None,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if depth < 1:
            raise ValueError(f"Search depth must be positive: {depth}")

        self.game_name = game_name
        self.depth = depth
        self.computer_first = computer_first

        # Only override what was actually given
        self.params = dict(DEFAULT_PARAMS[game_name])
        if params:
            unknown = set(params) - set(self.params)
            if unknown:
                raise ValueError(f"Unknown {game_name} parameter(s): {sorted(unknown)}")
            self.params.update({k: v for k, v in params.items() if v is not None})


# Default configuration
DEFAULT_CONFIG = Config()
