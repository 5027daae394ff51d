"""
Core module - score type, move constants, and hashing.

This module provides the building blocks shared by every game state.
"""

from combo_games.core.types import (
    Score,
    MIN_TAKEN,
    MAX_TAKEN,
    CONNECTABLE,
)
from combo_games.core.hashing import fold_hash, HASH_PRIME, TURN_BIT

__all__ = [
    # Types
    "Score",
    # Constants
    "MIN_TAKEN",
    "MAX_TAKEN",
    "CONNECTABLE",
    "HASH_PRIME",
    "TURN_BIT",
    # Functions
    "fold_hash",
]
