"""
Core types and gameplay constants.

This module contains the fundamental types used by every game state:
- Score: terminal outcome from the computer's point of view
- Move-size limits for the take-away games
- Run length for Connect-3
"""

from __future__ import annotations

from enum import IntEnum


class Score(IntEnum):
    """
    Outcome of a match, seen from the computer ("good guy").

    TIE doubles as "not finished yet"; callers must consult
    game_over() before reading a TIE as a draw.
    """

    LOSS = -1
    TIE = 0
    VICTORY = 1


# ─── Take-away games (Kayles, Crossout) ───────────────────────────────────────

MIN_TAKEN = 1  # Fewest pins/tiles a single move may remove
MAX_TAKEN = 2  # Most pins/tiles a single move may remove

# ─── Connect-3 ────────────────────────────────────────────────────────────────

CONNECTABLE = 3  # Aligned symbols needed to win
