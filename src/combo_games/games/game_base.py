"""
GameStateBase - abstract base class for all game states.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from combo_games.core.types import Score


class GameStateBase(ABC):
    """
    Abstract base class for all game states.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - A state is a VALUE: position + whose turn + cached hash.
    - Successors are fresh states; nothing is shared with the parent.
    - The only mutation is assign(), from a structurally compatible source.

    The search driver relies on successors(), game_over(), score_game(),
    computers_turn(), __hash__ and __eq__ only.
    """

    __slots__ = ()

    hash_code: int

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'kayles')."""
        pass

    @abstractmethod
    def game_over(self) -> bool:
        """Return True if the position is terminal."""
        pass

    @abstractmethod
    def score_game(self) -> Score:
        """
        Return the outcome for the computer:
            VICTORY / TIE / LOSS
        TIE also means the game is not over.
        """
        pass

    @abstractmethod
    def computers_turn(self) -> bool:
        """Return True if the computer is to move."""
        pass

    @abstractmethod
    def successors(self) -> List["GameStateBase"]:
        """
        Return every state reachable by one legal move, in a fixed order.
        Each successor has the turn flipped.
        """
        pass

    @abstractmethod
    def apply(self, move: Any) -> "GameStateBase":
        """
        Build the successor for a move descriptor, in the same form
        diff() returns.
        """
        pass

    @abstractmethod
    def assign(self, other: "GameStateBase") -> "GameStateBase":
        """
        Copy position, turn and cached hash from a compatible state.
        Returns self.
        """
        pass

    @staticmethod
    @abstractmethod
    def are_subsequent(first: "GameStateBase", next_state: "GameStateBase") -> bool:
        """Return True if next_state follows first by exactly one legal move."""
        pass

    @staticmethod
    @abstractmethod
    def diff(first: "GameStateBase", next_state: "GameStateBase") -> Any:
        """Return the move that turns first into next_state."""
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return self.hash_code

    @abstractmethod
    def __str__(self) -> str:
        """One-line synopsis of the state."""
        pass

    def _turn_word(self) -> str:
        return "computer" if self.computers_turn() else "human"
