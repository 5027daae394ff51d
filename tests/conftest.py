"""
Shared test fixtures for combo_games tests.

Design principles:
- Game-agnostic fixtures where possible
- Seeded randomness only
- Minimal, focused fixtures
"""

import random
from typing import Callable, List

import pytest

from combo_games.games import Connect3State, CrossoutState, KaylesState
from combo_games.games.game_base import GameStateBase


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Initial States
# =============================================================================

def _initial_states() -> List[GameStateBase]:
    return [
        KaylesState([3, 4, 2], we_are_up=True),
        KaylesState([5], we_are_up=False),
        CrossoutState(7, 8, we_are_up=True),
        CrossoutState(5, 6, we_are_up=False, crossed=[4]),
        Connect3State(3, 3, (), we_are_up=True),
        Connect3State(4, 4, ["X", "O"], we_are_up=True),
    ]


@pytest.fixture(params=range(len(_initial_states())), ids=lambda i: _initial_states()[i].game_id() + str(i))
def initial_state(request) -> GameStateBase:
    """Each game, from a couple of starting positions."""
    return _initial_states()[request.param]


# =============================================================================
# Reachable Positions
# =============================================================================

@pytest.fixture
def random_walk(rng: random.Random) -> Callable[[GameStateBase], List[GameStateBase]]:
    """Play random successors until the game ends; return every state seen."""

    def walk(state: GameStateBase) -> List[GameStateBase]:
        seen = [state]
        while not state.game_over():
            state = rng.choice(state.successors())
            seen.append(state)
        return seen

    return walk


@pytest.fixture
def reachable_states(initial_state: GameStateBase, random_walk) -> List[GameStateBase]:
    """States from a few random playouts of one initial state."""
    states: List[GameStateBase] = []
    for _ in range(3):
        states.extend(random_walk(initial_state))
    return states
