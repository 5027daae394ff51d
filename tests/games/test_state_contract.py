"""
Contract tests shared by every game state.

Each check runs over positions reached by seeded random playouts.
"""

from itertools import product

from combo_games.core.types import Score
from combo_games.games import Connect3State


class TestSuccessorContract:
    """Successors flip the turn and are exactly one move away."""

    def test_turn_alternates(self, reachable_states):
        for s in reachable_states:
            for t in s.successors():
                assert t.computers_turn() is not s.computers_turn()

    def test_successors_are_subsequent(self, reachable_states):
        for s in reachable_states:
            for t in s.successors():
                assert type(s).are_subsequent(s, t)

    def test_diff_round_trip(self, reachable_states):
        """Re-applying the recovered move rebuilds the successor."""
        for s in reachable_states:
            for t in s.successors():
                assert s.apply(type(s).diff(s, t)) == t

    def test_deterministic_order(self, initial_state):
        first = [t.hash_code for t in initial_state.successors()]
        second = [t.hash_code for t in initial_state.successors()]
        assert first == second

    def test_empty_iff_over(self, reachable_states):
        for s in reachable_states:
            assert (len(s.successors()) == 0) == s.game_over()


class TestScoreContract:

    def test_score_range(self, reachable_states):
        for s in reachable_states:
            assert s.score_game() in (Score.LOSS, Score.TIE, Score.VICTORY)

    def test_tie_means_unfinished_or_draw(self, reachable_states):
        for s in reachable_states:
            if not s.game_over():
                assert s.score_game() == Score.TIE
            elif not isinstance(s, Connect3State):
                assert s.score_game() != Score.TIE

    def test_playout_ends(self, initial_state, random_walk):
        assert random_walk(initial_state)[-1].game_over()


class TestIdentityContract:

    def test_hash_non_negative(self, reachable_states):
        assert all(hash(s) >= 0 for s in reachable_states)

    def test_equal_states_equal_hashes(self, reachable_states):
        for a, b in product(reachable_states, repeat=2):
            if a == b:
                assert hash(a) == hash(b)

    def test_reflexive_and_symmetric(self, reachable_states):
        for a, b in product(reachable_states, repeat=2):
            assert a == a
            assert (a == b) == (b == a)

    def test_transitive(self, reachable_states):
        sample = reachable_states[:12]
        for a, b, c in product(sample, repeat=3):
            if a == b and b == c:
                assert a == c

    def test_hash_matches_recomputation(self, reachable_states):
        """The cached hash equals a freshly computed one."""
        for s in reachable_states:
            cached = s.hash_code
            s._cache_hash()
            assert s.hash_code == cached


class TestAssignContract:

    def test_self_assign_is_identity(self, reachable_states):
        for s in reachable_states:
            before = s.hash_code
            assert s.assign(s) is s
            assert s.hash_code == before

    def test_assign_makes_equal(self, reachable_states):
        target = reachable_states[0]
        for s in reachable_states[1:]:
            target.assign(s)
            assert target == s
            assert hash(target) == hash(s)
