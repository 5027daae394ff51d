"""
Tests for combo_games.core.types
"""

from combo_games.core.types import CONNECTABLE, MAX_TAKEN, MIN_TAKEN, Score


class TestScore:
    """Score enum tests."""

    def test_values(self):
        """Scores carry their conventional integer values."""
        assert Score.LOSS == -1
        assert Score.TIE == 0
        assert Score.VICTORY == 1

    def test_ordering(self):
        """Scores compare as integers."""
        assert Score.LOSS < Score.TIE < Score.VICTORY
        assert max(Score) is Score.VICTORY

    def test_round_trip_from_int(self):
        """Integer values map back to members."""
        assert Score(-1) is Score.LOSS
        assert Score(1) is Score.VICTORY


class TestConstants:

    def test_take_limits(self):
        assert (MIN_TAKEN, MAX_TAKEN) == (1, 2)

    def test_run_length(self):
        assert CONNECTABLE == 3
