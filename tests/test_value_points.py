"""Tests for ValuePointCalculator."""

import pytest

from conftest import make_reference
from crimsonnimbus.engine.value_points import ValuePointCalculator


class TestValuePointCalculator:
    """Test suite for ValuePointCalculator."""

    @pytest.mark.parametrize("wins,expected", [(0, 0), (1, 1), (2, 3), (3, 6), (4, 10), (10, 55), (-2, 0)])
    def test_modifier_is_sum_of_one_to_wins(self, wins, expected):
        """Test the win streak bonus accumulation."""
        assert ValuePointCalculator.modifier(wins) == expected

    def test_all_fifty_scores_325(self):
        """Test the reference example: every stat 50, no streak."""
        calculator = ValuePointCalculator()
        assert calculator.score(make_reference(value=50), 0) == pytest.approx(325.0)

    def test_zero_wins_is_weighted_sum(self):
        """Test that without a streak the score is the plain weighted sum."""
        calculator = ValuePointCalculator()
        character = make_reference(
            height=180, weight=90, intelligence=10, strength=20, speed=30, durability=40, combat=60, power=70
        )
        expected = 180 * 0.2 + 90 * 0.3 + 10 * 0.8 + 20 * 1.1 + 30 * 1.0 + 40 * 0.8 + 60 * 1.2 + 70 * 1.1
        assert calculator.score(character, 0) == pytest.approx(expected)

    def test_height_and_weight_capped_before_multiplying(self):
        """Test that oversized height and weight stop contributing at the cap."""
        calculator = ValuePointCalculator()
        breakdown = calculator.breakdown(make_reference(height=1000, weight=5000), 0)
        assert breakdown["height"] == pytest.approx(300 * 0.2)
        assert breakdown["weight"] == pytest.approx(400 * 0.3)

    def test_cap_applies_after_modifier(self):
        """Test that the streak bonus cannot push height past the cap."""
        calculator = ValuePointCalculator()
        breakdown = calculator.breakdown(make_reference(height=299), 2)
        assert breakdown["height"] == pytest.approx(300 * 0.2)

    def test_other_stats_not_capped_by_modifier(self):
        """Test that the bonus can lift ordinary stats above 100."""
        calculator = ValuePointCalculator()
        breakdown = calculator.breakdown(make_reference(value=100), 4)
        assert breakdown["power"] == pytest.approx(110 * 1.1)

    def test_streak_bonus_added_to_every_stat(self):
        """Test score with a streak of 3 (bonus 6) on an all-50 character."""
        calculator = ValuePointCalculator()
        assert calculator.score(make_reference(value=50), 3) == pytest.approx(56 * 6.5)

    def test_score_not_rounded(self):
        """Test that fractional value points are kept."""
        calculator = ValuePointCalculator()
        score = calculator.score(make_reference(value=0, height=1), 0)
        assert score == pytest.approx(0.2)

    def test_score_monotonic_in_stats_and_wins(self):
        """Test that raising a stat or the streak never lowers the score."""
        calculator = ValuePointCalculator()
        base = calculator.score(make_reference(value=40), 1)
        assert calculator.score(make_reference(value=40, combat=41), 1) >= base
        assert calculator.score(make_reference(value=40, height=2000), 1) >= base
        assert calculator.score(make_reference(value=40), 2) >= base

    def test_score_deterministic(self):
        """Test that scoring the same input twice gives the same value."""
        calculator = ValuePointCalculator()
        character = make_reference(value=37, height=401, weight=12)
        assert calculator.score(character, 5) == calculator.score(character, 5)
