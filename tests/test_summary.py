"""Tests for consensus statistics.

Invariants:
1. No guesses -> None, never a zero or NaN summary
2. std_dev is the population standard deviation (divide by count)
3. Every guess is weighted equally, whatever its source
"""

import math
from datetime import datetime, timezone

import pytest

from hivemind.aggregation.summary import (
    build_median_snapshot,
    compute_median,
    summarize,
)
from hivemind.dev.simulate import simulate_guesses
from hivemind.models.types import ConsensusSummary


class TestSummarize:
    """Tests for summarize()."""

    def test_empty_returns_none(self):
        """Empty input is the explicit no-data result."""
        assert summarize([]) is None

    def test_empty_generator_returns_none(self):
        assert summarize(g for g in []) is None

    def test_single_guess(self, make_guess):
        """One guess of 42 -> count 1, mean 42, std_dev 0."""
        summary = summarize([make_guess(42)])
        assert isinstance(summary, ConsensusSummary)
        assert summary.count == 1
        assert summary.mean == 42
        assert summary.std_dev == 0

    def test_identical_values_have_zero_spread(self, make_guesses):
        summary = summarize(make_guesses([50, 50, 50, 50]))
        assert summary.std_dev == 0

    def test_population_std_dev(self, make_guesses):
        """[40, 50, 60] -> sqrt(200/3), not the sample formula sqrt(100)."""
        summary = summarize(make_guesses([40, 50, 60]))
        assert summary.count == 3
        assert summary.mean == pytest.approx(50)
        assert summary.std_dev == pytest.approx(math.sqrt(200 / 3))
        assert summary.std_dev == pytest.approx(8.165, abs=1e-3)

    def test_wide_distribution(self, make_guesses):
        summary = summarize(make_guesses([10, 30, 50, 70, 90]))
        assert summary.std_dev == pytest.approx(28.284, abs=1e-3)

    def test_decimal_values(self, make_guesses):
        summary = summarize(make_guesses([49.5, 50.0, 50.5]))
        assert summary.mean == pytest.approx(50.0)
        assert summary.std_dev == pytest.approx(0.408, abs=1e-3)

    def test_source_does_not_weight(self, make_guess):
        """Guesses from every source count equally."""
        guesses = [
            make_guess(20, user_id="a", source="IN_APP"),
            make_guess(80, user_id="b", source="REDDIT_COMMENT"),
            make_guess(50, user_id="c", source="UNKNOWN"),
        ]
        assert summarize(guesses).mean == pytest.approx(50)

    def test_input_not_mutated(self, make_guesses):
        guesses = make_guesses([30, 10, 20])
        before = list(guesses)
        summarize(guesses)
        assert guesses == before

    def test_simulated_round_statistics(self):
        """111 seeded guesses around 50 with spread 9 land near 50 and 9."""
        guesses = simulate_guesses("test-game", target=50, count=111, std_dev=9, seed=20240101)
        summary = summarize(guesses)
        assert summary.count == 111
        assert summary.mean == pytest.approx(50, abs=3)
        assert summary.std_dev == pytest.approx(9, abs=2)


class TestComputeMedian:
    """Tests for compute_median()."""

    def test_empty(self):
        stats = compute_median([])
        assert stats.median is None
        assert stats.sample_size == 0

    def test_odd_count_takes_middle(self, make_guesses):
        stats = compute_median(make_guesses([90, 10, 40]))
        assert stats.median == 40
        assert stats.sample_size == 3

    def test_even_count_averages_middle_pair(self, make_guesses):
        assert compute_median(make_guesses([10, 20, 30, 40])).median == 25

    def test_even_count_half_rounds_up(self, make_guesses):
        """Middle pair 20 and 21 -> 20.5 -> 21."""
        assert compute_median(make_guesses([20, 21])).median == 21


class TestBuildMedianSnapshot:
    """Tests for build_median_snapshot()."""

    def test_no_guesses_returns_none(self):
        assert build_median_snapshot("game-1", []) is None

    def test_snapshot_fields(self, make_guesses):
        now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        snapshot = build_median_snapshot("game-1", make_guesses([10, 70, 30]), now=now)
        assert snapshot.game_id == "game-1"
        assert snapshot.median == 30
        assert snapshot.sample_size == 3
        assert snapshot.calculated_at == now
        assert snapshot.freshness == "FRESH"

    def test_default_timestamp_is_utc(self, make_guesses):
        snapshot = build_median_snapshot("game-1", make_guesses([50]))
        assert snapshot.calculated_at.tzinfo is not None
