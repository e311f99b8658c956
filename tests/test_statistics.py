"""Tests for analysis/statistics.py — mean/σ, histogram, relative change.

Covers:
  - Population (÷N) standard deviation
  - Degenerate sentinels: empty sample, zero-mean relative change, zero width
  - Histogram: bins span [0, max], clamping, half-up midpoint labels
  - Count conservation for any bin count
  - Shared width across two samples
"""

from __future__ import annotations

import pytest

from battery_lab.analysis.statistics import (
    histogram,
    relative_change,
    shared_bin_width,
    summarize,
)
from battery_lab.errors import InvalidConfigurationError
from battery_lab.rounding import round_half_up


class TestSummarize:

    def test_population_standard_deviation(self):
        stats = summarize([2, 4, 4, 4, 5, 5, 7, 9])
        assert stats.mean == pytest.approx(5.0)
        assert stats.std == pytest.approx(2.0)  # sample σ would be 2.138

    def test_empty_sample_sentinel(self):
        stats = summarize([])
        assert stats.mean == 0.0
        assert stats.std == 0.0

    def test_single_value_has_zero_spread(self):
        stats = summarize([67])
        assert stats.mean == 67.0
        assert stats.std == 0.0


class TestHistogram:

    def test_bins_span_zero_to_max(self):
        """Minimum 50 does not shift the first bin away from 0."""
        h = histogram([50, 60, 120], bin_count=12)
        assert h.bin_width == pytest.approx(10.0)
        assert h.counts[5] == 1
        assert h.counts[6] == 1
        assert h.counts[11] == 1
        assert sum(h.counts[:5]) == 0

    def test_maximum_clamped_into_last_bin(self):
        h = histogram([0, 12], bin_count=12)
        assert h.counts[0] == 1
        assert h.counts[11] == 1

    def test_edges_are_half_up_rounded_midpoints(self):
        h = histogram([0, 12], bin_count=12)
        assert h.edges == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]

    def test_fractional_width_edges(self):
        """width = 67/12 ≈ 5.583 → first midpoint 2.79 → 3, last 64.2 → 64."""
        h = histogram([67] * 4, bin_count=12)
        assert h.edges[0] == 3
        assert h.edges[-1] == 64
        assert h.counts == [0] * 11 + [4]

    @pytest.mark.parametrize("bin_count", [1, 2, 5, 12, 37])
    def test_counts_sum_to_sample_size(self, bin_count: int):
        samples = [3, 17, 17, 40, 41, 88, 120, 120, 1, 0, 64]
        h = histogram(samples, bin_count=bin_count)
        assert sum(h.counts) == len(samples)
        assert len(h.counts) == len(h.edges) == bin_count

    def test_all_zero_samples_go_to_first_bin(self):
        h = histogram([0, 0, 0], bin_count=4)
        assert h.counts == [3, 0, 0, 0]
        assert h.edges == [0, 0, 0, 0]

    def test_empty_sample(self):
        h = histogram([], bin_count=3)
        assert h.counts == [0, 0, 0]

    def test_explicit_width_overrides_own_max(self):
        h = histogram([10, 20], bin_count=4, width=10.0)
        assert h.counts == [0, 1, 1, 0]

    @pytest.mark.parametrize("bin_count", [0, -3])
    def test_invalid_bin_count_rejected(self, bin_count: int):
        with pytest.raises(InvalidConfigurationError):
            histogram([1, 2, 3], bin_count=bin_count)


class TestSharedBinWidth:

    def test_width_from_combined_max(self):
        assert shared_bin_width([[10, 40], [90, 5]], bin_count=12) == pytest.approx(7.5)

    def test_empty_sets_ignored(self):
        assert shared_bin_width([[], [24]], bin_count=12) == pytest.approx(2.0)

    def test_shared_width_keeps_bins_comparable(self):
        white = [60, 65, 70]
        colored = [30, 90, 120]
        width = shared_bin_width([white, colored], bin_count=12)
        hw = histogram(white, 12, width=width)
        hc = histogram(colored, 12, width=width)
        assert hw.edges == hc.edges
        assert sum(hw.counts) == 3 and sum(hc.counts) == 3


class TestRelativeChange:

    def test_increase(self):
        assert relative_change(100.0, 110.0) == pytest.approx(10.0)

    def test_decrease(self):
        assert relative_change(80.0, 60.0) == pytest.approx(-25.0)

    def test_zero_baseline_is_undefined(self):
        assert relative_change(0.0, 5.0) is None


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
