"""Tests for engine/population.py — white vs colored Monte-Carlo study.

Covers:
  - Deterministic population (zero noise) → every lifetime 67, σ 0
  - Histogram counts conserve the unit count, edges shared by both regimes
  - Representative trajectory is a full path of the first unit
  - Single-unit population is valid
  - Seeded reproducibility
  - Correlated noise widens the lifetime spread
  - Invalid populations rejected before any unit runs
"""

from __future__ import annotations

import pytest

from battery_lab.config.lifetime import LifetimeConfig
from battery_lab.engine.population import run_population
from battery_lab.engine.random_source import RandomSource
from battery_lab.errors import InvalidConfigurationError


class TestDeterministicPopulation:

    def test_all_lifetimes_equal(self, deterministic_lifetime: LifetimeConfig):
        result = run_population(deterministic_lifetime, RandomSource(seed=1))

        for dist in (result.white, result.colored):
            assert dist.lifetimes == [67] * 5
            assert dist.stats.mean == 67.0
            assert dist.stats.std == 0.0
            assert dist.censored_count == 0

    def test_relative_change_is_zero(self, deterministic_lifetime: LifetimeConfig):
        result = run_population(deterministic_lifetime, RandomSource(seed=1))
        assert result.relative_change_pct == pytest.approx(0.0)

    def test_histogram_puts_everything_in_last_bin(self, deterministic_lifetime: LifetimeConfig):
        result = run_population(deterministic_lifetime, RandomSource(seed=1))
        assert result.histogram_bin_width == pytest.approx(67 / 12)
        assert result.white.histogram_counts == [0] * 11 + [5]
        assert result.colored.histogram_counts == [0] * 11 + [5]

    def test_censored_population(self):
        config = LifetimeConfig(
            base_drain_per_step=0.0, noise_amplitude=0.0,
            unit_count=3, max_steps=50, fail_threshold=10.0,
        )
        result = run_population(config, RandomSource(seed=0))
        assert result.white.lifetimes == [50, 50, 50]
        assert result.white.censored_count == 3
        assert result.colored.censored_count == 3


class TestNoisyPopulation:

    def test_counts_conserve_unit_count(self, lifetime_config: LifetimeConfig):
        result = run_population(lifetime_config, RandomSource(seed=3))
        assert sum(result.white.histogram_counts) == lifetime_config.unit_count
        assert sum(result.colored.histogram_counts) == lifetime_config.unit_count
        assert len(result.histogram_edges) == lifetime_config.histogram_bins

    def test_bin_width_from_combined_max(self, lifetime_config: LifetimeConfig):
        result = run_population(lifetime_config, RandomSource(seed=3))
        peak = max(result.white.lifetimes + result.colored.lifetimes)
        assert result.histogram_bin_width == pytest.approx(peak / lifetime_config.histogram_bins)

    def test_sample_trajectory_belongs_to_first_unit(self, lifetime_config: LifetimeConfig):
        result = run_population(lifetime_config, RandomSource(seed=3))
        for dist in (result.white, result.colored):
            assert dist.sample_trajectory[0] == 100.0
            assert len(dist.sample_trajectory) == dist.lifetimes[0] + 1

    def test_regimes_draw_independent_noise(self, lifetime_config: LifetimeConfig):
        result = run_population(lifetime_config, RandomSource(seed=3))
        assert result.white.sample_trajectory != result.colored.sample_trajectory

    def test_single_unit_population(self, lifetime_config: LifetimeConfig):
        config = lifetime_config.model_copy(update={"unit_count": 1})
        result = run_population(config, RandomSource(seed=3))
        assert len(result.white.lifetimes) == 1
        assert result.white.stats.std == 0.0
        assert result.colored.stats.std == 0.0

    def test_same_seed_same_result(self, lifetime_config: LifetimeConfig):
        a = run_population(lifetime_config, RandomSource(seed=77))
        b = run_population(lifetime_config, RandomSource(seed=77))
        assert a == b

    def test_different_seeds_differ(self, lifetime_config: LifetimeConfig):
        a = run_population(lifetime_config, RandomSource(seed=1))
        b = run_population(lifetime_config, RandomSource(seed=2))
        assert a.white.lifetimes != b.white.lifetimes

    def test_correlated_noise_widens_spread(self, lifetime_config: LifetimeConfig):
        """Persistent AR(1) excursions accumulate; white noise averages out."""
        config = lifetime_config.model_copy(update={"unit_count": 200})
        result = run_population(config, RandomSource(seed=5))
        assert result.colored.stats.std > result.white.stats.std

    def test_default_source(self, deterministic_lifetime: LifetimeConfig):
        result = run_population(deterministic_lifetime)
        assert result.white.lifetimes == [67] * 5


class _CountingSource(RandomSource):
    """Records how many child streams were requested."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.spawned = 0

    def spawn(self, n: int) -> list[RandomSource]:
        self.spawned += n
        return super().spawn(n)


class TestInvalidPopulation:
    """``model_copy(update=...)`` skips pydantic validation; the runner re-checks."""

    @pytest.mark.parametrize("unit_count", [0, -3])
    def test_empty_population_rejected(self, lifetime_config: LifetimeConfig, unit_count: int):
        config = lifetime_config.model_copy(update={"unit_count": unit_count})
        source = _CountingSource(seed=0)
        with pytest.raises(InvalidConfigurationError):
            run_population(config, source)
        assert source.spawned == 0

    def test_zero_bins_rejected_before_simulation(self, lifetime_config: LifetimeConfig):
        config = lifetime_config.model_copy(update={"histogram_bins": 0})
        source = _CountingSource(seed=0)
        with pytest.raises(InvalidConfigurationError):
            run_population(config, source)
        assert source.spawned == 0
