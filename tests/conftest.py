"""Shared test fixtures — lab presets and hand-calculable configs."""

from __future__ import annotations

import pytest

from battery_lab.config import (
    DischargeConfig,
    LifetimeConfig,
    Scenario,
    SimulationConfig,
)
from battery_lab.engine.random_source import RandomSource


@pytest.fixture
def source() -> RandomSource:
    return RandomSource(seed=1234)


@pytest.fixture
def lifetime_config() -> LifetimeConfig:
    """Reset preset with a smaller population for fast tests."""
    return LifetimeConfig(
        base_drain_per_step=1.5,
        noise_amplitude=2.0,
        correlation=0.8,
        unit_count=40,
        max_steps=1_200,
        fail_threshold=0.0,
        histogram_bins=12,
    )


@pytest.fixture
def deterministic_lifetime() -> LifetimeConfig:
    """Zero noise: every cell loses exactly 1.5% per step → fails at step 67."""
    return LifetimeConfig(
        base_drain_per_step=1.5,
        noise_amplitude=0.0,
        correlation=0.8,
        unit_count=5,
        max_steps=1_200,
        fail_threshold=0.0,
        histogram_bins=12,
    )


@pytest.fixture
def linear_discharge() -> DischargeConfig:
    """Zero noise: 1% per 30-min step, 100% → 80% over 10 h."""
    return DischargeConfig(
        duration_hours=10,
        drain_rate_per_hour=2,
        noise_amplitude=0,
        correlation_tau_minutes=5,
        step_resolution_minutes=30,
    )


@pytest.fixture
def noisy_discharge() -> DischargeConfig:
    return DischargeConfig(
        duration_hours=24,
        drain_rate_per_hour=5,
        noise_amplitude=3,
        correlation_tau_minutes=60,
        step_resolution_minutes=5,
    )


@pytest.fixture
def scenario(lifetime_config: LifetimeConfig, noisy_discharge: DischargeConfig) -> Scenario:
    return Scenario(
        lifetime=lifetime_config,
        discharge=noisy_discharge,
        simulation=SimulationConfig(random_seed=42),
    )
