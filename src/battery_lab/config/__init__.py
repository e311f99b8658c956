"""Configuration models — every lab input type."""

from battery_lab.config.noise import NoiseSpec
from battery_lab.config.lifetime import LifetimeConfig
from battery_lab.config.discharge import DischargeConfig, STRESS_NOISE_MULTIPLIER
from battery_lab.config.scenario import Scenario, SimulationConfig

__all__ = [
    "NoiseSpec",
    "LifetimeConfig",
    "DischargeConfig",
    "STRESS_NOISE_MULTIPLIER",
    "SimulationConfig",
    "Scenario",
]
