"""Engine — random source, noise processes and the stochastic simulators."""

from battery_lab.engine.random_source import RandomSource
from battery_lab.engine.noise import NoiseProcess, WhiteNoise, ColoredNoise, build_noise_process
from battery_lab.engine.cell import CellDegradationSimulator, CellRunResult
from battery_lab.engine.population import run_population
from battery_lab.engine.discharge import simulate_discharge
from battery_lab.engine.orchestrator import run_lifetime_experiment, run_discharge_experiment

__all__ = [
    "RandomSource",
    "NoiseProcess",
    "WhiteNoise",
    "ColoredNoise",
    "build_noise_process",
    "CellDegradationSimulator",
    "CellRunResult",
    "run_population",
    "simulate_discharge",
    "run_lifetime_experiment",
    "run_discharge_experiment",
]
