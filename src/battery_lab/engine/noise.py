"""Noise processes — per-step perturbations fed into the simulators.

Two strategies implement the same one-method protocol, so the simulators
never branch on the noise model:

White:
  sample = A × z,   z ~ N(0, 1) i.i.d.

Colored (AR(1)):
  εₙ     = ρ × εₙ₋₁ + √(1 − ρ²) × z
  sample = A × εₙ
  ε₀ = 0 (process starts at its unconditional mean).  The √(1 − ρ²) factor
  keeps the stationary variance of ε at 1, so A is the marginal σ for
  either regime.

For a continuous-time correlation time τ sampled every Δt,
ρ = exp(−Δt / τ), see :meth:`ColoredNoise.from_time_constant`.  Halving
Δt doubles the number of steps per τ while keeping the decay per unit time
unchanged.
"""

from __future__ import annotations

import math
from typing import Protocol

from battery_lab.config.noise import NoiseSpec
from battery_lab.engine.random_source import RandomSource
from battery_lab.errors import InvalidConfigurationError


class NoiseProcess(Protocol):
    """Anything that yields one scalar noise sample per step."""

    def next_sample(self) -> float: ...


def _check_amplitude(amplitude: float) -> None:
    if amplitude < 0:
        raise InvalidConfigurationError(f"noise amplitude must be ≥ 0, got {amplitude}")


class WhiteNoise:
    """Independent N(0, A²) sample every step."""

    def __init__(self, amplitude: float, source: RandomSource) -> None:
        _check_amplitude(amplitude)
        self._amplitude = amplitude
        self._source = source

    @property
    def amplitude(self) -> float:
        return self._amplitude

    def next_sample(self) -> float:
        return self._amplitude * self._source.next_standard_normal()


class ColoredNoise:
    """First-order autoregressive noise with unit-variance innovation.

    Parameters
    ----------
    amplitude : float
        Marginal σ of the returned samples.
    correlation : float
        ρ ∈ [−1, 1).  ρ = 0 is white noise; ρ → 1 is a slow random walk.
    source : RandomSource
        Owned exclusively by this process.
    """

    def __init__(self, amplitude: float, correlation: float, source: RandomSource) -> None:
        _check_amplitude(amplitude)
        if not -1.0 <= correlation < 1.0:
            raise InvalidConfigurationError(
                f"correlation must lie in [-1, 1), got {correlation}"
            )
        self._amplitude = amplitude
        self._rho = correlation
        self._scale = math.sqrt(1.0 - correlation * correlation)
        self._source = source
        self._previous_innovation = 0.0

    @classmethod
    def from_time_constant(
        cls,
        amplitude: float,
        step: float,
        tau: float,
        source: RandomSource,
    ) -> ColoredNoise:
        """Build from a sampling step Δt and correlation time τ (same units)."""
        if step <= 0 or tau <= 0:
            raise InvalidConfigurationError(
                f"step and tau must be > 0, got step={step}, tau={tau}"
            )
        return cls(amplitude, math.exp(-step / tau), source)

    @property
    def amplitude(self) -> float:
        return self._amplitude

    @property
    def correlation(self) -> float:
        return self._rho

    @property
    def previous_innovation(self) -> float:
        """Last unit-variance innovation ε (0.0 before the first sample)."""
        return self._previous_innovation

    def next_sample(self) -> float:
        innovation = (
            self._rho * self._previous_innovation
            + self._scale * self._source.next_standard_normal()
        )
        self._previous_innovation = innovation
        return self._amplitude * innovation


def build_noise_process(spec: NoiseSpec, source: RandomSource) -> NoiseProcess:
    """Instantiate the strategy described by ``spec`` on its own source."""
    if spec.mode == "white":
        return WhiteNoise(spec.amplitude, source)
    return ColoredNoise(spec.amplitude, spec.correlation, source)
