"""Discharge curve simulator — one continuous-time trajectory.

  steps     = max(2, round(duration × 60 / Δt_min))
  Δt_h      = Δt_min / 60
  base_loss = drain_rate × Δt_h
  ε         ← AR(1) with a = exp(−Δt_min / τ_min), innovation √(1 − a²)
  loss      = max(0, base_loss + A × ε)
  health    = clamp(health − loss, 0, 100)

Sample 0 is (0 h, 100%); each step appends one sample, so an untrimmed run
holds ``steps + 1`` samples.  Zero health is absorbing: once it is reached
the remaining steps are filled with 0 and the loop stops.  Finally the
tail is trimmed to the last positive sample plus at most
:data:`TRAILING_ZERO_SAMPLES` zeros.
"""

from __future__ import annotations

import logging
import math

from battery_lab.config.discharge import DischargeConfig
from battery_lab.engine.cell import INITIAL_HEALTH_PCT, clamp_health
from battery_lab.engine.noise import ColoredNoise
from battery_lab.engine.random_source import RandomSource
from battery_lab.errors import InvalidConfigurationError
from battery_lab.models.results import DischargeTrajectory
from battery_lab.rounding import round_half_up

logger = logging.getLogger(__name__)

MIN_STEPS = 2
TRAILING_ZERO_SAMPLES = 10
"""Zero-health samples kept after the battery empties."""


def step_count(config: DischargeConfig) -> int:
    """Number of simulated steps for ``config``."""
    if config.step_resolution_minutes <= 0:
        raise InvalidConfigurationError(
            f"step_resolution_minutes must be > 0, got {config.step_resolution_minutes}"
        )
    raw = config.duration_hours * 60.0 / config.step_resolution_minutes
    if not math.isfinite(raw) or raw < 0:
        raise InvalidConfigurationError(
            f"duration_hours={config.duration_hours} and step_resolution_minutes="
            f"{config.step_resolution_minutes} do not give a finite step count"
        )
    return max(MIN_STEPS, round_half_up(raw))


def simulate_discharge(config: DischargeConfig, source: RandomSource | None = None) -> DischargeTrajectory:
    """Simulate one discharge curve.

    Parameters
    ----------
    config : DischargeConfig
        Validated curve inputs.
    source : RandomSource | None
        Owned by this run.  ``None`` = fresh entropy.

    Returns
    -------
    DischargeTrajectory
        Trimmed time (h) / health (%) series; health is non-increasing.
    """
    steps = step_count(config)
    dt_hours = config.step_resolution_minutes / 60.0
    base_loss = config.drain_rate_per_hour * dt_hours
    noise = ColoredNoise.from_time_constant(
        amplitude=config.noise_amplitude,
        step=config.step_resolution_minutes,
        tau=config.correlation_tau_minutes,
        source=source if source is not None else RandomSource(),
    )

    health = INITIAL_HEALTH_PCT
    times = [0.0]
    levels = [health]

    for i in range(1, steps + 1):
        loss = max(0.0, base_loss + noise.next_sample())
        health = clamp_health(health - loss)
        times.append(i * dt_hours)
        levels.append(health)

        if health <= 0.0 and i < steps:
            # Absorbing at empty
            for j in range(i + 1, steps + 1):
                times.append(j * dt_hours)
                levels.append(0.0)
            logger.debug("battery empty at %.2f h of %.2f h", i * dt_hours, steps * dt_hours)
            break

    keep = _trimmed_length(levels)
    return DischargeTrajectory(time_hours=times[:keep], health_pct=levels[:keep])


def _trimmed_length(levels: list[float]) -> int:
    """Length after dropping all but ``TRAILING_ZERO_SAMPLES`` trailing zeros."""
    last_positive = 0
    for i in range(len(levels) - 1, -1, -1):
        if levels[i] > 0.0:
            last_positive = i
            break
    tail = min(TRAILING_ZERO_SAMPLES, len(levels) - last_positive - 1)
    return last_positive + 1 + tail
