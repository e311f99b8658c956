"""Single-cell degradation simulator.

Steps one cell's health from 100% towards failure:

  loss   = max(0, drain + noise)        ← noise can slow drain, never reverse it
  health = clamp(health − loss, 0, 100)
  fail if  health ≤ fail_threshold

The run stops at the first failing step (``lifetime = step``) or after
``max_steps`` steps (``lifetime = max_steps``, right-censored).  The
trajectory always holds the initial 100% plus one value per executed step,
so ``len(trajectory) == lifetime + 1``.

Health is floored at 0, so a negative threshold is unreachable and every
such run is censored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from battery_lab.engine.noise import NoiseProcess
from battery_lab.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

INITIAL_HEALTH_PCT = 100.0
MIN_HEALTH_PCT = 0.0
MAX_HEALTH_PCT = 100.0


def clamp_health(value: float) -> float:
    """Clamp a health value into [0, 100]."""
    return max(MIN_HEALTH_PCT, min(MAX_HEALTH_PCT, value))


@dataclass(frozen=True)
class CellRunResult:
    """Immutable output of one cell run."""

    lifetime: int
    """Step at which health first reached the threshold, or ``max_steps``."""

    trajectory: tuple[float, ...]
    """Health after each step; index 0 is the initial 100%."""

    censored: bool
    """True when the threshold was never reached within the budget."""


class CellDegradationSimulator:
    """Runs cells with a fixed drain / threshold / budget.

    Usage::

        sim = CellDegradationSimulator(base_drain_per_step=1.5,
                                       fail_threshold=0.0, max_steps=1200)
        result = sim.run(WhiteNoise(2.0, RandomSource(7)))
        # result.lifetime → cycles to failure

    Parameters
    ----------
    base_drain_per_step : float
        Deterministic loss per step (% health).
    fail_threshold : float
        Failure level (% health).  ≤ 0 means failure only at full exhaustion.
    max_steps : int
        Step budget, ≥ 1.
    """

    def __init__(
        self,
        base_drain_per_step: float,
        fail_threshold: float,
        max_steps: int,
    ) -> None:
        if max_steps < 1:
            raise InvalidConfigurationError(f"max_steps must be ≥ 1, got {max_steps}")
        self._drain = base_drain_per_step
        self._threshold = fail_threshold
        self._max_steps = max_steps

    @property
    def max_steps(self) -> int:
        return self._max_steps

    def run(self, noise: NoiseProcess) -> CellRunResult:
        """Simulate one cell driven by ``noise`` (consumed, not shared)."""
        health = INITIAL_HEALTH_PCT
        path = [health]

        for step in range(1, self._max_steps + 1):
            step_loss = max(0.0, self._drain + noise.next_sample())
            health = clamp_health(health - step_loss)
            path.append(health)
            if health <= self._threshold:
                return CellRunResult(lifetime=step, trajectory=tuple(path), censored=False)

        logger.debug("cell censored at %d steps (health %.2f%%)", self._max_steps, health)
        return CellRunResult(lifetime=self._max_steps, trajectory=tuple(path), censored=True)
