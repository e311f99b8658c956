"""Experiment entry points — scenario in, result model out.

Two independent pipelines, both seeded from ``scenario.simulation.random_seed``:

  lifetime:   Scenario.lifetime  → run_population → PopulationResult
  discharge:  Scenario.discharge → simulate_discharge → analyze_residuals
                                                      + summarize_discharge
              → DischargeResult

The same seed gives identical results; ``None`` draws fresh entropy.
"""

from __future__ import annotations

import logging

from battery_lab.analysis.residuals import analyze_residuals, summarize_discharge
from battery_lab.config.scenario import Scenario
from battery_lab.engine.discharge import simulate_discharge
from battery_lab.engine.population import run_population
from battery_lab.engine.random_source import RandomSource
from battery_lab.models.results import DischargeResult, PopulationResult

logger = logging.getLogger(__name__)


def run_lifetime_experiment(scenario: Scenario) -> PopulationResult:
    """White-vs-colored lifetime study for ``scenario.lifetime``."""
    source = RandomSource(scenario.simulation.random_seed)
    return run_population(scenario.lifetime, source)


def run_discharge_experiment(scenario: Scenario, stressed: bool = False) -> DischargeResult:
    """Simulate and analyze one discharge curve.

    ``stressed=True`` reruns the configured curve with amplified noise
    (:meth:`DischargeConfig.stressed`).
    """
    config = scenario.discharge.stressed() if stressed else scenario.discharge
    trajectory = simulate_discharge(config, RandomSource(scenario.simulation.random_seed))
    residuals = analyze_residuals(trajectory)

    logger.info(
        "discharge curve: %d samples, rms %.2f, lag1 %.3f → %s",
        len(trajectory), residuals.rms, residuals.lag1_correlation, residuals.classification,
    )

    return DischargeResult(
        stressed=stressed,
        trajectory=trajectory,
        residuals=residuals,
        summary=summarize_discharge(trajectory),
    )
