"""Result models — simulation output contracts."""

from battery_lab.models.results import (
    DischargeResult,
    DischargeSummary,
    DischargeTrajectory,
    Histogram,
    LifetimeDistribution,
    PopulationResult,
    ResidualStats,
    SummaryStats,
)

__all__ = [
    "DischargeResult",
    "DischargeSummary",
    "DischargeTrajectory",
    "Histogram",
    "LifetimeDistribution",
    "PopulationResult",
    "ResidualStats",
    "SummaryStats",
]
