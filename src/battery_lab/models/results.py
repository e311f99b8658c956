"""Result types — the contract between engine, analysis, and API.

Every model here is produced fresh by one experiment call and never mutated
afterwards.  Plain numeric lists only, so any renderer can consume them.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, model_validator


# ═══════════════════════════════════════════════════════════════════════════
# Distribution statistics
# ═══════════════════════════════════════════════════════════════════════════

class SummaryStats(BaseModel):
    """Mean and population standard deviation of a sample."""

    mean: float
    std: float
    """Population σ (divides by N). 0.0 for empty or single-element samples."""


class Histogram(BaseModel):
    """Fixed-count histogram over ``[0, max]``."""

    bin_width: float
    edges: list[int]
    """Display label per bin: rounded bin midpoint."""
    counts: list[int]


# ═══════════════════════════════════════════════════════════════════════════
# Population lifetime study
# ═══════════════════════════════════════════════════════════════════════════

class LifetimeDistribution(BaseModel):
    """Lifetimes of every simulated cell under one noise regime."""

    regime: Literal["white", "colored"]
    lifetimes: list[int]
    """Steps to failure per cell; ``max_steps`` for censored cells."""
    stats: SummaryStats
    censored_count: int
    """Cells that never reached the failure threshold."""
    histogram_counts: list[int]
    """Counts against the shared ``PopulationResult.histogram_edges``."""
    sample_trajectory: list[float]
    """Health path of the first simulated cell (index 0 = 100%)."""


class PopulationResult(BaseModel):
    """White-vs-colored lifetime comparison."""

    unit_count: int
    max_steps: int
    histogram_edges: list[int]
    """Bin labels shared by both regimes (width from the combined maximum)."""
    histogram_bin_width: float
    white: LifetimeDistribution
    colored: LifetimeDistribution
    relative_change_pct: float | None = None
    """Colored mean vs white mean, in %. None when the white mean is 0."""


# ═══════════════════════════════════════════════════════════════════════════
# Discharge curve
# ═══════════════════════════════════════════════════════════════════════════

class DischargeTrajectory(BaseModel):
    """Parallel time / health series of one discharge run."""

    time_hours: list[float]
    health_pct: list[float]

    @model_validator(mode="after")
    def _parallel_series(self) -> "DischargeTrajectory":
        if len(self.time_hours) != len(self.health_pct):
            raise ValueError(
                f"time_hours ({len(self.time_hours)}) and health_pct "
                f"({len(self.health_pct)}) must have equal length"
            )
        if not self.time_hours:
            raise ValueError("trajectory must contain at least one sample")
        return self

    def __len__(self) -> int:
        return len(self.time_hours)


class ResidualStats(BaseModel):
    """Deviation of a trajectory from its start-to-end straight line."""

    rms: float
    lag1_correlation: float
    """0.0 when the residuals are constant (undefined correlation)."""
    classification: Literal["structured", "noiselike"]


class DischargeSummary(BaseModel):
    """Headline numbers of one discharge curve."""

    duration_hours: float
    start_pct: float
    end_pct: float
    used_pct: float
    """max(0, start − end)."""
    avg_drain_pct_per_hour: float
    """used / duration; 0.0 for a zero-length curve."""


class DischargeResult(BaseModel):
    """Trajectory plus its residual analysis."""

    stressed: bool = False
    trajectory: DischargeTrajectory
    residuals: ResidualStats
    summary: DischargeSummary
