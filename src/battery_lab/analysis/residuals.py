"""Residual analysis of a discharge curve.

The trend is the straight line through the first and last samples (not a
least-squares fit):

  trend(t)  = start + (end − start) × t / t_end
  rᵢ        = healthᵢ − trend(tᵢ)
  xᵢ        = rᵢ − mean(r)
  rms       = √(mean(xᵢ²))
  lag1      = Σ xᵢ·xᵢ₊₁ / Σ xᵢ²        (i = 0 … n−2; 0 if the denominator is 0)

A curve is ``structured`` when its residuals are both large and persistent:
|lag1| > :data:`STRUCTURE_LAG1_THRESHOLD` and rms > :data:`STRUCTURE_RMS_THRESHOLD`.
Both thresholds are tunable policy values, not physical constants.
"""

from __future__ import annotations

import numpy as np

from battery_lab.models.results import DischargeSummary, DischargeTrajectory, ResidualStats

STRUCTURE_LAG1_THRESHOLD = 0.5
STRUCTURE_RMS_THRESHOLD = 5.0  # % health

RESIDUAL_EPSILON = 1e-9
"""When every centered residual is below this, the curve is the trend line and x is all 0."""


def analyze_residuals(
    trajectory: DischargeTrajectory,
    lag1_threshold: float = STRUCTURE_LAG1_THRESHOLD,
    rms_threshold: float = STRUCTURE_RMS_THRESHOLD,
) -> ResidualStats:
    """Residual RMS, lag-1 autocorrelation and structured/noise-like verdict."""
    t = np.asarray(trajectory.time_hours, dtype=np.float64)
    h = np.asarray(trajectory.health_pct, dtype=np.float64)

    start, end = h[0], h[-1]
    t_end = t[-1]
    if t_end > 0:
        trend = start + (end - start) * (t / t_end)
    else:
        trend = np.full_like(h, start)

    residuals = h - trend
    x = residuals - residuals.mean()
    if np.max(np.abs(x)) < RESIDUAL_EPSILON:
        x = np.zeros_like(x)
    rms = float(np.sqrt(np.mean(x * x)))

    den = float(np.sum(x[:-1] * x[:-1]))
    num = float(np.sum(x[:-1] * x[1:]))
    lag1 = num / den if den != 0 else 0.0

    structured = abs(lag1) > lag1_threshold and rms > rms_threshold
    return ResidualStats(
        rms=rms,
        lag1_correlation=lag1,
        classification="structured" if structured else "noiselike",
    )


def summarize_discharge(trajectory: DischargeTrajectory) -> DischargeSummary:
    """Duration, start → end health and average drain of a curve."""
    duration = trajectory.time_hours[-1]
    start = trajectory.health_pct[0]
    end = trajectory.health_pct[-1]
    used = max(0.0, start - end)
    return DischargeSummary(
        duration_hours=duration,
        start_pct=start,
        end_pct=end,
        used_pct=used,
        avg_drain_pct_per_hour=used / duration if duration > 0 else 0.0,
    )
