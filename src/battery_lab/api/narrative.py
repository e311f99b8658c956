"""Narrative generator — plain-English interpretation of lab results.

Turns the numeric result models into short text blocks that a caller can
show next to its charts, or hand to an LLM.
"""

from __future__ import annotations

from battery_lab.models.results import DischargeResult, LifetimeDistribution, PopulationResult

STRUCTURED_VERDICT = (
    "Noticeable structure: high noise in residuals; strong correlation in noise "
    "(structured behaviour)."
)
NOISELIKE_VERDICT = (
    "Residuals look mostly uncorrelated; behaviour close to simple noise around a trend."
)


def format_relative_change(pct: float | None) -> str:
    """Signed percent string, e.g. ``+12.3%``; ``n/a`` when undefined."""
    if pct is None:
        return "n/a"
    sign = "+" if pct >= 0 else ""
    return f"{sign}{pct:.1f}%"


def _regime_line(label: str, dist: LifetimeDistribution) -> str:
    line = f"{label:22s} mean = {dist.stats.mean:7.1f} cycles, σ = {dist.stats.std:6.1f} cycles"
    if dist.censored_count:
        line += f"  ({dist.censored_count} censored)"
    return line


def generate_lifetime_narrative(result: PopulationResult) -> str:
    """Text summary of a white-vs-colored lifetime study."""
    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("LIFETIME STUDY")
    sections.append("=" * 60)
    sections.append(_regime_line("White noise:", result.white))
    sections.append(_regime_line("Correlated (AR(1)):", result.colored))

    change = result.relative_change_pct
    if change is None:
        sections.append("Relative change (correlated vs white): undefined (white mean is 0)")
    else:
        direction = "longer" if change >= 0 else "shorter"
        sections.append(
            f"Relative change (correlated vs white): {format_relative_change(change)} "
            f"in mean lifetime ({direction})"
        )
    sections.append(f"Runs simulated: {result.unit_count} cells per model")
    return "\n".join(sections)


def generate_discharge_narrative(result: DischargeResult) -> str:
    """Text summary of one discharge curve and its residual verdict."""
    s = result.summary
    r = result.residuals

    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("DISCHARGE CURVE" + (" (STRESSED)" if result.stressed else ""))
    sections.append("=" * 60)
    sections.append(
        f"Duration: {s.duration_hours:.2f} h\n"
        f"Start → End: {s.start_pct:.1f}% → {s.end_pct:.1f}% (Δ {s.used_pct:.1f}%)\n"
        f"Average drain: {s.avg_drain_pct_per_hour:.2f} %/h\n"
        f"Residual RMS: {r.rms:.2f} %\n"
        f"Lag-1 correlation: {r.lag1_correlation:.3f}"
    )
    sections.append(STRUCTURED_VERDICT if r.classification == "structured" else NOISELIKE_VERDICT)
    return "\n".join(sections)
