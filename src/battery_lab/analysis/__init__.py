"""Analysis — pure functions over lifetime samples and discharge curves."""

from battery_lab.analysis.statistics import summarize, histogram, shared_bin_width, relative_change
from battery_lab.analysis.residuals import analyze_residuals, summarize_discharge

__all__ = [
    "summarize",
    "histogram",
    "shared_bin_width",
    "relative_change",
    "analyze_residuals",
    "summarize_discharge",
]
