"""Distribution summaries for lifetime samples.

Degenerate inputs return defined sentinels instead of raising:

  summarize([])             → mean 0, σ 0
  relative_change(0, b)     → None   (undefined)
  histogram with max == 0   → every sample in bin 0

Histogram bins always span ``[0, max]`` with a fixed bin count, whatever the
sample minimum.  Two regimes are made comparable by binning both against a
shared width (:func:`shared_bin_width`).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from battery_lab.errors import InvalidConfigurationError
from battery_lab.models.results import Histogram, SummaryStats
from battery_lab.rounding import round_half_up

DEFAULT_BIN_COUNT = 12


def summarize(samples: Sequence[float]) -> SummaryStats:
    """Mean and population σ (÷N, not N−1)."""
    if len(samples) == 0:
        return SummaryStats(mean=0.0, std=0.0)
    arr = np.asarray(samples, dtype=np.float64)
    return SummaryStats(mean=float(arr.mean()), std=float(arr.std(ddof=0)))


def shared_bin_width(sample_sets: Iterable[Sequence[float]], bin_count: int = DEFAULT_BIN_COUNT) -> float:
    """Bin width from the combined maximum of several samples."""
    _check_bin_count(bin_count)
    peak = max((max(s) for s in sample_sets if len(s) > 0), default=0.0)
    return float(peak) / bin_count


def histogram(
    samples: Sequence[float],
    bin_count: int = DEFAULT_BIN_COUNT,
    width: float | None = None,
) -> Histogram:
    """Fixed-count histogram over ``[0, max(samples)]``.

    Parameters
    ----------
    samples : sequence of float
        Values to bin.
    bin_count : int
        Number of bins, ≥ 1.
    width : float | None
        Bin width to use instead of ``max(samples) / bin_count``.

    Returns
    -------
    Histogram
        ``edges[i]`` is the rounded midpoint of bin ``i``; ``sum(counts)``
        equals ``len(samples)``.
    """
    _check_bin_count(bin_count)
    if width is None:
        width = float(max(samples)) / bin_count if len(samples) > 0 else 0.0

    counts = [0] * bin_count
    for value in samples:
        idx = math.floor(value / width) if width > 0 else 0
        idx = min(max(idx, 0), bin_count - 1)
        counts[idx] += 1

    edges = [round_half_up((i + 0.5) * width) for i in range(bin_count)]
    return Histogram(bin_width=width, edges=edges, counts=counts)


def relative_change(a: float, b: float) -> float | None:
    """(b − a) / a in percent.  None when ``a == 0``."""
    if a == 0:
        return None
    return (b - a) / a * 100.0


def _check_bin_count(bin_count: int) -> None:
    if bin_count < 1:
        raise InvalidConfigurationError(f"bin_count must be ≥ 1, got {bin_count}")
