"""Rounding shared by the engine and the analysis layer."""

import math


def round_half_up(value: float) -> int:
    """Round .5 away from −∞ (not banker's rounding)."""
    return int(math.floor(value + 0.5))
