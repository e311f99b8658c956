"""Battery noise lab — stochastic battery-health degradation and discharge analysis."""

__version__ = "1.0.0"
