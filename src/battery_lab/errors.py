"""Exceptions raised by the simulation core."""


class BatteryLabError(Exception):
    """Base class for battery-lab errors."""


class InvalidConfigurationError(BatteryLabError, ValueError):
    """Raised when a simulation is asked to run with parameters it cannot honour.

    Always raised before the first simulated step, so no partial result exists.
    """
