"""GridLife exception hierarchy.

Centralised base classes so callers can catch simulation failures narrowly
and the command-line entry point can turn them into a diagnostic and exit code.
"""


class GridLifeError(Exception):
    """Root of all GridLife domain exceptions."""


class SimulationError(GridLifeError):
    """Errors during simulation execution (grid, cells, agents)."""


class InvariantViolation(SimulationError):
    """An internal invariant was broken; the simulation cannot continue."""


class ConfigurationError(GridLifeError):
    """Invalid or missing configuration."""


class BoardFormatError(ConfigurationError):
    """The board layout is malformed."""
