"""GridLife: an artificial-life simulator on a toroidal grid.

Agents carry a mutating instruction program, wander the board, eat food,
reproduce and die under an energy budget.
"""

from gridlife.agent import Agent
from gridlife.cell import Cell, CellKind
from gridlife.config.parameters import SimulationParameters, load_parameters, parse_parameters
from gridlife.exceptions import (
    BoardFormatError,
    ConfigurationError,
    GridLifeError,
    InvariantViolation,
    SimulationError,
)
from gridlife.grid import Grid
from gridlife.heading import Heading
from gridlife.program import Program, mutate
from gridlife.simulation import Simulation
from gridlife.stats import MetricSummary, RoundStats

__all__ = [
    "Agent",
    "Cell",
    "CellKind",
    "Grid",
    "Heading",
    "Program",
    "mutate",
    "Simulation",
    "SimulationParameters",
    "load_parameters",
    "parse_parameters",
    "MetricSummary",
    "RoundStats",
    # Errors
    "GridLifeError",
    "SimulationError",
    "InvariantViolation",
    "ConfigurationError",
    "BoardFormatError",
]
