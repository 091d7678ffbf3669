"""Simulation: a wrapper that owns the grid, parameters and random stream.

All randomness of a run flows from the single ``rng`` held here, so a run
started with the same seed, board and parameters reproduces exactly.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import orjson

from gridlife.config.display import SEPARATOR_WIDTH
from gridlife.config.parameters import SimulationParameters
from gridlife.grid import Grid
from gridlife.reporting import SimulationReporter
from gridlife.stats import RoundStats

logger = logging.getLogger(__name__)


class Simulation:
    """Drives a grid through the configured number of rounds.

    Attributes:
        grid: The board being simulated
        parameters: Run configuration
        rng: Random number generator for deterministic behavior
        seed: Seed used to create ``rng``, if any
        reporter: Receives stats lines and state dumps
        history: Per-round statistics records
    """

    def __init__(
        self,
        grid: Grid,
        parameters: SimulationParameters,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        reporter: Optional[SimulationReporter] = None,
    ) -> None:
        """Initialize the simulation.

        Args:
            grid: Board to simulate on
            parameters: Validated run configuration
            rng: Random number generator instance (creates new if None)
            seed: Random seed (only used if rng is None)
            reporter: Output sink (writes to stdout if None)
        """
        self.grid = grid
        self.parameters = parameters
        self.seed = seed

        if rng is not None:
            self.rng = rng
        elif seed is not None:
            self.rng = random.Random(seed)
            logger.info("Simulation initialized with seed: %d", seed)
        else:
            self.rng = random.Random()

        self.reporter = reporter if reporter is not None else SimulationReporter()
        self.history: List[Dict[str, Any]] = []

    @property
    def round_number(self) -> int:
        return self.grid.round_number

    def setup(self) -> None:
        """Populate the board and report the starting state."""
        self.grid.seed_population(self.parameters, self.rng)
        self.grid.refresh_and_collect_stats(self.parameters)
        self.reporter.report_state(self.grid)

    def step(self) -> RoundStats:
        """Simulate one round and report its statistics line."""
        self.grid.advance_round(self.parameters, self.rng)
        stats = self.grid.refresh_and_collect_stats(self.parameters)
        self.history.append(stats.to_dict())
        self.reporter.report_stats(stats)
        return stats

    def run(self) -> RoundStats:
        """Run the whole simulation.

        The full state is dumped at start, every ``print_every`` rounds and
        after the last round.
        """
        rounds = self.parameters.rounds
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("GRIDLIFE SIMULATION")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info(
            "Board %dx%d, %d agents, %d rounds, state every %d rounds",
            self.grid.rows,
            self.grid.columns,
            self.parameters.population,
            rounds,
            self.parameters.print_every,
        )

        self.setup()
        stats = self.grid.stats
        for _ in range(rounds):
            stats = self.step()
            round_number = stats.round_number
            if round_number % self.parameters.print_every == 0 or round_number == rounds:
                self.reporter.report_state(self.grid)
            if stats.population == 0:
                logger.debug("Population extinct after round %d", round_number)

        logger.info("Simulation complete after %d rounds, %d agents alive", rounds, stats.population)
        return stats

    def get_stats(self) -> Dict[str, Any]:
        """Current statistics as a dictionary."""
        return self.grid.stats.to_dict()

    def export_stats_json(self, filename: Union[str, Path]) -> None:
        """Export parameters and per-round statistics to a JSON file."""
        export_data = {
            "seed": self.seed,
            "board": {"rows": self.grid.rows, "columns": self.grid.columns},
            "parameters": self.parameters.to_dict(),
            "rounds": self.history,
            "final": self.get_stats(),
        }
        Path(filename).write_bytes(orjson.dumps(export_data, option=orjson.OPT_INDENT_2))
        logger.info("Stats exported to: %s", filename)
