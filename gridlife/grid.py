"""The toroidal board and per-round traversal."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterator, List, Sequence, Tuple

from gridlife.agent import Agent
from gridlife.cell import Cell, CellKind
from gridlife.exceptions import InvariantViolation
from gridlife.heading import Heading
from gridlife.stats import RoundStats

if TYPE_CHECKING:
    from gridlife.config.parameters import SimulationParameters

logger = logging.getLogger(__name__)


class Grid:
    """Fixed rows x columns of cells whose edges wrap around.

    Cells are always visited in row-major order, and agents within a cell
    from front to back, so a run is fully determined by its random stream.
    """

    def __init__(self, layout: Sequence[Sequence[CellKind]]) -> None:
        """Build the cells from an already validated rectangular layout."""
        if not layout or not layout[0]:
            raise InvariantViolation("Grid needs at least one row and one column")
        self.rows = len(layout)
        self.columns = len(layout[0])
        self.cells: List[List[Cell]] = [
            [Cell(row, column, kind) for column, kind in enumerate(kinds)]
            for row, kinds in enumerate(layout)
        ]
        self.stats = RoundStats()

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.columns})"

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    @property
    def round_number(self) -> int:
        return self.stats.round_number

    def cell_at(self, position: Tuple[int, int]) -> Cell:
        row, column = position
        try:
            return self.cells[row][column]
        except IndexError:
            raise InvariantViolation(f"No cell at {position} on {self!r}") from None

    def neighbor(self, cell: Cell, heading: Heading) -> Cell:
        """Adjacent cell in ``heading``; both axes wrap."""
        row_step, column_step = heading.offset
        return self.cells[(cell.row + row_step) % self.rows][(cell.column + column_step) % self.columns]

    def step(self, position: Tuple[int, int], *headings: Heading) -> Cell:
        """Follow one orthogonal hop per heading starting at ``position``."""
        cell = self.cell_at(position)
        for heading in headings:
            cell = self.neighbor(cell, heading)
        return cell

    def agents(self) -> Iterator[Agent]:
        """Every agent, row-major by cell and front to back within a cell."""
        for cell in self:
            yield from cell

    def seed_population(self, parameters: "SimulationParameters", rng: random.Random) -> None:
        """Drop ``parameters.population`` fresh agents on random cells."""
        for _ in range(parameters.population):
            position = (rng.randrange(self.rows), rng.randrange(self.columns))
            self.cell_at(position).place(Agent.spawn(parameters, position, rng))
        logger.debug("Seeded %d agents on %r", parameters.population, self)

    def advance_round(self, parameters: "SimulationParameters", rng: random.Random) -> None:
        for cell in self:
            cell.snapshot_round_start()
        for cell in self:
            cell.run_round(parameters, self, rng)
        self.stats.round_number += 1

    def refresh_and_collect_stats(self, parameters: "SimulationParameters") -> RoundStats:
        """Regrow food and recompute the statistics from every cell."""
        self.stats.clear()
        for cell in self:
            cell.update_state(parameters)
            self.stats.add_cell(cell)
        return self.stats

    def state_lines(self) -> List[str]:
        return [repr(agent) for agent in self.agents()]
