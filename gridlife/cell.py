"""Board cells and their round-bounded agent scheduling."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Deque, Iterator, Optional, Tuple

from gridlife.exceptions import InvariantViolation

if TYPE_CHECKING:
    from gridlife.agent import Agent
    from gridlife.config.parameters import SimulationParameters
    from gridlife.grid import Grid

logger = logging.getLogger(__name__)


class CellKind(Enum):
    """What a cell was laid out as."""

    EMPTY = "empty"
    FOOD = "food"


@dataclass
class FoodPatch:
    """Food state of a food-bearing cell.

    Attributes:
        ready: Whether the food can be eaten now
        growth: Rounds counted since the food was last eaten
    """

    ready: bool = True
    growth: int = 0

    def consume(self) -> None:
        self.ready = False
        self.growth = 0

    def grow(self, duration: int) -> None:
        if self.ready:
            return
        self.growth += 1
        if self.growth >= duration:
            self.ready = True
            self.growth = 0


class Cell:
    """A fixed grid location holding the agents currently standing on it.

    The membership list keeps arrival order with the most recent arrival at
    the front. ``count_at_round_start`` bounds how many agents the cell
    processes in a round, so agents that wander in mid-round wait until the
    next one.
    """

    def __init__(self, row: int, column: int, kind: CellKind = CellKind.EMPTY) -> None:
        self.row = row
        self.column = column
        self.kind = kind
        self.food: Optional[FoodPatch] = FoodPatch() if kind is CellKind.FOOD else None
        self.agents: Deque["Agent"] = deque()
        self.count_at_round_start = 0

    @property
    def coordinate(self) -> Tuple[int, int]:
        return (self.row, self.column)

    @property
    def has_food(self) -> bool:
        return self.food is not None and self.food.ready

    def __len__(self) -> int:
        return len(self.agents)

    def __iter__(self) -> Iterator["Agent"]:
        return iter(list(self.agents))

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.column}, {self.kind.value}, agents={len(self.agents)})"

    def place(self, agent: "Agent") -> None:
        """Put an agent at the front without any food interaction."""
        self.agents.appendleft(agent)

    def accept(self, agent: "Agent", parameters: "SimulationParameters") -> None:
        """Let an agent walk in; it eats the food if the food is ready."""
        self.agents.appendleft(agent)
        if self.has_food:
            agent.eat(parameters.food_energy)
            self.food.consume()

    def release(self, agent: "Agent") -> None:
        """Remove an agent by identity. Absent agents are ignored."""
        for index, present in enumerate(self.agents):
            if present is agent:
                del self.agents[index]
                return

    def snapshot_round_start(self) -> None:
        self.count_at_round_start = len(self.agents)

    def run_round(
        self, parameters: "SimulationParameters", grid: "Grid", rng: random.Random
    ) -> None:
        """Give every agent present at round start exactly one turn.

        Agents are taken from the tail. A survivor that is still here and was
        not already put back at the front by its own movement is re-inserted
        at the front; agents that die are released from wherever they ended up.
        """
        for _ in range(self.count_at_round_start):
            if not self.agents:
                raise InvariantViolation(
                    f"{self!r} expected {self.count_at_round_start} agents this round"
                )
            agent = self.agents.pop()
            if not agent.try_survive_round(parameters, grid, rng):
                logger.debug("Agent died at %s aged %d", agent.position, agent.age)
                agent.die(grid)
            elif (
                agent.position == self.coordinate
                and agent.is_alive
                and not (self.agents and self.agents[0] is agent)
            ):
                self.agents.appendleft(agent)

    def update_state(self, parameters: "SimulationParameters") -> None:
        """Advance food regrowth by one round."""
        if self.food is not None:
            self.food.grow(parameters.food_growth_duration)
