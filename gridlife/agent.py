"""Agents: program-driven organisms living on the grid."""

from __future__ import annotations

import random
import sys
from typing import TYPE_CHECKING, Tuple

from gridlife.config.instructions import INSTRUCTION_COST
from gridlife.heading import EAT_SEARCH_PATHS, SNIFF_ORDER, Heading
from gridlife.program import Instruction, Program, mutate

if TYPE_CHECKING:
    from gridlife.cell import Cell
    from gridlife.config.parameters import SimulationParameters
    from gridlife.grid import Grid

# Energy value marking an agent as dead
DEAD_ENERGY = -1.0

MAX_ENERGY = sys.float_info.max


class Agent:
    """An organism that executes its program once per round.

    The agent knows where it stands through ``position``, a ``(row, column)``
    handle into the grid. The cell at that position owns the agent's
    membership; the agent only uses the handle to route movement and death.

    Attributes:
        program: Instruction program, replaced wholesale only at birth
        heading: Direction the agent faces
        energy: Remaining energy; -1 marks a dead agent
        age: Rounds lived
        position: (row, column) of the cell the agent stands on
    """

    def __init__(
        self,
        program: Program,
        energy: float,
        heading: Heading,
        position: Tuple[int, int],
        age: int = 0,
    ) -> None:
        self.program = program
        self.energy = energy
        self.heading = heading
        self.position = position
        self.age = age

    @classmethod
    def spawn(
        cls,
        parameters: "SimulationParameters",
        position: Tuple[int, int],
        rng: random.Random,
    ) -> "Agent":
        """Create an initial agent from the seed program."""
        program = mutate(Program(parameters.starting_program), parameters, rng)
        heading = Heading(rng.randrange(len(Heading)))
        return cls(program, parameters.starting_energy, heading, position)

    @property
    def is_alive(self) -> bool:
        return self.energy != DEAD_ENERGY

    def __repr__(self) -> str:
        row, column = self.position
        return (
            f"Agent{{heading={self.heading.label}, program={self.program}, "
            f"energy={self.energy:.2f}, age={self.age}, "
            f"cell=row: {row + 1}, column: {column + 1}}}"
        )

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    def try_survive_round(
        self, parameters: "SimulationParameters", grid: "Grid", rng: random.Random
    ) -> bool:
        """Live through one round.

        Reproduce if eligible and lucky, run the program, pay the round
        overhead and grow older.

        Returns:
            True if the agent survived the round
        """
        if self.can_duplicate(parameters) and rng.random() < parameters.duplication_probability:
            child = self.duplicate(parameters, rng)
            grid.cell_at(self.position).place(child)
        self.execute_program(parameters, grid)
        self.age += 1
        return self.energy >= 0

    def can_duplicate(self, parameters: "SimulationParameters") -> bool:
        return self.energy >= parameters.duplication_limit

    def duplicate(self, parameters: "SimulationParameters", rng: random.Random) -> "Agent":
        """Create a child facing the other way and hand it part of our energy."""
        fraction = parameters.parents_energy_fraction
        child = Agent(
            program=mutate(self.program, parameters, rng),
            energy=self.energy * fraction,
            heading=self.heading.reversed(),
            position=self.position,
        )
        self.energy *= 1 - fraction
        return child

    def execute_program(self, parameters: "SimulationParameters", grid: "Grid") -> None:
        """Run every instruction, then pay the round overhead.

        Running out of energy before an instruction stops the program and
        marks the agent dead.
        """
        for symbol in self.program:
            if self.energy <= 0:
                self.energy = DEAD_ENERGY
                break
            self.perform(Instruction.from_symbol(symbol), parameters, grid)
            self.energy -= INSTRUCTION_COST

        if self.energy < parameters.round_cost:
            self.energy = DEAD_ENERGY
        else:
            self.energy -= parameters.round_cost

    def die(self, grid: "Grid") -> None:
        grid.cell_at(self.position).release(self)

    # ------------------------------------------------------------------
    # Instructions
    # ------------------------------------------------------------------

    def perform(
        self, instruction: Instruction, parameters: "SimulationParameters", grid: "Grid"
    ) -> None:
        if instruction is Instruction.TURN_LEFT:
            self.heading = self.heading.turned_left()
        elif instruction is Instruction.TURN_RIGHT:
            self.heading = self.heading.turned_right()
        elif instruction is Instruction.MOVE_FORWARD:
            self.enter(grid.step(self.position, self.heading), parameters, grid)
        elif instruction is Instruction.SNIFF:
            self.sniff(grid)
        elif instruction is Instruction.EAT:
            self.seek_food(parameters, grid)

    def enter(self, target: "Cell", parameters: "SimulationParameters", grid: "Grid") -> None:
        """Leave the current cell and walk into ``target``."""
        grid.cell_at(self.position).release(self)
        target.accept(self, parameters)
        self.position = target.coordinate

    def sniff(self, grid: "Grid") -> None:
        """Turn towards the first adjacent cell with ready food."""
        for heading in SNIFF_ORDER:
            if grid.step(self.position, heading).has_food:
                self.heading = heading
                return

    def seek_food(self, parameters: "SimulationParameters", grid: "Grid") -> None:
        """Jump onto the first cell with ready food, searching clockwise from above."""
        for path in EAT_SEARCH_PATHS:
            target = grid.step(self.position, *path)
            if target.has_food:
                self.enter(target, parameters, grid)
                return

    def eat(self, food_energy: float) -> None:
        if MAX_ENERGY - self.energy < food_energy:
            self.energy = MAX_ENERGY
        else:
            self.energy += food_energy
