"""Per-round population statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict

from gridlife.config.display import NUMBER_FORMAT

if TYPE_CHECKING:
    from gridlife.cell import Cell


@dataclass
class MetricSummary:
    """Minimum, maximum and sum of one population metric.

    The mean needs the population count, which is tracked by
    :class:`RoundStats` rather than by each metric.
    """

    name: str
    minimum: float = float("inf")
    maximum: float = float("-inf")
    total: float = 0.0

    def reset(self) -> None:
        self.minimum = float("inf")
        self.maximum = float("-inf")
        self.total = 0.0

    def update(self, value: float) -> None:
        if value < self.minimum:
            self.minimum = value
        if value > self.maximum:
            self.maximum = value
        self.total += value

    def mean(self, count: int) -> float:
        if count == 0:
            return 0.0
        return self.total / count

    def triple(self, count: int) -> tuple:
        """(min, mean, max), all zero for an empty population."""
        if count == 0:
            return (0.0, 0.0, 0.0)
        return (self.minimum, self.mean(count), self.maximum)

    def format(self, count: int) -> str:
        return f"{self.name}: " + "/".join(NUMBER_FORMAT.format(v) for v in self.triple(count))

    def to_dict(self, count: int) -> Dict[str, float]:
        low, mean, high = self.triple(count)
        return {"min": low, "mean": mean, "max": high, "sum": self.total}


@dataclass
class RoundStats:
    """Statistics recomputed from scratch after every round.

    Attributes:
        round_number: Rounds completed so far
        population: Living agents on the board
        food_cells: Cells whose food is ready
        program_length: Program length summary
        energy: Energy summary
        age: Age summary
    """

    round_number: int = 0
    population: int = 0
    food_cells: int = 0
    program_length: MetricSummary = field(default_factory=lambda: MetricSummary("prg"))
    energy: MetricSummary = field(default_factory=lambda: MetricSummary("energy"))
    age: MetricSummary = field(default_factory=lambda: MetricSummary("age"))

    def clear(self) -> None:
        """Forget the previous collection; the round number is kept."""
        self.population = 0
        self.food_cells = 0
        self.program_length.reset()
        self.energy.reset()
        self.age.reset()

    def add_cell(self, cell: "Cell") -> None:
        self.population += len(cell)
        if cell.has_food:
            self.food_cells += 1
        for agent in cell:
            self.program_length.update(len(agent.program))
            self.energy.update(agent.energy)
            self.age.update(agent.age)

    def format_line(self) -> str:
        count = self.population
        return (
            f"{self.round_number}, agents: {count}, food_cells: {self.food_cells}, "
            f"{self.program_length.format(count)}, {self.energy.format(count)}, "
            f"{self.age.format(count)}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        count = self.population
        return {
            "round": self.round_number,
            "population": count,
            "food_cells": self.food_cells,
            "program_length": self.program_length.to_dict(count),
            "energy": self.energy.to_dict(count),
            "age": self.age.to_dict(count),
        }
