"""Pytest configuration and fixtures for GridLife tests."""

import random

import pytest

from gridlife.cell import CellKind
from gridlife.config.parameters import SimulationParameters
from gridlife.grid import Grid

BASE_PARAMETERS = dict(
    rounds=10,
    population=0,
    starting_energy=10.0,
    food_energy=5.0,
    food_growth_duration=3,
    round_cost=0.0,
    duplication_probability=0.0,
    parents_energy_fraction=0.5,
    duplication_limit=100.0,
    print_every=5,
    remove_probability=0.0,
    add_probability=0.0,
    change_probability=0.0,
    starting_program="",
    valid_instructions="lpiwj",
)


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def make_parameters():
    """Factory for parameters with quiet defaults (no mutation, no births)."""

    def _make(**overrides):
        values = dict(BASE_PARAMETERS)
        values.update(overrides)
        return SimulationParameters(**values)

    return _make


@pytest.fixture
def make_grid():
    """Factory building a grid from rows of ' ' and 'x'."""

    def _make(*rows):
        kinds = {" ": CellKind.EMPTY, "x": CellKind.FOOD}
        return Grid([[kinds[char] for char in row] for row in rows])

    return _make
