"""Simulation parameters and the parameter-file loader.

The parameter file holds one ``name value`` pair per line. Names are the
long-form keys (``how_many_rounds``, ``probability_of_adding_instr`` ...);
the model exposes them under shorter attribute names. The value of
``starting_program`` and ``valid_instructions`` may be empty.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from gridlife.config.instructions import CANONICAL_INSTRUCTIONS
from gridlife.exceptions import ConfigurationError
from gridlife.program import Program

logger = logging.getLogger(__name__)

# Keys whose value is allowed to be empty
_PROGRAM_KEYS = ("starting_program", "valid_instructions")


class SimulationParameters(BaseModel):
    """Read-only run configuration.

    Attributes:
        rounds: Number of rounds to simulate
        population: Number of agents placed on the board at start
        starting_energy: Energy of every initial agent
        food_energy: Energy granted by eating a ready food patch
        food_growth_duration: Rounds a consumed food patch needs to regrow
        round_cost: Energy overhead paid at the end of every round
        duplication_probability: Chance of reproducing when eligible
        parents_energy_fraction: Share of the parent's energy given to the child
        duplication_limit: Minimum energy required to reproduce
        print_every: Cadence (in rounds) of full state dumps
        remove_probability: Chance of a remove mutation
        add_probability: Chance of an add mutation
        change_probability: Chance of a change mutation
        starting_program: Seed program every initial agent mutates from
        valid_instructions: Alphabet mutations draw new symbols from
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    rounds: int = Field(alias="how_many_rounds", gt=0)
    population: int = Field(alias="how_many_robs_on_start", ge=0)
    starting_energy: float = Field(gt=0)
    food_energy: float = Field(alias="how_much_energy_food_gives", ge=0)
    food_growth_duration: int = Field(alias="how_long_does_food_grow", gt=0)
    round_cost: float = Field(ge=0)
    duplication_probability: float = Field(ge=0, le=1)
    parents_energy_fraction: float = Field(ge=0, le=1)
    duplication_limit: float = Field(ge=0)
    print_every: int = Field(alias="how_often_to_print", gt=0)
    remove_probability: float = Field(alias="probability_of_removing_instr", ge=0, le=1)
    add_probability: float = Field(alias="probability_of_adding_instr", ge=0, le=1)
    change_probability: float = Field(alias="probability_of_changing_instr", ge=0, le=1)
    starting_program: str = ""
    valid_instructions: str = ""

    @field_validator("starting_program", "valid_instructions")
    @classmethod
    def _only_known_symbols(cls, value: str) -> str:
        unknown = sorted(set(value) - set(CANONICAL_INSTRUCTIONS))
        if unknown:
            raise ValueError(f"unknown instruction symbols: {''.join(unknown)!r}")
        return value

    @model_validator(mode="after")
    def _seed_program_uses_valid_instructions(self) -> "SimulationParameters":
        if not Program(self.starting_program).uses_only(self.valid_instructions):
            stray = sorted(set(self.starting_program) - set(self.valid_instructions))
            raise ValueError(
                "There are instructions in the starting program that do not exist "
                f"in valid_instructions: {''.join(stray)!r}"
            )
        return self

    def to_dict(self) -> Dict[str, Union[int, float, str]]:
        """Convert parameters to a dictionary keyed by attribute name."""
        return self.model_dump()


PARAMETER_KEYS = tuple(
    info.alias or name for name, info in SimulationParameters.model_fields.items()
)


def parse_parameters(text: str) -> SimulationParameters:
    """Parse parameter-file content.

    Args:
        text: File content, one ``name value`` pair per line

    Returns:
        Validated parameters

    Raises:
        ConfigurationError: On unknown, duplicate, missing or invalid entries
    """
    raw: Dict[str, str] = {}
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        name, separator, value = line.partition(" ")
        if name not in PARAMETER_KEYS:
            raise ConfigurationError(f"Not valid parameter (line {line_number}): {line!r}")
        if name in raw:
            raise ConfigurationError(f"Parameter given twice (line {line_number}): {name}")
        if not separator and name not in _PROGRAM_KEYS:
            raise ConfigurationError(f"Parameter without a value (line {line_number}): {name}")
        raw[name] = value if name in _PROGRAM_KEYS else value.strip()

    missing = [key for key in PARAMETER_KEYS if key not in raw]
    if missing:
        raise ConfigurationError(f"Not valid parameter count, missing: {', '.join(missing)}")

    try:
        parameters = SimulationParameters.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'parameters'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Not valid parameter values - {details}") from exc

    logger.debug("Parsed parameters: %s", parameters.to_dict())
    return parameters


def load_parameters(path: Union[str, Path]) -> SimulationParameters:
    """Read and validate a parameter file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read parameter file {path}: {exc}") from exc
    return parse_parameters(text)
