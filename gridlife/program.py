"""Agent programs and the mutation operator.

A program is a string of instruction symbols. Programs are values: mutation
never edits a program, it builds a new one from the parent.

Mutation Types:
- Add: one fresh random symbol joins the tail
- Remove: the tail shrinks by one symbol
- Add and remove together: the last slot is replaced by a fresh symbol
- Change: one random position is overwritten by a fresh symbol

The parent's last symbol is always left out of the direct copy and only comes
back when neither or only an add mutation fires, so every mutation acts on
the tail of the program.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List

from gridlife.config.instructions import (
    EAT_SYMBOL,
    MOVE_FORWARD_SYMBOL,
    SNIFF_SYMBOL,
    TURN_LEFT_SYMBOL,
    TURN_RIGHT_SYMBOL,
)
from gridlife.exceptions import InvariantViolation

if TYPE_CHECKING:
    from gridlife.config.parameters import SimulationParameters


class Instruction(Enum):
    """Program instructions keyed by their symbol."""

    TURN_LEFT = TURN_LEFT_SYMBOL
    TURN_RIGHT = TURN_RIGHT_SYMBOL
    MOVE_FORWARD = MOVE_FORWARD_SYMBOL
    SNIFF = SNIFF_SYMBOL
    EAT = EAT_SYMBOL

    @classmethod
    def from_symbol(cls, symbol: str) -> "Instruction":
        try:
            return cls(symbol)
        except ValueError:
            raise InvariantViolation(f"Unknown instruction symbol: {symbol!r}") from None


@dataclass(frozen=True)
class Program:
    """Immutable sequence of instruction symbols."""

    code: str = ""

    def __len__(self) -> int:
        return len(self.code)

    def __iter__(self) -> Iterator[str]:
        return iter(self.code)

    def __str__(self) -> str:
        return "[" + ", ".join(self.code) + "]"

    def uses_only(self, alphabet: str) -> bool:
        """Whether every symbol belongs to ``alphabet``."""
        return set(self.code) <= set(alphabet)


def random_symbol(alphabet: str, rng: random.Random) -> str:
    """Pick a uniformly random symbol from ``alphabet``."""
    if not alphabet:
        raise InvariantViolation("Cannot pick a random instruction from an empty alphabet")
    return rng.choice(alphabet)


def mutate(parent: Program, parameters: "SimulationParameters", rng: random.Random) -> Program:
    """Build a mutated copy of ``parent``.

    Args:
        parent: Program to mutate
        parameters: Supplies the alphabet and the three mutation probabilities
        rng: Random number generator

    Returns:
        A new program; empty when the alphabet is empty
    """
    alphabet = parameters.valid_instructions
    if not alphabet:
        return Program()

    code = parent.code
    should_remove = len(code) > 0 and rng.random() < parameters.remove_probability
    should_add = rng.random() < parameters.add_probability
    should_change = rng.random() < parameters.change_probability

    symbols: List[str] = list(code[:-1])
    if should_add and should_remove:
        symbols.append(random_symbol(alphabet, rng))
    elif should_add:
        if code:
            symbols.append(code[-1])
        symbols.append(random_symbol(alphabet, rng))
    elif not should_remove and code:
        symbols.append(code[-1])

    if should_change and symbols:
        symbols[rng.randrange(len(symbols))] = random_symbol(alphabet, rng)

    return Program("".join(symbols))
