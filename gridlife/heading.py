"""Compass headings an agent can face."""

from enum import IntEnum
from typing import Tuple

from gridlife.exceptions import InvariantViolation


class Heading(IntEnum):
    """Cardinal heading, numbered clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turned_left(self) -> "Heading":
        return Heading((self - 1) % 4)

    def turned_right(self) -> "Heading":
        return Heading((self + 1) % 4)

    def reversed(self) -> "Heading":
        return Heading((self + 2) % 4)

    @property
    def offset(self) -> Tuple[int, int]:
        """(row, column) step one cell forward."""
        try:
            return _OFFSETS[self]
        except KeyError:
            raise InvariantViolation(f"Wrong heading: {self!r}") from None

    @property
    def label(self) -> str:
        return _LABELS[self]


_OFFSETS = {
    Heading.NORTH: (-1, 0),
    Heading.EAST: (0, 1),
    Heading.SOUTH: (1, 0),
    Heading.WEST: (0, -1),
}

_LABELS = {
    Heading.NORTH: "top",
    Heading.EAST: "right",
    Heading.SOUTH: "bottom",
    Heading.WEST: "left",
}

# Order in which sniff checks the neighbourhood
SNIFF_ORDER = (Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST)

# Clockwise search for eat, starting above. Two-step entries are composed
# orthogonal hops, not true diagonals.
EAT_SEARCH_PATHS = (
    (Heading.NORTH,),
    (Heading.NORTH, Heading.EAST),
    (Heading.EAST,),
    (Heading.EAST, Heading.SOUTH),
    (Heading.SOUTH,),
    (Heading.SOUTH, Heading.WEST),
    (Heading.WEST,),
    (Heading.WEST, Heading.NORTH),
)
