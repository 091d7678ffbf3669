"""Board layout loading.

A board file is a rectangle of characters, one row per line: ``x`` marks a
cell with food and a space marks an empty cell.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from gridlife.cell import CellKind
from gridlife.config.board import EMPTY_MARKER, FOOD_MARKER
from gridlife.exceptions import BoardFormatError

logger = logging.getLogger(__name__)

_MARKER_KINDS = {
    EMPTY_MARKER: CellKind.EMPTY,
    FOOD_MARKER: CellKind.FOOD,
}


def parse_layout(text: str, source: str = "<board>") -> List[List[CellKind]]:
    """Turn board text into rows of cell kinds.

    Raises:
        BoardFormatError: Empty board, ragged rows or an unknown character
    """
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    rows = [row[:-1] if row.endswith("\r") else row for row in rows]

    if not rows or not rows[0]:
        raise BoardFormatError(f"Not valid board dimensions in {source}")

    width = len(rows[0])
    layout: List[List[CellKind]] = []
    for row_number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise BoardFormatError(f"Row lengths vary in {source} (row {row_number})")
        try:
            layout.append([_MARKER_KINDS[char] for char in row])
        except KeyError as exc:
            raise BoardFormatError(
                f"Forbidden char {exc.args[0]!r} in board's representation in {source}"
            ) from None

    logger.debug("Parsed %dx%d board from %s", len(layout), width, source)
    return layout


def load_layout(path: Union[str, Path]) -> List[List[CellKind]]:
    """Read and validate a board file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise BoardFormatError(f"Cannot read board file {path}: {exc}") from exc
    return parse_layout(text, source=str(path))
