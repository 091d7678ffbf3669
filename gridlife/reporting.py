"""Textual reports: one stats line per round and full state dumps."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from gridlife.config.display import SEPARATOR_WIDTH, STATE_HEADER

if TYPE_CHECKING:
    from gridlife.grid import Grid
    from gridlife.stats import RoundStats


class SimulationReporter:
    """Write simulation output to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")

    def report_stats(self, stats: "RoundStats") -> None:
        self._write(stats.format_line())

    def report_state(self, grid: "Grid") -> None:
        self._write()
        self._write(STATE_HEADER)
        self._write("-" * SEPARATOR_WIDTH)
        for line in grid.state_lines():
            self._write(line)
        self._write("-" * SEPARATOR_WIDTH)
        self._write()
