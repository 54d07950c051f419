"""Occupancy grids: which matrix positions hold a physical key."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Mark(Enum):
    KEY = "K"
    BLANK = "."


# Ragged: rows may differ in length
Grid = list[list[Mark]]

_CELL_TOKENS = {
    "K": Mark.KEY,
    "k": Mark.KEY,
    "x": Mark.KEY,
    ".": Mark.BLANK,
    "_": Mark.BLANK,
    "-": Mark.BLANK,
}


class LayoutError(ValueError):
    """Raised when an occupancy grid definition cannot be read."""


def count_keys(grid: Grid) -> int:
    """Number of KEY cells in the grid."""
    return sum(1 for row in grid for cell in row if cell is Mark.KEY)


def parse_grid(text: str) -> Grid:
    """Parse the plain-text grid format.

    One row per line, cells separated by whitespace. ``K``/``k``/``x`` mark a
    key and ``.``/``_``/``-`` a gap. Blank lines and ``#`` comments are skipped.
    """
    grid: Grid = []
    for lineno, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        row = []
        for cell in stripped.split():
            mark = _CELL_TOKENS.get(cell)
            if mark is None:
                raise LayoutError(f"line {lineno}: unknown cell {cell!r}")
            row.append(mark)
        grid.append(row)
    if not grid:
        raise LayoutError("layout defines no rows")
    return grid


def load_grid(path: Path) -> Grid:
    """Read a grid file. OSError propagates to the caller."""
    return parse_grid(path.read_text(encoding="utf-8"))
