"""Render a key table as a box-drawing diagram plus a canonical key list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from keymapfmt.layout import Grid, Mark, count_keys
from keymapfmt.render.borders import fill_glyph, separator_glyph, vertex_glyph

PLACEHOLDER = "_______"
DEFAULT_PREFIX = "//    "
KEY_INDENT = " " * 8


class KeyCountMismatch(ValueError):
    """The table's key count differs from the grid's occupied-cell count."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"layout has {expected} keys but table defines {actual}")
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class RenderedTable:
    diagram: list[str]
    key_list: list[str]


def _border_line(grid: Grid, row: int, width: int) -> str:
    # Horizontal line along the top of `row`; row == len(grid) is the bottom edge
    above = len(grid[row - 1]) if row > 0 else 0
    below = len(grid[row]) if row < len(grid) else 0
    parts = []
    for col in range(max(above, below) + 1):
        parts.append(vertex_glyph(grid, row, col).value)
        parts.append(fill_glyph(grid, row, col).value * (width + 2))
    return "".join(parts)


def _key_line(grid: Grid, row: int, labels: Sequence[str], width: int) -> str:
    parts = []
    for col in range(len(grid[row]) + 1):
        parts.append(separator_glyph(grid, row, col).value)
        parts.append(" " + labels[col].ljust(width) + " " if col < len(labels) else "")
    return "".join(parts)


def render_diagram(grid: Grid, keys: Sequence[str], width: int, prefix: str = DEFAULT_PREFIX) -> list[str]:
    """Diagram lines, each prefixed and stripped of trailing spaces."""
    remaining = iter(keys)
    lines = [_border_line(grid, 0, width)] if grid else []
    for row, cells in enumerate(grid):
        labels = [next(remaining) if cell is Mark.KEY else "" for cell in cells]
        lines.append(_key_line(grid, row, labels, width))
        lines.append(_border_line(grid, row + 1, width))
    return [(prefix + line).rstrip() for line in lines]


def render_key_list(grid: Grid, keys: Sequence[str], width: int) -> list[str]:
    """Keys in row-major grid order, one line per row that holds a key."""
    lines = []
    index = 0
    for cells in grid:
        entries = []
        for cell in cells:
            if cell is not Mark.KEY:
                continue
            entry = (keys[index] or PLACEHOLDER).ljust(width)
            index += 1
            if index < len(keys):
                entry += ","
            entries.append(entry)
        if entries:
            lines.append((KEY_INDENT + " ".join(entries)).rstrip())
    return lines


def render_table(grid: Grid, keys: Sequence[str], prefix: str = DEFAULT_PREFIX) -> RenderedTable:
    """Render one table against ``grid``.

    Raises KeyCountMismatch before producing any output when the key count
    does not match the number of occupied cells.
    """
    expected = count_keys(grid)
    if expected != len(keys):
        raise KeyCountMismatch(expected, len(keys))

    width = max((len(key) for key in keys), default=0)
    return RenderedTable(
        diagram=render_diagram(grid, keys, width, prefix),
        key_list=render_key_list(grid, keys, width),
    )
