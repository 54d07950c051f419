"""Box-drawing glyphs and the vertex lookup table.

A vertex sits where up to four cells meet. Its glyph depends only on which of
those four quadrants hold a key: a line runs between two quadrants whenever
at least one of them is occupied, matching how separators and horizontal
fills are drawn. The top and bottom edges use the same table with the
missing row treated as blank.
"""

from __future__ import annotations

from enum import Enum, IntFlag

from keymapfmt.layout import Grid, Mark


class Glyph(str, Enum):
    TOP_LEFT = "╭"
    TOP_RIGHT = "╮"
    BOTTOM_LEFT = "╰"
    BOTTOM_RIGHT = "╯"
    HORIZONTAL = "─"
    VERTICAL = "│"
    TOP_TEE = "┬"
    BOTTOM_TEE = "┴"
    LEFT_TEE = "├"
    RIGHT_TEE = "┤"
    CROSS = "┼"
    BLANK = " "


class Quadrant(IntFlag):
    NONE = 0
    NW = 1
    NE = 2
    SW = 4
    SE = 8


Q = Quadrant

VERTEX_GLYPHS: dict[int, Glyph] = {
    Q.NONE: Glyph.BLANK,
    # top edge of a run of keys
    Q.SE: Glyph.TOP_LEFT,
    Q.SW: Glyph.TOP_RIGHT,
    Q.SW | Q.SE: Glyph.TOP_TEE,
    # bottom edge
    Q.NE: Glyph.BOTTOM_LEFT,
    Q.NW: Glyph.BOTTOM_RIGHT,
    Q.NW | Q.NE: Glyph.BOTTOM_TEE,
    # left and right edges of stacked keys
    Q.NE | Q.SE: Glyph.LEFT_TEE,
    Q.NW | Q.SW: Glyph.RIGHT_TEE,
    # three or four quadrants, or a diagonal pair: all four arms drawn
    Q.NW | Q.SE: Glyph.CROSS,
    Q.NE | Q.SW: Glyph.CROSS,
    Q.NW | Q.NE | Q.SW: Glyph.CROSS,
    Q.NW | Q.NE | Q.SE: Glyph.CROSS,
    Q.NW | Q.SW | Q.SE: Glyph.CROSS,
    Q.NE | Q.SW | Q.SE: Glyph.CROSS,
    Q.NW | Q.NE | Q.SW | Q.SE: Glyph.CROSS,
}


def is_key(grid: Grid, row: int, col: int) -> bool:
    """True if (row, col) holds a key; anything out of range is blank."""
    if row < 0 or col < 0 or row >= len(grid):
        return False
    cells = grid[row]
    return col < len(cells) and cells[col] is Mark.KEY


def vertex_mask(grid: Grid, row: int, col: int) -> int:
    """Occupancy bits of the cells around the vertex at the top-left of (row, col)."""
    mask = Q.NONE
    if is_key(grid, row - 1, col - 1):
        mask |= Q.NW
    if is_key(grid, row - 1, col):
        mask |= Q.NE
    if is_key(grid, row, col - 1):
        mask |= Q.SW
    if is_key(grid, row, col):
        mask |= Q.SE
    return int(mask)


def vertex_glyph(grid: Grid, row: int, col: int) -> Glyph:
    return VERTEX_GLYPHS[vertex_mask(grid, row, col)]


def separator_glyph(grid: Grid, row: int, col: int) -> Glyph:
    """Vertical separator on the left side of (row, col)."""
    if is_key(grid, row, col - 1) or is_key(grid, row, col):
        return Glyph.VERTICAL
    return Glyph.BLANK


def fill_glyph(grid: Grid, row: int, col: int) -> Glyph:
    """Horizontal run along the top side of (row, col)."""
    if is_key(grid, row - 1, col) or is_key(grid, row, col):
        return Glyph.HORIZONTAL
    return Glyph.BLANK
