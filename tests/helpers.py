"""Shared test helpers — grid builders and diagram slicing."""

from keymapfmt.layout import Grid, parse_grid
from keymapfmt.render.formatter import DEFAULT_PREFIX


def make_grid(*rows: str) -> Grid:
    """Build a grid from rows like ``"K . K"``."""
    return parse_grid("\n".join(rows))


def strip_prefix(lines: list[str], prefix: str = DEFAULT_PREFIX) -> list[str]:
    assert all(line.startswith(prefix.rstrip()) for line in lines)
    return [line[len(prefix):] for line in lines]


def vertices(line: str, width: int) -> str:
    """The vertex glyphs of one border line, skipping the horizontal fills."""
    return line[:: width + 3]
