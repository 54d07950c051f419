"""Splice rendered key tables back into the original source."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from keymapfmt.layout import Grid
from keymapfmt.render.formatter import DEFAULT_PREFIX, KeyCountMismatch, RenderedTable, render_table
from keymapfmt.source.parser import KeymapsBlock, KeyTable, parse_keymaps

logger = logging.getLogger(__name__)


@dataclass
class FormatResult:
    text: str
    block_found: bool = False
    tables: int = 0
    rendered: int = 0
    skipped: int = 0


def table_text(table: KeyTable, rendered: RenderedTable, newline: str = "\n") -> str:
    """Replacement text for one table: diagram comment, then the LAYOUT call."""
    lines = [
        "",
        *rendered.diagram,
        f"    [{table.name.text}] = LAYOUT(",
        *rendered.key_list,
        "    ),",
        "",
    ]
    return newline.join(lines)


def table_segments(block: KeymapsBlock) -> list[tuple[int, int]]:
    """Byte ranges tiling the inside of the block, one per table.

    Each range starts where the previous table ended (or just past ``{``);
    the last one runs up to ``}``.
    """
    segments = []
    start = block.start_offset + 1
    for i, table in enumerate(block.key_tables):
        last = i == len(block.key_tables) - 1
        end = block.end_offset if last else table.end_offset
        segments.append((start, end))
        start = end
    return segments


def patch_source(source: str, block: KeymapsBlock, replacements: list[str | None]) -> str:
    """Replace each table segment with its rendered text.

    ``None`` keeps the segment's original text verbatim. Everything up to
    and including ``{`` and from ``}`` onward is preserved byte for byte.
    """
    data = source.encode("utf-8")
    segments = table_segments(block)
    if len(replacements) != len(segments):
        raise ValueError(f"expected {len(segments)} replacements, got {len(replacements)}")

    out = [data[: block.start_offset + 1]]
    if not segments:
        out.append(data[block.start_offset + 1 : block.end_offset])
    for (start, end), text in zip(segments, replacements):
        out.append(data[start:end] if text is None else text.encode("utf-8"))
    out.append(data[block.end_offset :])
    return b"".join(out).decode("utf-8")


def format_source(source: str, grid: Grid, prefix: str = DEFAULT_PREFIX) -> FormatResult:
    """Parse ``source``, render every table against ``grid`` and patch it in.

    Returns the input unchanged when no keymaps block is found. A table whose
    key count does not fit the grid keeps its original text.
    """
    block = parse_keymaps(source)
    if block is None:
        logger.info("No keymaps block found, leaving source unchanged")
        return FormatResult(text=source)
    if block.unparsed:
        logger.warning(
            "%d entries in the keymaps block could not be parsed, leaving source unchanged",
            block.unparsed,
        )
        return FormatResult(text=source, block_found=True, tables=len(block.key_tables))

    result = FormatResult(text=source, block_found=True, tables=len(block.key_tables))
    newline = "\r\n" if "\r\n" in source else "\n"
    replacements: list[str | None] = []
    for table in block.key_tables:
        try:
            rendered = render_table(grid, table.keys, prefix)
        except KeyCountMismatch as e:
            logger.warning(
                "Skipping [%s]: expected %d keys, found %d",
                table.name.text, e.expected, e.actual,
            )
            replacements.append(None)
            result.skipped += 1
            continue
        replacements.append(table_text(table, rendered, newline))
        result.rendered += 1

    result.text = patch_source(source, block, replacements)
    logger.debug("Formatted %d/%d tables", result.rendered, result.tables)
    return result
