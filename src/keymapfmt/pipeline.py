"""File-level formatting step.

Reads a keymap source, formats it against an occupancy grid and optionally
writes it back. Returns a summary dict for the caller to report.
"""

from __future__ import annotations

import logging
from pathlib import Path

from keymapfmt import config
from keymapfmt.layout import Grid
from keymapfmt.patcher import format_source

logger = logging.getLogger(__name__)


def format_file(
    path: Path,
    grid: Grid,
    write: bool = False,
    prefix: str | None = None,
) -> dict:
    """Format the keymaps block in ``path``.

    I/O errors propagate. The file is only rewritten when ``write`` is set
    and the formatted text differs from what is on disk.

    Returns {"text": str, "changed": bool, "block_found": bool,
    "tables": N, "rendered": N, "skipped": N}.
    """
    with path.open(encoding="utf-8", newline="") as f:
        source = f.read()
    result = format_source(source, grid, prefix if prefix is not None else config.DIAGRAM_PREFIX)
    changed = result.text != source

    if write and changed:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(result.text)
        logger.info("Rewrote %s (%d tables)", path, result.rendered)

    return {
        "text": result.text,
        "changed": changed,
        "block_found": result.block_found,
        "tables": result.tables,
        "rendered": result.rendered,
        "skipped": result.skipped,
    }
