#!/usr/bin/env python3
"""CLI: Align a QMK keymap.c and annotate each layer with a key diagram."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the package is importable when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from keymapfmt import config
from keymapfmt.layout import LayoutError, load_grid
from keymapfmt.pipeline import format_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Format the keymaps table of a QMK keymap.c")
    parser.add_argument("path", type=Path, help="keymap source file")
    parser.add_argument(
        "--layout",
        type=Path,
        default=config.KEYMAP_LAYOUT,
        help="Occupancy grid file (default: KEYMAP_LAYOUT from .env)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Write the result back to PATH instead of printing it",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether PATH would change; exit 1 if it would",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if args.layout is None:
        print("Error: no layout given. Use --layout or set KEYMAP_LAYOUT in .env.", file=sys.stderr)
        return 1

    try:
        grid = load_grid(args.layout)
    except LayoutError as e:
        print(f"Error: invalid layout {args.layout}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read layout {args.layout}: {e}", file=sys.stderr)
        return 2

    try:
        result = format_file(args.path, grid, write=args.overwrite and not args.check)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {args.path}: {e}", file=sys.stderr)
        return 2

    if not result["block_found"]:
        print(f"Warning: no keymaps block found in {args.path}", file=sys.stderr)
    if result["skipped"]:
        print(
            f"Warning: {result['skipped']} of {result['tables']} tables left unchanged "
            "(key count does not match layout)",
            file=sys.stderr,
        )

    if args.check:
        if result["changed"]:
            print(f"{args.path} would be reformatted", file=sys.stderr)
            return 1
        return 0

    if args.overwrite:
        state = "reformatted" if result["changed"] else "unchanged"
        print(f"{args.path}: {state} ({result['rendered']}/{result['tables']} tables)", file=sys.stderr)
    else:
        sys.stdout.write(result["text"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
