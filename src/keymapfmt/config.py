"""Configuration loaded from environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Occupancy grid used when no --layout is given
KEYMAP_LAYOUT: Path | None = Path(os.environ["KEYMAP_LAYOUT"]) if os.getenv("KEYMAP_LAYOUT") else None

# Leading text of every diagram line
DIAGRAM_PREFIX: str = os.getenv("DIAGRAM_PREFIX", "//    ")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
