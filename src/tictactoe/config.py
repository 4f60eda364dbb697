# src/tictactoe/config.py

from __future__ import annotations

import logging
import os

BOARD_SIZES = (3, 4)
DEFAULT_SIZE = 3

# Search
MAX_DEPTH = 6
WIN_SCORE = 10

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # minimum time a computer move stays on screen

LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once. Level comes from TICTACTOE_LOG_LEVEL unless given."""
    if getattr(setup_logging, "_configured", False):
        return
    name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
