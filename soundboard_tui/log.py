"""Package logger for Soundboard TUI.

The TUI owns the terminal, so log records go to a file rather than stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_PATH = Path.home() / ".soundboard" / "tui.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("soundboard_tui")


def setup_logging(path: Path | None = None, *, debug: bool = False) -> Path | None:
    """Attach a file handler to the package logger.

    Returns the log path, or ``None`` if the file could not be opened.
    """
    path = path or LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return path
