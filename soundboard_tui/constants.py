"""Shared constants for Soundboard TUI."""

from __future__ import annotations

from pathlib import Path

APP_DIR = Path.home() / ".soundboard"

# Recently-played cap when preferences don't override it.
MAX_RECENTLY_PLAYED = 10

MUTED_MESSAGE = "COMMS SILENCED. Unmute to proceed."
