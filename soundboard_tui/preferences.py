"""User preferences for Soundboard TUI.

Loads settings from ~/.soundboard/tui-preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import APP_DIR, MAX_RECENTLY_PLAYED
from .log import logger

PREFS_PATH = APP_DIR / "tui-preferences.yaml"
DEFAULT_STORAGE_PATH = APP_DIR / "storage.json"

THEME_NAMES = ("allied", "soviet")

_DEFAULT_YAML = """\
# Soundboard TUI Preferences
# Delete this file to reset to defaults.

storage:
  path: ""                       # key-value file for favorites etc. (empty = ~/.soundboard/storage.json)
  max_recently_played: 10        # how many clips the recent list keeps

catalog:
  path: ""                       # custom catalog YAML (empty = bundled catalog)

display:
  show_filenames: false          # show clip filenames next to names
  theme: "allied"                # allied | soviet
"""


@dataclass
class StoragePreferences:
    """Where session data lives and how much history is kept."""

    path: Path = DEFAULT_STORAGE_PATH
    max_recently_played: int = MAX_RECENTLY_PLAYED


@dataclass
class DisplayPreferences:
    """Display settings for the clip list."""

    show_filenames: bool = False
    theme: str = "allied"


@dataclass
class Preferences:
    """Top-level TUI preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    catalog_path: Path | None = None  # None means the bundled catalog


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            if isinstance(data.get("storage"), dict):
                sdata = data["storage"]
                if sdata.get("path"):
                    prefs.storage.path = Path(str(sdata["path"])).expanduser()
                if "max_recently_played" in sdata:
                    prefs.storage.max_recently_played = max(
                        1, int(sdata["max_recently_played"])
                    )
            if isinstance(data.get("catalog"), dict):
                cdata = data["catalog"]
                if cdata.get("path"):
                    prefs.catalog_path = Path(str(cdata["path"])).expanduser()
            if isinstance(data.get("display"), dict):
                ddata = data["display"]
                if "show_filenames" in ddata:
                    prefs.display.show_filenames = bool(ddata["show_filenames"])
                if ddata.get("theme") in THEME_NAMES:
                    prefs.display.theme = str(ddata["theme"])
        except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError):
            logger.warning("invalid preferences file %s, using defaults", path)
            return Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML)
        except OSError:
            logger.debug("could not write default preferences to %s", path)

    return prefs


def _save_value(section: str, key: str, value: str, path: Path | None) -> None:
    """Surgically set ``section.key`` in the preferences file.

    Preserves user comments and other sections as-is.  Best-effort: errors
    are logged, never raised.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        if re.search(rf"^\s+{key}:", text, re.MULTILINE):
            # Replace existing key line, preserving trailing comments
            text = re.sub(
                rf"^(\s+{key}:)\s*(?:\"[^\"]*\"|\S+)(.*?)$",
                lambda m: f"{m.group(1)} {value}{m.group(2)}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        elif re.search(rf"^{section}:", text, re.MULTILINE):
            text = re.sub(
                rf"^({section}:.*)$",
                lambda m: f"{m.group(1)}\n  {key}: {value}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = text.rstrip() + f"\n\n{section}:\n  {key}: {value}\n"

        path.write_text(text)
    except OSError:
        logger.debug("failed to save preference %s.%s", section, key, exc_info=True)


def save_theme_name(name: str, path: Path | None = None) -> None:
    """Persist the display theme to the preferences file."""
    _save_value("display", "theme", f'"{name}"', path)
