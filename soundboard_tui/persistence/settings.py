"""Small UI settings kept next to the clip lists."""

from __future__ import annotations

import json

from ..log import logger
from ._base import KeyValueStorage
from .ordered import ParseFailure, parse_id_list

VOLUME_KEY = "soundboardVolume"
ONBOARDING_KEY = "cnc-onboarding-seen"
COLLAPSED_KEY = "cnc-collapsed-categories"

DEFAULT_VOLUME = 100


def clamp_volume(volume: int) -> int:
    return max(0, min(100, int(volume)))


class SettingsStore:
    """Volume, onboarding flag, and collapsed categories.

    Values are stored as plain strings: the volume as a decimal integer,
    the onboarding flag as ``"true"``, collapsed categories as a JSON array.
    Reads fall back to defaults and writes report failure by returning
    ``False``, mirroring :class:`OrderedIdStore`.
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def _get(self, key: str) -> str | None:
        try:
            return self.storage.get(key)
        except Exception as exc:  # adapters may fail in arbitrary ways on read
            logger.warning("failed to read setting %s: %s", key, exc)
            return None

    def _set(self, key: str, value: str) -> bool:
        try:
            self.storage.set(key, value)
        except Exception as exc:  # StorageWriteError or an adapter's own error
            logger.warning("failed to save setting %s: %s", key, exc)
            return False
        return True

    # -- volume ---------------------------------------------------------------

    def load_volume(self) -> int:
        raw = self._get(VOLUME_KEY)
        if raw is None:
            return DEFAULT_VOLUME
        try:
            return clamp_volume(int(raw))
        except ValueError:
            logger.warning("ignoring stored volume %r", raw)
            return DEFAULT_VOLUME

    def save_volume(self, volume: int) -> bool:
        return self._set(VOLUME_KEY, str(clamp_volume(volume)))

    # -- onboarding -----------------------------------------------------------

    def has_seen_onboarding(self) -> bool:
        return self._get(ONBOARDING_KEY) == "true"

    def mark_onboarding_seen(self) -> bool:
        return self._set(ONBOARDING_KEY, "true")

    # -- collapsed categories -------------------------------------------------

    def load_collapsed(self) -> set[str]:
        result = parse_id_list(self._get(COLLAPSED_KEY))
        if isinstance(result, ParseFailure):
            logger.warning("ignoring stored collapsed categories: %s", result.reason)
            return set()
        return set(result.ids)

    def save_collapsed(self, category_ids: set[str]) -> bool:
        return self._set(COLLAPSED_KEY, json.dumps(sorted(category_ids)))
