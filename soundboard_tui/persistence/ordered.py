"""Persisted ordered id lists (shared by favorites and recently-played)."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass

from ..log import logger
from ..ordered_list import dedupe
from ._base import KeyValueStorage


@dataclass(frozen=True)
class Parsed:
    ids: list[str]


@dataclass(frozen=True)
class ParseFailure:
    reason: str


ParseResult = Parsed | ParseFailure


def parse_id_list(raw: str | None) -> ParseResult:
    """Decode a stored JSON array of clip ids.

    A missing or empty value parses as an empty list.  Anything that is not
    a JSON array of strings is a :class:`ParseFailure`.  Repeated ids are
    collapsed so a loaded list never holds the same id twice.
    """
    if not raw:
        return Parsed([])
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        return ParseFailure(f"invalid JSON: {exc.msg}")
    if not isinstance(data, list):
        return ParseFailure(f"expected a JSON array, got {type(data).__name__}")
    if not all(isinstance(item, str) for item in data):
        return ParseFailure("array contains non-string ids")
    return Parsed(dedupe(data))


class OrderedIdStore:
    """One ordered id list stored as a JSON array under ``KEY``.

    ``load`` never raises and ``save`` never raises: a failed read yields an
    empty list, a failed write is logged and the caller's in-memory list
    stays authoritative.
    """

    KEY = "ordered-ids"
    LABEL = "list"

    def __init__(self, storage: KeyValueStorage, key: str | None = None) -> None:
        self.storage = storage
        self.key = key or self.KEY

    def load(self) -> list[str]:
        """Read the stored list (empty on missing or unreadable data)."""
        try:
            raw = self.storage.get(self.key)
        except Exception as exc:  # adapters may fail in arbitrary ways on read
            logger.warning("failed to read %s (%s): %s", self.LABEL, self.key, exc)
            return []
        result = parse_id_list(raw)
        if isinstance(result, ParseFailure):
            logger.warning(
                "ignoring stored %s (%s): %s", self.LABEL, self.key, result.reason
            )
            return []
        return result.ids

    def save(self, clip_ids: Sequence[str]) -> bool:
        """Persist *clip_ids*; return False if the write was rejected."""
        try:
            self.storage.set(self.key, json.dumps(list(clip_ids)))
        except Exception as exc:  # StorageWriteError or an adapter's own error
            logger.warning("failed to save %s (%s): %s", self.LABEL, self.key, exc)
            return False
        return True
