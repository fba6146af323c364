"""Recently-played persistence store."""

from __future__ import annotations

from ._base import KeyValueStorage
from .ordered import OrderedIdStore

RECENTLY_PLAYED_KEY = "cnc-recently-played"


class RecentlyPlayedStore(OrderedIdStore):
    """Recently played clip ids, most recent first, capped at ``max_items``."""

    KEY = RECENTLY_PLAYED_KEY
    LABEL = "recently played"

    def __init__(self, storage: KeyValueStorage, max_items: int) -> None:
        super().__init__(storage)
        self.max_items = max(1, max_items)

    def load(self) -> list[str]:
        """Load the stored list, trimmed to the current cap."""
        return super().load()[: self.max_items]
