"""Favorites persistence store."""

from __future__ import annotations

from ._base import KeyValueStorage
from .ordered import OrderedIdStore

FAVORITES_KEY = "cnc-favorites"


class FavoritesStore(OrderedIdStore):
    """Favorite clip ids in user-chosen order (``["a.wav", "b.wav"]``)."""

    KEY = FAVORITES_KEY
    LABEL = "favorites"

    def __init__(self, storage: KeyValueStorage) -> None:
        super().__init__(storage)
