"""Persistence layer: string key-value adapters and the stores built on them."""

from ._base import JsonFileStorage, KeyValueStorage, MemoryStorage, StorageWriteError
from .favorites import FavoritesStore
from .ordered import OrderedIdStore, Parsed, ParseFailure, parse_id_list
from .recently_played import RecentlyPlayedStore
from .settings import SettingsStore

__all__ = [
    "FavoritesStore",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "OrderedIdStore",
    "ParseFailure",
    "Parsed",
    "RecentlyPlayedStore",
    "SettingsStore",
    "StorageWriteError",
    "parse_id_list",
]
