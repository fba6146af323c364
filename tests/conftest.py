"""Shared test fixtures for soundboard-tui test suite."""

from __future__ import annotations

import pytest

from soundboard_tui.catalog import Catalog, CategoryInfo, ClipRecord, build_catalog
from soundboard_tui.persistence import MemoryStorage, StorageWriteError
from soundboard_tui.session import Soundboard


class FailingStorage(MemoryStorage):
    """MemoryStorage whose writes are rejected, like a full or disabled store."""

    def set(self, key: str, value: str) -> None:
        raise StorageWriteError("quota exceeded")


class DeniedStorage(MemoryStorage):
    """Storage whose writes fail with a plain OSError instead of StorageWriteError."""

    def set(self, key: str, value: str) -> None:
        raise PermissionError("denied")


class ExplodingStorage(MemoryStorage):
    """Storage whose reads raise, e.g. a browser store with access denied."""

    def get(self, key: str) -> str | None:
        raise RuntimeError("storage disabled")


@pytest.fixture
def categories() -> dict[str, CategoryInfo]:
    return {
        "allies": CategoryInfo(label="ALLIED FORCES", sort_order=1),
        "tanya": CategoryInfo(label="TANYA", sort_order=3),
        "dogs": CategoryInfo(label="ATTACK DOGS", sort_order=9),
    }


@pytest.fixture
def clips() -> list[ClipRecord]:
    """Small catalog covering names, filenames, tags, and categories."""
    return [
        ClipRecord("allies_ack.wav", "Acknowledged", "allies"),
        ClipRecord("allies_yes_sir.wav", "Yes Sir", "allies"),
        ClipRecord("tanya_laugh.wav", "Laugh", "tanya", frozenset({"iconic"})),
        ClipRecord("tanya_lets_rock.wav", "Let's Rock", "tanya", frozenset({"taunt"})),
        ClipRecord("dog_wouf.wav", "Dog Woof", "dogs", frozenset({"bark"})),
    ]


@pytest.fixture
def catalog(clips, categories) -> Catalog:
    return build_catalog(clips, categories, popular=["tanya_laugh.wav", "gone.wav"])


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def board(catalog, storage) -> Soundboard:
    sb = Soundboard(catalog, storage, max_recently_played=3)
    sb.load()
    return sb


@pytest.fixture
def exploding_storage() -> ExplodingStorage:
    return ExplodingStorage()


@pytest.fixture
def denied_storage() -> DeniedStorage:
    return DeniedStorage()
