"""Session state and the write-through soundboard facade.

:class:`SessionState` holds everything that changes while the app runs.
:class:`Soundboard` owns one state object and applies the pure list
operations from :mod:`ordered_list` to it: compute the new list, persist it,
then replace the in-memory copy.  A failed write is logged by the store and
the in-memory list stays authoritative for the rest of the session.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from . import ordered_list
from .catalog import Catalog, ClipRecord
from .constants import MAX_RECENTLY_PLAYED
from .persistence import (
    FavoritesStore,
    KeyValueStorage,
    RecentlyPlayedStore,
    SettingsStore,
)
from .persistence.settings import DEFAULT_VOLUME, clamp_volume
from .search import normalize_query, resolve_ids, search_catalog, search_summary


@dataclass
class SessionState:
    """Mutable per-session data shared by the UI."""

    favorites: list[str] = field(default_factory=list)
    recently_played: list[str] = field(default_factory=list)
    search_term: str = ""
    volume: int = DEFAULT_VOLUME
    previous_volume: int = DEFAULT_VOLUME
    collapsed_categories: set[str] = field(default_factory=set)
    now_playing: str | None = None


class Soundboard:
    """Favorites, recently-played, search, and settings for one session."""

    def __init__(
        self,
        catalog: Catalog,
        storage: KeyValueStorage,
        *,
        max_recently_played: int = MAX_RECENTLY_PLAYED,
    ) -> None:
        self.catalog = catalog
        self.favorites_store = FavoritesStore(storage)
        self.recent_store = RecentlyPlayedStore(storage, max_recently_played)
        self.settings = SettingsStore(storage)
        self.state = SessionState()
        self.storage_ok = True

    @property
    def max_recently_played(self) -> int:
        return self.recent_store.max_items

    def load(self) -> SessionState:
        """Hydrate the session from storage (missing or bad data reads empty)."""
        volume = self.settings.load_volume()
        self.state = SessionState(
            favorites=self.favorites_store.load(),
            recently_played=self.recent_store.load(),
            volume=volume,
            previous_volume=volume or DEFAULT_VOLUME,
            collapsed_categories=self.settings.load_collapsed(),
        )
        return self.state

    def _note(self, ok: bool) -> bool:
        self.storage_ok = ok
        return ok

    def _commit_favorites(self, new: list[str]) -> list[str]:
        self._note(self.favorites_store.save(new))
        self.state.favorites = new
        return new

    def _commit_recent(self, new: list[str]) -> list[str]:
        self._note(self.recent_store.save(new))
        self.state.recently_played = new
        return new

    # -- favorites ------------------------------------------------------------

    def is_favorite(self, clip_id: str) -> bool:
        return ordered_list.is_member(self.state.favorites, clip_id)

    def toggle_favorite(self, clip_id: str) -> bool:
        """Add or remove *clip_id*; return True if it is now a favorite."""
        added = not self.is_favorite(clip_id)
        self._commit_favorites(ordered_list.toggle(self.state.favorites, clip_id))
        return added

    def reorder_favorites(self, dragged_id: str, target_id: str) -> list[str]:
        return self._commit_favorites(
            ordered_list.reorder(self.state.favorites, dragged_id, target_id)
        )

    def move_favorite_up(self, clip_id: str) -> list[str]:
        return self._commit_favorites(
            ordered_list.move_up(self.state.favorites, clip_id)
        )

    def move_favorite_down(self, clip_id: str) -> list[str]:
        return self._commit_favorites(
            ordered_list.move_down(self.state.favorites, clip_id)
        )

    def clear_all_favorites(self) -> int:
        """Empty the favorites list; return how many were removed."""
        count = len(self.state.favorites)
        self._commit_favorites(ordered_list.clear(self.state.favorites))
        return count

    def favorite_clips(self) -> list[ClipRecord]:
        """Favorites in user order, skipping ids the catalog no longer has."""
        return resolve_ids(self.catalog, self.state.favorites)

    def favorite_position(self, clip_id: str) -> tuple[int, int] | None:
        """1-based ``(position, total)`` of a favorite, for announcements."""
        if not self.is_favorite(clip_id):
            return None
        return self.state.favorites.index(clip_id) + 1, len(self.state.favorites)

    # -- recently played ------------------------------------------------------

    def add_to_recently_played(self, clip_id: str) -> list[str]:
        return self._commit_recent(
            ordered_list.add_to_recently_played(
                self.state.recently_played, clip_id, self.max_recently_played
            )
        )

    def recent_clips(self) -> list[ClipRecord]:
        return resolve_ids(self.catalog, self.state.recently_played)

    def last_played(self) -> ClipRecord | None:
        recent = self.recent_clips()
        return recent[0] if recent else None

    def clear_recently_played(self) -> None:
        self._commit_recent([])

    # -- search ---------------------------------------------------------------

    def set_search(self, query: str) -> Sequence[ClipRecord]:
        self.state.search_term = normalize_query(query)
        return self.visible_clips()

    def visible_clips(self) -> Sequence[ClipRecord]:
        return search_catalog(self.catalog, self.state.search_term)

    def search_summary(self) -> str:
        return search_summary(
            len(self.visible_clips()), len(self.catalog), self.state.search_term
        )

    # -- playback bookkeeping -------------------------------------------------

    @property
    def is_muted(self) -> bool:
        return self.state.volume == 0

    def play(self, clip_id: str) -> ClipRecord | None:
        """Mark *clip_id* as playing and record it in recently-played.

        Returns ``None`` without side effects when muted or when the id is
        not in the catalog.  Playing the clip that is already playing stops
        it (returns ``None`` and clears ``now_playing``).
        """
        clip = self.catalog.get(clip_id)
        if clip is None or self.is_muted:
            return None
        if self.state.now_playing == clip_id:
            self.stop()
            return None
        self.state.now_playing = clip_id
        self.add_to_recently_played(clip_id)
        return clip

    def stop(self) -> None:
        self.state.now_playing = None

    def random_clip(self, rng: random.Random | None = None) -> ClipRecord | None:
        if not self.catalog.clips:
            return None
        return (rng or random).choice(self.catalog.clips)

    def popular_clips(self) -> list[ClipRecord]:
        return resolve_ids(self.catalog, self.catalog.popular)

    # -- volume ---------------------------------------------------------------

    def set_volume(self, volume: int) -> int:
        volume = clamp_volume(volume)
        if volume > 0:
            self.state.previous_volume = volume
        self.state.volume = volume
        self._note(self.settings.save_volume(volume))
        return volume

    def toggle_mute(self) -> int:
        """Mute, or restore the last non-zero volume; return the new volume."""
        if self.state.volume > 0:
            self.state.previous_volume = self.state.volume
            return self.set_volume(0)
        return self.set_volume(self.state.previous_volume or DEFAULT_VOLUME)

    # -- categories -----------------------------------------------------------

    def is_collapsed(self, category_id: str) -> bool:
        """Collapsed state, ignoring collapse while a search is active."""
        if self.state.search_term:
            return False
        return category_id in self.state.collapsed_categories

    def toggle_category_collapsed(self, category_id: str) -> bool:
        """Flip a category's collapsed state; return True if now collapsed."""
        collapsed = set(self.state.collapsed_categories)
        if category_id in collapsed:
            collapsed.discard(category_id)
        else:
            collapsed.add(category_id)
        self._note(self.settings.save_collapsed(collapsed))
        self.state.collapsed_categories = collapsed
        return category_id in collapsed

    # -- onboarding -----------------------------------------------------------

    def should_show_onboarding(self) -> bool:
        return not self.settings.has_seen_onboarding()

    def dismiss_onboarding(self) -> None:
        self._note(self.settings.mark_onboarding_seen())

    # -- maintenance ----------------------------------------------------------

    def prune_missing(self) -> int:
        """Drop ids the catalog no longer knows from both lists.

        Stale ids are otherwise kept so a later catalog can bring them back;
        this is the explicit opt-in compaction.  Returns the number removed.
        """
        favorites = [c for c in self.state.favorites if c in self.catalog]
        recent = [c for c in self.state.recently_played if c in self.catalog]
        removed = (len(self.state.favorites) - len(favorites)) + (
            len(self.state.recently_played) - len(recent)
        )
        if removed:
            self._commit_favorites(favorites)
            self._commit_recent(recent)
        return removed
