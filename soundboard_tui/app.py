"""Main Soundboard TUI application."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Input, ListView, Static

from .catalog import load_catalog
from .constants import MUTED_MESSAGE
from .log import logger, setup_logging
from .persistence import JsonFileStorage
from .preferences import THEME_NAMES, Preferences, load_preferences, save_theme_name
from .search import category_counts, sounds_by_category
from .session import Soundboard
from .theme import TEXTUAL_THEMES, textual_theme_for
from .widgets import CategoryHeader, ClipItem, ConfirmScreen, EmptyItem, ShortcutOverlay

_APP_CSS = """\
Screen {
    background: $background;
}

#main-container {
    height: 1fr;
}

#sidebar {
    width: 36;
    border-right: solid $panel;
}

.panel-title {
    height: 1;
    padding: 0 1;
    color: $primary;
    text-style: bold;
}

#favorites-list, #recent-list {
    height: 1fr;
}

#browser {
    width: 1fr;
}

#search-input {
    margin: 0 0;
}

#search-summary {
    height: 1;
    padding: 0 1;
    color: $text-muted;
}

#clip-list {
    height: 1fr;
}

.category-header {
    color: $secondary;
    text-style: bold;
}

#status-bar {
    dock: bottom;
    height: 1;
    background: $panel;
    color: $text-muted;
    padding: 0 1;
}

#status-playing {
    width: 1fr;
}

#status-volume {
    width: auto;
}

#shortcut-modal, #confirm-modal {
    width: 64;
    height: auto;
    max-height: 80%;
    border: thick $primary;
    background: $surface;
    padding: 1 2;
}

ShortcutOverlay, ConfirmScreen {
    align: center middle;
}

#confirm-title {
    text-style: bold;
    color: $error;
}

#confirm-buttons {
    height: auto;
    margin-top: 1;
}
"""


class SoundboardApp(App):
    """Soundboard TUI - browse, search, and star sound clips."""

    CSS = _APP_CSS
    TITLE = "Soundboard"

    BINDINGS = [
        Binding("ctrl+t", "toggle_favorite", "Star", show=True),
        Binding("ctrl+up", "move_favorite_up", "Fav up", show=False),
        Binding("ctrl+down", "move_favorite_down", "Fav down", show=False),
        Binding("ctrl+x", "clear_favorites", "Clear favs", show=False),
        Binding("ctrl+r", "random_clip", "Random", show=True),
        Binding("ctrl+l", "replay_last", "Replay", show=True),
        Binding("f8", "toggle_mute", "Mute", show=True),
        Binding("f7", "clear_recent", "Clear recent", show=False),
        Binding("f6", "toggle_theme", "Theme", show=False),
        Binding("escape", "clear_search", "Clear search", show=False),
        Binding("f1", "show_shortcuts", "Help", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        board: Soundboard,
        prefs: Preferences | None = None,
        prefs_path: Path | None = None,
    ) -> None:
        super().__init__()
        self.board = board
        self._prefs = prefs or Preferences()
        self._prefs_path = prefs_path

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        with Horizontal(id="main-container"):
            with Vertical(id="sidebar"):
                yield Static("FAVORITES", id="favorites-title", classes="panel-title")
                yield ListView(id="favorites-list")
                yield Static("RECENTLY PLAYED", id="recent-title", classes="panel-title")
                yield ListView(id="recent-list")
            with Vertical(id="browser"):
                yield Input(placeholder="Search sounds…", id="search-input")
                yield Static("", id="search-summary")
                yield ListView(id="clip-list")
        with Horizontal(id="status-bar"):
            yield Static("-", id="status-playing")
            yield Static("", id="status-volume")
        yield Footer()

    async def on_mount(self) -> None:
        for theme in TEXTUAL_THEMES.values():
            self.register_theme(theme)
        self.theme = textual_theme_for(self._prefs.display.theme).name

        await self._refresh_all()
        self.query_one("#search-input", Input).focus()

        if self.board.should_show_onboarding():
            self.notify(
                "Type to search. Ctrl+T stars a clip. F1 shows all keys.",
                title="MISSION BRIEFING",
                timeout=10,
            )
            self.board.dismiss_onboarding()

    # ── Rendering ───────────────────────────────────────────────

    def _clip_item(self, clip) -> ClipItem:
        return ClipItem(
            clip,
            favorite=self.board.is_favorite(clip.id),
            show_filename=self._prefs.display.show_filenames,
        )

    async def _fill(self, list_view: ListView, items: list, index: int | None) -> None:
        await list_view.clear()
        await list_view.extend(items)
        if items:
            list_view.index = max(0, min(index or 0, len(items) - 1))

    async def _refresh_clip_list(self) -> None:
        list_view = self.query_one("#clip-list", ListView)
        visible = self.board.visible_clips()
        items: list = []
        for cat_id, info, count in category_counts(self.board.catalog, visible):
            collapsed = self.board.is_collapsed(cat_id)
            items.append(CategoryHeader(cat_id, info, count, collapsed))
            if not collapsed:
                items.extend(
                    self._clip_item(clip) for clip in sounds_by_category(visible, cat_id)
                )
        if not items:
            items.append(EmptyItem("No sounds match your search"))
        await self._fill(list_view, items, list_view.index)
        self.query_one("#search-summary", Static).update(self.board.search_summary())

    async def _refresh_favorites(self, index: int | None = None) -> None:
        list_view = self.query_one("#favorites-list", ListView)
        clips = self.board.favorite_clips()
        items: list = [self._clip_item(clip) for clip in clips]
        if not items:
            items.append(EmptyItem("Ctrl+T to star a clip"))
        await self._fill(list_view, items, list_view.index if index is None else index)
        self.query_one("#favorites-title", Static).update(f"FAVORITES ({len(clips)})")

    async def _refresh_recent(self) -> None:
        list_view = self.query_one("#recent-list", ListView)
        clips = self.board.recent_clips()
        items: list = [self._clip_item(clip) for clip in clips]
        if not items:
            items.append(EmptyItem("Nothing played yet"))
        await self._fill(list_view, items, 0)
        self.query_one("#recent-title", Static).update(
            f"RECENTLY PLAYED ({len(clips)})"
        )

    async def _refresh_all(self) -> None:
        await self._refresh_favorites()
        await self._refresh_recent()
        await self._refresh_clip_list()
        self._update_status()

    def _update_status(self) -> None:
        playing = self.board.state.now_playing
        clip = self.board.catalog.get(playing) if playing else None
        self.query_one("#status-playing", Static).update(
            f"Now playing: {clip.display_name}" if clip else "-"
        )
        volume = self.board.state.volume
        self.query_one("#status-volume", Static).update(
            "MUTED" if volume == 0 else f"Volume {volume}%"
        )

    def _warn_if_unsaved(self) -> None:
        if not self.board.storage_ok:
            self.notify(
                "Could not save changes; they are kept for this session only.",
                severity="warning",
            )

    # ── Selection helpers ───────────────────────────────────────

    def _current_clip_id(self) -> str | None:
        """Clip under the cursor of the focused list (or the clip browser)."""
        focused = self.focused
        list_view = (
            focused
            if isinstance(focused, ListView)
            else self.query_one("#clip-list", ListView)
        )
        child = list_view.highlighted_child
        if isinstance(child, ClipItem):
            return child.clip_id
        return None

    def _current_favorite_id(self) -> str | None:
        clip_id = self._current_clip_id()
        if clip_id is not None and self.board.is_favorite(clip_id):
            return clip_id
        return None

    def select_clip(self, clip_id: str) -> bool:
        """Highlight *clip_id* in the clip browser and focus it."""
        list_view = self.query_one("#clip-list", ListView)
        for index, child in enumerate(list_view.children):
            if isinstance(child, ClipItem) and child.clip_id == clip_id:
                list_view.index = index
                list_view.focus()
                return True
        return False

    def visible_clip_ids(self) -> list[str]:
        """Clip ids currently listed in the browser, top to bottom."""
        list_view = self.query_one("#clip-list", ListView)
        return [c.clip_id for c in list_view.children if isinstance(c, ClipItem)]

    # ── Events ──────────────────────────────────────────────────

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self.board.set_search(event.value)
            await self._refresh_clip_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.query_one("#clip-list", ListView).focus()

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        item = event.item
        if isinstance(item, CategoryHeader):
            self.board.toggle_category_collapsed(item.category_id)
            self._warn_if_unsaved()
            await self._refresh_clip_list()
        elif isinstance(item, ClipItem):
            await self.play_clip(item.clip_id)

    async def play_clip(self, clip_id: str) -> None:
        """Start (or stop, if already playing) *clip_id*."""
        if self.board.is_muted:
            self.notify(MUTED_MESSAGE, severity="warning")
            return
        self.board.play(clip_id)
        self._warn_if_unsaved()
        await self._refresh_recent()
        self._update_status()

    # ── Actions ─────────────────────────────────────────────────

    async def action_toggle_favorite(self) -> None:
        clip_id = self._current_clip_id()
        if clip_id is None:
            return
        added = self.board.toggle_favorite(clip_id)
        clip = self.board.catalog.get(clip_id)
        name = clip.display_name if clip else "Sound"
        self.notify(f"Target marked: {name}" if added else f"Target unmarked: {name}")
        self._warn_if_unsaved()
        await self._refresh_all()

    async def _move_favorite(self, up: bool) -> None:
        clip_id = self._current_favorite_id()
        if clip_id is None:
            return
        if up:
            self.board.move_favorite_up(clip_id)
        else:
            self.board.move_favorite_down(clip_id)
        self._warn_if_unsaved()
        position = self.board.favorite_position(clip_id)
        index = position[0] - 1 if position else None
        await self._refresh_favorites(index=index)
        if position:
            clip = self.board.catalog.get(clip_id)
            name = clip.display_name if clip else "Sound"
            direction = "up" if up else "down"
            self.notify(f"{name} moved {direction}, now {position[0]} of {position[1]}")

    async def action_move_favorite_up(self) -> None:
        await self._move_favorite(up=True)

    async def action_move_favorite_down(self) -> None:
        await self._move_favorite(up=False)

    def action_clear_favorites(self) -> None:
        count = len(self.board.state.favorites)
        if count == 0:
            self.notify("NO TARGETS TO CLEAR")
            return

        async def _after(confirmed: bool | None) -> None:
            if not confirmed:
                self.notify("OPERATION CANCELLED")
                return
            self.board.clear_all_favorites()
            self._warn_if_unsaved()
            await self._refresh_all()
            self.notify("ALL TARGETS CLEARED")

        plural = "" if count == 1 else "s"
        self.push_screen(
            ConfirmScreen(
                f"Clear all {count} target{plural} from favorites? "
                "This action cannot be undone."
            ),
            _after,
        )

    async def action_random_clip(self) -> None:
        clip = self.board.random_clip()
        if clip is not None:
            await self.play_clip(clip.id)

    async def action_replay_last(self) -> None:
        clip = self.board.last_played()
        if clip is None:
            return
        # Replaying the clip that is still marked as playing restarts it.
        self.board.stop()
        await self.play_clip(clip.id)

    async def action_clear_recent(self) -> None:
        if not self.board.state.recently_played:
            return
        self.board.clear_recently_played()
        self._warn_if_unsaved()
        await self._refresh_recent()
        self.notify("Recently played cleared")

    def action_toggle_theme(self) -> None:
        current = self._prefs.display.theme
        index = THEME_NAMES.index(current) if current in THEME_NAMES else -1
        name = THEME_NAMES[(index + 1) % len(THEME_NAMES)]
        self._prefs.display.theme = name
        self.theme = textual_theme_for(name).name
        save_theme_name(name, self._prefs_path)
        self.notify(f"Theme: {name}")

    def action_toggle_mute(self) -> None:
        self.board.toggle_mute()
        self._warn_if_unsaved()
        self._update_status()

    async def action_clear_search(self) -> None:
        search = self.query_one("#search-input", Input)
        if search.value:
            search.value = ""
            self.board.set_search("")
            await self._refresh_clip_list()
        search.focus()

    def action_show_shortcuts(self) -> None:
        self.push_screen(ShortcutOverlay())


def run_app(
    *,
    prefs_path: Path | None = None,
    catalog_path: Path | None = None,
    storage_path: Path | None = None,
    max_recently_played: int | None = None,
    debug: bool = False,
) -> None:
    """Load preferences, catalog, and storage, then run the TUI."""
    setup_logging(debug=debug)
    prefs = load_preferences(prefs_path)
    catalog = load_catalog(catalog_path or prefs.catalog_path)
    storage = JsonFileStorage(storage_path or prefs.storage.path)
    board = Soundboard(
        catalog,
        storage,
        max_recently_played=max_recently_played or prefs.storage.max_recently_played,
    )
    board.load()
    logger.info(
        "starting with %d clips, %d favorites", len(catalog), len(board.state.favorites)
    )
    SoundboardApp(board, prefs, prefs_path=prefs_path).run()
