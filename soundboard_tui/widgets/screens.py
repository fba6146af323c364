"""Modal screen widgets for Soundboard TUI."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

SHORTCUTS_TEXT = """\
                   Keyboard Shortcuts
────────────────────────────────────────────────────────

 BROWSE ───────────────────────────────────────────────
  Type             Search by name, filename, or tag
  Escape           Clear search
  Tab              Cycle focus (search / clips / panels)
  Enter            Play clip (or collapse a category)

 FAVORITES ────────────────────────────────────────────
  Ctrl+T           Star / unstar highlighted clip
  Ctrl+↑/↓         Move favorite up/down
  Ctrl+X           Clear all favorites

 PLAYBACK ─────────────────────────────────────────────
  Ctrl+R           Play a random clip
  Ctrl+L           Replay last clip
  F8               Mute / unmute
  F7               Clear recently played

 OTHER ────────────────────────────────────────────────
  F6               Switch theme (allied / soviet)
  F1               This help
  Ctrl+Q           Quit

           Press F1 or Esc to close\
"""


class ShortcutOverlay(ModalScreen):
    """Modal overlay listing all keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss_overlay", show=False),
        Binding("f1", "dismiss_overlay", show=False),
    ]

    def compose(self) -> ComposeResult:
        with ScrollableContainer(id="shortcut-modal"):
            yield Static(SHORTCUTS_TEXT, id="shortcut-content")

    def action_dismiss_overlay(self) -> None:
        self.app.pop_screen()

    def on_click(self, event) -> None:
        """Dismiss overlay when clicking outside the modal content."""
        modal = self.query_one("#shortcut-modal")
        if (event.screen_x, event.screen_y) not in modal.region:
            self.app.pop_screen()


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no confirmation for destructive operations."""

    BINDINGS = [
        Binding("y", "confirm", show=False),
        Binding("n", "cancel", show=False),
        Binding("escape", "cancel", show=False),
    ]

    def __init__(
        self,
        message: str,
        *,
        title: str = "CONFIRM OPERATION",
        confirm_label: str = "EXECUTE",
        cancel_label: str = "ABORT",
    ) -> None:
        super().__init__()
        self._message = message
        self._title = title
        self._confirm_label = confirm_label
        self._cancel_label = cancel_label

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-modal"):
            yield Static(self._title, id="confirm-title")
            yield Static(self._message, id="confirm-message")
            with Horizontal(id="confirm-buttons"):
                yield Button(self._confirm_label, variant="error", id="confirm-yes")
                yield Button(self._cancel_label, id="confirm-no")

    def on_mount(self) -> None:
        self.query_one("#confirm-no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
