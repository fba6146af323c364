"""Widgets for Soundboard TUI."""

from .clips import CategoryHeader, ClipItem, EmptyItem
from .screens import ConfirmScreen, ShortcutOverlay

__all__ = [
    "CategoryHeader",
    "ClipItem",
    "ConfirmScreen",
    "EmptyItem",
    "ShortcutOverlay",
]
