"""Soundboard TUI: a searchable soundboard with favorites and recents."""

__version__ = "0.1.0"
