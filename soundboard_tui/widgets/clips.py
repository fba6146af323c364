"""List items for the clip browser and the favorites/recent panels."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Label, ListItem

from ..catalog import CategoryInfo, ClipRecord


class ClipItem(ListItem):
    """One clip row.  ``clip_id`` identifies the clip for actions."""

    def __init__(
        self,
        clip: ClipRecord,
        *,
        favorite: bool = False,
        show_filename: bool = False,
    ) -> None:
        star = "★" if favorite else "☆"
        text = f"{star} {escape(clip.display_name)}"
        if show_filename:
            text += f"  [dim]{escape(clip.id)}[/]"
        super().__init__(Label(text), classes="clip-item")
        self.clip_id = clip.id


class CategoryHeader(ListItem):
    """Section header; selecting it collapses or expands the category."""

    def __init__(
        self, category_id: str, info: CategoryInfo, count: int, collapsed: bool
    ) -> None:
        arrow = "▶" if collapsed else "▼"
        super().__init__(
            Label(f"{arrow} {escape(info.label)} ({count})"),
            classes="category-header",
        )
        self.category_id = category_id
        self.collapsed = collapsed


class EmptyItem(ListItem):
    """Placeholder row for an empty list."""

    def __init__(self, text: str) -> None:
        super().__init__(
            Label(f"[dim]{escape(text)}[/]"), classes="empty-item", disabled=True
        )
