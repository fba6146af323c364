"""Search and category filtering over the clip catalog.

All functions return order-preserving subsequences of their input; there is
no relevance ranking.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import PurePath

from .catalog import Catalog, CategoryInfo, ClipRecord
from .matching import fuzzy_match


def normalize_query(query: str | None) -> str:
    """Lowercase and trim a raw search string."""
    return (query or "").strip().lower()


def clip_matches(
    clip: ClipRecord,
    query: str,
    categories: Mapping[str, CategoryInfo] | None = None,
) -> bool:
    """Return True if *clip* matches the (already normalized) *query*.

    Name and filename stem are matched fuzzily.  The extension is left out
    because every clip shares it.  Tags and the category label are fixed
    vocabulary, so they only match by substring.
    """
    stem = PurePath(clip.id).stem
    if fuzzy_match(query, clip.display_name) or fuzzy_match(query, stem):
        return True
    if any(query in tag.lower() for tag in clip.tags):
        return True
    if categories is not None:
        info = categories.get(clip.category)
        if info is not None and query in info.label.lower():
            return True
    return False


def filter_sounds(
    clips: Sequence[ClipRecord],
    query: str | None,
    categories: Mapping[str, CategoryInfo] | None = None,
) -> Sequence[ClipRecord]:
    """Return the clips matching *query*, in catalog order.

    A blank query is "no filter" and returns *clips* unchanged.
    """
    term = normalize_query(query)
    if not term:
        return clips
    return [clip for clip in clips if clip_matches(clip, term, categories)]


def search_catalog(catalog: Catalog, query: str | None) -> Sequence[ClipRecord]:
    """:func:`filter_sounds` over a whole catalog, including category labels."""
    return filter_sounds(catalog.clips, query, catalog.categories)


def sounds_by_category(
    clips: Iterable[ClipRecord], category_id: str
) -> list[ClipRecord]:
    return [clip for clip in clips if clip.category == category_id]


def sorted_categories(
    categories: Mapping[str, CategoryInfo],
) -> list[tuple[str, CategoryInfo]]:
    """Return ``(id, info)`` pairs ordered by ``sort_order`` (stable on ties)."""
    return sorted(categories.items(), key=lambda item: item[1].sort_order)


def category_counts(
    catalog: Catalog, clips: Iterable[ClipRecord] | None = None
) -> list[tuple[str, CategoryInfo, int]]:
    """Return ``(id, info, count)`` for each non-empty category, in sort order.

    *clips* defaults to the full catalog; pass a search result to count only
    visible clips.
    """
    counts: dict[str, int] = {}
    for clip in catalog.clips if clips is None else clips:
        counts[clip.category] = counts.get(clip.category, 0) + 1
    return [
        (cat_id, info, counts[cat_id])
        for cat_id, info in sorted_categories(catalog.categories)
        if counts.get(cat_id)
    ]


def resolve_ids(catalog: Catalog, clip_ids: Iterable[str]) -> list[ClipRecord]:
    """Map ids to clip records, silently skipping ids the catalog lacks."""
    resolved = []
    for clip_id in clip_ids:
        clip = catalog.get(clip_id)
        if clip is not None:
            resolved.append(clip)
    return resolved


def search_summary(count: int, total: int, query: str | None) -> str:
    """Human-readable result line for the current search (empty if no query)."""
    term = (query or "").strip()
    if not term:
        return ""
    if count == 0:
        return f'No sounds found for "{term}"'
    return f'Showing {count} of {total} sounds for "{term}"'
