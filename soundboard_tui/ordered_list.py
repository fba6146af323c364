"""Pure operations on ordered, duplicate-free lists of clip ids.

Favorites and recently-played share these primitives.  Every function
returns a new list and never mutates its input; no-op cases (unknown id,
already at the edge) return an equal copy.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def dedupe(clip_ids: Iterable[str]) -> list[str]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for clip_id in clip_ids:
        if clip_id not in seen:
            seen.add(clip_id)
            result.append(clip_id)
    return result


def is_member(clip_ids: Sequence[str], clip_id: str) -> bool:
    return clip_id in clip_ids


def toggle(clip_ids: Sequence[str], clip_id: str) -> list[str]:
    """Remove *clip_id* if present, otherwise append it."""
    if clip_id in clip_ids:
        return [c for c in clip_ids if c != clip_id]
    return [*clip_ids, clip_id]


def reorder(clip_ids: Sequence[str], dragged_id: str, target_id: str) -> list[str]:
    """Move *dragged_id* to the index *target_id* currently occupies.

    The target index is taken before the dragged id is removed: dropping on
    a later item places the dragged id after it, dropping on an earlier item
    places it before.
    """
    result = list(clip_ids)
    if dragged_id not in result or target_id not in result:
        return result
    target_index = result.index(target_id)
    result.remove(dragged_id)
    result.insert(target_index, dragged_id)
    return result


def move_up(clip_ids: Sequence[str], clip_id: str) -> list[str]:
    """Swap *clip_id* with its predecessor."""
    result = list(clip_ids)
    if clip_id not in result:
        return result
    index = result.index(clip_id)
    if index > 0:
        result[index - 1], result[index] = result[index], result[index - 1]
    return result


def move_down(clip_ids: Sequence[str], clip_id: str) -> list[str]:
    """Swap *clip_id* with its successor."""
    result = list(clip_ids)
    if clip_id not in result:
        return result
    index = result.index(clip_id)
    if index < len(result) - 1:
        result[index], result[index + 1] = result[index + 1], result[index]
    return result


def clear(clip_ids: Sequence[str]) -> list[str]:  # noqa: ARG001
    return []


def add_to_recently_played(
    clip_ids: Sequence[str], clip_id: str, max_items: int
) -> list[str]:
    """Put *clip_id* at the front, dropping its old position and the overflow."""
    if max_items <= 0:
        return []
    rest = [c for c in clip_ids if c != clip_id]
    return [clip_id, *rest][:max_items]
