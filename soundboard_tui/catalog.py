"""Static clip catalog.

The catalog is an immutable table of clip records grouped into categories.
It is read once at startup from YAML (the bundled ``data/catalog.yaml`` by
default) and shared read-only by search and the favorites/recents views.

On-disk format::

    categories:
      tanya: {label: "TANYA", order: 3}
    popular: [tanya_laugh.wav]
    clips:
      - {file: tanya_laugh.wav, name: "Laugh", category: tanya, tags: [iconic]}
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


class CatalogError(ValueError):
    """Raised when a catalog file is missing, unreadable, or malformed."""


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata for one category."""

    label: str
    sort_order: int


@dataclass(frozen=True)
class ClipRecord:
    """A single catalogued audio clip. ``id`` doubles as the filename."""

    id: str
    display_name: str
    category: str
    tags: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Catalog:
    """Immutable collection of clips plus their category map."""

    clips: tuple[ClipRecord, ...]
    categories: Mapping[str, CategoryInfo]
    popular: tuple[str, ...] = ()
    _index: Mapping[str, ClipRecord] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(
            self, "_index", MappingProxyType({c.id: c for c in self.clips})
        )

    def __len__(self) -> int:
        return len(self.clips)

    def __iter__(self) -> Iterator[ClipRecord]:
        return iter(self.clips)

    def __contains__(self, clip_id: object) -> bool:
        return clip_id in self._index

    def get(self, clip_id: str) -> ClipRecord | None:
        """Return the clip with *clip_id*, or ``None`` if it is not catalogued."""
        return self._index.get(clip_id)

    def category_label(self, category_id: str) -> str:
        info = self.categories.get(category_id)
        return info.label if info else category_id


def build_catalog(
    clips: Iterable[ClipRecord],
    categories: Mapping[str, CategoryInfo],
    popular: Iterable[str] = (),
) -> Catalog:
    """Validate and assemble a :class:`Catalog`.

    Clip ids must be unique and every clip must name a known category.
    """
    records = tuple(clips)
    seen: set[str] = set()
    for clip in records:
        if clip.id in seen:
            raise CatalogError(f"duplicate clip id: {clip.id!r}")
        seen.add(clip.id)
        if clip.category not in categories:
            raise CatalogError(
                f"clip {clip.id!r} has unknown category {clip.category!r}"
            )
    return Catalog(clips=records, categories=categories, popular=tuple(popular))


def parse_catalog(data: object) -> Catalog:
    """Build a catalog from the parsed YAML document."""
    if not isinstance(data, dict):
        raise CatalogError("catalog document must be a mapping")

    raw_categories = data.get("categories")
    if not isinstance(raw_categories, dict) or not raw_categories:
        raise CatalogError("catalog has no categories")
    categories: dict[str, CategoryInfo] = {}
    for cat_id, info in raw_categories.items():
        if not isinstance(info, dict):
            raise CatalogError(f"category {cat_id!r} must be a mapping")
        try:
            categories[str(cat_id)] = CategoryInfo(
                label=str(info.get("label", cat_id)),
                sort_order=int(info["order"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"category {cat_id!r} needs an integer order") from exc

    raw_clips = data.get("clips") or []
    if not isinstance(raw_clips, list):
        raise CatalogError("catalog clips must be a list")
    clips: list[ClipRecord] = []
    for entry in raw_clips:
        if not isinstance(entry, dict) or "file" not in entry:
            raise CatalogError(f"malformed clip entry: {entry!r}")
        tags = entry.get("tags") or []
        if not isinstance(tags, list):
            raise CatalogError(f"tags for {entry['file']!r} must be a list")
        clips.append(
            ClipRecord(
                id=str(entry["file"]),
                display_name=str(entry.get("name", entry["file"])),
                category=str(entry.get("category", "")),
                tags=frozenset(str(t) for t in tags),
            )
        )

    popular = data.get("popular") or []
    if not isinstance(popular, list):
        raise CatalogError("popular must be a list of clip ids")
    return build_catalog(clips, categories, (str(p) for p in popular))


def load_catalog(path: Path | None = None) -> Catalog:
    """Load a catalog from *path* (the bundled catalog by default)."""
    path = path or DEFAULT_CATALOG_PATH
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"cannot read catalog {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"invalid catalog YAML in {path}: {exc}") from exc
    return parse_catalog(data)
