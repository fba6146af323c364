"""Entry point for Soundboard TUI CLI."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

from . import __version__
from .catalog import (
    DEFAULT_CATALOG_PATH,
    Catalog,
    CatalogError,
    ClipRecord,
    load_catalog,
)
from .log import LOG_PATH, logger
from .persistence import JsonFileStorage
from .preferences import PREFS_PATH, Preferences, load_preferences
from .search import category_counts, search_catalog, search_summary
from .session import Soundboard


def _run_doctor(prefs: Preferences, catalog_path: Path | None, storage_path: Path) -> int:
    """Print an environment report; return the exit status."""
    print("Soundboard TUI -- Environment Doctor\n")
    print(f"  Python:       {sys.executable} ({sys.version.split()[0]})")
    print(f"  Preferences:  {PREFS_PATH}")
    print(f"  Log file:     {LOG_PATH}")

    all_ok = True
    print()
    path = catalog_path or DEFAULT_CATALOG_PATH
    try:
        catalog = load_catalog(path)
        print(f"  [ok] {'Catalog':14s}  {len(catalog)} clips in {path}")
    except CatalogError as exc:
        print(f"  [!!] {'Catalog':14s}  {exc}")
        all_ok = False

    storage = JsonFileStorage(storage_path)
    if storage_path.exists():
        print(f"  [ok] {'Storage':14s}  {len(storage.keys())} key(s) in {storage_path}")
    else:
        print(f"  [--] {'Storage':14s}  not created yet ({storage_path})")
    print(f"  [ok] {'Recent cap':14s}  {prefs.storage.max_recently_played}")

    print()
    print("  All checks passed." if all_ok else "  Some checks failed.")
    return 0 if all_ok else 1


def _print_clips(clips: Iterable[ClipRecord], catalog: Catalog) -> None:
    for clip in clips:
        print(f"  {clip.id:40s}  {clip.display_name}  [{catalog.category_label(clip.category)}]")


def main(argv: list[str] | None = None) -> None:
    """Run Soundboard TUI."""
    parser = argparse.ArgumentParser(description="Soundboard TUI")
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"soundboard-tui {__version__}",
    )
    parser.add_argument(
        "--search",
        "-s",
        type=str,
        help="Print clips matching a query and exit",
    )
    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="Print categories with clip counts and exit",
    )
    parser.add_argument(
        "--favorites",
        action="store_true",
        help="Print saved favorites in order and exit",
    )
    parser.add_argument(
        "--clear-recent",
        action="store_true",
        help="Empty the recently played list and exit",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="Drop saved ids the catalog no longer has, then exit",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Catalog YAML to load instead of the bundled one",
    )
    parser.add_argument(
        "--storage",
        type=Path,
        help="Key-value JSON file for favorites and settings",
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        help=f"Preferences file (default: {PREFS_PATH})",
    )
    parser.add_argument(
        "--max-recent",
        type=int,
        help="How many recently played clips to keep",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check catalog, storage and preferences, then exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write debug-level records to the log file",
    )

    args = parser.parse_args(argv)
    if args.max_recent is not None and args.max_recent < 1:
        parser.error("--max-recent must be at least 1")

    prefs = load_preferences(args.prefs)
    catalog_path = args.catalog or prefs.catalog_path
    storage_path = args.storage or prefs.storage.path

    if args.doctor:
        sys.exit(_run_doctor(prefs, catalog_path, storage_path))

    if (
        args.search is not None
        or args.list_categories
        or args.favorites
        or args.clear_recent
        or args.prune
    ):
        try:
            catalog = load_catalog(catalog_path)
        except CatalogError as exc:
            print(f"error: {exc}", file=sys.stderr)
            sys.exit(1)

        if args.list_categories:
            for cat_id, info, count in category_counts(catalog):
                print(f"  {info.label:24s} {count:4d}  ({cat_id})")
        if args.search is not None:
            matches = search_catalog(catalog, args.search)
            summary = search_summary(len(matches), len(catalog), args.search)
            if summary:
                print(summary)
            _print_clips(matches, catalog)
        board = Soundboard(catalog, JsonFileStorage(storage_path))
        board.load()
        if args.prune:
            print(f"Removed {board.prune_missing()} stale id(s).")
        if args.clear_recent:
            board.clear_recently_played()
            print("Recently played cleared.")
        if (args.prune or args.clear_recent) and not board.storage_ok:
            print(f"error: could not write {storage_path}", file=sys.stderr)
            sys.exit(1)
        if args.favorites:
            clips = board.favorite_clips()
            if not clips:
                print("No favorites yet.")
            _print_clips(clips, catalog)
        return

    try:
        from .app import run_app

        run_app(
            prefs_path=args.prefs,
            catalog_path=args.catalog,
            storage_path=args.storage,
            max_recently_played=args.max_recent,
            debug=args.debug,
        )
    except (KeyboardInterrupt, SystemExit):
        pass
    except CatalogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.debug("Fatal error in soundboard-tui", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
