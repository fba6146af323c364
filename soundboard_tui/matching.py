"""Typo-tolerant string matching for clip search."""

from __future__ import annotations

import re

# Queries this short only match exactly or as a substring.
MIN_FUZZY_LENGTH = 3

_WORD_SPLIT = re.compile(r"[\s_\-]+")


def levenshtein_distance(a: str, b: str) -> int:
    """Return the unit-cost edit distance between *a* and *b*."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    rows, cols = len(a) + 1, len(b) + 1
    table = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,  # deletion
                table[i][j - 1] + 1,  # insertion
                table[i - 1][j - 1] + cost,  # substitution
            )
    return table[-1][-1]


def fuzzy_tolerance(query: str) -> int:
    """Maximum edits allowed for *query*: 1 for short queries, 2 otherwise."""
    if len(query) < MIN_FUZZY_LENGTH:
        return 0
    return 1 if len(query) <= 4 else 2


def fuzzy_match(query: str, target: str, max_distance: int | None = None) -> bool:
    """Return True if *query* approximately matches *target*.

    Matching is case-insensitive.  Exact and substring hits always match.
    Otherwise queries of at least three characters may differ by a small
    number of edits from the whole target or from any single word in it,
    which catches typos like ``"tania"`` for ``"Tanya"``.

    An empty query never matches; callers treat "no query" as "show all".
    """
    if not query or not target:
        return False

    q = query.lower()
    text = target.lower()
    if q == text or q in text:
        return True
    if len(q) < MIN_FUZZY_LENGTH:
        return False

    tolerance = fuzzy_tolerance(q) if max_distance is None else max_distance
    candidates = [text, *(w for w in _WORD_SPLIT.split(text) if w)]
    for candidate in candidates:
        # Edit distance is at least the length difference.
        if abs(len(candidate) - len(q)) > tolerance:
            continue
        if levenshtein_distance(q, candidate) <= tolerance:
            return True
    return False
