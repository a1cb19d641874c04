from __future__ import annotations

from typing import Iterable, Optional


def matches_search(term: Optional[str], *values: Optional[str]) -> bool:
    """Case-insensitive substring match of ``term`` against any value.

    An empty term matches everything; missing values never match.
    """
    if not term:
        return True
    needle = term.lower()
    return any(v is not None and needle in str(v).lower() for v in values)


def rank_sort_key(lavel: Optional[int]) -> tuple[int, int]:
    """Sort key ordering by rank ascending with unranked entries last."""
    if not lavel:
        return (1, 0)
    return (0, int(lavel))


def count_where(items: Iterable, predicate) -> int:
    return sum(1 for item in items if predicate(item))
