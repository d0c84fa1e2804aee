"""Shape predicates over fixed element lists.

Every function accepts any finite iterable and is total: the empty list and
single-element lists are vacuously sets, ascending and descending.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise
from typing import Any


def contains(items: Iterable[Any], x: Any) -> bool:
    return any(item == x for item in items)


def first_duplicate(items: Iterable[Any]) -> tuple[Any, int, int] | None:
    """Return ``(value, first_pos, repeat_pos)`` for the first repeated value, else None."""
    seen: dict[Any, int] = {}
    for pos, item in enumerate(items):
        if item in seen:
            return item, seen[item], pos
        seen[item] = pos
    return None


def is_set(items: Iterable[Any]) -> bool:
    return first_duplicate(items) is None


def is_ascending(items: Iterable[Any]) -> bool:
    return all(a <= b for a, b in pairwise(items))


def is_descending(items: Iterable[Any]) -> bool:
    return all(a >= b for a, b in pairwise(items))


def is_monotonic(items: Iterable[Any]) -> bool:
    # materialize once so a one-shot iterator is not consumed by the first check
    seq = tuple(items)
    return is_ascending(seq) or is_descending(seq)
