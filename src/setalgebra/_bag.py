from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from setalgebra import _predicates
from setalgebra._decorators import ensures
from setalgebra._errors import IndexOutOfRangeError
from setalgebra._set import Set, _check_kind

I = TypeVar("I")


class Bag(Generic[I]):
    """An ordered multiset: a fixed element list in which values may repeat."""

    __slots__ = ("_items", "_kind")

    def __init__(self, *elements: I, kind: type | None = None) -> None:
        items = tuple(elements)
        _check_kind(items, kind)
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_kind", kind)

    @classmethod
    def from_iterable(cls, items: Iterable[I], *, kind: type | None = None) -> Bag[I]:
        return cls(*items, kind=kind)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (type(self), self._items, self._kind))

    @property
    def kind(self) -> type | None:
        return self._kind

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        return not self._items

    @property
    def head(self) -> I:
        if not self._items:
            raise IndexOutOfRangeError(0, 0)
        return self._items[0]

    @property
    def tail(self) -> Bag[I]:
        return type(self)(*self._items[1:], kind=self._kind)

    def contains(self, x: Any) -> bool:
        return _predicates.contains(self._items, x)

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def count(self, x: Any) -> int:
        return sum(1 for item in self._items if item == x)

    def __iter__(self) -> Iterator[I]:
        return iter(self._items)

    def to_list(self) -> list[I]:
        return list(self._items)

    @property
    def is_ascending(self) -> bool:
        return _predicates.is_ascending(self._items)

    @property
    def is_descending(self) -> bool:
        return _predicates.is_descending(self._items)

    @property
    def is_monotonic(self) -> bool:
        return _predicates.is_monotonic(self._items)

    def __eq__(self, other: object) -> bool:
        # bags compare as literal sequences
        if isinstance(other, Bag):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        body = ", ".join(repr(x) for x in self._items)
        if self._kind is not None:
            body = f"{body}, kind={self._kind.__name__}" if body else f"kind={self._kind.__name__}"
        return f"{type(self).__name__}({body})"

    @ensures(lambda self, result: all(result.contains(x) for x in self._items))
    @ensures(lambda self, result: result.size() <= self.size())
    def to_set(self) -> Set[I]:
        """Collapse duplicates into the canonical set of this bag.

        The set of the tail is built first and the head is prepended only
        when the tail does not already hold it, so each value keeps the
        position of its *last* occurrence: ``Bag(0, 1, 1)`` becomes
        ``Set(0, 1)`` with the second ``1`` as the survivor.
        """
        kept: list[I] = []
        seen: set[I] = set()
        for x in reversed(self._items):
            if x not in seen:
                seen.add(x)
                kept.append(x)
        kept.reverse()
        return Set(*kept, kind=self._kind)


def to_set(items: Iterable[I], *, kind: type | None = None) -> Set[I]:
    """Canonical set of ``items``; a ``Set`` is returned unchanged."""
    if isinstance(items, Set):
        return items
    return Bag.from_iterable(items, kind=kind).to_set()


def _rebuild(cls: type[Bag[Any]], items: tuple[Any, ...], kind: type | None) -> Bag[Any]:
    return cls(*items, kind=kind)
