"""Immutable, duplicate-free sets over a totally ordered scalar domain.

A ``Set`` is identified by the literal element list it was built from.
Construction is the only place the duplicate-free invariant is validated;
every operation returns a new value and never alters its operands. Equality
between sets is bidirectional containment, so two sets holding the same
elements in a different order compare equal while remaining distinct
sequences.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from setalgebra import _predicates
from setalgebra._decorators import ensures
from setalgebra._errors import IndexOutOfRangeError, MalformedSetError

I = TypeVar("I")


def _check_kind(items: Iterable[Any], kind: type | None) -> None:
    if kind is None:
        return
    for x in items:
        if not isinstance(x, kind):
            raise TypeError(f"Element {x!r} is not of kind {kind.__name__}")


def _members_of(items: Iterable[Any]) -> frozenset[Any] | tuple[Any, ...]:
    seq = tuple(items)
    try:
        return frozenset(seq)
    except TypeError:
        return seq


def _returns_set(*_args: Any, result: Any, **_kwargs: Any) -> bool:
    return isinstance(result, Set) and _predicates.is_set(result.to_list())


class Set(Generic[I]):
    """A canonical set value.

    ``Set(-1, 3, 4)`` builds the set of those three elements in that order;
    ``Set()`` is the empty set. Passing ``kind`` pins the element type: every
    element must then be an instance of it, and sets derived from this one
    carry the same kind.

    Raises:
        MalformedSetError: An element is repeated, or is not equal to itself
            (NaN), so it cannot take part in a total order.
        TypeError: An element is not an instance of ``kind``.
    """

    __slots__ = ("_items", "_kind", "_members")

    def __init__(self, *elements: I, kind: type | None = None) -> None:
        items = tuple(elements)
        _check_kind(items, kind)
        for x in items:
            if x != x:
                raise MalformedSetError(f"Element {x!r} is not equal to itself and has no place in an order", element=x)
        dup = _predicates.first_duplicate(items)
        if dup is not None:
            value, first, again = dup
            raise MalformedSetError(f"Duplicate in set: {value!r} at positions {first} and {again}", element=value)
        self._init(items, kind)

    def _init(self, items: tuple[I, ...], kind: type | None) -> None:
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_members", _members_of(items))

    @classmethod
    def from_iterable(cls, items: Iterable[I], *, kind: type | None = None) -> Set[I]:
        return cls(*items, kind=kind)

    def _derive(self, items: tuple[I, ...]) -> Set[I]:
        # Results of the algebra are well-formed by construction; the
        # ensures contracts on each operation re-verify them.
        obj = object.__new__(type(self))
        obj._init(items, self._kind)
        return obj

    def _coerce(self, other: Iterable[I]) -> Set[I]:
        if isinstance(other, Set):
            _check_kind(other._items, self._kind)
            return other
        return Set.from_iterable(other, kind=self._kind)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (type(self), self._items, self._kind))

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    @property
    def kind(self) -> type | None:
        return self._kind

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        return not self._items

    def get(self, index: int) -> I:
        """Element at ``index`` in construction order."""
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))
        return self._items[index]

    def __getitem__(self, index: int) -> I:
        return self.get(index)

    @property
    def head(self) -> I:
        return self.get(0)

    @property
    def tail(self) -> Set[I]:
        return self._derive(self._items[1:])

    def contains(self, x: Any) -> bool:
        try:
            return x in self._members
        except TypeError:
            return _predicates.contains(self._items, x)

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterator[I]:
        return iter(self._items)

    def to_list(self) -> list[I]:
        return list(self._items)

    def to_set(self) -> Set[I]:
        return self

    @property
    def is_ascending(self) -> bool:
        return _predicates.is_ascending(self._items)

    @property
    def is_descending(self) -> bool:
        return _predicates.is_descending(self._items)

    @property
    def is_monotonic(self) -> bool:
        return _predicates.is_monotonic(self._items)

    def subset_of(self, other: Iterable[Any]) -> bool:
        """True if every element of this set occurs in ``other``.

        ``other`` may be any iterable and need not be duplicate-free.
        """
        members = _members_of(other)
        return all(x in members for x in self._items)

    def equals(self, other: Iterable[Any]) -> bool:
        """Symmetric containment: each side is a subset of the other."""
        others = tuple(other)
        return self.subset_of(others) and all(self.contains(y) for y in others)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self.equals(other._items)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Set):
            return not self.equals(other._items)
        return NotImplemented

    def __hash__(self) -> int:
        # order-independent, like equality
        return hash(frozenset(self._items))

    def __le__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self.subset_of(other._items)
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Set):
            return other.subset_of(self._items)
        return NotImplemented

    def __repr__(self) -> str:
        body = ", ".join(repr(x) for x in self._items)
        if self._kind is not None:
            body = f"{body}, kind={self._kind.__name__}" if body else f"kind={self._kind.__name__}"
        return f"{type(self).__name__}({body})"

    # ------------------------------------------------------------------
    # algebra
    # ------------------------------------------------------------------

    @ensures(_returns_set)
    @ensures(lambda self, x, result: result.contains(x) and self.subset_of(result))
    def prepend(self, x: I) -> Set[I]:
        if self.contains(x):
            return self
        return type(self)(x, *self._items, kind=self._kind)

    @ensures(_returns_set)
    @ensures(lambda self, x, result: result.contains(x) and self.subset_of(result))
    def append(self, x: I) -> Set[I]:
        if self.contains(x):
            return self
        return type(self)(*self._items, x, kind=self._kind)

    @ensures(_returns_set)
    @ensures(lambda self, other, result: self.subset_of(result))
    def union(self, other: Iterable[I]) -> Set[I]:
        """Fold ``other`` into this set by repeated prepend.

        The result holds this set's elements missing from ``other`` (in this
        set's order) followed by ``other``'s elements. Only content equality
        is meaningful; the order is a by-product of the fold.

        Raises:
            MalformedSetError: ``other`` repeats an element.
            TypeError: An element of ``other`` is not of this set's kind.
        """
        that = self._coerce(other)
        return self._derive(tuple(x for x in self._items if not that.contains(x)) + that._items)

    def __add__(self, other: object) -> Set[I]:
        if isinstance(other, Set):
            return self.union(other)
        return NotImplemented

    __or__ = __add__

    @ensures(_returns_set)
    @ensures(lambda self, x, result: not result.contains(x) and result.subset_of(self._items))
    def subtract(self, x: Any) -> Set[I]:
        if not self.contains(x):
            return self
        return self._derive(tuple(y for y in self._items if y != x))

    @ensures(_returns_set)
    @ensures(lambda self, other, result: not any(result.contains(x) for x in self._items))
    def difference(self, other: Iterable[I]) -> Set[I]:
        """What remains of ``other`` once each element of this set is subtracted from it.

        Raises:
            MalformedSetError: ``other`` repeats an element.
            TypeError: An element of ``other`` is not of this set's kind.
        """
        that = self._coerce(other)
        return that._derive(tuple(y for y in that._items if not self.contains(y)))

    def __sub__(self, other: object) -> Set[I]:
        # a - b removes b's elements from a
        if isinstance(other, Set):
            return other.difference(self)
        return NotImplemented

    @ensures(_returns_set)
    @ensures(lambda self, other, result: result.subset_of(self._items))
    def intersection(self, other: Iterable[Any]) -> Set[I]:
        members = _members_of(other)
        return self._derive(tuple(x for x in self._items if x in members))

    def __mul__(self, other: object) -> Set[I]:
        if isinstance(other, Set):
            return self.intersection(other._items)
        return NotImplemented

    __and__ = __mul__

    @ensures(_returns_set)
    @ensures(lambda self, bound, result: all(x < bound for x in result))
    def smaller_than(self, bound: I) -> Set[I]:
        return self._derive(tuple(x for x in self._items if x < bound))

    @ensures(_returns_set)
    @ensures(lambda self, bound, result: all(bound < x for x in result))
    def larger_than(self, bound: I) -> Set[I]:
        return self._derive(tuple(x for x in self._items if bound < x))

    def quick_sort(self) -> Set[I]:
        from setalgebra._sort import quick_sort

        return quick_sort(self)


def _rebuild(cls: type[Set[Any]], items: tuple[Any, ...], kind: type | None) -> Set[Any]:
    return cls(*items, kind=kind)
