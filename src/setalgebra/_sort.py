from __future__ import annotations

from typing import Any, TypeVar

from setalgebra._decorators import ensures
from setalgebra._set import Set

I = TypeVar("I")


@ensures(lambda s, result: isinstance(result, Set) and result.is_ascending)
@ensures(lambda s, result: result.size() == s.size() and result == s)
def quick_sort(s: Set[I]) -> Set[I]:
    """Sort a set ascending by partitioning around its head.

    The head is the pivot; the tail splits into the elements strictly smaller
    and strictly larger than it, and the result is the sorted smaller part,
    then the pivot, then the sorted larger part, concatenated in that order.
    Partitions are worked off an explicit stack, so an already sorted input
    does not run into the interpreter's recursion limit.
    """
    out: list[I] = []
    # entries are ("sort", subset) or ("emit", pivot)
    stack: list[tuple[str, Any]] = [("sort", s)]
    while stack:
        op, value = stack.pop()
        if op == "emit":
            out.append(value)
            continue
        if value.empty():
            continue
        pivot = value.head
        rest = value.tail
        stack.append(("sort", rest.larger_than(pivot)))
        stack.append(("emit", pivot))
        stack.append(("sort", rest.smaller_than(pivot)))
    return s._derive(tuple(out))
