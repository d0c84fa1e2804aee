"""Symmetric difference built from the set algebra.

Every obligation in this module holds.
"""

from __future__ import annotations

from setalgebra import Set, against, law, requires


def symmetric_spec(a: Set, b: Set) -> frozenset[int]:
    return frozenset(a) ^ frozenset(b)


@against(symmetric_spec, eq=lambda s, ref: frozenset(s) == ref, max_examples=300)
def symmetric_difference(a: Set, b: Set) -> Set:
    return (a - b) + (b - a)


@law
def symmetric_difference_commutes(a: Set, b: Set) -> bool:
    return symmetric_difference(a, b) == symmetric_difference(b, a)


@law
@requires(lambda a, b: not (a * b).empty())
def shared_elements_shrink_difference(a: Set, b: Set) -> bool:
    return (a - b).size() < a.size()


@law
def sorted_union_is_ascending() -> bool:
    return (Set(5, 3) + Set(9, 1)).quick_sort().to_list() == [1, 3, 5, 9]
