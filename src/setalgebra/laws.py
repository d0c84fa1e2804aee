"""Built-in laws of the set algebra.

Run them with ``setalgebra`` (this is the default module) or
``check_module("setalgebra.laws")``. Laws with parameters are checked on
generated sets and bags; laws without parameters are fixed scenarios.
Functions decorated with ``@against`` are compared with Python's own
``frozenset`` on the same inputs.
"""

from __future__ import annotations

from typing import Any

from setalgebra._bag import Bag, to_set
from setalgebra._decorators import against, law, requires
from setalgebra._predicates import contains, is_ascending, is_descending, is_monotonic, is_set
from setalgebra._set import Set


def _same_members(a: Any, b: Any) -> bool:
    return frozenset(a) == frozenset(b)


# ---------------------------------------------------------------------------
# properties
# ---------------------------------------------------------------------------

@law
def to_set_idempotent(xs: list[int]) -> bool:
    once = to_set(xs)
    return to_set(once) == once and to_set(once).to_list() == once.to_list()


@law
def bag_to_set_keeps_every_value(bag: Bag) -> bool:
    s = bag.to_set()
    return is_set(s) and all(s.contains(x) for x in bag) and all(bag.contains(x) for x in s)


@law
def union_commutative(a: Set, b: Set) -> bool:
    return a + b == b + a


@law
def union_absorbs_itself(a: Set) -> bool:
    return a + a == a


@law
def intersection_absorbs_itself(a: Set) -> bool:
    return a * a == a


@law
def difference_with_itself_is_empty(a: Set) -> bool:
    return (a - a).empty()


@law
def subset_reflexive(a: Set) -> bool:
    return a.subset_of(a)


@law
def equality_is_mutual_containment(a: Set, b: Set) -> bool:
    return (a == b) == (a.subset_of(b) and b.subset_of(a))


@law
def equality_ignores_order(a: Set) -> bool:
    return a == Set(*reversed(a.to_list())) and hash(a) == hash(Set(*reversed(a.to_list())))


@law
@requires(lambda a, x: not a.contains(x))
def one_way_containment_is_not_equality(a: Set, x: int) -> bool:
    return a.subset_of(a.prepend(x)) and a != a.prepend(x)


@law
def prepend_present_is_noop(a: Set, x: int) -> bool:
    if not a.contains(x):
        return True
    return a.prepend(x).to_list() == a.to_list() and a.append(x).to_list() == a.to_list()


@law
def subtract_absent_is_noop(a: Set, x: int) -> bool:
    if a.contains(x):
        return a.subtract(x).size() == a.size() - 1
    return a.subtract(x).to_list() == a.to_list()


@law
def operands_unchanged(a: Set, b: Set) -> bool:
    before_a, before_b = a.to_list(), b.to_list()
    _ = (a + b, a - b, a * b, a.quick_sort())
    return a.to_list() == before_a and b.to_list() == before_b


@law
def partition_splits_around_bound(a: Set, bound: int) -> bool:
    low, high = a.smaller_than(bound), a.larger_than(bound)
    rest = a.subtract(bound)
    return low * high == Set() and low + high == rest


@law
def quick_sort_idempotent(a: Set) -> bool:
    once = a.quick_sort()
    return once.quick_sort().to_list() == once.to_list() and once.is_ascending


@law
def quick_sort_preserves_content(a: Set, x: int) -> bool:
    s = a.quick_sort()
    return s.size() == a.size() and s.contains(x) == a.contains(x) and s == a


@law
def ascending_or_descending_is_monotonic(xs: list[int]) -> bool:
    return is_monotonic(xs) == (is_ascending(xs) or is_descending(xs))


# ---------------------------------------------------------------------------
# reference model
# ---------------------------------------------------------------------------

@against(lambda a, b: frozenset(a) | frozenset(b), eq=_same_members)
def union(a: Set, b: Set) -> Set:
    return a + b


@against(lambda a, b: frozenset(a) & frozenset(b), eq=_same_members)
def intersection(a: Set, b: Set) -> Set:
    return a * b


@against(lambda a, b: frozenset(a) - frozenset(b), eq=_same_members)
def difference(a: Set, b: Set) -> Set:
    return a - b


@against(lambda a, bound: sorted(x for x in a if x < bound), eq=lambda s, ref: s.to_list() == ref)
def sorted_prefix(a: Set, bound: int) -> Set:
    return a.smaller_than(bound).quick_sort()


@against(lambda xs: frozenset(xs), eq=_same_members)
def deduplicate(xs: list[int]) -> Set:
    return Bag(*xs).to_set()


# ---------------------------------------------------------------------------
# scenarios
# ---------------------------------------------------------------------------

@law
def scenario_membership() -> bool:
    s = Set(-1, 3, 4)
    return s.contains(3) and s.contains(4)


@law
def scenario_subset_of_larger_list() -> bool:
    return Set(-1, 3, 4).subset_of([-1, 3, 5, 4])


@law
def scenario_equals_reordered_list() -> bool:
    return Set(-1, 3, 4).equals([3, 4, -1])


@law
def scenario_union() -> bool:
    u = Set(1, 2) + Set(3, 2)
    return u == Set(2, 3, 1) and u != Set(3, 1)


@law
def scenario_difference() -> bool:
    return Set(1, 3, 2) - Set(2, 1) == Set(3)


@law
def scenario_intersection() -> bool:
    return Set(1, 2, 3) * Set(4, 3, 2) == Set(3, 2)


@law
def scenario_partition() -> bool:
    s = Set(1, 2, 4, 3)
    return s.smaller_than(2) == Set(1) and s.larger_than(2) == Set(3, 4)


@law
def scenario_quick_sort() -> bool:
    ordered = Set(4, 1, 7, 3, 2, 6, 5).quick_sort()
    return ordered.is_ascending and ordered == Set(7, 1, 2, 3, 4, 6, 5)


@law
def scenario_bag_keeps_later_duplicate() -> bool:
    return Bag(0, 1, 1).to_set() == Set(1, 0) and to_set([]) == Set()


@law
def scenario_indexed_access() -> bool:
    return Set(2, 1, 0).get(2) == 0


@law
def scenario_union_with_list() -> bool:
    u = Set(-1, 3, 4).union([0, 3, 2])
    merged = Set(-1, 3, 4) + Set(-2, -5)
    return u.contains(2) and not u.contains(-2) and merged.contains(-5) and not merged.contains(5)


@law
def scenario_shape_predicates() -> bool:
    return (
        contains([1, 3, 4, 7, 0], 1)
        and is_set([1, 2, 3]) and not is_set([1, 1, 2])
        and is_ascending([1, 1, 2]) and not is_ascending([3, 2, 2, 0])
        and not is_descending([1, 1, 2]) and is_descending([3, 2, 2, 0])
        and is_monotonic([1, 1, 2]) and is_monotonic([3, 2, 1]) and not is_monotonic([3, 1, 2])
    )
