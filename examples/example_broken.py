"""Laws that do not hold, for exercising failure reporting.

Bug: `merge` keeps the left operand's duplicates of the right operand.
Bug: `union_keeps_left_order` confuses content equality with sequence identity.
Bug: `scenario_duplicate_literal` builds a set with a repeated element.
"""

from __future__ import annotations

from setalgebra import Set, against, law


@against(lambda a, b: frozenset(a) | frozenset(b), eq=lambda s, ref: len(s) == len(ref))
def merge(a: Set, b: Set) -> list[int]:
    return a.to_list() + b.to_list()


@law
def union_keeps_left_order(a: Set, b: Set) -> bool:
    return (a + b).to_list()[: a.size()] == a.to_list()


@law
def scenario_duplicate_literal() -> bool:
    return Set(1, 2, 1).size() == 2


@law
def scenario_passes() -> bool:
    return Set(1, 2).contains(2)
