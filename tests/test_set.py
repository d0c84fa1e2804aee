"""Tests for the Set value type and its algebra."""

from __future__ import annotations

import pickle

import pytest

from setalgebra import IndexOutOfRangeError, MalformedSetError, Set, SetAlgebraError


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_empty(self):
        s = Set()
        assert s.empty() is True
        assert s.size() == 0
        assert len(s) == 0

    def test_keeps_construction_order(self):
        assert Set(-1, 3, 4).to_list() == [-1, 3, 4]

    def test_duplicate_rejected(self):
        with pytest.raises(MalformedSetError, match="Duplicate in set: 1 at positions 0 and 2"):
            Set(1, 2, 1)

    def test_duplicate_error_names_element(self):
        with pytest.raises(MalformedSetError) as info:
            Set(3, 5, 5)
        assert info.value.element == 5

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            Set(1, 1)
        with pytest.raises(SetAlgebraError):
            Set(1, 1)

    def test_nan_rejected(self):
        with pytest.raises(MalformedSetError, match="not equal to itself"):
            Set(1.0, float("nan"))

    def test_from_iterable(self):
        assert Set.from_iterable(iter([2, 1])).to_list() == [2, 1]

    def test_kind_enforced(self):
        with pytest.raises(TypeError, match="not of kind int"):
            Set(1, "a", kind=int)

    def test_kind_propagates(self):
        s = Set(1, 2, kind=int)
        assert s.kind is int
        assert s.subtract(1).kind is int
        assert (s * Set(2)).kind is int
        assert s.quick_sort().kind is int
        with pytest.raises(TypeError):
            s.prepend("x")

    def test_kind_checked_on_set_operands(self):
        with pytest.raises(TypeError, match="not of kind int"):
            Set(1, kind=int) + Set("a")
        with pytest.raises(TypeError, match="not of kind int"):
            Set(1, kind=int).union(["a"])
        with pytest.raises(TypeError, match="not of kind int"):
            Set(1, kind=int).difference(Set("a"))
        assert (Set(1, kind=int) + Set(2)).kind is int

    def test_subscripted_generic(self):
        assert Set[int](1, 2) == Set(2, 1)

    def test_immutable(self):
        s = Set(1, 2)
        with pytest.raises(AttributeError):
            s._items = ()
        with pytest.raises(AttributeError):
            s.extra = 1
        with pytest.raises(AttributeError):
            del s._items

    def test_pickle_roundtrip(self):
        s = Set(3, 1, 2, kind=int)
        again = pickle.loads(pickle.dumps(s))
        assert again.to_list() == [3, 1, 2]
        assert again.kind is int

    def test_repr(self):
        assert repr(Set(1, 2)) == "Set(1, 2)"
        assert repr(Set()) == "Set()"
        assert repr(Set(kind=int)) == "Set(kind=int)"
        assert repr(Set(1, kind=int)) == "Set(1, kind=int)"


# ---------------------------------------------------------------------------
# queries
# ---------------------------------------------------------------------------

class TestQueries:
    def test_get(self):
        assert Set(2, 1, 0).get(2) == 0
        assert Set(2, 1, 0)[0] == 2

    def test_get_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError, match="Index out of range: 3"):
            Set(2, 1, 0).get(3)
        with pytest.raises(IndexError):
            Set(2, 1, 0)[-1]

    def test_head_and_tail(self):
        s = Set(4, 5, 6)
        assert s.head == 4
        assert s.tail.to_list() == [5, 6]
        assert Set().tail == Set()
        with pytest.raises(IndexOutOfRangeError):
            Set().head

    def test_contains(self):
        s = Set(-1, 3, 4)
        assert s.contains(3) and s.contains(4)
        assert not s.contains(5)
        assert 3 in s
        assert not Set().contains(0)

    def test_contains_unhashable(self):
        assert Set(1, 2).contains([1]) is False

    def test_subset_of(self):
        assert Set(-1, 3, 4).subset_of([-1, 3, 5, 4])
        assert not Set(-1, 3, 4).subset_of([-1, 3])
        assert Set().subset_of([])
        assert Set(1).subset_of([1, 1, 1])

    def test_equals(self):
        assert Set(-1, 3, 4).equals([3, 4, -1])
        assert not Set(-1, 3, 4).equals([3, 4])
        assert not Set(3, 4).equals([3, 4, -1])
        assert Set(1, 2).equals([2, 1, 1])
        assert Set().equals([])

    def test_eq_operator(self):
        assert Set(1, 2) == Set(2, 1)
        assert Set(1, 2) != Set(1)
        assert (Set(1) == [1]) is False

    def test_hash_ignores_order(self):
        assert hash(Set(1, 2, 3)) == hash(Set(3, 1, 2))
        assert len({Set(1, 2), Set(2, 1)}) == 1

    def test_subset_operators(self):
        assert Set(1) <= Set(2, 1)
        assert not Set(3) <= Set(2, 1)
        assert Set(2, 1) >= Set(1)

    def test_shape_properties(self):
        assert Set(1, 2, 3).is_ascending
        assert Set(3, 2, 1).is_descending
        assert not Set(3, 1, 2).is_monotonic
        assert Set().is_ascending and Set().is_descending

    def test_to_set_is_identity(self):
        s = Set(1, 2)
        assert s.to_set() is s


# ---------------------------------------------------------------------------
# algebra
# ---------------------------------------------------------------------------

class TestPrependAppend:
    def test_prepend(self):
        assert Set(1, 2).prepend(0).to_list() == [0, 1, 2]

    def test_append(self):
        assert Set(1, 2).append(0).to_list() == [1, 2, 0]

    def test_present_is_noop(self):
        s = Set(1, 2)
        assert s.prepend(2) is s
        assert s.append(1) is s

    def test_operand_unchanged(self):
        s = Set(1, 2)
        s.prepend(0)
        assert s.to_list() == [1, 2]


class TestUnion:
    def test_union_content(self):
        u = Set(1, 2) + Set(3, 2)
        assert u == Set(2, 3, 1)
        assert u != Set(3, 1)

    def test_union_order_follows_fold(self):
        assert (Set(1, 2) + Set(3, 2)).to_list() == [1, 3, 2]

    def test_union_with_list(self):
        u = Set(-1, 3, 4).union([0, 3, 2])
        assert u.contains(2) and not u.contains(-2)

    def test_union_with_duplicate_list_rejected(self):
        with pytest.raises(MalformedSetError):
            Set(1).union([2, 2])

    def test_union_with_empty(self):
        assert Set() + Set(1) == Set(1)
        assert Set(1) + Set() == Set(1)

    def test_or_alias(self):
        assert Set(1) | Set(2) == Set(1, 2)

    def test_non_set_operand(self):
        with pytest.raises(TypeError):
            Set(1) + [2]


class TestSubtractDifference:
    def test_subtract(self):
        assert Set(1, 2, 3).subtract(2).to_list() == [1, 3]

    def test_subtract_absent_is_noop(self):
        s = Set(1, 2)
        assert s.subtract(9) is s

    def test_difference_removes_this_from_other(self):
        assert Set(2, 1).difference([1, 3, 2]).to_list() == [3]

    def test_difference_of_empty_is_other(self):
        assert Set().difference([4, 5]).to_list() == [4, 5]

    def test_minus_operator(self):
        assert Set(1, 3, 2) - Set(2, 1) == Set(3)
        assert Set(2, 1) - Set(1, 3, 2) == Set()

    def test_minus_itself_is_empty(self):
        assert (Set(1, 2) - Set(1, 2)).empty()


class TestIntersection:
    def test_intersection(self):
        assert Set(1, 2, 3) * Set(4, 3, 2) == Set(3, 2)

    def test_keeps_this_order(self):
        assert Set(1, 2, 3).intersection([3, 2, 2]).to_list() == [2, 3]

    def test_and_alias(self):
        assert (Set(1, 2) & Set(2)) == Set(2)

    def test_disjoint(self):
        assert (Set(1) * Set(2)).empty()


class TestPartition:
    def test_smaller_than(self):
        assert Set(1, 2, 4, 3).smaller_than(2) == Set(1)

    def test_larger_than(self):
        s = Set(1, 2, 4, 3).larger_than(2)
        assert s == Set(3, 4)
        assert s.to_list() == [4, 3]

    def test_bound_excluded(self):
        assert not Set(1, 2, 3).smaller_than(2).contains(2)
        assert not Set(1, 2, 3).larger_than(2).contains(2)

    def test_bound_absent_from_set(self):
        assert Set(5, 1, 9).smaller_than(6).to_list() == [5, 1]


class TestContracts:
    def test_operations_work_with_contracts_disabled(self):
        from setalgebra import set_contracts_enabled

        set_contracts_enabled(False)
        assert (Set(1, 2) + Set(3)) == Set(1, 2, 3)
        assert Set(3, 1, 2).quick_sort().to_list() == [1, 2, 3]
