"""Tests for Hypothesis strategy synthesis."""

from __future__ import annotations

from hypothesis import find, given
from hypothesis import strategies as st

from setalgebra import Bag, Set
from setalgebra._strategies import (
    _parameter_count,
    _strategy_for_function,
    _strategy_for_type,
    element_strategy,
    register_element_strategy,
    register_strategy,
    register_strategy_factory,
)


class TestStrategyForType:
    @given(_strategy_for_type(Set))
    def test_set_values(self, s):
        assert isinstance(s, Set)
        assert s.size() <= 20

    @given(_strategy_for_type(Bag, max_size=5))
    def test_bag_values(self, b):
        assert isinstance(b, Bag)
        assert b.size() <= 5

    @given(_strategy_for_type(Set[int]))
    def test_subscripted_set(self, s):
        assert isinstance(s, Set)

    @given(_strategy_for_type(list[int], max_size=4))
    def test_list_of_int(self, xs):
        assert isinstance(xs, list) and len(xs) <= 4

    @given(_strategy_for_type(tuple[int, int]))
    def test_fixed_tuple(self, t):
        assert isinstance(t, tuple) and len(t) == 2
        assert all(isinstance(x, int) for x in t)

    @given(_strategy_for_type(tuple[Set, ...], max_size=3))
    def test_variadic_tuple(self, t):
        assert isinstance(t, tuple) and len(t) <= 3
        assert all(isinstance(s, Set) for s in t)

    @given(_strategy_for_type(int | None))
    def test_optional_int(self, x):
        assert x is None or isinstance(x, int)

    def test_bags_can_repeat(self):
        b = find(_strategy_for_type(Bag), lambda b: b.size() != b.to_set().size())
        assert b.size() == 2

    def test_override(self):
        marker = object()
        register_strategy(complex, st.just(marker))
        assert find(_strategy_for_type(complex), lambda _: True) is marker

    def test_factory_override(self):
        seen = {}

        def factory(*, max_size, depth):
            seen.update(max_size=max_size, depth=depth)
            return st.just(Set(*range(max_size)))
        register_strategy_factory(Set, factory)
        s = find(_strategy_for_type(Set[int], max_size=3), lambda _: True)
        assert s.to_list() == [0, 1, 2]
        assert seen == {"max_size": 3, "depth": 0}


class TestElementStrategy:
    def test_register_and_reset(self):
        words = st.sampled_from(["a", "b", "c"])
        register_element_strategy(words)
        assert element_strategy() is words
        s = find(_strategy_for_type(Set), lambda s: s.size() == 3)
        assert sorted(s) == ["a", "b", "c"]
        register_element_strategy(None)
        assert element_strategy() is not words


class TestStrategyForFunction:
    def test_kwargs_by_name(self):
        def law(a: Set, x: int) -> bool:
            return True
        kwargs = find(_strategy_for_function(law), lambda kw: True)
        assert set(kwargs) == {"a", "x"}
        assert isinstance(kwargs["a"], Set)

    def test_parameter_count(self):
        def scenario() -> bool:
            return True

        def prop(a: Set, *rest: int, b: Set) -> bool:
            return True
        assert _parameter_count(scenario) == 0
        assert _parameter_count(prop) == 2
