from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from typing import Any, Union, get_args, get_origin, get_type_hints

from hypothesis import strategies as st

from setalgebra._bag import Bag
from setalgebra._set import Set
from setalgebra._util import StrategyFactory

# small range so generated sets overlap often enough to exercise union/intersection
_DEFAULT_ELEMENTS: st.SearchStrategy[Any] = st.integers(min_value=-50, max_value=50)

_ELEMENT_STRATEGY: list[st.SearchStrategy[Any]] = [_DEFAULT_ELEMENTS]
_STRATEGY_OVERRIDES: dict[Any, st.SearchStrategy[Any]] = {}
_STRATEGY_FACTORY_OVERRIDES: dict[Any, StrategyFactory] = {}


def register_strategy(tp: Any, strat: st.SearchStrategy[Any]) -> None:
    _STRATEGY_OVERRIDES[tp] = strat


def register_strategy_factory(tp: Any, factory: StrategyFactory) -> None:
    _STRATEGY_FACTORY_OVERRIDES[tp] = factory


def register_element_strategy(strat: st.SearchStrategy[Any] | None) -> None:
    """Replace the element strategy used for ``Set`` and ``Bag`` parameters.

    Passing ``None`` restores the default (integers in ``[-50, 50]``). The
    elements drawn must be hashable and totally ordered among themselves.
    """
    _ELEMENT_STRATEGY[0] = _DEFAULT_ELEMENTS if strat is None else strat


def element_strategy() -> st.SearchStrategy[Any]:
    return _ELEMENT_STRATEGY[0]


def sets(*, max_size: int = 20) -> st.SearchStrategy[Set[Any]]:
    return st.lists(element_strategy(), unique=True, max_size=max_size).map(lambda xs: Set(*xs))


def bags(*, max_size: int = 20) -> st.SearchStrategy[Bag[Any]]:
    return st.lists(element_strategy(), max_size=max_size).map(lambda xs: Bag(*xs))


def _try_override(tp: Any, *, max_size: int, depth: int) -> st.SearchStrategy[Any] | None:
    if tp in _STRATEGY_OVERRIDES:
        return _STRATEGY_OVERRIDES[tp]
    if tp in _STRATEGY_FACTORY_OVERRIDES:
        return _STRATEGY_FACTORY_OVERRIDES[tp](max_size=max_size, depth=depth)

    origin = get_origin(tp)
    if origin in _STRATEGY_OVERRIDES:
        return _STRATEGY_OVERRIDES[origin]
    if origin in _STRATEGY_FACTORY_OVERRIDES:
        return _STRATEGY_FACTORY_OVERRIDES[origin](max_size=max_size, depth=depth)

    return None


def _strategy_for_type(tp: Any, *, max_size: int = 20, depth: int = 0) -> st.SearchStrategy[Any]:
    if depth > 5:
        return st.none()

    ov = _try_override(tp, max_size=max_size, depth=depth)
    if ov is not None:
        return ov

    origin = get_origin(tp)
    args = get_args(tp)

    if tp is Set or origin is Set:
        return sets(max_size=max_size)
    if tp is Bag or origin is Bag:
        return bags(max_size=max_size)

    if tp is Any:
        return element_strategy()
    if tp is int:
        return st.integers(min_value=-60, max_value=60)
    if tp is float:
        return st.floats(allow_nan=False, allow_infinity=False)
    if tp is bool:
        return st.booleans()
    if tp is str:
        return st.text()

    if origin in (Union, types.UnionType) and len(args) == 2 and type(None) in args:
        other = args[0] if args[1] is type(None) else args[1]
        return st.one_of(st.none(), _strategy_for_type(other, max_size=max_size, depth=depth + 1))

    if origin in (Union, types.UnionType):
        return st.one_of(*[_strategy_for_type(a, max_size=max_size, depth=depth + 1) for a in args])

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return st.lists(
                _strategy_for_type(args[0], max_size=max_size, depth=depth + 1),
                max_size=max_size,
            ).map(tuple)
        return st.tuples(*[_strategy_for_type(a, max_size=max_size, depth=depth + 1) for a in args])

    if origin is list:
        (elem,) = args if args else (Any,)
        return st.lists(_strategy_for_type(elem, max_size=max_size, depth=depth + 1), max_size=max_size)

    return st.just(None)


def _strategy_for_function(fn: Callable[..., Any], *, max_size: int = 20) -> st.SearchStrategy[dict[str, Any]]:
    sig = inspect.signature(fn)
    hints = get_type_hints(fn)

    kwargs_strats: dict[str, st.SearchStrategy[Any]] = {}
    for name, param in sig.parameters.items():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        tp = hints.get(name, Any)
        s = _strategy_for_type(tp, max_size=max_size)
        if param.default is not inspect.Parameter.empty:
            kwargs_strats[name] = st.one_of(st.just(param.default), s)
        else:
            kwargs_strats[name] = s

    return st.fixed_dictionaries(kwargs_strats)


def _parameter_count(fn: Callable[..., Any]) -> int:
    sig = inspect.signature(fn)
    return sum(
        1 for p in sig.parameters.values() if p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
    )
