from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from hypothesis import HealthCheck

from setalgebra._bundle import (
    _bundle,
    _check_ensures,
    _check_requires,
    _root_original,
    _set_original,
    contracts_enabled,
)
from setalgebra._util import _qualified_name


def requires(pred: Callable[..., bool]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["requires"].append(pred)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if contracts_enabled():
                ok, err = _check_requires(fn, args, kwargs)
                if not ok:
                    raise AssertionError(f"Precondition failed for {_qualified_name(_root_original(fn))}: {err}")
            return fn(*args, **kwargs)

        _set_original(wrapper, fn)
        return wrapper

    return deco


def ensures(pred: Callable[..., bool]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["ensures"].append(pred)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not contracts_enabled():
                return fn(*args, **kwargs)
            ok, err = _check_requires(fn, args, kwargs)
            if not ok:
                raise AssertionError(f"Precondition failed for {_qualified_name(_root_original(fn))}: {err}")
            result = fn(*args, **kwargs)
            ok2, err2 = _check_ensures(fn, args, kwargs, result)
            if not ok2:
                raise AssertionError(f"Postcondition failed for {_qualified_name(_root_original(fn))}: {err2}")
            return result

        _set_original(wrapper, fn)
        return wrapper

    return deco


def law(
    fn: Callable[..., Any] | None = None,
    *,
    max_examples: int | None = None,
) -> Callable[..., Any]:
    """Mark a function as an algebraic law for the engine to check.

    A law with no parameters is a scenario and is evaluated once. A law with
    parameters is a property: arguments are generated from its type hints and
    the law must return a truthy value for every one of them. Preconditions
    attached with ``@requires`` filter the generated arguments.

    Args:
        max_examples: Number of generated examples for a property law.
            Defaults to the engine-wide setting.
    """
    def _apply(f: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(f)["law"] = {"max_examples": max_examples}
        return f

    if fn is not None:
        # bare @law
        return _apply(fn)
    return _apply


def against(
    reference: Callable[..., Any],
    *,
    eq: Callable[[Any, Any], bool] | None = None,
    max_examples: int = 200,
    deadline_ms: int | None = None,
    suppress_health_checks: tuple[HealthCheck, ...] = (
        HealthCheck.too_slow,
        HealthCheck.filter_too_much,
    ),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["against"] = {
            "reference": reference,
            "eq": eq,
            "max_examples": max_examples,
            "deadline_ms": deadline_ms,
            "suppress_health_checks": suppress_health_checks,
        }
        return fn

    return deco
