from __future__ import annotations

import os
import time
from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

ContractPredicate = Callable[..., bool]
StrategyFactory = Callable[..., st.SearchStrategy[Any]]


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def _now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def _qualified_name(fn: Callable[..., Any]) -> str:
    return f"{fn.__module__}.{getattr(fn, '__qualname__', getattr(fn, '__name__', str(fn)))}"


def _jsonable(obj: Any) -> Any:
    """Convert law arguments and results into something ``json.dump`` accepts."""
    from setalgebra._bag import Bag
    from setalgebra._set import Set

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, Set):
        return {"__set__": [_jsonable(x) for x in obj]}
    if isinstance(obj, Bag):
        return {"__bag__": [_jsonable(x) for x in obj]}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted((_jsonable(x) for x in obj), key=repr)
    if isinstance(obj, dict):
        return {str(k): _jsonable(v) for k, v in obj.items()}
    return repr(obj)


def _safe_call(pred: ContractPredicate, *args: Any, **kwargs: Any) -> tuple[bool, str | None]:
    try:
        return bool(pred(*args, **kwargs)), None
    except Exception as e:
        return False, f"{type(e).__name__}: {e}"
