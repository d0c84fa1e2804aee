from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from setalgebra._util import _safe_call

_BUNDLE_ATTR = "__setalgebra_bundle__"
_ORIGINAL_ATTR = "__setalgebra_original__"

_CONTRACTS: bool | None = None


def contracts_enabled() -> bool:
    global _CONTRACTS
    if _CONTRACTS is None:
        _CONTRACTS = os.environ.get("SETALGEBRA_CONTRACTS", "1").strip().lower() not in ("0", "false", "no", "off")
    return _CONTRACTS


def set_contracts_enabled(enabled: bool) -> None:
    global _CONTRACTS
    _CONTRACTS = enabled


def _root_original(fn: Callable[..., Any]) -> Callable[..., Any]:
    cur = fn
    while True:
        nxt = getattr(cur, _ORIGINAL_ATTR, None)
        if nxt is None:
            return cur
        cur = nxt


def _bundle(fn: Callable[..., Any]) -> dict[str, Any]:
    base = _root_original(fn)
    if not hasattr(base, _BUNDLE_ATTR):
        setattr(
            base,
            _BUNDLE_ATTR,
            {"requires": [], "ensures": [], "law": None, "against": None},
        )
    return getattr(base, _BUNDLE_ATTR)  # type: ignore[no-any-return]


def _has_bundle(fn: Any) -> bool:
    return callable(fn) and hasattr(_root_original(fn), _BUNDLE_ATTR)


def _set_original(wrapper: Callable[..., Any], original: Callable[..., Any]) -> None:
    setattr(wrapper, _ORIGINAL_ATTR, original)
    root = _root_original(original)
    if hasattr(root, _BUNDLE_ATTR) and not hasattr(wrapper, _BUNDLE_ATTR):
        setattr(wrapper, _BUNDLE_ATTR, getattr(root, _BUNDLE_ATTR))


def _check_requires(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[bool, str]:
    for pred in _bundle(fn)["requires"]:
        ok, err = _safe_call(pred, *args, **kwargs)
        if not ok:
            return False, err or "returned False"
    return True, ""


def _check_ensures(
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    result: Any,
) -> tuple[bool, str]:
    for pred in _bundle(fn)["ensures"]:
        ok, err = _safe_call(pred, *args, **kwargs, result=result)
        if not ok:
            return False, err or "returned False"
    return True, ""
