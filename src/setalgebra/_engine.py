from __future__ import annotations

import dataclasses
import importlib
import json
import logging
import os
import time
from collections.abc import Callable
from typing import Any

from hypothesis import HealthCheck, Verbosity, assume, given, settings
from hypothesis.errors import FailedHealthCheck

from setalgebra._bundle import _bundle, _check_ensures, _check_requires, _has_bundle, _root_original
from setalgebra._strategies import _parameter_count, _strategy_for_function
from setalgebra._util import _ensure_dir, _jsonable, _now_iso, _qualified_name

log = logging.getLogger(__name__)

DEFAULT_MAX_EXAMPLES = 100

_SUPPRESS_DEFAULT: tuple[HealthCheck, ...] = (HealthCheck.too_slow, HealthCheck.filter_too_much)


@dataclasses.dataclass
class LawResult:
    function: str
    obligation: str
    status: str  # "pass" | "fail" | "error" | "skip"
    details: dict[str, Any]
    duration_s: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "function": self.function,
            "obligation": self.obligation,
            "status": self.status,
            "details": self.details,
            "duration_s": round(self.duration_s, 3),
        }


class _Counterexample(AssertionError):
    pass


def _collect_functions(module: Any) -> list[Callable[..., Any]]:
    fns: list[Callable[..., Any]] = []
    for _name, obj in vars(module).items():
        if not _has_bundle(obj):
            continue
        b = _bundle(obj)
        if b["law"] is not None or b["against"] is not None:
            fns.append(obj)
    return fns


def _run_property(
    root: Callable[..., Any],
    check: Callable[[dict[str, Any]], dict[str, Any] | None],
    *,
    max_size: int,
    max_examples: int,
    deadline_ms: int | None,
    suppress_health_checks: tuple[HealthCheck, ...],
    derandomize: bool,
) -> dict[str, Any] | None:
    """Search for arguments on which ``check`` reports a failure.

    Returns the shrunk counterexample, or None when none was found. An
    exception raised by the checked function propagates.
    """
    strat_kwargs = _strategy_for_function(root, max_size=max_size)
    # Hypothesis replays the minimal failing example last, so the final
    # write here is the shrunk one.
    shrunk_ce: list[dict[str, Any] | None] = [None]

    @settings(
        max_examples=max_examples,
        deadline=deadline_ms,
        suppress_health_check=list(suppress_health_checks),
        derandomize=derandomize,
        database=None,
        report_multiple_bugs=False,
        verbosity=Verbosity.quiet,
    )
    @given(strat_kwargs)
    def prop(kwargs: dict[str, Any]) -> None:
        ok_pre, _ = _check_requires(root, (), kwargs)
        assume(ok_pre)
        failure = check(kwargs)
        if failure is not None:
            shrunk_ce[0] = failure
            raise _Counterexample(failure.get("note", "law does not hold"))

    try:
        prop()
    except _Counterexample:
        return shrunk_ce[0]
    return None


def _check_scenario(fn: Callable[..., Any], qn: str) -> LawResult:
    t0 = time.monotonic()
    try:
        outcome = fn()
    except Exception as e:
        return LawResult(
            qn, "scenario", "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t0,
        )
    status = "pass" if outcome else "fail"
    return LawResult(qn, "scenario", status, {"result": _jsonable(outcome)}, duration_s=time.monotonic() - t0)


def _check_law(
    root: Callable[..., Any],
    qn: str,
    *,
    max_size: int,
    max_examples: int,
    derandomize: bool,
) -> LawResult:
    t0 = time.monotonic()

    def check(kwargs: dict[str, Any]) -> dict[str, Any] | None:
        outcome = root(**kwargs)
        if outcome:
            return None
        return {"kwargs": _jsonable(kwargs), "result": _jsonable(outcome)}

    try:
        ce = _run_property(
            root,
            check,
            max_size=max_size,
            max_examples=max_examples,
            deadline_ms=None,
            suppress_health_checks=_SUPPRESS_DEFAULT,
            derandomize=derandomize,
        )
    except FailedHealthCheck as e:
        return LawResult(qn, "law", "fail", {"error": f"FailedHealthCheck: {e}"}, duration_s=time.monotonic() - t0)
    except Exception as e:
        return LawResult(
            qn, "law", "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t0,
        )

    if ce is not None:
        return LawResult(
            qn, "law", "fail",
            {"error": "law does not hold", "counterexample": ce},
            duration_s=time.monotonic() - t0,
        )
    return LawResult(qn, "law", "pass", {"max_examples": max_examples}, duration_s=time.monotonic() - t0)


def _check_against(
    root: Callable[..., Any],
    qn: str,
    cfg: dict[str, Any],
    *,
    max_size: int,
    max_examples: int | None,
    derandomize: bool,
) -> LawResult:
    t1 = time.monotonic()
    reference = cfg["reference"]
    eq = cfg["eq"] or (lambda a, b: a == b)
    examples = max_examples if max_examples is not None else int(cfg["max_examples"])

    def check(kwargs: dict[str, Any]) -> dict[str, Any] | None:
        impl_r = root(**kwargs)
        ok_post, post_err = _check_ensures(root, (), kwargs, impl_r)
        if not ok_post:
            return {
                "kwargs": _jsonable(kwargs),
                "impl_result": _jsonable(impl_r),
                "reference_result": None,
                "note": f"ensures failed: {post_err}",
            }
        ref_r = reference(**kwargs)
        if not eq(impl_r, ref_r):
            return {
                "kwargs": _jsonable(kwargs),
                "impl_result": _jsonable(impl_r),
                "reference_result": _jsonable(ref_r),
            }
        return None

    try:
        ce = _run_property(
            root,
            check,
            max_size=max_size,
            max_examples=examples,
            deadline_ms=cfg["deadline_ms"],
            suppress_health_checks=cfg["suppress_health_checks"],
            derandomize=derandomize,
        )
    except FailedHealthCheck as e:
        return LawResult(
            qn, "equiv_to_reference", "fail",
            {"reference": _qualified_name(reference), "error": f"FailedHealthCheck: {e}"},
            duration_s=time.monotonic() - t1,
        )
    except Exception as e:
        return LawResult(
            qn, "equiv_to_reference", "error",
            {"reference": _qualified_name(reference), "error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t1,
        )

    if ce is not None:
        return LawResult(
            qn, "equiv_to_reference", "fail",
            {"reference": _qualified_name(reference), "error": "impl != reference", "counterexample": ce},
            duration_s=time.monotonic() - t1,
        )
    return LawResult(
        qn, "equiv_to_reference", "pass",
        {"reference": _qualified_name(reference), "max_examples": examples},
        duration_s=time.monotonic() - t1,
    )


def check_module(
    module_name: str,
    *,
    out_dir: str = ".setalgebra",
    max_size: int = 20,
    max_examples: int | None = None,
    derandomize: bool = False,
    on_result: Callable[[LawResult], None] | None = None,
) -> tuple[list[LawResult], dict[str, Any]]:
    """Check every law and reference-model obligation defined in a module.

    Writes ``<module>.laws.json`` (all results) and ``<module>.summary.json``
    (status counts) into ``out_dir`` and returns both.
    """
    _ensure_dir(out_dir)

    module = importlib.import_module(module_name)
    funcs = _collect_functions(module)
    log.debug("collected %d obligations from %s", len(funcs), module_name)
    if not funcs:
        log.warning("no @law or @against functions found in %s", module_name)

    results: list[LawResult] = []

    def _emit(result: LawResult) -> None:
        log.debug("%s %s: %s", result.obligation, result.function, result.status)
        results.append(result)
        if on_result is not None:
            on_result(result)

    for fn in funcs:
        root = _root_original(fn)
        b = _bundle(root)
        qn = _qualified_name(root)

        if b["law"] is not None:
            if _parameter_count(root) == 0:
                _emit(_check_scenario(fn, qn))
            else:
                examples = b["law"]["max_examples"] or max_examples or DEFAULT_MAX_EXAMPLES
                _emit(_check_law(root, qn, max_size=max_size, max_examples=examples, derandomize=derandomize))

        if b["against"] is not None:
            _emit(_check_against(
                root, qn, b["against"],
                max_size=max_size,
                max_examples=max_examples,
                derandomize=derandomize,
            ))

    counts = {s: sum(1 for r in results if r.status == s) for s in ("pass", "fail", "error", "skip")}
    summary: dict[str, Any] = {
        "module": module_name,
        "timestamp": _now_iso(),
        "obligations": len(results),
        "counts": counts,
        "functions": [_qualified_name(_root_original(fn)) for fn in funcs],
    }

    laws_path = os.path.join(out_dir, f"{module_name}.laws.json")
    summary_path = os.path.join(out_dir, f"{module_name}.summary.json")

    with open(laws_path, "w", encoding="utf-8") as f:
        json.dump([r.to_json() for r in results], f, indent=2)

    with open(summary_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

    return results, summary
