from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
import time

from setalgebra._engine import LawResult, check_module
from setalgebra._term import force_color, paint

DEFAULT_MODULE = "setalgebra.laws"


def _status_label(status: str) -> str:
    return paint(status.upper(), status)


def _print_result_line(r: LawResult, *, verbose: bool = False) -> None:
    label = _status_label(r.status)
    # pad on the raw status so ANSI codes don't break alignment
    pad = " " * (5 - len(r.status))
    timing = "  " + paint(f"({r.duration_s:.1f}s)", "dim") if r.duration_s >= 0.05 else ""
    print(f"  {pad}{label}  {r.obligation:<18}  {paint(r.function, 'bold')}{timing}")

    if not verbose or r.status not in ("fail", "error"):
        return

    ce = r.details.get("counterexample")
    if ce and isinstance(ce, dict):
        if "kwargs" in ce:
            print(f"         kwargs:    {json.dumps(ce['kwargs'], default=str)}")
        if "result" in ce:
            print(f"         result:    {json.dumps(ce['result'], default=str)}")
        if "impl_result" in ce:
            print(f"         impl:      {json.dumps(ce['impl_result'], default=str)}")
        if "reference_result" in ce:
            print(f"         reference: {json.dumps(ce['reference_result'], default=str)}")
        if "note" in ce:
            print(f"         note:      {ce['note']}")
        if "error" in ce:
            print(f"         error:     {ce['error']}")
    elif "error" in r.details:
        print(f"         error:     {r.details['error']}")
    elif "result" in r.details:
        print(f"         result:    {json.dumps(r.details['result'], default=str)}")


def _print_summary(results: list[LawResult], total_s: float, out_dir: str) -> None:
    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status in ("fail", "error"))
    skipped = sum(1 for r in results if r.status == "skip")

    parts: list[str] = []
    if passed:
        parts.append(paint(f"{passed} passed", "pass"))
    if failed:
        parts.append(paint(f"{failed} failed", "error"))
    if skipped:
        parts.append(paint(f"{skipped} skipped", "dim"))

    summary = ", ".join(parts) if parts else "no obligations"
    timing = paint(f"({total_s:.1f}s total)", "dim")
    location = paint(f"JSON reports in {out_dir}/", "dim")
    print(f"\n{summary}  {timing}  {location}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="setalgebra", description="Check algebraic set laws defined in a module.")
    p.add_argument("module", nargs="?", default=DEFAULT_MODULE, help=f"Module of laws to check (default: {DEFAULT_MODULE})")
    p.add_argument("--out", default=".setalgebra", help="Output directory for JSON reports")
    p.add_argument("--max-size", type=int, default=20, help="Max size of generated sets and bags")
    p.add_argument("--max-examples", type=int, default=None, help="Generated examples per law")
    p.add_argument("--derandomize", action="store_true", help="Use a fixed seed for example generation")
    p.add_argument("-v", "--verbose", action="store_true", help="Show counterexample details")
    p.add_argument("-q", "--quiet", action="store_true", help="Only print summary and exit code")
    p.add_argument("--json", action="store_true", help="Output results as JSON array to stdout")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr",
    )
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    if args.no_color:
        force_color(False)

    json_mode = args.json

    def on_result(r: LawResult) -> None:
        if not json_mode and not args.quiet:
            _print_result_line(r, verbose=args.verbose)

    try:
        importlib.import_module(args.module)
    except ImportError as e:
        print(f"error: could not import module '{args.module}': {e}", file=sys.stderr)
        return 1

    t_start = time.monotonic()
    results, _summary = check_module(
        args.module,
        out_dir=args.out,
        max_size=args.max_size,
        max_examples=args.max_examples,
        derandomize=args.derandomize,
        on_result=on_result,
    )
    total_s = time.monotonic() - t_start

    if not results:
        if json_mode:
            print("[]")
        else:
            print(f"warning: no @law or @against functions found in '{args.module}'", file=sys.stderr)
        return 0

    if json_mode:
        print(json.dumps([r.to_json() for r in results], indent=2, default=str))
        return 1 if any(r.status in ("fail", "error") for r in results) else 0

    _print_summary(results, total_s, args.out)

    if any(r.status in ("fail", "error") for r in results):
        return 1
    return 0
