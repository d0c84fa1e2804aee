from __future__ import annotations

import os
import sys

_COLOR: bool | None = None

_CODES = {
    "pass": (32,),
    "fail": (31, 1),
    "error": (31,),
    "skip": (33,),
    "dim": (2,),
    "bold": (1,),
}


def supports_color() -> bool:
    global _COLOR
    if _COLOR is None:
        _COLOR = (
            os.environ.get("NO_COLOR", "") == ""
            and os.environ.get("TERM", "") != "dumb"
            and hasattr(sys.stdout, "isatty")
            and sys.stdout.isatty()
        )
    return _COLOR


def force_color(enabled: bool) -> None:
    global _COLOR
    _COLOR = enabled


def paint(text: str, role: str) -> str:
    """Wrap ``text`` in the ANSI codes for ``role`` when colour is on."""
    codes = _CODES.get(role)
    if not codes or not supports_color():
        return text
    seq = ";".join(str(c) for c in codes)
    return f"\033[{seq}m{text}\033[0m"
