from __future__ import annotations

from typing import Any


class SetAlgebraError(Exception):
    """Base class for errors raised while building set values."""


class MalformedSetError(SetAlgebraError, ValueError):
    """A set was constructed from a list that repeats an element."""

    def __init__(self, message: str, *, element: Any = None) -> None:
        super().__init__(message)
        self.element = element


class IndexOutOfRangeError(SetAlgebraError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index out of range: {index} (size {size})")
        self.index = index
        self.size = size
