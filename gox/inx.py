"""Membership tests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _equal_fold(a: str, b: str) -> bool:
    return len(a) == len(b) and all(
        x == y or x.lower() == y.lower() or x.upper() == y.upper() for x, y in zip(a, b)
    )


def is_in(value: Any, values: Iterable[Any] | None) -> bool:
    """Return True when ``value`` equals one of ``values``."""
    if not values:
        return False
    return any(item == value for item in values)


def string_in(s: str, *args: str) -> bool:
    """Return True when ``s`` equals one of ``args``, ignoring case."""
    return any(_equal_fold(s, other) for other in args)


def int_in(i: int, *args: int) -> bool:
    """Return True when ``i`` is one of ``args``."""
    return is_in(i, args)