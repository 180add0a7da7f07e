"""Helpers for lists: mapping, filtering, comparing, diffing and chunking."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from .inx import string_in

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def map_values(values: Sequence[T], func: Callable[[T], T]) -> list[T]:
    """Return a new list holding ``func`` applied to every value."""
    return [func(value) for value in values]


def filter_values(values: Sequence[T], func: Callable[[T], bool]) -> list[T]:
    """Return the values for which ``func`` is true."""
    return [value for value in values if func(value)]


def to_interface(values: Sequence[Any] | None) -> list[Any]:
    """Return the values as a plain list; None gives an empty list."""
    return list(values) if values else []


def string_to_interface(values: Sequence[str] | None) -> list[Any]:
    """Return a list of the given strings."""
    return to_interface(values)


def int_to_interface(values: Sequence[int] | None) -> list[Any]:
    """Return a list of the given integers."""
    return to_interface(values)


def _normalise(values: Sequence[str], case_sensitive: bool, ignore_empty: bool, trim: bool) -> list[str]:
    result = []
    for value in values:
        if trim:
            value = value.strip()
        if not value and ignore_empty:
            continue
        if not case_sensitive:
            value = value.upper()
        result.append(value)
    return result


def _same_items(a: Sequence[Any], b: Sequence[Any]) -> bool:
    return len(a) == len(b) and all(item in b for item in a)


def string_slice_equal(
    a: Sequence[str] | None,
    b: Sequence[str] | None,
    case_sensitive: bool,
    ignore_empty: bool,
    trim: bool,
) -> bool:
    """Return True when ``a`` and ``b`` have the same length and every item of ``a`` is in ``b``.

    None only equals None. Items may be trimmed, compared ignoring case and
    have empty items dropped before comparing.
    """
    if a is None or b is None:
        return a is None and b is None
    if not case_sensitive or ignore_empty or trim:
        a = _normalise(a, case_sensitive, ignore_empty, trim)
        b = _normalise(b, case_sensitive, ignore_empty, trim)
    return _same_items(a, b)


def int_slice_equal(a: Sequence[int] | None, b: Sequence[int] | None) -> bool:
    """Return True when ``a`` and ``b`` have the same length and every item of ``a`` is in ``b``."""
    if a is None or b is None:
        return a is None and b is None
    return _same_items(a, b)


def string_slice_reverse(values: Sequence[str]) -> list[str]:
    """Return a reversed copy of ``values``."""
    return list(reversed(values))


def int_slice_reverse(values: Sequence[int]) -> list[int]:
    """Return a reversed copy of ``values``."""
    return list(reversed(values))


def diff(*args: Sequence[H] | None) -> list[H]:
    """Return the items of the first sequence that are in none of the others."""
    if not args or args[0] is None:
        return []
    first = args[0]
    if len(args) == 1:
        return list(first)
    others = {value for items in args[1:] if items for value in items}
    return [value for value in first if value not in others]


def string_slice_diff(*args: Sequence[str] | None) -> list[str]:
    """Return the strings of the first sequence found in none of the others, ignoring case."""
    if not args or args[0] is None:
        return []
    first = args[0]
    if len(args) == 1:
        return list(first)
    others = [value for items in args[1:] if items for value in items]
    return [value for value in first if not string_in(value, *others)]


def int_slice_diff(*args: Sequence[int] | None) -> list[int]:
    """Return the integers of the first sequence that are in none of the others."""
    return diff(*args)


def chunk(items: Sequence[T] | None, size: int) -> list[list[T]]:
    """Split ``items`` into lists of at most ``size`` items.

    A size of zero or less gives the whole sequence as one chunk.
    """
    if not items:
        return []
    if size <= 0:
        return [list(items)]
    return [list(items[start : start + size]) for start in range(0, len(items), size)]