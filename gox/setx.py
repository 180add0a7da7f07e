"""Remove duplicates from sequences."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TypeVar

from .inx import int_in

T = TypeVar("T", bound=Hashable)


def to_set(values: Sequence[T]) -> list[T]:
    """Return the distinct values in first-seen order."""
    if len(values) <= 1:
        return list(values)
    return list(dict.fromkeys(values))


def to_string_set(values: Sequence[str], case_sensitive: bool) -> list[str] | None:
    """Return distinct trimmed, non-empty strings.

    A sequence of at most one item is returned unchanged; when nothing is
    left after trimming, None is returned.
    """
    if len(values) <= 1:
        return list(values)
    seen: dict[str, str] = {}
    for value in values:
        value = value.strip()
        if value:
            seen.setdefault(value if case_sensitive else value.lower(), value)
    if not seen:
        return None
    return list(seen.values())


def to_int_set(values: Sequence[int]) -> list[int]:
    """Return the distinct integers in first-seen order."""
    if len(values) <= 1:
        return list(values)
    unique: list[int] = []
    for value in values:
        if not int_in(value, *unique):
            unique.append(value)
    return unique