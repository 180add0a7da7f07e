"""Checks and conversions for byte strings."""

from __future__ import annotations

from collections.abc import Iterable


def is_empty(b: bytes) -> bool:
    """Return True when ``b`` holds no bytes at all."""
    return len(b) == 0


def is_blank(b: bytes) -> bool:
    """Return True when ``b`` is empty or holds only whitespace."""
    return len(b) == 0 or not b.decode("utf-8", "replace").strip()


def to_string(b: bytes) -> str:
    """Decode ``b`` as UTF-8 without losing undecodable bytes."""
    return bytes(b).decode("utf-8", "surrogateescape")


def _fold(value: bytes, case_sensitive: bool) -> bytes:
    return value if case_sensitive else value.lower()


def starts_with(s: bytes, prefixes: Iterable[bytes] | None, case_sensitive: bool) -> bool:
    """Return True when ``s`` starts with any of ``prefixes``.

    No prefixes at all, or an empty prefix, always matches.
    """
    prefixes = list(prefixes or ())
    if not prefixes:
        return True
    s = _fold(s, case_sensitive)
    return any(not prefix or s.startswith(_fold(prefix, case_sensitive)) for prefix in prefixes)


def ends_with(s: bytes, suffixes: Iterable[bytes] | None, case_sensitive: bool) -> bool:
    """Return True when ``s`` ends with any of ``suffixes``.

    No suffixes at all, or an empty suffix, always matches.
    """
    suffixes = list(suffixes or ())
    if not suffixes:
        return True
    s = _fold(s, case_sensitive)
    return any(not suffix or s.endswith(_fold(suffix, case_sensitive)) for suffix in suffixes)


def contains(s: bytes, substrings: Iterable[bytes] | None, case_sensitive: bool) -> bool:
    """Return True when ``s`` contains any of ``substrings``.

    An empty substring always matches; no substrings never matches.
    """
    s = _fold(s, case_sensitive)
    return any(not sub or _fold(sub, case_sensitive) in s for sub in substrings or ())