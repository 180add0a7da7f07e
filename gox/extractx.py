"""Extract numbers written like ``1,234.56`` from free text."""

from __future__ import annotations

import math
import re
import struct

_NUMBER = re.compile(r"-?\d+[\d.,]*\d*", re.ASCII)


def _clean(s: str) -> str:
    s = s.strip()
    if not s:
        return s
    s = s.replace(",", "")
    if s.endswith("."):
        s = s[-2:-1]
    return s


def number(s: str) -> str:
    """Return the first number found in ``s``, or an empty string."""
    if not s:
        return ""
    match = _NUMBER.search(s)
    return _clean(match.group()) if match else ""


def numbers(s: str) -> list[str]:
    """Return every number found in ``s``."""
    if not s:
        return []
    return [_clean(found) for found in _NUMBER.findall(s)]


def _parse_int(s: str, bits: int) -> int | None:
    text = number(s)
    if not text:
        return None
    try:
        value = int(text, 10)
    except ValueError:
        return None
    limit = 1 << (bits - 1)
    return value if -limit <= value < limit else None


def to_float64(s: str) -> float:
    """Return the first number in ``s`` as a float, or 0.0."""
    text = number(s)
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return 0.0 if math.isinf(value) else value


def to_float32(s: str) -> float:
    """Return the first number in ``s`` rounded to single precision, or 0.0."""
    value = to_float64(s)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def to_int64(s: str) -> int:
    """Return the first number in ``s`` as a 64-bit integer, or 0."""
    value = _parse_int(s, 64)
    return 0 if value is None else value


def to_int32(s: str) -> int:
    """Return the first number in ``s`` as a 32-bit integer, or 0."""
    value = _parse_int(s, 32)
    return 0 if value is None else value


def to_int16(s: str) -> int:
    """Return the first number in ``s`` as a 16-bit integer, or 0."""
    value = _parse_int(s, 16)
    return 0 if value is None else value


def to_int8(s: str) -> int:
    """Return the first number in ``s`` parsed as 16-bit and wrapped to 8 bits, or 0."""
    value = _parse_int(s, 16)
    if value is None:
        return 0
    return (value + 128) % 256 - 128


def to_int(s: str) -> int:
    """Return the first number in ``s`` when it fits in 16 bits, or 0."""
    value = _parse_int(s, 16)
    return 0 if value is None else value