"""Read values out of a JSON document by dotted paths, without defining types."""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Any

from .bytex import is_blank
from .jsonx import to_json

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name}")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return to_json(value, "")


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def _to_float32(value: float) -> float:
    import struct

    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _truncate(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(value)


def _element(data: Any, part: str) -> Any:
    if isinstance(data, dict):
        return data.get(part)
    if isinstance(data, list):
        index = _parse_int(part)
        if index is not None and 0 <= index < len(data):
            return data[index]
    return None


class ParseFinder:
    """The value found at a path, with conversions to common types.

    A missing value converts to an empty string, zero or False.
    """

    def __init__(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"ParseFinder({self._value!r})"

    def interface(self) -> Any:
        """Return the value as decoded, or None when missing."""
        return self._value

    def __str__(self) -> str:
        return "" if self._value is None else _stringify(self._value)

    def to_float32(self) -> float:
        """Return the value rounded to single precision."""
        value = self._value
        if isinstance(value, bool):
            return 1.0 if value else 0.0
        if isinstance(value, (int, float)):
            return _to_float32(float(value))
        if isinstance(value, str):
            parsed = _parse_float(value)
            if parsed is None:
                return 0.0
            result = _to_float32(parsed)
            return 0.0 if math.isinf(result) and not math.isinf(parsed) else result
        return 0.0

    def to_float64(self) -> float:
        """Return the value as a float."""
        value = self._value
        if isinstance(value, bool):
            return 1.0 if value else 0.0
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            parsed = _parse_float(value)
            return 0.0 if parsed is None else parsed
        return 0.0

    def to_int(self) -> int:
        """Return the value as an integer; fractions are truncated."""
        value = self._value
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return _truncate(value)
        if isinstance(value, str):
            parsed = _parse_int(value)
            if parsed is None:
                return 0
            return min(max(parsed, _INT64_MIN), _INT64_MAX)
        return 0

    def to_int64(self) -> int:
        """Return the value as a 64-bit integer; out-of-range strings give 0."""
        value = self._value
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return _truncate(value)
        if isinstance(value, str):
            parsed = _parse_int(value)
            if parsed is None or not _INT64_MIN <= parsed <= _INT64_MAX:
                return 0
            return parsed
        return 0

    def to_bool(self) -> bool:
        """Return the value as a boolean; numbers are true when positive."""
        value = self._value
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value > 0
        if isinstance(value, str):
            return value in _TRUE_WORDS
        return False


class Parser:
    """A loaded JSON document whose values are looked up by dotted paths such as ``a.b.0``."""

    def __init__(self, s: str = "") -> None:
        self._data: Any = None
        self._value: Any = None
        self.load_string(s)

    def load_string(self, s: str) -> Parser:
        """Load the document from text; blank or invalid text leaves the parser unchanged."""
        return self.load_bytes(s.encode("utf-8", "surrogatepass"))

    def load_bytes(self, data: bytes) -> Parser:
        """Load the document from bytes; blank or invalid data leaves the parser unchanged."""
        if is_blank(data):
            return self
        try:
            self._data = json.loads(data, parse_constant=_reject_constant)
        except (ValueError, UnicodeDecodeError):
            pass
        return self

    def _lookup(self, path: str) -> Any:
        data = self._data
        for part in path.split("."):
            data = _element(data, part)
            if data is None:
                return None
        return data

    def exists(self, path: str) -> bool:
        """Return True when ``path`` leads to a value that is not null."""
        if self._data is None or not path:
            return False
        return self._lookup(path) is not None

    def find(self, path: str, *args: Any) -> ParseFinder:
        """Return the value at ``path``; the first extra argument is the default when not found."""
        if args:
            self._value = args[0]
        if self._data is None or not path:
            return ParseFinder(self._value)
        found = self._lookup(path)
        if found is not None:
            self._value = found
        return ParseFinder(self._value)