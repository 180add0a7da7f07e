"""JSON encoding helpers, raw JSON messages and extraction of JSON from text."""

from __future__ import annotations

import base64
import dataclasses
import json
from collections.abc import Mapping
from typing import Any

_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _prepare(value: Any) -> Any:
    """Turn ``value`` into plain JSON data: mappings sorted by key, dataclasses in field order."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: _prepare(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        ordered = sorted(value.items(), key=lambda item: str(item[0]))
        return {key: _prepare(item) for key, item in ordered}
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def _dumps(value: Any, indent: int | None = None) -> str:
    separators = (",", ": ") if indent is not None else (",", ":")
    text = json.dumps(
        _prepare(value),
        ensure_ascii=False,
        allow_nan=False,
        indent=indent,
        separators=separators,
    )
    return text.translate(_HTML_ESCAPES)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"jsonx: invalid literal {name}")


def _loads(data: str | bytes) -> Any:
    return json.loads(data, parse_constant=_reject_constant)


def _is_valid(data: str | bytes) -> bool:
    try:
        _loads(data)
    except (ValueError, UnicodeDecodeError):
        return False
    return True


def to_raw_message(value: Any, default_value: str) -> bytes:
    """Encode ``value`` as compact JSON bytes, using ``default_value`` when it encodes to null.

    Raises TypeError or ValueError when ``value`` cannot be encoded.
    """
    data = _dumps(value).strip()
    if not data or data.lower() == "null":
        data = default_value
    return data.encode("utf-8")


def to_json(value: Any, default_value: str) -> str:
    """Return ``value`` as compact JSON, or ``default_value`` when it is None or cannot be encoded."""
    if value is None:
        return default_value
    try:
        text = _dumps(value)
    except (TypeError, ValueError, RecursionError):
        return default_value
    return text if _is_valid(text) else default_value


def to_pretty_json(value: Any) -> str:
    """Return ``value`` as JSON indented by four spaces, or its plain text when it cannot be encoded."""
    if value is None:
        return "null"
    try:
        return _dumps(value, indent=4)
    except (TypeError, ValueError, RecursionError):
        return str(value)


def empty_object_raw_message() -> bytes:
    """Return the raw message of an empty object."""
    return b"{}"


def empty_array_raw_message() -> bytes:
    """Return the raw message of an empty array."""
    return b"[]"


def is_empty_raw_message(data: bytes | str | None) -> bool:
    """Return True when ``data`` is missing, blank, null, an empty object or an empty array."""
    if data is None:
        return True
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("utf-8", "replace")
    else:
        text = data
    text = text.strip()
    if text in ("", "[]", "{}") or text.lower() == "null":
        return True
    text = text.replace(" ", "")
    return text in ("[]", "{}")


def convert(data: bytes | str | None) -> Any:
    """Decode the raw message ``data``; an empty message gives None.

    Raises ValueError when ``data`` is not valid JSON.
    """
    if is_empty_raw_message(data):
        return None
    return _loads(data)


def extract(s: str) -> str:
    """Return the first valid JSON object or array found in ``s``.

    The whole text is returned when it is valid JSON. Raises ValueError when
    ``s`` is blank or holds no valid JSON.
    """
    s = s.strip()
    if not s:
        raise ValueError("jsonx: empty string")
    if _is_valid(s):
        return s
    n = len(s)
    for start, char in enumerate(s):
        if char not in "{[":
            continue
        for end in range(n, start, -1):
            candidate = s[start:end]
            if _is_valid(candidate):
                return candidate
    raise ValueError("jsonx: not found")