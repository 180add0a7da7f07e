"""Helpers for mappings."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import urlencode


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "1" if key else "0"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        return _format_float(key)
    return str(key)


def keys(m: Any) -> list[str] | None:
    """Return the keys of ``m`` as sorted strings, or None when ``m`` is not a mapping."""
    if not isinstance(m, Mapping):
        return None
    return sorted(_key_text(key) for key in m)


def string_map_string_encode(params: Mapping[str, str] | None) -> str:
    """Encode ``params`` as a query string with keys in sorted order."""
    if not params:
        return ""
    return urlencode(sorted(params.items()))