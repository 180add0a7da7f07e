"""Build cache keys from arbitrary values."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _key_part(value: Any) -> str:
    if value is None:
        return "<invalid Value>"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "surrogateescape")
    if isinstance(value, Mapping):
        ordered = sorted(((str(key), item) for key, item in value.items()), key=lambda pair: pair[0])
        return generate(*(part for pair in ordered for part in pair))
    if isinstance(value, (list, tuple)):
        return generate(*value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
        return f"{type(value).__name__}:{_key_part(fields)}"
    return str(value)


def generate(*args: Any) -> str:
    """Join a textual form of every value into one key.

    Sequences are flattened, mappings and dataclasses contribute their
    keys and values in sorted key order.
    """
    return "".join(_key_part(value) for value in args)