"""Pretty printing of values as indented JSON."""

from __future__ import annotations

import json
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


def _to_json(prefix: str, data: Any) -> str:
    try:
        text = json.dumps(data, indent=4, ensure_ascii=False, sort_keys=True, allow_nan=False)
    except (TypeError, ValueError):
        text = repr(data)
    else:
        text = text.translate(_HTML_ESCAPES)
    return f"{prefix}\n{text}" if prefix else text


def spretty_print(*args: Any) -> str:
    """Return each value as indented JSON, preceded by one blank line per value."""
    if not args:
        return ""
    values = [""] * len(args) + [_to_json("", value) for value in args]
    return "\n".join(values)


def pretty_print(prefix: str, *args: Any) -> None:
    """Print each value as indented JSON under ``prefix``, without newlines."""
    for value in args:
        print(_to_json(prefix, value), end="")


def pretty_println(prefix: str, *args: Any) -> None:
    """Print each value as indented JSON on its own lines, numbered when several."""
    only_one = len(args) == 1
    for index, value in enumerate(args, 1):
        if only_one:
            label = prefix
        elif prefix:
            label = f"{prefix} {index}"
        else:
            label = str(index)
        print(_to_json(label, value))