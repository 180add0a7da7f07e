"""HTML building helpers."""

from __future__ import annotations

from collections.abc import Mapping


def tag(
    tag: str,
    content: str,
    attributes: Mapping[str, str] | None = None,
    styles: Mapping[str, str] | None = None,
) -> str:
    """Return an HTML element with sorted attributes and an inline style built from ``styles``."""
    parts = [f"<{tag}"]
    for key in sorted(attributes or {}):
        parts.append(f' {key}="{attributes[key]}"')
    if styles:
        declarations = "".join(f"{key}:{styles[key]};" for key in sorted(styles))
        parts.append(f' style="{declarations}"')
    parts.append(f">{content}</{tag}>")
    return "".join(parts)