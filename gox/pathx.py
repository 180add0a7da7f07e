"""Helpers for slash-separated paths."""

from __future__ import annotations


def _base(path: str) -> str:
    if not path:
        return "."
    path = path.rstrip("/")
    if not path:
        return "/"
    return path.rsplit("/", 1)[-1]


def _ext(path: str) -> str:
    tail = path.rsplit("/", 1)[-1]
    dot = tail.rfind(".")
    return tail[dot:] if dot >= 0 else ""


def filename_without_ext(s: str) -> str:
    """Return the last element of ``s`` without its extension."""
    if not s:
        return ""
    filename = _base(s)
    extension = _ext(s)
    if extension and filename.endswith(extension):
        filename = filename[: -len(extension)]
    return filename