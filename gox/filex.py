"""File system checks that never raise."""

from __future__ import annotations

import os
import stat


def _stat(path: str | os.PathLike) -> os.stat_result | None:
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def is_file(path: str | os.PathLike) -> bool:
    """Return True when ``path`` exists and is not a directory."""
    info = _stat(path)
    return info is not None and not stat.S_ISDIR(info.st_mode)


def is_dir(path: str | os.PathLike) -> bool:
    """Return True when ``path`` is a directory."""
    info = _stat(path)
    return info is not None and stat.S_ISDIR(info.st_mode)


def exists(path: str | os.PathLike) -> bool:
    """Return True when ``path`` exists."""
    return _stat(path) is not None


def size(path: str | os.PathLike) -> int:
    """Return the size of ``path`` in bytes, or 0 when it cannot be read."""
    info = _stat(path)
    return info.st_size if info is not None else 0