"""Create and extract zip archives."""

from __future__ import annotations

import os
import shutil
import zipfile
from collections.abc import Iterable

_SUPPORTED_METHODS = (zipfile.ZIP_STORED, zipfile.ZIP_DEFLATED)


def compress(
    filename: str | os.PathLike,
    files: Iterable[str | os.PathLike],
    method: int = zipfile.ZIP_DEFLATED,
    compact_directory: bool = False,
) -> None:
    """Write ``files`` into the zip archive ``filename``.

    With ``compact_directory`` each entry is named by its base name only.
    When a file cannot be read, the archive is left empty and the error is
    raised.
    """
    if method not in _SUPPORTED_METHODS:
        raise ValueError(f"zip: unsupported compression algorithm {method}")
    paths = [os.fspath(path) for path in files]
    with zipfile.ZipFile(filename, "w") as archive:
        entries = []
        for path in paths:
            os.stat(path)
            with open(path, "rb") if not os.path.isdir(path) else _nothing():
                pass
            entries.append((path, os.path.basename(path) if compact_directory else path))
        for path, arcname in entries:
            archive.write(path, arcname, compress_type=method)


class _nothing:
    def __enter__(self) -> None:
        return None

    def __exit__(self, *exc_info: object) -> None:
        return None


def _mode(info: zipfile.ZipInfo) -> int:
    mode = (info.external_attr >> 16) & 0o777
    if mode:
        return mode
    if info.is_dir():
        return 0o777
    return 0o444 if info.external_attr & 0x01 else 0o666


def _target(dst: str, name: str) -> str:
    base = os.path.abspath(dst)
    target = os.path.abspath(os.path.join(dst, name))
    if os.path.commonpath([base, target]) != base:
        raise ValueError(f"zip: entry {name!r} is outside the destination")
    return target


def uncompress(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Extract the zip archive ``src`` into the directory ``dst``, creating it when needed."""
    dst = os.fspath(dst)
    with zipfile.ZipFile(src) as archive:
        os.makedirs(dst, exist_ok=True)
        for info in archive.infolist():
            path = _target(dst, info.filename)
            if info.is_dir():
                os.makedirs(path, _mode(info), exist_ok=True)
                continue
            os.makedirs(os.path.dirname(path), exist_ok=True)
            descriptor = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _mode(info))
            with archive.open(info) as reader, os.fdopen(descriptor, "wb") as writer:
                shutil.copyfileobj(reader, writer)