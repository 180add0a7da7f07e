"""Checksums and digests of text."""

from __future__ import annotations

import hashlib
import zlib


def crc32(s: str) -> int:
    """Return the IEEE CRC-32 checksum of the UTF-8 encoding of ``s``."""
    return zlib.crc32(s.encode("utf-8")) & 0xFFFFFFFF


def md5(s: str) -> str:
    """Return the lowercase hex MD5 digest of ``s``."""
    return hashlib.md5(s.encode("utf-8")).hexdigest()


def sha1(s: str) -> str:
    """Return the lowercase hex SHA-1 digest of ``s``."""
    return hashlib.sha1(s.encode("utf-8")).hexdigest()