"""Predicates for values and strings."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any
from urllib.parse import urlsplit

_SAFE_CHARACTERS = re.compile(r"[a-zA-Z0-9.\-_]+")
_COLOR_HEX = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")

_URL_SCHEMA = r"((https?):\/\/)"
_URL_PATH = r"((\/|\?|#)[^\s]*)"
_URL_PORT = r"(:(\d{1,5}))"
_URL_IP = (
    r"([1-9]\d?|1\d\d|2[01]\d|22[0-3]|24\d|25[0-5])(\.(\d{1,2}|1\d\d|2[0-4]\d|25[0-5])){2}"
    r"(?:\.([0-9]\d?|1\d\d|2[0-4]\d|25[0-5]))"
)
_URL_SUBDOMAIN = r"((www\.)|([a-zA-Z0-9]+([-_\.]?[a-zA-Z0-9])*[a-zA-Z0-9]\.[a-zA-Z0-9]+))"
_URL_IPV6 = (
    r"(([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,7}:"
    r"|([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}"
    r"|([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}|([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}"
    r"|([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}|[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})"
    r"|:((:[0-9a-fA-F]{1,4}){1,7}|:)|fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}"
    r"|::(ffff(:0{1,4}){0,1}:){0,1}((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"
    r"|([0-9a-fA-F]{1,4}:){1,4}:((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9]))"
)
_URL = re.compile(
    "^" + _URL_SCHEMA + "?" + "((" + _URL_IP + r"|(\[" + _URL_IPV6 + r"\])"
    r"|(([a-zA-Z0-9]([a-zA-Z0-9_-]+)?[a-zA-Z0-9]([-\.][a-zA-Z0-9]+)*)|(" + _URL_SUBDOMAIN + "?))?"
    "(([a-zA-Z\u00a1-\uffff0-9]+-?-?)*[a-zA-Z\u00a1-\uffff0-9]+)"
    r"(?:\.([a-zA-Z\u00a1-\uffff]{1,}))?))\.?" + _URL_PORT + "?" + _URL_PATH + "?$"
)


def _is_zero_time(t: datetime) -> bool:
    offset = t.utcoffset() or timedelta(0)
    return t.replace(tzinfo=None) - datetime.min == offset


def empty(value: Any) -> bool:
    """Return True for None, empty containers, False, zero numbers and the zero time."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray, list, tuple, set, frozenset, Mapping)):
        return len(value) == 0
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, datetime):
        return _is_zero_time(value)
    return False


def equal(expected: Any, actual: Any) -> bool:
    """Return True when both values have the same type and compare equal."""
    if expected is None or actual is None:
        return expected is None and actual is None
    if isinstance(expected, (bytes, bytearray)):
        return isinstance(actual, (bytes, bytearray)) and bytes(expected) == bytes(actual)
    return type(expected) is type(actual) and expected == actual


def safe_characters(s: str) -> bool:
    """Return True when ``s`` is non-empty and holds only ASCII letters, digits, '.', '-' and '_'."""
    return bool(s) and _SAFE_CHARACTERS.fullmatch(s) is not None


def http_url(s: str) -> bool:
    """Return True when ``s`` looks like an HTTP or HTTPS URL, with or without a scheme."""
    if not s or len(s) >= 2083 or len(s.encode("utf-8")) <= 3 or s.startswith("."):
        return False
    if s.startswith("//"):
        s = "http:" + s
    candidate = s
    if ":" in s and "://" not in s:
        candidate = "http://" + s
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("."):
        return False
    if not host and parts.path and "." not in parts.path:
        return False
    return _URL.match(s) is not None


def _platform_name() -> str:
    platform = sys.platform
    for prefix, name in (
        ("linux", "linux"),
        ("win", "windows"),
        ("cygwin", "windows"),
        ("darwin", "darwin"),
        ("freebsd", "freebsd"),
        ("openbsd", "openbsd"),
        ("netbsd", "netbsd"),
        ("dragonfly", "dragonfly"),
        ("aix", "aix"),
        ("sunos", "solaris"),
        ("android", "android"),
        ("ios", "ios"),
        ("emscripten", "js"),
        ("gnu", "hurd"),
    ):
        if platform.startswith(prefix):
            return name
    return platform


def is_os(typ: str) -> bool:
    """Return True when the running operating system is ``typ``, such as ``linux`` or ``windows``."""
    return _platform_name() == typ


def color_hex(s: str) -> bool:
    """Return True for a ``#rgb`` or ``#rrggbb`` hex colour."""
    return _COLOR_HEX.fullmatch(s) is not None