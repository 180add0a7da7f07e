"""A URL whose query values can be read and changed."""

from __future__ import annotations

from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit

from .isx import http_url


class URL:
    """A parsed URL with editable query values."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.url: SplitResult | None = None
        self.valid = False
        self._values: dict[str, list[str]] = {}
        try:
            self.url = urlsplit(path)
        except ValueError:
            return
        self.valid = True
        for key, value in parse_qsl(self.url.query, keep_blank_values=True):
            self._values.setdefault(key, []).append(value)

    def get_value(self, key: str, default_value: str = "") -> str:
        """Return the first value of ``key``, or ``default_value`` when it is missing or empty."""
        values = self._values.get(key)
        return (values[0] if values else "") or default_value

    def set_value(self, key: str, value: str) -> URL:
        """Replace every value of ``key`` with ``value``."""
        self._values[key] = [value]
        return self

    def add_value(self, key: str, value: str) -> URL:
        """Append ``value`` to the values of ``key``."""
        self._values.setdefault(key, []).append(value)
        return self

    def del_key(self, key: str) -> URL:
        """Remove ``key`` and its values."""
        self._values.pop(key, None)
        return self

    def has_key(self, key: str) -> bool:
        """Return True when ``key`` is present."""
        return key in self._values

    def _encode(self) -> str:
        return urlencode([(key, value) for key in sorted(self._values) for value in self._values[key]])

    def __str__(self) -> str:
        if self.url is None:
            return self.path
        s = self.path
        raw_query = self.url.query
        if not raw_query:
            if self._values:
                s += "?" + self._encode()
        else:
            s = s.replace(raw_query, self._encode(), 1)
        return s


def is_absolute(s: str) -> bool:
    """Return True when ``s`` is an absolute HTTP URL with a dotted host."""
    if s.startswith("//"):
        s = "http:" + s
    if not http_url(s):
        return False
    try:
        parts = urlsplit(s)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    return bool(parts.scheme) and len(host) > 2 and host.find(".") > 0


def is_relative(s: str) -> bool:
    """Return True when ``s`` is not an absolute URL."""
    return not is_absolute(s)