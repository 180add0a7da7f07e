"""Random strings drawn from a secure source."""

from __future__ import annotations

import secrets
import string

_NUMBER_CHARS = string.digits
_LETTER_CHARS = string.ascii_uppercase + string.ascii_lowercase


def _generate(chars: str, n: int, upper: bool) -> str:
    if n <= 0:
        return ""
    value = "".join(secrets.choice(chars) for _ in range(n))
    return value.upper() if upper else value


def letter(n: int, upper: bool) -> str:
    """Return ``n`` random ASCII letters, upper-cased when asked."""
    return _generate(_LETTER_CHARS, n, upper)


def number(n: int) -> str:
    """Return ``n`` random decimal digits."""
    return _generate(_NUMBER_CHARS, n, False)


def any_chars(n: int) -> str:
    """Return ``n`` random ASCII letters and digits."""
    return _generate(_LETTER_CHARS + _NUMBER_CHARS, n, False)