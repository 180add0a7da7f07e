"""Spreadsheet column names (A, B, ..., XFD) with a movable cursor."""

from __future__ import annotations

import re

_COLUMN_NAME = re.compile(r"[A-Za-z]{1,3}")
_MIN_NUMBER = 1
_MAX_NUMBER = 16384
_BASE = 64


class ColumnError(ValueError):
    """Raised for an invalid column name or a move out of range."""


def _to_number(name: str) -> int:
    total = 0
    for power, letter in enumerate(reversed(name.upper())):
        total += (ord(letter) - _BASE) * 26**power
    return total


def _is_valid_name(name: str) -> bool:
    return _COLUMN_NAME.fullmatch(name) is not None and _to_number(name) <= _MAX_NUMBER


def _to_name(number: int) -> str:
    letters = []
    while True:
        quotient, remainder = divmod(number, 26)
        letters.append("Z" if remainder == 0 else chr(_BASE + remainder))
        if quotient == 0:
            break
        if quotient <= 26:
            if quotient != 1 or remainder != 0:
                letters.append(chr(_BASE + quotient))
            break
        number = quotient
    return "".join(reversed(letters))


class Column:
    """A cursor over spreadsheet columns that remembers where it started and how far right it went."""

    def __init__(self, name: str) -> None:
        name = name.upper()
        if not _is_valid_name(name):
            raise ColumnError("invalid column name")
        self._start_name = name
        self._end_name = name
        self._current = name

    def __repr__(self) -> str:
        return f"Column({self._current!r})"

    @property
    def start_name(self) -> str:
        """The column the cursor was created at."""
        return self._start_name

    @property
    def end_name(self) -> str:
        """The farthest column reached."""
        return self._end_name

    @property
    def name(self) -> str:
        """The current column."""
        return self._current

    def name_with_row(self, row: int) -> str:
        """Return the current column joined with ``row``, such as ``A1``."""
        return f"{self._current}{row}"

    def _update_end_name(self, name: str) -> None:
        if self._end_name < name or len(self._end_name) < len(name):
            self._end_name = name

    def to_first(self) -> Column:
        """Move to column A."""
        self._current = "A"
        return self

    def next(self) -> Column:
        """Move one column right."""
        return self.right_shift(1)

    def prev(self) -> Column:
        """Move one column left."""
        return self.left_shift(1)

    def reset(self) -> Column:
        """Move back to the starting column and forget the farthest one."""
        self._current = self._start_name
        self._end_name = self._start_name
        return self

    def to(self, name: str) -> Column:
        """Jump to the column ``name``."""
        name = name.upper()
        if not _is_valid_name(name):
            raise ColumnError(f"invalid column name {name}")
        self._current = name
        self._update_end_name(name)
        return self

    def right_shift(self, steps: int) -> Column:
        """Move ``steps`` columns right; zero or fewer steps do nothing."""
        if steps <= 0:
            return self
        return self._shift(steps)

    def left_shift(self, steps: int) -> Column:
        """Move ``steps`` columns left; zero or fewer steps do nothing."""
        if steps <= 0:
            return self
        return self._shift(-steps)

    def _shift(self, steps: int) -> Column:
        if steps == 0:
            return self
        number = _to_number(self._current) + steps
        if number > _MAX_NUMBER:
            raise ColumnError("out of max columns")
        if number < _MIN_NUMBER:
            raise ColumnError("out of min columns")
        self._current = _to_name(number)
        if steps > 0:
            self._update_end_name(self._current)
        return self