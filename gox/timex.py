"""Date and time helpers: day, month and ISO week boundaries."""

from __future__ import annotations

import calendar
import math
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _sunday_weekday(d: date) -> int:
    """Weekday numbered from Sunday as 0."""
    return (d.weekday() + 1) % 7


def _is_zero(t: datetime) -> bool:
    offset = t.utcoffset() or timedelta(0)
    return t.replace(tzinfo=None) - datetime.min == offset


def _local(year: int, month: int, day: int, hour: int = 0, minute: int = 0,
           second: int = 0, microsecond: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, second, microsecond).astimezone()


def is_america_summer_time(t: datetime) -> bool:
    """Return True when ``t`` falls in United States daylight saving time."""
    if _is_zero(t):
        return False
    month = t.month
    if 4 <= month <= 10:
        return True
    if month not in (3, 11):
        return False
    day = t.day
    first = t.date().replace(day=1)
    weekday = _sunday_weekday(first)
    if month == 3:
        return day >= (first + timedelta(days=14 - weekday)).day
    return day < (first + timedelta(days=7 - weekday)).day


def chinese_time_location() -> tzinfo:
    """Return the China time zone, or a fixed UTC+8 zone when it is unavailable."""
    try:
        return ZoneInfo("Asia/Shanghai")
    except (ZoneInfoNotFoundError, ValueError):
        return timezone(timedelta(hours=8), "CST")


def between(t: datetime, begin: datetime, end: datetime) -> bool:
    """Return True when ``t`` lies within ``begin`` and ``end``, both included."""
    return begin < t < end or t == begin or t == end


def day_start(t: datetime) -> datetime:
    """Return midnight, local time, of the date of ``t``."""
    return _local(t.year, t.month, t.day)


def day_end(t: datetime) -> datetime:
    """Return the last instant, local time, of the date of ``t``."""
    return _local(t.year, t.month, t.day, 23, 59, 59, 999999)


def month_start(t: datetime) -> datetime:
    """Return midnight, local time, of the first day of the month of ``t``."""
    return _local(t.year, t.month, 1)


def month_end(t: datetime) -> datetime:
    """Return the last instant, local time, of the month of ``t``."""
    last_day = calendar.monthrange(t.year, t.month)[1]
    return day_end(datetime(t.year, t.month, last_day))


def is_am(t: datetime) -> bool:
    """Return True before noon."""
    return t.hour <= 11


def is_pm(t: datetime) -> bool:
    """Return True from noon on."""
    return t.hour >= 12


def week_start(year_week: int) -> datetime:
    """Return the Monday, UTC midnight, of the ISO week given as ``YYYYWW``."""
    year = year_week // 100
    week = year_week % year
    t = datetime(year, 7, 1, tzinfo=timezone.utc)
    t -= timedelta(days=t.weekday())
    return t + timedelta(weeks=week - t.isocalendar()[1])


def week_end(year_week: int) -> datetime:
    """Return Sunday 23:59:59 UTC of the ISO week given as ``YYYYWW``."""
    t = week_start(year_week) + timedelta(days=6)
    return datetime(t.year, t.month, t.day, 23, 59, 59, tzinfo=timezone.utc)


def year_weeks_by_week(start_year_week: int, end_year_week: int) -> list[int]:
    """Return every ``YYYYWW`` ISO week from the first to the last, both included."""
    current = week_start(start_year_week)
    last = week_start(end_year_week)
    weeks = []
    while current <= last:
        iso = current.isocalendar()
        weeks.append(iso[0] * 100 + iso[1])
        current += timedelta(weeks=1)
    return weeks


def year_weeks_by_time(start_date: datetime, end_date: datetime) -> list[int]:
    """Return every ``YYYYWW`` ISO week between two dates, both included."""
    start = start_date.isocalendar()
    end = end_date.isocalendar()
    return year_weeks_by_week(start[0] * 100 + start[1], end[0] * 100 + end[1])


def x_iso_week(t: datetime) -> tuple[int, int]:
    """Return ``(year, week)`` counting weeks that start on Sunday."""
    day = t.date() if isinstance(t, datetime) else t
    thursday = day + timedelta(days=4 - _sunday_weekday(day))
    start = date(thursday.year, 1, 1)
    days = (thursday - start).days
    week = int(math.ceil((days + 1) / 7))
    return start.year, week