from datetime import datetime, timedelta, timezone

import pytest

from gox.timex import (
    between,
    chinese_time_location,
    day_end,
    day_start,
    is_am,
    is_america_summer_time,
    is_pm,
    month_end,
    month_start,
    week_end,
    week_start,
    x_iso_week,
    year_weeks_by_time,
    year_weeks_by_week,
)

LAYOUT = "%Y-%m-%d %H:%M:%S"


def _date(text):
    return datetime.strptime(text, "%Y-%m-%d").replace(tzinfo=timezone.utc)


def _datetime(text):
    return datetime.strptime(text, LAYOUT).replace(tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0001-01-01", False),
        ("2021-11-10", False),
        ("2021-12-10", False),
        ("2021-03-10", False),
        ("2021-03-14", True),
        ("2021-11-01", True),
        ("2021-10-10", True),
        ("2021-10-11", True),
        ("2021-10-12", True),
        ("2021-12-12", False),
        ("2022-03-15", True),
    ],
)
def test_is_america_summer_time(text, expected):
    assert is_america_summer_time(_date(text)) is expected


@pytest.mark.parametrize(
    "t, begin, end, expected",
    [
        ("2022-01-01", "2022-01-01", "2022-01-01", True),
        ("2022-01-02", "2022-01-01", "2022-01-01", False),
        ("2022-01-02", "2022-01-01", "2022-01-02", True),
    ],
)
def test_between(t, begin, end, expected):
    assert between(_date(t), _date(begin), _date(end)) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2022, 1, 1, 12, 12, 0, 924000, tzinfo=timezone.utc), "2022-01-01 00:00:00"),
        (_datetime("2022-01-01 00:00:00"), "2022-01-01 00:00:00"),
    ],
)
def test_day_start(value, expected):
    assert day_start(value).strftime(LAYOUT) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2022-01-01 12:12:00", "2022-01-01 23:59:59"),
        ("2022-01-01 00:00:00", "2022-01-01 23:59:59"),
    ],
)
def test_day_end(value, expected):
    result = day_end(_datetime(value))
    assert result.strftime(LAYOUT) == expected
    assert result.microsecond == 999999


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2022-01-12 12:12:00", "2022-01-01 00:00:00"),
        ("2022-01-21 00:00:00", "2022-01-01 00:00:00"),
    ],
)
def test_month_start(value, expected):
    assert month_start(_datetime(value)).strftime(LAYOUT) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2022-01-12 12:12:00", "2022-01-31 23:59:59"),
        ("2022-02-21 00:00:00", "2022-02-28 23:59:59"),
        ("2024-02-10 00:00:00", "2024-02-29 23:59:59"),
    ],
)
def test_month_end(value, expected):
    assert month_end(_datetime(value)).strftime(LAYOUT) == expected


@pytest.mark.parametrize(
    "year_week, expected",
    [
        (202201, "2022-01-03 00:00:00"),
        (202202, "2022-01-10 00:00:00"),
    ],
)
def test_week_start(year_week, expected):
    assert week_start(year_week).strftime(LAYOUT) == expected


@pytest.mark.parametrize(
    "year_week, expected",
    [
        (202201, "2022-01-09 23:59:59"),
        (202202, "2022-01-16 23:59:59"),
    ],
)
def test_week_end(year_week, expected):
    assert week_end(year_week).strftime(LAYOUT) == expected


@pytest.mark.parametrize(
    "begin, end, expected",
    [
        (202201, 202202, [202201, 202202]),
        (202201, 202204, [202201, 202202, 202203, 202204]),
    ],
)
def test_year_weeks_by_week(begin, end, expected):
    assert year_weeks_by_week(begin, end) == expected


@pytest.mark.parametrize(
    "begin, end, expected",
    [
        ("2022-01-01", "2022-01-02", [202152]),
        ("2022-01-01", "2022-02-02", [202152, 202201, 202202, 202203, 202204, 202205]),
    ],
)
def test_year_weeks_by_time(begin, end, expected):
    assert year_weeks_by_time(_date(begin), _date(end)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2022-01-01", "202152"),
        ("2022-01-02", "202201"),
        ("2022-01-09", "202202"),
        ("2022-01-10", "202202"),
        ("2022-01-15", "202202"),
        ("2022-01-16", "202203"),
        ("2022-01-17", "202203"),
        ("2022-01-29", "202204"),
        ("2022-12-25", "202252"),
        ("2023-01-01", "202301"),
    ],
)
def test_x_iso_week(text, expected):
    year, week = x_iso_week(_date(text))
    assert f"{year}{week:02d}" == expected


def test_is_am_and_is_pm():
    morning = _datetime("2022-01-01 11:59:59")
    noon = _datetime("2022-01-01 12:00:00")
    assert is_am(morning) is True
    assert is_pm(morning) is False
    assert is_am(noon) is False
    assert is_pm(noon) is True


def test_chinese_time_location_is_utc_plus_eight():
    zone = chinese_time_location()
    assert datetime(2022, 1, 1, tzinfo=zone).utcoffset() == timedelta(hours=8)