import datetime

import pytest

from reporting.features.transactions.dates import (
    count_days, current_month_range, is_valid_range, month_bounds,
    resolve_date_range, resolve_month
)

NOW = datetime.datetime(2024, 2, 14, 16, 30, 5)


def test_valid_range_is_kept():
    start = datetime.datetime(2024, 1, 1)
    end = datetime.datetime(2024, 1, 31)
    assert resolve_date_range(start, end, now=NOW) == (start, end)


def test_single_instant_range_is_valid():
    instant = datetime.datetime(2024, 1, 1, 12)
    assert is_valid_range(instant, instant)


@pytest.mark.parametrize(
    "start, end",
    [
        (None, None),
        (datetime.datetime(2024, 1, 1), None),
        (None, datetime.datetime(2024, 1, 31)),
        (datetime.datetime(2024, 1, 31), datetime.datetime(2024, 1, 1)),
        (
            datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
            datetime.datetime(2024, 1, 31),
        ),
    ],
)
def test_invalid_range_falls_back_to_current_month(start, end):
    resolved_start, resolved_end = resolve_date_range(start, end, now=NOW)
    assert resolved_start == datetime.datetime(2024, 2, 1, 0, 0, 0)
    assert resolved_end == datetime.datetime(2024, 2, 29, 23, 59, 59)


def test_current_month_range_keeps_timezone():
    tz = datetime.timezone(datetime.timedelta(hours=7))
    start, end = current_month_range(datetime.datetime(2023, 4, 10, 8, tzinfo=tz))
    assert start == datetime.datetime(2023, 4, 1, tzinfo=tz)
    assert end == datetime.datetime(2023, 4, 30, 23, 59, 59, tzinfo=tz)


def test_current_month_range_defaults_to_local_clock():
    start, end = current_month_range()
    today = datetime.datetime.now()
    assert (start.year, start.month, start.day) == (today.year, today.month, 1)
    assert (end.hour, end.minute, end.second) == (23, 59, 59)
    assert end.month == start.month


def test_resolve_month_parses_token():
    assert resolve_month("2023-11", now=NOW) == datetime.datetime(2023, 11, 1)


@pytest.mark.parametrize("token", [None, "", "2023/11", "2023-13", "november", "2024-1", "2024-01-05", " 2024-01"])
def test_resolve_month_falls_back_to_now(token):
    assert resolve_month(token, now=NOW) == NOW


def test_month_bounds_cover_whole_month():
    start, end = month_bounds(datetime.datetime(2024, 2, 14, 9))
    assert start == datetime.datetime(2024, 2, 1)
    assert end == datetime.datetime(2024, 3, 1)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (datetime.datetime(2024, 1, 1), datetime.datetime(2024, 1, 31), 30),
        (datetime.datetime(2024, 1, 1), datetime.datetime(2024, 1, 31, 23, 59, 59), 31),
        (datetime.datetime(2024, 1, 1, 12), datetime.datetime(2024, 1, 2, 1), 1),
        (datetime.datetime(2024, 1, 1), datetime.datetime(2024, 1, 1), 0),
        (datetime.datetime(2024, 1, 20), datetime.datetime(2024, 2, 10, 6), 22),
    ],
)
def test_count_days_rounds_partial_days_up(start, end, expected):
    assert count_days(start, end) == expected
