"""
Dense daily series for omzet reports.

Storage only returns a row for days that had transactions. This module turns
those sparse aggregates into one row per calendar day, but only for the days
that fall inside the requested page, so a long range with a small page never
gets fully materialized.
"""

import datetime
import logging
from bisect import bisect_left
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from .schemas import DailyAggregate, DailyReportRow

logger = logging.getLogger(__name__)

ZERO_OMZET = "0"


def window_bounds(page: int, limit: int) -> tuple[int, int]:
    """Returns the first and last 1-based day ordinal shown on `page`."""
    return (page - 1) * limit + 1, page * limit


def is_sorted_by_date(aggregates: Sequence[DailyAggregate]) -> bool:
    return all(a.date <= b.date for a, b in zip(aggregates, aggregates[1:]))


def _day_of_year_key(value: datetime.datetime) -> Tuple[int, int]:
    # Year is intentionally not compared
    return value.month, value.day


def _index_by_day_of_year(aggregates: Sequence[DailyAggregate]) -> Dict[Tuple[int, int], List[int]]:
    positions = defaultdict(list)
    for index, aggregate in enumerate(aggregates):
        positions[_day_of_year_key(aggregate.date)].append(index)
    return positions


def build_daily_series(
    start_date: datetime.datetime,
    total_days: int,
    aggregates: Sequence[DailyAggregate],
    page: int,
    limit: int,
) -> List[DailyReportRow]:
    """
    Builds the rows for one page of the date-complete series.

    Day ordinal 1 is the calendar day of `start_date`; ordinal i is that day
    plus (i - 1) days, stamped at midnight in `start_date`'s tzinfo. Each day
    takes the omzet of the aggregate with the same day and month, or "0".

    Aggregates must be sorted ascending by date. Matching walks them with a
    cursor that only moves forward over the whole range: once a match is
    found at index k, the next day is searched from k onwards. Days before
    the page still move the cursor, so a page always equals the same slice
    of the full series. With unsorted input some days stay at "0"; the
    input is not re-scanned.

    Args:
        start_date: Resolved start of the report range
        total_days: Number of calendar days in the range
        aggregates: Per-day sums from storage, ascending by date
        page: 1-based page number
        limit: Days per page

    Returns:
        List[DailyReportRow]: At most `limit` rows, empty when the page lies
        past the end of the range.
    """
    if not is_sorted_by_date(aggregates):
        logger.warning(
            "Daily aggregates are not sorted by date, some days may be reported as %s",
            ZERO_OMZET,
        )

    first, last = window_bounds(page, limit)
    first_day = start_date.replace(hour=0, minute=0, second=0, microsecond=0)
    positions = _index_by_day_of_year(aggregates)

    rows = []
    cursor = 0
    for ordinal in range(1, min(last, total_days) + 1):
        day = first_day + datetime.timedelta(days=ordinal - 1)

        # First index >= cursor with the same day and month, as a linear scan would find it
        candidates = positions.get(_day_of_year_key(day), [])
        found = bisect_left(candidates, cursor)
        omzet = ZERO_OMZET
        if found < len(candidates):
            cursor = candidates[found]
            omzet = aggregates[cursor].omzet

        if ordinal >= first:
            rows.append(DailyReportRow(date=day, omzet=omzet))

    return rows
