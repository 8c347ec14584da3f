"""
Date handling for omzet reports.

Requested ranges are never rejected: a missing, reversed or otherwise unusable
range silently becomes the current calendar month, and an unparseable month
token becomes "now".
"""

import calendar
import datetime
import logging
import math
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

MONTH_FORMAT = "%Y-%m"
MONTH_TOKEN = re.compile(r"\d{4}-\d{2}")


def is_valid_range(
    start_date: Optional[datetime.datetime], end_date: Optional[datetime.datetime]
) -> bool:
    if start_date is None or end_date is None:
        return False
    # Naive and aware datetimes can't be ordered against each other
    if (start_date.tzinfo is None) != (end_date.tzinfo is None):
        return False
    return start_date <= end_date


def current_month_range(
    now: Optional[datetime.datetime] = None,
) -> Tuple[datetime.datetime, datetime.datetime]:
    """
    Returns the first and the last instant of the month `now` falls in.

    The start is day 1 at 00:00:00 and the end is the last day of the month at
    23:59:59, both in the tzinfo of `now` (the local clock when omitted).
    """
    now = now or datetime.datetime.now()
    last_day = calendar.monthrange(now.year, now.month)[1]
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    end = now.replace(day=last_day, hour=23, minute=59, second=59, microsecond=0)
    return start, end


def resolve_date_range(
    start_date: Optional[datetime.datetime],
    end_date: Optional[datetime.datetime],
    now: Optional[datetime.datetime] = None,
) -> Tuple[datetime.datetime, datetime.datetime]:
    if is_valid_range(start_date, end_date):
        return start_date, end_date

    start, end = current_month_range(now)
    logger.debug(
        "Invalid report range %s - %s, using current month %s - %s",
        start_date, end_date, start, end,
    )
    return start, end


def resolve_month(token: Optional[str], now: Optional[datetime.datetime] = None) -> datetime.datetime:
    """Parses a "YYYY-MM" month token, falling back to `now` when it can't be parsed."""
    if token:
        try:
            # strptime alone would also take a single-digit month such as "2024-1"
            if MONTH_TOKEN.fullmatch(token):
                return datetime.datetime.strptime(token, MONTH_FORMAT)
        except ValueError:
            pass
        logger.debug("Unparseable month token %r, using current month", token)
    return now or datetime.datetime.now()


def month_bounds(month: datetime.datetime) -> Tuple[datetime.datetime, datetime.datetime]:
    """Returns [first instant of the month, first instant of the next month)."""
    start = month.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    last_day = calendar.monthrange(month.year, month.month)[1]
    return start, start + datetime.timedelta(days=last_day)


def count_days(start_date: datetime.datetime, end_date: datetime.datetime) -> int:
    """Number of calendar days spanned by the range, counting partial days as whole."""
    hours = (end_date - start_date).total_seconds() / 3600
    return math.ceil(hours / 24)
