"""
Omzet Report Service Module

Assembles the two omzet reports from the storage layer's per-day sums:

- the monthly report lists the days of one month that had transactions,
  paged by storage over those records;
- the daily report covers every calendar day of a date range, paged over
  calendar days, with "0" for days without transactions.

Neither report validates its inputs beyond falling back to defaults, and
storage errors are not caught here.
"""

import datetime
import logging
from typing import Optional

from .dates import count_days, resolve_date_range, resolve_month
from .pagination import (
    DAILY_REPORT_PATH, MONTHLY_REPORT_PATH, build_links, normalize_paging,
    total_pages_for_days, total_pages_for_records
)
from .repository import ReportRepository
from .schemas import DailyReportRow, Pagination, ReportResponse
from .series import build_daily_series

logger = logging.getLogger(__name__)


async def generate_monthly_report(
    repository: ReportRepository,
    merchant_id: int,
    outlet_id: int,
    month: Optional[str],
    limit: int,
    page: int,
    now: Optional[datetime.datetime] = None,
) -> ReportResponse:
    """
    Generates the monthly omzet report.

    Args:
        repository: Storage collaborator providing per-day sums
        merchant_id: Merchant to report on
        outlet_id: Outlet to report on, 0 for all outlets
        month: Month token "YYYY-MM"; the current month when missing or unparseable
        limit: Rows per page, defaults to 10 when not positive
        page: 1-based page, defaults to 1 when not positive
        now: Reference time for the fallback month (the local clock when omitted)

    Returns:
        ReportResponse: The page of daily sums as returned by storage, with
        `total_page` rounded down over the number of days with activity.
    """
    limit, page = normalize_paging(limit, page)
    month_date = resolve_month(month, now)

    rows, count = await repository.fetch_monthly(merchant_id, outlet_id, month_date, limit, page)

    total_page = total_pages_for_records(count, limit)
    return ReportResponse(
        pagination=Pagination(limit=limit, page=page, total_page=total_page),
        link=build_links(MONTHLY_REPORT_PATH, outlet_id, limit, page, total_page),
        data=[DailyReportRow(date=row.date, omzet=row.omzet) for row in rows],
    )


async def generate_daily_report(
    repository: ReportRepository,
    merchant_id: int,
    outlet_id: int,
    start_date: Optional[datetime.datetime],
    end_date: Optional[datetime.datetime],
    limit: int,
    page: int,
    now: Optional[datetime.datetime] = None,
) -> ReportResponse:
    """
    Generates the date-complete daily omzet report.

    An invalid or missing range is replaced by the current calendar month.
    Pagination counts calendar days, so every page holds `limit` consecutive
    days (fewer on the last page, none past the end of the range).

    Args:
        repository: Storage collaborator providing per-day sums
        merchant_id: Merchant to report on
        outlet_id: Outlet to report on, 0 for all outlets
        start_date: Start of the range
        end_date: End of the range
        limit: Days per page, defaults to 10 when not positive
        page: 1-based page, defaults to 1 when not positive
        now: Reference time for the fallback month (the local clock when omitted)

    Returns:
        ReportResponse: One row per calendar day of the requested page.
    """
    limit, page = normalize_paging(limit, page)
    start_date, end_date = resolve_date_range(start_date, end_date, now)

    aggregates = await repository.fetch_range(merchant_id, outlet_id, start_date, end_date)

    total_days = count_days(start_date, end_date)
    rows = build_daily_series(start_date, total_days, aggregates, page, limit)
    logger.debug(
        "Daily report for merchant %s outlet %s: %d days, %d with activity, page %d has %d rows",
        merchant_id, outlet_id, total_days, len(aggregates), page, len(rows),
    )

    total_page = total_pages_for_days(total_days, limit)
    return ReportResponse(
        pagination=Pagination(limit=limit, page=page, total_page=total_page),
        link=build_links(DAILY_REPORT_PATH, outlet_id, limit, page, total_page),
        data=rows,
    )
