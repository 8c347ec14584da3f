"""
Storage access for omzet reports.

The report service only depends on the `ReportRepository` protocol; the
Tortoise implementation below sums transactions per calendar day. Errors
raised by the database are left to propagate to the caller untouched.
"""

import datetime
import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Protocol, Tuple

from .dates import month_bounds
from .models import Transaction
from .schemas import DailyAggregate

logger = logging.getLogger(__name__)


class ReportRepository(Protocol):
    async def fetch_monthly(
        self, merchant_id: int, outlet_id: int, month: datetime.datetime, limit: int, page: int
    ) -> Tuple[List[DailyAggregate], int]:
        """Returns one page of per-day sums for the month of `month`, and the number of days with activity."""
        ...

    async def fetch_range(
        self,
        merchant_id: int,
        outlet_id: int,
        start_date: datetime.datetime,
        end_date: datetime.datetime,
    ) -> List[DailyAggregate]:
        """Returns every per-day sum within [start_date, end_date], ascending by date."""
        ...


def format_amount(amount: Decimal) -> str:
    """Renders a sum as plain decimal text without exponent or trailing zeros, e.g. 1500.00 -> "1500"."""
    text = format(amount.normalize(), "f")
    return "0" if text in ("-0", "0") else text


def aggregate_by_day(rows: Iterable[dict]) -> List[DailyAggregate]:
    """Sums `bill_total` per calendar day of `transacted_at`, ascending by day."""
    totals: Dict[datetime.date, Decimal] = defaultdict(Decimal)
    for row in rows:
        if row["bill_total"] is None:
            continue
        totals[row["transacted_at"].date()] += Decimal(row["bill_total"])

    return [
        DailyAggregate(
            date=datetime.datetime.combine(day, datetime.time.min),
            omzet=format_amount(total),
        )
        for day, total in sorted(totals.items())
    ]


def _as_wall_clock(value: datetime.datetime) -> datetime.datetime:
    # Stored timestamps are naive (use_tz=False), compare on wall-clock time
    return value.replace(tzinfo=None)


class TortoiseReportRepository:
    async def _daily_totals(
        self, merchant_id: int, outlet_id: int, **period
    ) -> List[DailyAggregate]:
        query = Transaction.filter(merchant_id=merchant_id, **period)
        if outlet_id > 0:
            query = query.filter(outlet_id=outlet_id)
        rows = await query.order_by("transacted_at").values("transacted_at", "bill_total")
        return aggregate_by_day(rows)

    async def fetch_monthly(
        self, merchant_id: int, outlet_id: int, month: datetime.datetime, limit: int, page: int
    ) -> Tuple[List[DailyAggregate], int]:
        start, end = month_bounds(_as_wall_clock(month))
        days = await self._daily_totals(
            merchant_id, outlet_id, transacted_at__gte=start, transacted_at__lt=end
        )
        offset = (page - 1) * limit
        logger.debug(
            "Monthly totals for merchant %s outlet %s in %s: %d days",
            merchant_id, outlet_id, start.strftime("%Y-%m"), len(days),
        )
        return days[offset:offset + limit], len(days)

    async def fetch_range(
        self,
        merchant_id: int,
        outlet_id: int,
        start_date: datetime.datetime,
        end_date: datetime.datetime,
    ) -> List[DailyAggregate]:
        return await self._daily_totals(
            merchant_id,
            outlet_id,
            transacted_at__gte=_as_wall_clock(start_date),
            transacted_at__lte=_as_wall_clock(end_date),
        )


def get_report_repository() -> ReportRepository:
    return TortoiseReportRepository()
