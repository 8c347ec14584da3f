"""
Paging and navigation links for report responses.
"""

import math
from typing import Tuple

from starlette.datastructures import URL

from ...core.config import DEFAULT_LIMIT, DEFAULT_PAGE, REPORT_BASE_URL
from .schemas import Link

MONTHLY_REPORT_PATH = "/report"
DAILY_REPORT_PATH = "/reporting"


def normalize_paging(limit: int, page: int) -> Tuple[int, int]:
    """Replaces non-positive values with the defaults."""
    if limit <= 0:
        limit = DEFAULT_LIMIT
    if page <= 0:
        page = DEFAULT_PAGE
    return limit, page


def total_pages_for_days(total_days: int, limit: int) -> int:
    """Pages needed to show every calendar day of the range, at least 1."""
    return max(1, math.ceil(total_days / limit))


def total_pages_for_records(count: int, limit: int) -> int:
    """
    Pages for the monthly listing, at least 1.

    Rounds down, unlike the daily series: a trailing partial page does not
    count towards the total.
    """
    return max(1, math.floor(count / limit))


def build_link(path: str, outlet_id: int, limit: int, page: int, base_url: str = REPORT_BASE_URL) -> str:
    params = {"limit": limit, "page": page}
    if outlet_id > 0:
        params["outlet_id"] = outlet_id
    # Sorted keys keep the query string stable: limit, outlet_id, page
    return str(URL(base_url + path).include_query_params(**dict(sorted(params.items()))))


def build_links(
    path: str, outlet_id: int, limit: int, page: int, total_page: int, base_url: str = REPORT_BASE_URL
) -> Link:
    link = Link(current=build_link(path, outlet_id, limit, page, base_url))
    if total_page > 1:
        link.next = build_link(path, outlet_id, limit, page + 1, base_url)
        if page > 1:
            link.prev = build_link(path, outlet_id, limit, page - 1, base_url)
    return link
