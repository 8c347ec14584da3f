"""Omzet Report API Schemas

Pydantic models for the request parameters and the response envelope of the
report endpoints. Field names are the wire names clients already depend on:

1. Query parameters (merchant, outlet, month token or date range, paging)
2. Daily aggregates handed over by the storage layer
3. The report envelope: pagination, navigation links and daily rows"""
from pydantic import BaseModel, Field
from typing import List, Optional
import datetime


# Request parameters shared by both report endpoints
class ReportQuery(BaseModel):
    merchant_id: int = Field(..., description="Merchant whose transactions are reported")
    outlet_id: int = Field(0, description="Restrict to one outlet; 0 or less means all outlets")
    limit: int = Field(10, description="Rows per page; values <= 0 fall back to 10")
    page: int = Field(1, description="1-based page number; values <= 0 fall back to 1")


class MonthlyReportQuery(ReportQuery):
    date: Optional[str] = Field(None, description="Month to report on (YYYY-MM); defaults to the current month")


class RangeReportQuery(ReportQuery):
    start_date: Optional[datetime.datetime] = Field(None, description="Start of the report range")
    end_date: Optional[datetime.datetime] = Field(None, description="End of the report range")


# One row per day with at least one transaction, as returned by storage
class DailyAggregate(BaseModel):
    date: datetime.datetime
    omzet: str = Field(..., description="Summed bill total for the day, as decimal text")


# One row per calendar day in the report
class DailyReportRow(BaseModel):
    date: datetime.datetime
    omzet: str = Field("0", description="Summed bill total for the day, '0' when there was no activity")


class Pagination(BaseModel):
    limit: int
    page: int
    total_page: int


class Link(BaseModel):
    current: str
    next: str = Field("", description="Empty when there is no next page")
    prev: str = Field("", description="Empty when there is no previous page")


class ReportResponse(BaseModel):
    pagination: Pagination
    link: Link
    data: List[DailyReportRow]
