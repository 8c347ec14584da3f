import logging
from fastapi import APIRouter, Depends
from typing import Annotated

from .schemas import MonthlyReportQuery, RangeReportQuery, ReportResponse
from .repository import ReportRepository, get_report_repository
from . import service as report_service

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Reports"],
    responses={404: {"description": "Not found"}},
)


@router.get("/report", response_model=ReportResponse)
async def get_monthly_report(
    repository: Annotated[ReportRepository, Depends(get_report_repository)],
    query: MonthlyReportQuery = Depends(),
):
    return await report_service.generate_monthly_report(
        repository,
        merchant_id=query.merchant_id,
        outlet_id=query.outlet_id,
        month=query.date,
        limit=query.limit,
        page=query.page,
    )


@router.get("/reporting", response_model=ReportResponse)
async def get_daily_report(
    repository: Annotated[ReportRepository, Depends(get_report_repository)],
    query: RangeReportQuery = Depends(),
):
    return await report_service.generate_daily_report(
        repository,
        merchant_id=query.merchant_id,
        outlet_id=query.outlet_id,
        start_date=query.start_date,
        end_date=query.end_date,
        limit=query.limit,
        page=query.page,
    )
