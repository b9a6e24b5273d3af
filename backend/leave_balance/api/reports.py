# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Query

from leave_balance.api.deps import StoreDep, TodayDep
from leave_balance.schemas.report import (
    ActivityLogResponse,
    BalanceSummaryResponse,
    HolidayWorkLogResponse,
    SickLeaveSummaryResponse,
)
from leave_balance.services import report as report_service

reports_router = APIRouter(
    prefix="/companies/{company_id}/reports",
    tags=["reports"],
)


@reports_router.get(
    "/balances",
    response_model=BalanceSummaryResponse,
)
async def get_balance_summary(
    company_id: uuid.UUID,
    store: StoreDep,
    today: TodayDep,
    as_of: date | None = Query(default=None),
) -> BalanceSummaryResponse:
    """Annual balance summary across all employees.

    With ``as_of`` the summary is historical; without it, it is the live
    view for today, matching each employee's live balance.
    """
    if as_of is None:
        return await report_service.get_company_balance_summary(store, company_id, today, historical=False)
    return await report_service.get_company_balance_summary(store, company_id, as_of)


@reports_router.get(
    "/sick-leave",
    response_model=SickLeaveSummaryResponse,
)
async def get_sick_leave_summary(
    company_id: uuid.UUID,
    store: StoreDep,
    start_date: date = Query(),
    end_date: date = Query(),
) -> SickLeaveSummaryResponse:
    """Approved sick days per employee for leaves starting within the period."""
    return await report_service.get_sick_leave_summary(store, company_id, start_date, end_date)


@reports_router.get(
    "/holiday-work",
    response_model=HolidayWorkLogResponse,
)
async def get_holiday_work_log(
    company_id: uuid.UUID,
    store: StoreDep,
    start_date: date = Query(),
    end_date: date = Query(),
) -> HolidayWorkLogResponse:
    """Compensated weekend and holiday workdays within the period."""
    return await report_service.get_holiday_work_log(store, company_id, start_date, end_date)


@reports_router.get(
    "/activity",
    response_model=ActivityLogResponse,
)
async def get_activity_log(
    company_id: uuid.UUID,
    store: StoreDep,
    start_date: date = Query(),
    end_date: date = Query(),
) -> ActivityLogResponse:
    """Leaves and departures within the period."""
    return await report_service.get_activity_log(store, company_id, start_date, end_date)
