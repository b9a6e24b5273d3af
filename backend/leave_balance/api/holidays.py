# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query

from leave_balance.api.deps import StoreDep
from leave_balance.schemas.duration import LeaveDurationRequest, LeaveDurationResponse
from leave_balance.schemas.holiday import (
    ClassifyWorkDateRequest,
    ClassifyWorkDateResponse,
    CreateHolidayRequest,
    CreateHolidayWorkRequest,
    HolidayListResponse,
    HolidayResponse,
    HolidayWorkResponse,
)
from leave_balance.services import duration as duration_service
from leave_balance.services import holiday as holiday_service

holidays_router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["calendar"],
)


@holidays_router.post(
    "/holidays",
    response_model=HolidayResponse,
    status_code=201,
)
async def create_holiday(
    company_id: uuid.UUID,
    payload: CreateHolidayRequest,
    store: StoreDep,
) -> HolidayResponse:
    """Create a company holiday."""
    return await holiday_service.create_holiday(store, company_id, payload)


@holidays_router.get(
    "/holidays",
    response_model=HolidayListResponse,
)
async def list_holidays(
    company_id: uuid.UUID,
    store: StoreDep,
    year: int | None = Query(default=None),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=100),
) -> HolidayListResponse:
    """List company holidays with optional year filter."""
    return await holiday_service.list_holidays(store, company_id, year, offset, limit)


@holidays_router.delete(
    "/holidays/{holiday_id}",
    status_code=204,
)
async def delete_holiday(
    company_id: uuid.UUID,
    holiday_id: uuid.UUID,
    store: StoreDep,
) -> None:
    """Delete a company holiday."""
    await holiday_service.delete_holiday(store, company_id, holiday_id)


@holidays_router.post(
    "/holiday-work/classify",
    response_model=ClassifyWorkDateResponse,
)
async def classify_holiday_work(
    company_id: uuid.UUID,
    payload: ClassifyWorkDateRequest,
    store: StoreDep,
) -> ClassifyWorkDateResponse:
    """Tell whether a worked date earns compensation, and as a weekend or a holiday."""
    return await holiday_service.classify_holiday_work(store, company_id, payload.date)


@holidays_router.post(
    "/employees/{employee_id}/holiday-work",
    response_model=HolidayWorkResponse,
    status_code=201,
)
async def record_holiday_work(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateHolidayWorkRequest,
    store: StoreDep,
) -> HolidayWorkResponse:
    """Credit a compensation day for a worked weekend or holiday."""
    return await holiday_service.record_holiday_work(store, company_id, employee_id, payload)


@holidays_router.delete(
    "/holiday-work/{record_id}",
    status_code=204,
)
async def delete_holiday_work(
    company_id: uuid.UUID,
    record_id: uuid.UUID,
    store: StoreDep,
) -> None:
    """Delete a holiday-work compensation record."""
    await holiday_service.delete_holiday_work(store, company_id, record_id)


@holidays_router.post(
    "/leave-duration",
    response_model=LeaveDurationResponse,
)
async def calculate_leave_duration(
    company_id: uuid.UUID,
    payload: LeaveDurationRequest,
    store: StoreDep,
) -> LeaveDurationResponse:
    """Count the chargeable days of a proposed leave."""
    return await duration_service.calculate_requested_days(store, company_id, payload)
