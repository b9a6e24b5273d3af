from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_balance.exceptions import AppError, NotFoundError
from leave_balance.models.holiday import Holiday, HolidayWorkCompensation
from leave_balance.schemas.holiday import (
    ClassifyWorkDateResponse,
    HolidayListResponse,
    HolidayResponse,
    HolidayWorkResponse,
)
from leave_balance.services.duration import classify_work_date, resolve_weekend_days
from leave_balance.services.employee import require_employee

if TYPE_CHECKING:
    import uuid
    from datetime import date

    from leave_balance.schemas.holiday import CreateHolidayRequest, CreateHolidayWorkRequest
    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)


def _build_holiday_response(holiday: Holiday) -> HolidayResponse:
    return HolidayResponse(
        id=holiday.id,
        date=holiday.date,
        name=holiday.name,
    )


def _build_holiday_work_response(record: HolidayWorkCompensation) -> HolidayWorkResponse:
    return HolidayWorkResponse(
        id=record.id,
        employee_id=record.employee_id,
        date=record.date,
        type=record.type,
    )


# ---------------------------------------------------------------------------
# Holiday calendar
# ---------------------------------------------------------------------------


async def create_holiday(
    store: RecordStore,
    company_id: uuid.UUID,
    payload: CreateHolidayRequest,
) -> HolidayResponse:
    """Add a company holiday; one per calendar date.

    Leaves and holiday work already recorded keep their stamped values.
    """
    holidays = await store.list_holidays(company_id)
    if any(h.date == payload.date for h in holidays):
        raise AppError("Holiday already exists for this date", status_code=409)

    holiday = Holiday(date=payload.date, name=payload.name)
    await store.add_holiday(company_id, holiday)
    logger.info("Added holiday %s (%s) company=%s", holiday.date, holiday.name, company_id)
    return _build_holiday_response(holiday)


async def list_holidays(
    store: RecordStore,
    company_id: uuid.UUID,
    year: int | None = None,
    offset: int = 0,
    limit: int = 50,
) -> HolidayListResponse:
    """List company holidays with optional year filter."""
    holidays = await store.list_holidays(company_id)
    if year is not None:
        holidays = [h for h in holidays if h.date.year == year]

    return HolidayListResponse(
        items=[_build_holiday_response(h) for h in holidays[offset : offset + limit]],
        total=len(holidays),
    )


async def delete_holiday(store: RecordStore, company_id: uuid.UUID, holiday_id: uuid.UUID) -> None:
    """Delete a company holiday."""
    if not await store.delete_holiday(company_id, holiday_id):
        raise NotFoundError("Holiday not found")
    logger.info("Deleted holiday=%s company=%s", holiday_id, company_id)


# ---------------------------------------------------------------------------
# Holiday work
# ---------------------------------------------------------------------------


async def classify_holiday_work(
    store: RecordStore,
    company_id: uuid.UUID,
    work_date: date,
) -> ClassifyWorkDateResponse:
    """Classify a worked date against the company's current calendar."""
    holidays = await store.list_holidays(company_id)
    weekend_days = await resolve_weekend_days(store, company_id)
    work_type = classify_work_date(work_date, holidays, weekend_days)
    return ClassifyWorkDateResponse(
        date=work_date,
        type=work_type,
        compensable=work_type is not None,
    )


async def record_holiday_work(
    store: RecordStore,
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateHolidayWorkRequest,
) -> HolidayWorkResponse:
    """Credit one compensation day for working a weekend or holiday.

    The type is stamped from the calendar in force now. A regular working
    day is rejected, as is a second record for the same employee and date.
    """
    await require_employee(store, company_id, employee_id)

    classified = await classify_holiday_work(store, company_id, payload.date)
    if classified.type is None:
        raise AppError("Work date is a regular working day", status_code=400)

    records = await store.get_employee_records(company_id, employee_id)
    if any(hw.date == payload.date for hw in records.holiday_work):
        raise AppError("Holiday work already recorded for this employee and date", status_code=409)

    record = HolidayWorkCompensation(employee_id=employee_id, date=payload.date, type=classified.type)
    await store.add_holiday_work(company_id, record)
    logger.info("Recorded %s work on %s for employee=%s", record.type, record.date, employee_id)
    return _build_holiday_work_response(record)


async def delete_holiday_work(store: RecordStore, company_id: uuid.UUID, record_id: uuid.UUID) -> None:
    if not await store.delete_holiday_work(company_id, record_id):
        raise NotFoundError("Holiday work not found")
    logger.info("Deleted holiday work=%s company=%s", record_id, company_id)
