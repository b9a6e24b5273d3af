"""Leave and departure writes: pricing, quota checks, and removal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_balance.exceptions import AppError, NotFoundError
from leave_balance.models.leave import DepartureRecord, LeaveRecord
from leave_balance.schemas.duration import LeaveDurationRequest
from leave_balance.schemas.leave import DepartureResponse, LeaveResponse
from leave_balance.services.balance import calculate_departure_quota
from leave_balance.services.duration import calculate_requested_days
from leave_balance.services.employee import require_employee

if TYPE_CHECKING:
    import uuid

    from leave_balance.schemas.leave import CreateDepartureRequest, CreateLeaveRequest
    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)


def _build_leave_response(leave: LeaveRecord) -> LeaveResponse:
    return LeaveResponse(
        id=leave.id,
        employee_id=leave.employee_id,
        category=leave.category,
        start_date=leave.start_date,
        end_date=leave.end_date,
        status=leave.status,
        days_taken=leave.days_taken,
    )


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


async def create_leave(
    store: RecordStore,
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateLeaveRequest,
) -> LeaveResponse:
    """Record a leave, stamping ``days_taken`` from the current calendar.

    The stamped count is never recomputed, so later holiday or weekend
    changes leave it untouched. A range with no chargeable day is rejected.
    """
    await require_employee(store, company_id, employee_id)

    priced = await calculate_requested_days(
        store,
        company_id,
        LeaveDurationRequest(start_date=payload.start_date, end_date=payload.end_date, category=payload.category),
    )
    if priced.days <= 0:
        raise AppError("Leave covers no chargeable days", status_code=400)

    leave = LeaveRecord(
        employee_id=employee_id,
        category=payload.category,
        start_date=payload.start_date,
        end_date=payload.end_date,
        status=payload.status,
        days_taken=priced.days,
    )
    await store.add_leave(company_id, leave)

    logger.info(
        "Recorded %s leave=%s for employee=%s: %d days",
        leave.category,
        leave.id,
        employee_id,
        leave.days_taken,
    )
    return _build_leave_response(leave)


async def delete_leave(store: RecordStore, company_id: uuid.UUID, leave_id: uuid.UUID) -> None:
    if not await store.delete_leave(company_id, leave_id):
        raise NotFoundError("Leave not found")
    logger.info("Deleted leave=%s company=%s", leave_id, company_id)


# ---------------------------------------------------------------------------
# Departures
# ---------------------------------------------------------------------------


async def create_departure(
    store: RecordStore,
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateDepartureRequest,
) -> DepartureResponse:
    """Record a departure if it fits in the remaining hours of its month."""
    await require_employee(store, company_id, employee_id)

    records = await store.get_employee_records(company_id, employee_id)
    approved = [d for d in records.departures if d.is_approved]
    remaining = calculate_departure_quota(approved, payload.date).monthly_remaining_hours
    if payload.hours > remaining:
        raise AppError(
            f"Monthly departure quota exceeded: {max(remaining, 0)} hours remaining",
            status_code=400,
        )

    departure = DepartureRecord(
        employee_id=employee_id,
        date=payload.date,
        hours=payload.hours,
        status=payload.status,
    )
    await store.add_departure(company_id, departure)

    if departure.is_approved:
        remaining -= departure.hours
    logger.info("Recorded departure=%s for employee=%s: %d hours", departure.id, employee_id, departure.hours)
    return DepartureResponse(
        id=departure.id,
        employee_id=employee_id,
        date=departure.date,
        hours=departure.hours,
        status=departure.status,
        monthly_remaining_hours=remaining,
    )


async def delete_departure(store: RecordStore, company_id: uuid.UUID, departure_id: uuid.UUID) -> None:
    if not await store.delete_departure(company_id, departure_id):
        raise NotFoundError("Departure not found")
    logger.info("Deleted departure=%s company=%s", departure_id, company_id)
