# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leave_balance.api.deps import StoreDep
from leave_balance.schemas.leave import (
    CreateDepartureRequest,
    CreateLeaveRequest,
    DepartureResponse,
    LeaveResponse,
)
from leave_balance.services import leave as leave_service

leaves_router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["leaves"],
)


@leaves_router.post(
    "/employees/{employee_id}/leaves",
    response_model=LeaveResponse,
    status_code=201,
)
async def create_leave(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateLeaveRequest,
    store: StoreDep,
) -> LeaveResponse:
    """Record a full-day leave; chargeable days are priced from the company calendar."""
    return await leave_service.create_leave(store, company_id, employee_id, payload)


@leaves_router.delete(
    "/leaves/{leave_id}",
    status_code=204,
)
async def delete_leave(
    company_id: uuid.UUID,
    leave_id: uuid.UUID,
    store: StoreDep,
) -> None:
    """Delete a leave record."""
    await leave_service.delete_leave(store, company_id, leave_id)


@leaves_router.post(
    "/employees/{employee_id}/departures",
    response_model=DepartureResponse,
    status_code=201,
)
async def create_departure(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateDepartureRequest,
    store: StoreDep,
) -> DepartureResponse:
    """Record a short departure within the monthly hour quota."""
    return await leave_service.create_departure(store, company_id, employee_id, payload)


@leaves_router.delete(
    "/departures/{departure_id}",
    status_code=204,
)
async def delete_departure(
    company_id: uuid.UUID,
    departure_id: uuid.UUID,
    store: StoreDep,
) -> None:
    """Delete a departure record."""
    await leave_service.delete_departure(store, company_id, departure_id)
