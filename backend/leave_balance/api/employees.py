# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leave_balance.api.deps import StoreDep
from leave_balance.schemas.employee import EmployeeListResponse, EmployeeResponse, UpsertEmployeeRequest
from leave_balance.services import employee as employee_service

employees_router = APIRouter(
    prefix="/companies/{company_id}/employees",
    tags=["employees"],
)


@employees_router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
)
async def upsert_employee(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: UpsertEmployeeRequest,
    store: StoreDep,
) -> EmployeeResponse:
    """Create or update an employee."""
    return await employee_service.upsert_employee(store, company_id, employee_id, payload)


@employees_router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
)
async def get_employee(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    store: StoreDep,
) -> EmployeeResponse:
    """Get an employee from the store."""
    return await employee_service.get_employee(store, company_id, employee_id)


@employees_router.get(
    "",
    response_model=EmployeeListResponse,
)
async def list_employees(
    company_id: uuid.UUID,
    store: StoreDep,
) -> EmployeeListResponse:
    """List all employees for a company."""
    return await employee_service.list_employees(store, company_id)
