from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_balance.exceptions import NotFoundError
from leave_balance.models.employee import Employee
from leave_balance.schemas.employee import EmployeeListResponse, EmployeeResponse

if TYPE_CHECKING:
    import uuid

    from leave_balance.schemas.employee import UpsertEmployeeRequest
    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)


def _build_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        company_id=employee.company_id,
        name=employee.name,
        hire_date=employee.hire_date,
        end_date=employee.end_date,
        custom_annual_leave_days=employee.custom_annual_leave_days,
        initial_annual_balance=employee.initial_annual_balance,
        balance_set_date=employee.balance_set_date,
    )


async def require_employee(store: RecordStore, company_id: uuid.UUID, employee_id: uuid.UUID) -> Employee:
    """Get an employee of the company or raise 404."""
    employee = await store.get_employee(company_id, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


async def upsert_employee(
    store: RecordStore,
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: UpsertEmployeeRequest,
) -> EmployeeResponse:
    """Create or replace an employee."""
    employee = Employee(
        id=employee_id,
        company_id=company_id,
        name=payload.name,
        hire_date=payload.hire_date,
        end_date=payload.end_date,
        custom_annual_leave_days=payload.custom_annual_leave_days,
        initial_annual_balance=payload.initial_annual_balance,
        balance_set_date=payload.balance_set_date,
    )
    await store.upsert_employee(employee)
    logger.info("Upserted employee=%s company=%s", employee_id, company_id)
    return _build_employee_response(employee)


async def get_employee(store: RecordStore, company_id: uuid.UUID, employee_id: uuid.UUID) -> EmployeeResponse:
    return _build_employee_response(await require_employee(store, company_id, employee_id))


async def list_employees(store: RecordStore, company_id: uuid.UUID) -> EmployeeListResponse:
    employees = await store.list_employees(company_id)
    items = [_build_employee_response(e) for e in employees]
    return EmployeeListResponse(items=items, total=len(items))
