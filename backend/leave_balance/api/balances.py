# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Query

from leave_balance.api.deps import StoreDep, TodayDep
from leave_balance.schemas.balance import BalanceReport
from leave_balance.services import balance as balance_service

employee_balance_router = APIRouter(
    prefix="/companies/{company_id}/employees/{employee_id}/balances",
    tags=["balances"],
)


@employee_balance_router.get("", response_model=BalanceReport)
async def get_employee_balance(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    store: StoreDep,
    today: TodayDep,
    as_of: date | None = Query(default=None, description="Historical cutoff; omit for the live balance"),
) -> BalanceReport:
    """Get an employee's annual and sick balances, live or as of a date."""
    if as_of is None:
        return await balance_service.get_employee_balance(store, company_id, employee_id, today)
    return await balance_service.get_employee_balance(store, company_id, employee_id, as_of, historical=True)
