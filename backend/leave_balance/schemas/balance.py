# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Balance report schemas
# ---------------------------------------------------------------------------


class DepartureQuota(BaseModel):
    """Informational departure-hour guidance; never feeds back into deductions."""

    monthly_remaining_hours: int = Field(description="Hours left before the monthly 8-hour mark")
    hours_toward_next_deduction: int = Field(description="Lifetime hours not yet converted into a deducted day")


class BalanceReport(BaseModel):
    """Point-in-time annual and sick balances for one employee.

    Day amounts are rounded to two decimals here and nowhere earlier.
    """

    employee_id: uuid.UUID
    as_of: date
    historical: bool
    entitlement_days: float
    accrued_annual: float
    holiday_compensation: int
    used_annual: int
    departure_hours: int
    departure_deduction_days: int
    annual_adjustment: float
    annual_balance: float
    sick_allotment: int
    sick_adjustment: float
    used_sick: int
    sick_balance: float
    departure_quota: DepartureQuota
