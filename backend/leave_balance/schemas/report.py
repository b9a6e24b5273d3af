# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid
from typing import Literal

from pydantic import BaseModel

from leave_balance.models.enums import HolidayWorkType, LeaveCategory


class EmployeeBalanceSummary(BaseModel):
    """Annual balance figures for a single employee on the report date."""

    employee_id: uuid.UUID
    employee_name: str
    accrued_annual: float
    used_annual: int
    holiday_compensation: int
    departure_deduction_days: int
    annual_adjustment: float
    annual_balance: float


class BalanceSummaryResponse(BaseModel):
    """Annual balance summary across all employees as of a date."""

    as_of: datetime.date
    historical: bool
    items: list[EmployeeBalanceSummary]
    total: int


class SickLeaveSummaryItem(BaseModel):
    """Approved sick days for one employee within a period."""

    employee_id: uuid.UUID
    employee_name: str
    sick_days: int


class SickLeaveSummaryResponse(BaseModel):
    """Sick leave summary across all employees."""

    start_date: datetime.date
    end_date: datetime.date
    items: list[SickLeaveSummaryItem]
    total: int


class HolidayWorkLogEntry(BaseModel):
    """A single compensated weekend or holiday workday."""

    id: uuid.UUID
    employee_id: uuid.UUID
    employee_name: str
    date: datetime.date
    type: HolidayWorkType


class HolidayWorkLogResponse(BaseModel):
    """Holiday work log within a period, newest first."""

    items: list[HolidayWorkLogEntry]
    total: int


class ActivityLogEntry(BaseModel):
    """A leave or departure within the activity log."""

    id: uuid.UUID
    employee_id: uuid.UUID
    employee_name: str
    kind: Literal["LEAVE", "DEPARTURE"]
    category: LeaveCategory | None
    start_date: datetime.date
    end_date: datetime.date | None
    days_taken: int | None
    hours: int | None


class ActivityLogResponse(BaseModel):
    """Leaves and departures within a period, newest first."""

    items: list[ActivityLogEntry]
    total: int
