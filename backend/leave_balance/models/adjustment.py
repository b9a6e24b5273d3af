# ruff: noqa: TC003
from __future__ import annotations

import datetime

from pydantic import Field

from leave_balance.models.base import EmployeeScopedRecord
from leave_balance.models.enums import LeaveCategory


class BalanceAdjustment(EmployeeScopedRecord):
    """A manual signed correction to an annual or sick balance."""

    category: LeaveCategory
    adjustment_days: float = Field(description="Positive to add, negative to deduct")
    reason: str = Field(default="", max_length=1000)
    # Only used to cut off historical reports; it has no effect on accrual timing.
    date: datetime.date
