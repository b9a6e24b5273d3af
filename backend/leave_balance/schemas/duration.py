# ruff: noqa: TC003
from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from leave_balance.models.enums import LeaveCategory


class LeaveDurationRequest(BaseModel):
    """A proposed leave range to price before the record is created."""

    start_date: date
    end_date: date
    category: LeaveCategory = LeaveCategory.ANNUAL


class LeaveDurationResponse(BaseModel):
    """Chargeable days for a proposed leave range."""

    start_date: date
    end_date: date
    category: LeaveCategory
    days: int
    weekend_days: list[int]
