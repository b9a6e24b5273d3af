# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid

from pydantic import BaseModel, Field

from leave_balance.models.enums import LeaveCategory, RecordStatus
from leave_balance.models.leave import MAX_DEPARTURE_HOURS, MIN_DEPARTURE_HOURS

# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class CreateLeaveRequest(BaseModel):
    """Request body for recording a full-day leave.

    ``days_taken`` is not accepted: it is priced from the company calendar
    when the record is created.
    """

    category: LeaveCategory
    start_date: datetime.date
    end_date: datetime.date
    status: RecordStatus = RecordStatus.APPROVED


class LeaveResponse(BaseModel):
    """Response schema for a leave record."""

    id: uuid.UUID
    employee_id: uuid.UUID
    category: LeaveCategory
    start_date: datetime.date
    end_date: datetime.date
    status: RecordStatus
    days_taken: int


# ---------------------------------------------------------------------------
# Departures
# ---------------------------------------------------------------------------


class CreateDepartureRequest(BaseModel):
    """Request body for recording a short same-day departure."""

    date: datetime.date
    hours: int = Field(ge=MIN_DEPARTURE_HOURS, le=MAX_DEPARTURE_HOURS)
    status: RecordStatus = RecordStatus.APPROVED


class DepartureResponse(BaseModel):
    """Response schema for a departure record."""

    id: uuid.UUID
    employee_id: uuid.UUID
    date: datetime.date
    hours: int
    status: RecordStatus
    monthly_remaining_hours: int = Field(description="Hours left in the departure's month after this one")
