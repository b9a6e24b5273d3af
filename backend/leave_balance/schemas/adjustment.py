# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid

from pydantic import BaseModel, Field

from leave_balance.models.enums import LeaveCategory


class CreateAdjustmentRequest(BaseModel):
    """Request body for a manual balance correction."""

    category: LeaveCategory
    adjustment_days: float = Field(description="Positive to add, negative to deduct")
    reason: str = Field(default="", max_length=1000)
    date: datetime.date | None = Field(default=None, description="Defaults to today")


class AdjustmentResponse(BaseModel):
    """Response schema for a balance adjustment."""

    id: uuid.UUID
    employee_id: uuid.UUID
    category: LeaveCategory
    adjustment_days: float
    reason: str
    date: datetime.date
