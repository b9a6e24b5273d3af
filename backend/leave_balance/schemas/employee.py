# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator


class UpsertEmployeeRequest(BaseModel):
    """Request body for upserting an employee in the stub store."""

    name: str = Field(min_length=1, max_length=255)
    hire_date: date
    end_date: date | None = None
    custom_annual_leave_days: float | None = Field(default=None, gt=0)
    initial_annual_balance: float | None = None
    balance_set_date: date | None = None

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.initial_annual_balance is not None and self.balance_set_date is None:
            msg = "balance_set_date is required when initial_annual_balance is set"
            raise ValueError(msg)
        if self.end_date is not None and self.end_date < self.hire_date:
            msg = "end_date must not be before hire_date"
            raise ValueError(msg)
        return self


class EmployeeResponse(BaseModel):
    """Response schema for an employee."""

    id: uuid.UUID
    company_id: uuid.UUID
    name: str
    hire_date: date
    end_date: date | None
    custom_annual_leave_days: float | None
    initial_annual_balance: float | None
    balance_set_date: date | None


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int
