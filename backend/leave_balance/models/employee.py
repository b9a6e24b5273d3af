# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import Self

from pydantic import Field, model_validator

from leave_balance.models.base import RecordBase


class Employee(RecordBase):
    """An employee as seen by the balance engine.

    ``initial_annual_balance``/``balance_set_date`` describe an imported
    opening balance: accrual before ``balance_set_date`` is represented
    solely by ``initial_annual_balance`` and is never recomputed.
    """

    company_id: uuid.UUID
    name: str = Field(default="", max_length=255)
    hire_date: date
    end_date: date | None = None
    custom_annual_leave_days: float | None = Field(default=None, gt=0)
    initial_annual_balance: float | None = None
    balance_set_date: date | None = None

    @model_validator(mode="after")
    def _validate_opening_balance(self) -> Self:
        if self.initial_annual_balance is not None and self.balance_set_date is None:
            msg = "balance_set_date is required when initial_annual_balance is set"
            raise ValueError(msg)
        return self
