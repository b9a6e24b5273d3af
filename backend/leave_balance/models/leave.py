# ruff: noqa: TC003
from __future__ import annotations

import datetime
from typing import Self

from pydantic import Field, model_validator

from leave_balance.models.base import EmployeeScopedRecord
from leave_balance.models.enums import LeaveCategory, RecordStatus

# A departure is a short same-day absence; longer ones are filed as leave.
MIN_DEPARTURE_HOURS = 1
MAX_DEPARTURE_HOURS = 4


class LeaveRecord(EmployeeScopedRecord):
    """A full-day leave over an inclusive date range.

    ``days_taken`` is computed once when the record is created (or replaced
    on edit) and is never recomputed on read, so later calendar changes do
    not alter historical usage.
    """

    category: LeaveCategory
    start_date: datetime.date
    end_date: datetime.date
    status: RecordStatus = RecordStatus.APPROVED
    days_taken: int = Field(ge=0)

    @model_validator(mode="after")
    def _validate_range(self) -> Self:
        if self.start_date > self.end_date:
            msg = "start_date must not be after end_date"
            raise ValueError(msg)
        return self

    @property
    def is_approved(self) -> bool:
        return self.status == RecordStatus.APPROVED


class DepartureRecord(EmployeeScopedRecord):
    """A short absence of a few hours on a single day."""

    date: datetime.date
    hours: int = Field(ge=MIN_DEPARTURE_HOURS, le=MAX_DEPARTURE_HOURS)
    status: RecordStatus = RecordStatus.APPROVED

    @property
    def is_approved(self) -> bool:
        return self.status == RecordStatus.APPROVED
