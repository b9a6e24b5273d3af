# ruff: noqa: TC003
from __future__ import annotations

import datetime

from pydantic import Field

from leave_balance.models.base import EmployeeScopedRecord, RecordBase
from leave_balance.models.enums import HolidayWorkType


class Holiday(RecordBase):
    """An official holiday on one exact calendar date (not a recurring rule)."""

    date: datetime.date
    name: str = Field(min_length=1, max_length=255)


class HolidayWorkCompensation(EmployeeScopedRecord):
    """One credited leave day for working on a weekend or holiday.

    ``type`` is stamped from the calendar in force when the record was
    created and is not re-derived afterwards.
    """

    date: datetime.date
    type: HolidayWorkType
