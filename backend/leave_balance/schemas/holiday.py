# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid

from pydantic import BaseModel, Field

from leave_balance.models.enums import HolidayWorkType


class CreateHolidayRequest(BaseModel):
    """Request body for adding a company holiday."""

    date: datetime.date
    name: str = Field(min_length=1, max_length=255)


class HolidayResponse(BaseModel):
    """Response schema for a company holiday."""

    id: uuid.UUID
    date: datetime.date
    name: str


class HolidayListResponse(BaseModel):
    """Paginated list of company holidays."""

    items: list[HolidayResponse]
    total: int


class ClassifyWorkDateRequest(BaseModel):
    """Request body for classifying a worked date."""

    date: datetime.date


class ClassifyWorkDateResponse(BaseModel):
    """Whether a worked date is compensable and under which rule."""

    date: datetime.date
    type: HolidayWorkType | None
    compensable: bool


class CreateHolidayWorkRequest(BaseModel):
    """Request body for crediting a worked weekend or holiday."""

    date: datetime.date


class HolidayWorkResponse(BaseModel):
    """Response schema for a holiday-work compensation record."""

    id: uuid.UUID
    employee_id: uuid.UUID
    date: datetime.date
    type: HolidayWorkType
