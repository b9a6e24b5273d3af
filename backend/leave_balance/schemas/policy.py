# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import Annotated

from pydantic import BaseModel, Field

WeekdayIndex = Annotated[int, Field(ge=0, le=6)]


class UpdateCompanyPolicyRequest(BaseModel):
    """Request body for replacing the company calendar policy."""

    weekend_days: list[WeekdayIndex] = Field(max_length=7, description="Weekday indices, 0 = Sunday")


class CompanyPolicyResponse(BaseModel):
    """The calendar policy in force for a company."""

    company_id: uuid.UUID
    weekend_days: list[int]
    is_default: bool = Field(description="True when the company never configured a policy")
