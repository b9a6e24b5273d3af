from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


def _uuid_factory() -> uuid.UUID:
    """Generate a new UUID v4."""
    return uuid.uuid4()


def as_calendar_date(value: date) -> date:
    """Strip any time-of-day from a date-like value.

    ``datetime`` is a subclass of ``date``, so comparisons and set lookups
    silently misbehave when one slips in; everything date-shaped goes
    through here before it is compared.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


class RecordBase(BaseModel):
    """Immutable value record with a UUID identity."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=_uuid_factory)


class EmployeeScopedRecord(RecordBase):
    """A record that belongs to one employee."""

    employee_id: uuid.UUID
