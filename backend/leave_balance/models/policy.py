from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Weekday indices start at Sunday: 0 = Sunday ... 6 = Saturday.
FRIDAY = 5
SATURDAY = 6
DEFAULT_WEEKEND_DAYS = frozenset({FRIDAY, SATURDAY})


class CompanyPolicy(BaseModel):
    """Company-wide calendar settings shared by span counting and holiday-work classification."""

    model_config = ConfigDict(frozen=True)

    weekend_days: frozenset[int] = Field(default=DEFAULT_WEEKEND_DAYS)

    @field_validator("weekend_days")
    @classmethod
    def _validate_weekend_days(cls, value: frozenset[int]) -> frozenset[int]:
        invalid = sorted(d for d in value if not 0 <= d <= 6)
        if invalid:
            msg = f"weekend_days must be weekday indices 0-6, got {invalid}"
            raise ValueError(msg)
        return value
