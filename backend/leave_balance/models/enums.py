from __future__ import annotations

import enum


class LeaveCategory(enum.StrEnum):
    """Category of a full-day leave or a balance adjustment."""

    ANNUAL = "ANNUAL"
    SICK = "SICK"


class RecordStatus(enum.StrEnum):
    """Approval state of leave and departure records."""

    APPROVED = "APPROVED"
    PENDING = "PENDING"


class HolidayWorkType(enum.StrEnum):
    """Which calendar rule made a worked day compensable."""

    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
