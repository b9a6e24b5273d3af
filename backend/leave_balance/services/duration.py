from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from leave_balance.config import get_settings
from leave_balance.exceptions import InvalidRangeError
from leave_balance.models.base import as_calendar_date
from leave_balance.models.enums import HolidayWorkType, LeaveCategory
from leave_balance.schemas.duration import LeaveDurationResponse

if TYPE_CHECKING:
    import uuid
    from collections.abc import Collection, Iterable

    from leave_balance.models.holiday import Holiday
    from leave_balance.schemas.duration import LeaveDurationRequest
    from leave_balance.services.records import RecordStore


def weekday_index(day: date) -> int:
    """Weekday index with 0 = Sunday ... 6 = Saturday."""
    return day.isoweekday() % 7


def holiday_dates(holidays: Iterable[Holiday | date]) -> set[date]:
    """Collapse a holiday calendar into a set of plain calendar dates."""
    return {as_calendar_date(h) if isinstance(h, date) else as_calendar_date(h.date) for h in holidays}


def calculate_leave_days(
    start_date: date,
    end_date: date,
    holidays: Iterable[Holiday | date],
    weekend_days: Collection[int],
    category: LeaveCategory,
) -> int:
    """Count chargeable days in the inclusive range ``[start_date, end_date]``.

    Sick leave is charged for every calendar day. Any other category skips
    weekend days and holidays. An inverted range yields 0; callers are
    expected to reject it as an invalid request rather than a zero-day leave.
    """
    start_date = as_calendar_date(start_date)
    end_date = as_calendar_date(end_date)

    if start_date > end_date:
        return 0

    if category == LeaveCategory.SICK:
        return (end_date - start_date).days + 1

    excluded = holiday_dates(holidays)
    count = 0
    current_date = start_date
    one_day = timedelta(days=1)

    while current_date <= end_date:
        if weekday_index(current_date) not in weekend_days and current_date not in excluded:
            count += 1
        current_date += one_day

    return count


def classify_work_date(
    work_date: date,
    holidays: Iterable[Holiday | date],
    weekend_days: Collection[int],
) -> HolidayWorkType | None:
    """Decide whether working on ``work_date`` earns a compensation day.

    A holiday takes precedence over a weekend; a regular working day
    returns None.
    """
    work_date = as_calendar_date(work_date)
    if work_date in holiday_dates(holidays):
        return HolidayWorkType.HOLIDAY
    if weekday_index(work_date) in weekend_days:
        return HolidayWorkType.WEEKEND
    return None


# ---------------------------------------------------------------------------
# Store-backed helpers
# ---------------------------------------------------------------------------


async def resolve_weekend_days(store: RecordStore, company_id: uuid.UUID) -> frozenset[int]:
    """The company's weekend days, falling back to the configured default."""
    policy = await store.get_company_policy(company_id)
    if policy is not None:
        return policy.weekend_days
    return frozenset(get_settings().default_weekend_days)


async def calculate_requested_days(
    store: RecordStore,
    company_id: uuid.UUID,
    payload: LeaveDurationRequest,
) -> LeaveDurationResponse:
    """Price a proposed leave against the company's current calendar.

    This is the figure stored as ``days_taken`` when the record is created.
    """
    if payload.start_date > payload.end_date:
        raise InvalidRangeError()

    holidays = await store.list_holidays(company_id)
    weekend_days = await resolve_weekend_days(store, company_id)
    days = calculate_leave_days(payload.start_date, payload.end_date, holidays, weekend_days, payload.category)

    return LeaveDurationResponse(
        start_date=payload.start_date,
        end_date=payload.end_date,
        category=payload.category,
        days=days,
        weekend_days=sorted(weekend_days),
    )
