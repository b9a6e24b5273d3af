from __future__ import annotations

from typing import TYPE_CHECKING

from leave_balance.models.base import as_calendar_date

if TYPE_CHECKING:
    from datetime import date

    from leave_balance.models.employee import Employee

# Service-based annual leave tiers (days per year).
BASE_ANNUAL_DAYS = 14
SENIOR_ANNUAL_DAYS = 21
SENIOR_SERVICE_YEARS = 5


def completed_service_years(hire_date: date, as_of: date) -> int:
    """Whole years of service at ``as_of``.

    A year only counts once the hire anniversary has passed in the current
    year. Negative before the hire date.
    """
    hire_date = as_calendar_date(hire_date)
    as_of = as_calendar_date(as_of)
    years = as_of.year - hire_date.year
    if (as_of.month, as_of.day) < (hire_date.month, hire_date.day):
        years -= 1
    return years


def resolve_entitlement(employee: Employee, as_of: date) -> float:
    """Annual leave days per year in force for ``employee`` on ``as_of``."""
    if employee.custom_annual_leave_days is not None:
        return employee.custom_annual_leave_days

    if completed_service_years(employee.hire_date, as_of) >= SENIOR_SERVICE_YEARS:
        return SENIOR_ANNUAL_DAYS
    return BASE_ANNUAL_DAYS
