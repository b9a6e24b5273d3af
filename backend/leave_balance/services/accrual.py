"""Accrual integrator: fractional month-by-month annual leave accrual."""

from __future__ import annotations

import logging
from calendar import monthrange
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from leave_balance.models.base import as_calendar_date
from leave_balance.services.entitlement import resolve_entitlement

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import date

    from leave_balance.models.employee import Employee

logger = logging.getLogger(__name__)

_MONTHS_PER_YEAR = 12


# ---------------------------------------------------------------------------
# Month walking
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MonthSlice:
    """The part of one calendar month covered by an accrual span."""

    month_start: date
    days_in_month: int
    covered_days: int

    @property
    def fraction(self) -> float:
        return self.covered_days / self.days_in_month


def _get_month_boundaries(day: date) -> tuple[date, date]:
    """Return (first, last) day of the month containing ``day``, both inclusive."""
    _, days_in_month = monthrange(day.year, day.month)
    return day.replace(day=1), day.replace(day=days_in_month)


def iter_month_slices(span_start: date, span_end: date) -> Iterator[MonthSlice]:
    """Yield every calendar month intersecting the inclusive span.

    The first and last months are partial when the span starts or ends
    mid-month; every month in between is whole.
    """
    month_start, month_end = _get_month_boundaries(span_start)
    while month_start <= span_end:
        first = max(span_start, month_start)
        last = min(span_end, month_end)
        yield MonthSlice(
            month_start=month_start,
            days_in_month=month_end.day,
            covered_days=(last - first).days + 1,
        )
        month_start, month_end = _get_month_boundaries(month_end + timedelta(days=1))


# ---------------------------------------------------------------------------
# Accrual
# ---------------------------------------------------------------------------


def effective_accrual_end(employee: Employee, as_of: date) -> date:
    """Last day that can accrue: the termination date caps ``as_of``."""
    as_of = as_calendar_date(as_of)
    if employee.end_date is not None:
        return min(employee.end_date, as_of)
    return as_of


def accrue_for_period(employee: Employee, period_start: date, as_of: date) -> float:
    """Sum fractional monthly accrual over ``[period_start, as_of]``.

    Entitlement is resolved on the first day of each month so that an
    employee crossing the service threshold mid-history accrues at the rate
    in force for each month. Returns 0 when the period ends before it starts.
    """
    period_start = as_calendar_date(period_start)
    period_end = effective_accrual_end(employee, as_of)
    if period_end < period_start:
        return 0.0

    total = 0.0
    for month in iter_month_slices(period_start, period_end):
        monthly_rate = resolve_entitlement(employee, month.month_start) / _MONTHS_PER_YEAR
        total += month.fraction * monthly_rate

    logger.debug(
        "Accrued %.4f days for employee=%s over %s..%s",
        total,
        employee.id,
        period_start,
        period_end,
    )
    return total


def calculate_accrued_leave(employee: Employee, as_of: date) -> float:
    """Total annual leave accrued by ``as_of``.

    Employees imported with an opening balance accrue only from
    ``balance_set_date`` on top of that balance; everyone else accrues from
    the hire date.
    """
    if employee.initial_annual_balance is not None and employee.balance_set_date is not None:
        return employee.initial_annual_balance + accrue_for_period(employee, employee.balance_set_date, as_of)

    return accrue_for_period(employee, employee.hire_date, as_of)
