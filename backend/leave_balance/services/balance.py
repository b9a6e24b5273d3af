"""Balance aggregator: combines accrual, usage, compensation and adjustments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from leave_balance.models.base import as_calendar_date
from leave_balance.models.enums import LeaveCategory
from leave_balance.schemas.balance import BalanceReport, DepartureQuota
from leave_balance.services.accrual import calculate_accrued_leave
from leave_balance.services.employee import require_employee
from leave_balance.services.entitlement import resolve_entitlement

if TYPE_CHECKING:
    import uuid
    from collections.abc import Iterable, Sequence
    from datetime import date

    from leave_balance.models.adjustment import BalanceAdjustment
    from leave_balance.models.employee import Employee
    from leave_balance.models.holiday import HolidayWorkCompensation
    from leave_balance.models.leave import DepartureRecord, LeaveRecord
    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)

# Flat yearly sick grant; sick leave has no accrual curve.
SICK_ALLOTMENT_DAYS = 14
# Accumulated departure hours convert to one deducted day per full workday.
DEPARTURE_HOURS_PER_DAY = 8

_TWO_PLACES = Decimal("0.01")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def round_days(value: float) -> float:
    """Round a day amount half-up to two decimals for reporting."""
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class _EmployeeSnapshot:
    """The employee's records that participate in one balance evaluation."""

    leaves: list[LeaveRecord]
    departures: list[DepartureRecord]
    holiday_work: list[HolidayWorkCompensation]
    adjustments: list[BalanceAdjustment]


def _select_records(
    employee: Employee,
    leaves: Iterable[LeaveRecord],
    departures: Iterable[DepartureRecord],
    holiday_work: Iterable[HolidayWorkCompensation],
    adjustments: Iterable[BalanceAdjustment],
    cutoff: date | None,
) -> _EmployeeSnapshot:
    """Keep the employee's approved records, dated on or before ``cutoff`` when given."""

    def _in_range(day: date) -> bool:
        return cutoff is None or as_calendar_date(day) <= cutoff

    return _EmployeeSnapshot(
        leaves=[
            leave
            for leave in leaves
            if leave.employee_id == employee.id and leave.is_approved and _in_range(leave.start_date)
        ],
        departures=[
            departure
            for departure in departures
            if departure.employee_id == employee.id and departure.is_approved and _in_range(departure.date)
        ],
        holiday_work=[hw for hw in holiday_work if hw.employee_id == employee.id and _in_range(hw.date)],
        adjustments=[adj for adj in adjustments if adj.employee_id == employee.id and _in_range(adj.date)],
    )


def _sum_days_taken(leaves: Iterable[LeaveRecord], category: LeaveCategory) -> int:
    return sum(leave.days_taken for leave in leaves if leave.category == category)


def _sum_adjustments(adjustments: Iterable[BalanceAdjustment], category: LeaveCategory) -> float:
    return sum((adj.adjustment_days for adj in adjustments if adj.category == category), 0.0)


# ---------------------------------------------------------------------------
# Departures
# ---------------------------------------------------------------------------


def departure_deduction_days(total_hours: int) -> int:
    """Whole days deducted for accumulated departure hours.

    Hours below the next multiple of 8 stay pending until more accrue.
    """
    return total_hours // DEPARTURE_HOURS_PER_DAY


def calculate_departure_quota(departures: Sequence[DepartureRecord], as_of: date) -> DepartureQuota:
    """Remaining departure hours in ``as_of``'s month and lifetime hours toward the next deduction.

    Expects departures already narrowed to one employee's approved records.
    """
    as_of = as_calendar_date(as_of)
    monthly_hours = sum(d.hours for d in departures if (d.date.year, d.date.month) == (as_of.year, as_of.month))
    total_hours = sum(d.hours for d in departures)
    return DepartureQuota(
        monthly_remaining_hours=DEPARTURE_HOURS_PER_DAY - monthly_hours,
        hours_toward_next_deduction=total_hours % DEPARTURE_HOURS_PER_DAY,
    )


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def compute_balances(
    employee: Employee,
    leaves: Iterable[LeaveRecord],
    departures: Iterable[DepartureRecord],
    holiday_work: Iterable[HolidayWorkCompensation],
    adjustments: Iterable[BalanceAdjustment],
    as_of: date,
    *,
    historical: bool = False,
) -> BalanceReport:
    """Evaluate an employee's annual and sick balances on ``as_of``.

    Live queries pass today's date and keep every approved record.
    Historical queries (``historical=True``) additionally drop records dated
    after ``as_of``. Both go through the same arithmetic.

    Sick usage only counts leaves starting in ``as_of``'s calendar year;
    annual usage never resets.
    """
    as_of = as_calendar_date(as_of)
    snapshot = _select_records(
        employee,
        leaves,
        departures,
        holiday_work,
        adjustments,
        cutoff=as_of if historical else None,
    )

    accrued_annual = calculate_accrued_leave(employee, as_of)
    holiday_compensation = len(snapshot.holiday_work)
    used_annual = _sum_days_taken(snapshot.leaves, LeaveCategory.ANNUAL)
    departure_hours = sum(d.hours for d in snapshot.departures)
    deduction = departure_deduction_days(departure_hours)
    annual_adjustment = _sum_adjustments(snapshot.adjustments, LeaveCategory.ANNUAL)
    annual_balance = accrued_annual + holiday_compensation - used_annual - deduction + annual_adjustment

    used_sick = _sum_days_taken(
        (leave for leave in snapshot.leaves if leave.start_date.year == as_of.year),
        LeaveCategory.SICK,
    )
    sick_adjustment = _sum_adjustments(snapshot.adjustments, LeaveCategory.SICK)
    sick_balance = SICK_ALLOTMENT_DAYS + sick_adjustment - used_sick

    logger.debug(
        "Balances for employee=%s as_of=%s historical=%s: annual=%.4f sick=%.2f",
        employee.id,
        as_of,
        historical,
        annual_balance,
        sick_balance,
    )

    return BalanceReport(
        employee_id=employee.id,
        as_of=as_of,
        historical=historical,
        entitlement_days=resolve_entitlement(employee, as_of),
        accrued_annual=round_days(accrued_annual),
        holiday_compensation=holiday_compensation,
        used_annual=used_annual,
        departure_hours=departure_hours,
        departure_deduction_days=deduction,
        annual_adjustment=round_days(annual_adjustment),
        annual_balance=round_days(annual_balance),
        sick_allotment=SICK_ALLOTMENT_DAYS,
        sick_adjustment=round_days(sick_adjustment),
        used_sick=used_sick,
        sick_balance=round_days(sick_balance),
        departure_quota=calculate_departure_quota(snapshot.departures, as_of),
    )


# ---------------------------------------------------------------------------
# Read path
# ---------------------------------------------------------------------------


async def get_employee_balance(
    store: RecordStore,
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    as_of: date,
    *,
    historical: bool = False,
) -> BalanceReport:
    """Load one employee's snapshot from the store and evaluate it."""
    employee = await require_employee(store, company_id, employee_id)
    records = await store.get_employee_records(company_id, employee_id)
    return compute_balances(
        employee,
        records.leaves,
        records.departures,
        records.holiday_work,
        records.adjustments,
        as_of,
        historical=historical,
    )
