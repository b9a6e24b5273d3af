"""Reporting service: as-of balance summaries, sick leave totals, and activity logs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_balance.exceptions import InvalidRangeError
from leave_balance.models.enums import LeaveCategory
from leave_balance.schemas.report import (
    ActivityLogEntry,
    ActivityLogResponse,
    BalanceSummaryResponse,
    EmployeeBalanceSummary,
    HolidayWorkLogEntry,
    HolidayWorkLogResponse,
    SickLeaveSummaryItem,
    SickLeaveSummaryResponse,
)
from leave_balance.services.balance import compute_balances

if TYPE_CHECKING:
    import uuid
    from datetime import date

    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)


def _check_period(start_date: date, end_date: date) -> None:
    if start_date > end_date:
        raise InvalidRangeError()


async def get_company_balance_summary(
    store: RecordStore,
    company_id: uuid.UUID,
    as_of: date,
    *,
    historical: bool = True,
) -> BalanceSummaryResponse:
    """Annual balance for every employee on ``as_of``.

    Historical summaries count only records dated on or before ``as_of``;
    live ones (``historical=False``) keep future-dated approved records, the
    same as the per-employee live balance.
    """
    employees = await store.list_employees(company_id)

    items: list[EmployeeBalanceSummary] = []
    for employee in sorted(employees, key=lambda e: e.name):
        records = await store.get_employee_records(company_id, employee.id)
        report = compute_balances(
            employee,
            records.leaves,
            records.departures,
            records.holiday_work,
            records.adjustments,
            as_of,
            historical=historical,
        )
        items.append(
            EmployeeBalanceSummary(
                employee_id=employee.id,
                employee_name=employee.name,
                accrued_annual=report.accrued_annual,
                used_annual=report.used_annual,
                holiday_compensation=report.holiday_compensation,
                departure_deduction_days=report.departure_deduction_days,
                annual_adjustment=report.annual_adjustment,
                annual_balance=report.annual_balance,
            )
        )

    logger.info(
        "Balance summary for company=%s as_of=%s historical=%s: %d employees",
        company_id,
        as_of,
        historical,
        len(items),
    )
    return BalanceSummaryResponse(as_of=as_of, historical=historical, items=items, total=len(items))


async def get_sick_leave_summary(
    store: RecordStore,
    company_id: uuid.UUID,
    start_date: date,
    end_date: date,
) -> SickLeaveSummaryResponse:
    """Approved sick days per employee for leaves starting within the period."""
    _check_period(start_date, end_date)
    employees = await store.list_employees(company_id)

    items: list[SickLeaveSummaryItem] = []
    for employee in sorted(employees, key=lambda e: e.name):
        records = await store.get_employee_records(company_id, employee.id)
        sick_days = sum(
            leave.days_taken
            for leave in records.leaves
            if leave.is_approved
            and leave.category == LeaveCategory.SICK
            and start_date <= leave.start_date <= end_date
        )
        items.append(SickLeaveSummaryItem(employee_id=employee.id, employee_name=employee.name, sick_days=sick_days))

    return SickLeaveSummaryResponse(start_date=start_date, end_date=end_date, items=items, total=len(items))


async def get_holiday_work_log(
    store: RecordStore,
    company_id: uuid.UUID,
    start_date: date,
    end_date: date,
) -> HolidayWorkLogResponse:
    """Compensated weekend and holiday workdays within the period, newest first."""
    _check_period(start_date, end_date)
    employees = await store.list_employees(company_id)

    items: list[HolidayWorkLogEntry] = []
    for employee in employees:
        records = await store.get_employee_records(company_id, employee.id)
        items.extend(
            HolidayWorkLogEntry(
                id=hw.id,
                employee_id=employee.id,
                employee_name=employee.name,
                date=hw.date,
                type=hw.type,
            )
            for hw in records.holiday_work
            if start_date <= hw.date <= end_date
        )

    items.sort(key=lambda e: e.date, reverse=True)
    return HolidayWorkLogResponse(items=items, total=len(items))


async def get_activity_log(
    store: RecordStore,
    company_id: uuid.UUID,
    start_date: date,
    end_date: date,
) -> ActivityLogResponse:
    """Leaves and departures starting within the period, newest first.

    Pending records are listed too; this is a log, not a balance.
    """
    _check_period(start_date, end_date)
    employees = await store.list_employees(company_id)

    items: list[ActivityLogEntry] = []
    for employee in employees:
        records = await store.get_employee_records(company_id, employee.id)
        items.extend(
            ActivityLogEntry(
                id=leave.id,
                employee_id=employee.id,
                employee_name=employee.name,
                kind="LEAVE",
                category=leave.category,
                start_date=leave.start_date,
                end_date=leave.end_date,
                days_taken=leave.days_taken,
                hours=None,
            )
            for leave in records.leaves
            if start_date <= leave.start_date <= end_date
        )
        items.extend(
            ActivityLogEntry(
                id=departure.id,
                employee_id=employee.id,
                employee_name=employee.name,
                kind="DEPARTURE",
                category=None,
                start_date=departure.date,
                end_date=None,
                days_taken=None,
                hours=departure.hours,
            )
            for departure in records.departures
            if start_date <= departure.date <= end_date
        )

    items.sort(key=lambda e: e.start_date, reverse=True)
    return ActivityLogResponse(items=items, total=len(items))
