"""Tests for the balance aggregator and the employee balance endpoint."""

from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

import pytest

from leave_balance.api.deps import get_today
from leave_balance.exceptions import NotFoundError
from leave_balance.main import app
from leave_balance.models.adjustment import BalanceAdjustment
from leave_balance.models.employee import Employee
from leave_balance.models.enums import HolidayWorkType, LeaveCategory, RecordStatus
from leave_balance.models.holiday import HolidayWorkCompensation
from leave_balance.models.leave import DepartureRecord, LeaveRecord
from leave_balance.services.balance import (
    calculate_departure_quota,
    compute_balances,
    departure_deduction_days,
    get_employee_balance,
    round_days,
)

if TYPE_CHECKING:
    from httpx import AsyncClient

    from leave_balance.services.records import InMemoryRecordStore

COMPANY_ID = uuid.uuid4()
YEAR_END = date(2023, 12, 31)


def _employee(hire_date: date = date(2023, 1, 1), **kwargs: object) -> Employee:
    return Employee(company_id=COMPANY_ID, name="Dana", hire_date=hire_date, **kwargs)  # type: ignore[arg-type]


def _leave(
    employee: Employee,
    category: LeaveCategory,
    start: date,
    end: date,
    days: int,
    **kwargs: object,
) -> LeaveRecord:
    return LeaveRecord(
        employee_id=employee.id,
        category=category,
        start_date=start,
        end_date=end,
        days_taken=days,
        **kwargs,  # type: ignore[arg-type]
    )


def _departure(employee: Employee, day: date, hours: int, **kwargs: object) -> DepartureRecord:
    return DepartureRecord(employee_id=employee.id, date=day, hours=hours, **kwargs)  # type: ignore[arg-type]


def _holiday_work(employee: Employee, day: date) -> HolidayWorkCompensation:
    return HolidayWorkCompensation(employee_id=employee.id, date=day, type=HolidayWorkType.WEEKEND)


def _adjustment(employee: Employee, category: LeaveCategory, days: float, day: date) -> BalanceAdjustment:
    return BalanceAdjustment(employee_id=employee.id, category=category, adjustment_days=days, date=day)


# ---------------------------------------------------------------------------
# Rounding and departures
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2.675, 2.68), (0.125, 0.13), (-0.125, -0.13), (1.004, 1.0), (14.0, 14.0)],
)
def test_round_days_half_up(value: float, expected: float) -> None:
    assert round_days(value) == expected


@pytest.mark.parametrize(("hours", "expected"), [(0, 0), (7, 0), (8, 1), (12, 1), (16, 2), (23, 2)])
def test_departure_deduction_days(hours: int, expected: int) -> None:
    assert departure_deduction_days(hours) == expected


def test_departure_hours_roll_over_into_deduction() -> None:
    """Four 3-hour departures: 12 hours deduct one day and leave 4 pending."""
    employee = _employee()
    departures = [_departure(employee, date(2023, month, 10), 3) for month in (9, 10, 11, 12)]

    report = compute_balances(employee, [], departures, [], [], YEAR_END)

    assert report.departure_hours == 12
    assert report.departure_deduction_days == 1
    assert report.departure_quota.hours_toward_next_deduction == 4


def test_departure_quota_counts_only_as_of_month() -> None:
    employee = _employee()
    departures = [
        _departure(employee, date(2023, 12, 4), 3),
        _departure(employee, date(2023, 12, 20), 2),
        _departure(employee, date(2023, 11, 30), 4),
    ]

    quota = calculate_departure_quota(departures, YEAR_END)

    assert quota.monthly_remaining_hours == 3
    assert quota.hours_toward_next_deduction == 1


def test_departure_quota_can_go_negative() -> None:
    employee = _employee()
    departures = [_departure(employee, date(2023, 12, day), 4) for day in (4, 5, 6)]
    assert calculate_departure_quota(departures, YEAR_END).monthly_remaining_hours == -4


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def test_annual_balance_composition() -> None:
    """14 accrued + 2 compensation - 5 used - 1 departure day + 1 adjustment = 11."""
    employee = _employee()
    leaves = [
        _leave(employee, LeaveCategory.ANNUAL, date(2023, 3, 5), date(2023, 3, 9), 5),
        _leave(employee, LeaveCategory.ANNUAL, date(2023, 4, 2), date(2023, 4, 3), 2, status=RecordStatus.PENDING),
    ]
    departures = [_departure(employee, date(2023, 5, day), 3) for day in (1, 2, 3, 4)]
    holiday_work = [_holiday_work(employee, date(2023, 6, 2)), _holiday_work(employee, date(2023, 6, 9))]
    adjustments = [_adjustment(employee, LeaveCategory.ANNUAL, 1, date(2023, 7, 1))]

    report = compute_balances(employee, leaves, departures, holiday_work, adjustments, YEAR_END)

    assert report.accrued_annual == 14.0
    assert report.holiday_compensation == 2
    assert report.used_annual == 5
    assert report.departure_deduction_days == 1
    assert report.annual_adjustment == 1.0
    assert report.annual_balance == 11.0
    assert report.entitlement_days == 14
    assert report.historical is False


def test_sick_balance_composition() -> None:
    """14 allotted + 2 adjustment - 3 used this year = 13; last year's sick leave is ignored."""
    employee = _employee(date(2020, 1, 1))
    leaves = [
        _leave(employee, LeaveCategory.SICK, date(2023, 2, 6), date(2023, 2, 8), 3),
        _leave(employee, LeaveCategory.SICK, date(2022, 11, 1), date(2022, 11, 4), 4),
        _leave(employee, LeaveCategory.SICK, date(2023, 5, 1), date(2023, 5, 1), 1, status=RecordStatus.PENDING),
    ]
    adjustments = [_adjustment(employee, LeaveCategory.SICK, 2, date(2023, 1, 10))]

    report = compute_balances(employee, leaves, [], [], adjustments, YEAR_END)

    assert report.sick_allotment == 14
    assert report.used_sick == 3
    assert report.sick_adjustment == 2.0
    assert report.sick_balance == 13.0


def test_sick_leave_does_not_touch_annual_balance() -> None:
    employee = _employee()
    leaves = [_leave(employee, LeaveCategory.SICK, date(2023, 2, 6), date(2023, 2, 8), 3)]

    report = compute_balances(employee, leaves, [], [], [], YEAR_END)

    assert report.used_annual == 0
    assert report.annual_balance == 14.0


def test_balance_rounds_once_at_the_end() -> None:
    """Rounded components sum to 1.00 but the unrounded total rounds to 1.01."""
    employee = _employee(date(2024, 1, 17))
    adjustments = [_adjustment(employee, LeaveCategory.ANNUAL, 0.4405, date(2024, 1, 20))]

    report = compute_balances(employee, [], [], [], adjustments, date(2024, 1, 31))

    assert report.accrued_annual == 0.56
    assert report.annual_adjustment == 0.44
    assert report.annual_balance == 1.01


def test_balance_may_go_negative() -> None:
    employee = _employee()
    leaves = [_leave(employee, LeaveCategory.ANNUAL, date(2023, 1, 8), date(2023, 1, 12), 5)]

    report = compute_balances(employee, leaves, [], [], [], date(2023, 1, 31))

    assert report.annual_balance == round_days(14 / 12 - 5)
    assert report.annual_balance < 0


def test_other_employees_records_are_ignored() -> None:
    employee = _employee()
    other = _employee()
    leaves = [_leave(other, LeaveCategory.ANNUAL, date(2023, 3, 5), date(2023, 3, 9), 5)]

    report = compute_balances(employee, leaves, [], [_holiday_work(other, date(2023, 6, 2))], [], YEAR_END)

    assert report.used_annual == 0
    assert report.holiday_compensation == 0


# ---------------------------------------------------------------------------
# Live versus historical
# ---------------------------------------------------------------------------


def _mixed_records(employee: Employee) -> dict[str, list]:
    return {
        "leaves": [
            _leave(employee, LeaveCategory.ANNUAL, date(2023, 3, 5), date(2023, 3, 6), 2),
            _leave(employee, LeaveCategory.ANNUAL, date(2023, 9, 3), date(2023, 9, 5), 3),
        ],
        "departures": [_departure(employee, date(2023, 8, day), 4) for day in (1, 2)],
        "holiday_work": [_holiday_work(employee, date(2023, 8, 4))],
        "adjustments": [_adjustment(employee, LeaveCategory.ANNUAL, 1.5, date(2023, 10, 1))],
    }


def test_live_balance_counts_future_dated_records() -> None:
    employee = _employee()
    report = compute_balances(employee, **_mixed_records(employee), as_of=date(2023, 6, 30))

    assert report.used_annual == 5
    assert report.departure_deduction_days == 1
    assert report.holiday_compensation == 1
    assert report.annual_adjustment == 1.5
    assert report.accrued_annual == 7.0


def test_historical_balance_drops_records_after_as_of() -> None:
    employee = _employee()
    report = compute_balances(employee, **_mixed_records(employee), as_of=date(2023, 6, 30), historical=True)

    assert report.historical is True
    assert report.used_annual == 2
    assert report.departure_deduction_days == 0
    assert report.holiday_compensation == 0
    assert report.annual_adjustment == 0.0
    assert report.annual_balance == 5.0


def test_historical_cutoff_uses_leave_start_date() -> None:
    """A leave straddling the cutoff counts in full once it has started."""
    employee = _employee()
    leaves = [_leave(employee, LeaveCategory.ANNUAL, date(2023, 6, 29), date(2023, 7, 3), 3)]

    report = compute_balances(employee, leaves, [], [], [], date(2023, 6, 30), historical=True)

    assert report.used_annual == 3


def test_historical_matches_live_when_nothing_is_future_dated() -> None:
    employee = _employee()
    records = _mixed_records(employee)

    live = compute_balances(employee, **records, as_of=YEAR_END)
    historical = compute_balances(employee, **records, as_of=YEAR_END, historical=True)

    assert live.annual_balance == historical.annual_balance
    assert live.sick_balance == historical.sick_balance


# ---------------------------------------------------------------------------
# Store-backed read path
# ---------------------------------------------------------------------------


async def test_get_employee_balance_reads_from_store(store: InMemoryRecordStore) -> None:
    employee = _employee()
    store.seed(employee)
    store.seed_leave(COMPANY_ID, _leave(employee, LeaveCategory.ANNUAL, date(2023, 3, 5), date(2023, 3, 9), 5))

    report = await get_employee_balance(store, COMPANY_ID, employee.id, YEAR_END)

    assert report.annual_balance == 9.0


async def test_get_employee_balance_unknown_employee(store: InMemoryRecordStore) -> None:
    with pytest.raises(NotFoundError):
        await get_employee_balance(store, COMPANY_ID, uuid.uuid4(), YEAR_END)


async def test_get_employee_balance_scoped_to_company(store: InMemoryRecordStore) -> None:
    employee = _employee()
    store.seed(employee)

    with pytest.raises(NotFoundError):
        await get_employee_balance(store, uuid.uuid4(), employee.id, YEAR_END)


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


async def test_balance_endpoint_live_uses_today(async_client: AsyncClient, store: InMemoryRecordStore) -> None:
    employee = _employee()
    store.seed(employee)
    store.seed_leave(COMPANY_ID, _leave(employee, LeaveCategory.ANNUAL, date(2024, 2, 4), date(2024, 2, 5), 2))
    app.dependency_overrides[get_today] = lambda: YEAR_END

    response = await async_client.get(f"/companies/{COMPANY_ID}/employees/{employee.id}/balances")

    assert response.status_code == 200
    data = response.json()
    assert data["as_of"] == "2023-12-31"
    assert data["historical"] is False
    assert data["used_annual"] == 2
    assert data["annual_balance"] == 12.0


async def test_balance_endpoint_as_of_is_historical(async_client: AsyncClient, store: InMemoryRecordStore) -> None:
    employee = _employee()
    store.seed(employee)
    store.seed_leave(COMPANY_ID, _leave(employee, LeaveCategory.ANNUAL, date(2024, 2, 4), date(2024, 2, 5), 2))

    response = await async_client.get(
        f"/companies/{COMPANY_ID}/employees/{employee.id}/balances", params={"as_of": "2023-12-31"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["historical"] is True
    assert data["used_annual"] == 0
    assert data["annual_balance"] == 14.0
    assert data["departure_quota"] == {"monthly_remaining_hours": 8, "hours_toward_next_deduction": 0}


async def test_balance_endpoint_unknown_employee_is_404(async_client: AsyncClient) -> None:
    response = await async_client.get(f"/companies/{COMPANY_ID}/employees/{uuid.uuid4()}/balances")

    assert response.status_code == 404
    assert response.json()["detail"] == "Employee not found"


async def test_balance_endpoint_invalid_as_of_is_422(async_client: AsyncClient) -> None:
    response = await async_client.get(
        f"/companies/{COMPANY_ID}/employees/{uuid.uuid4()}/balances", params={"as_of": "not-a-date"}
    )
    assert response.status_code == 422
