from __future__ import annotations

import uuid
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from leave_balance.models import (
    BalanceAdjustment,
    CompanyPolicy,
    DepartureRecord,
    Employee,
    Holiday,
    LeaveCategory,
    LeaveRecord,
    RecordStatus,
)
from leave_balance.models.base import as_calendar_date

COMPANY_ID = uuid.uuid4()
EMPLOYEE_ID = uuid.uuid4()


def test_as_calendar_date_strips_time() -> None:
    assert as_calendar_date(datetime(2025, 1, 5, 23, 59)) == date(2025, 1, 5)
    assert type(as_calendar_date(datetime(2025, 1, 5, 23, 59))) is date
    assert as_calendar_date(date(2025, 1, 5)) == date(2025, 1, 5)


def test_employee_instantiation() -> None:
    employee = Employee(company_id=COMPANY_ID, name="Test", hire_date=date(2024, 1, 1))
    assert employee.id is not None
    assert employee.end_date is None
    assert employee.custom_annual_leave_days is None


def test_employee_opening_balance_requires_set_date() -> None:
    with pytest.raises(ValidationError, match="balance_set_date"):
        Employee(company_id=COMPANY_ID, hire_date=date(2024, 1, 1), initial_annual_balance=5)


def test_employee_rejects_non_positive_custom_days() -> None:
    with pytest.raises(ValidationError):
        Employee(company_id=COMPANY_ID, hire_date=date(2024, 1, 1), custom_annual_leave_days=0)


def test_records_are_immutable() -> None:
    employee = Employee(company_id=COMPANY_ID, hire_date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        employee.hire_date = date(2020, 1, 1)  # type: ignore[misc]


def test_leave_record_defaults_to_approved() -> None:
    leave = LeaveRecord(
        employee_id=EMPLOYEE_ID,
        category=LeaveCategory.ANNUAL,
        start_date=date(2025, 1, 2),
        end_date=date(2025, 1, 7),
        days_taken=3,
    )
    assert leave.status == RecordStatus.APPROVED
    assert leave.is_approved


def test_leave_record_rejects_inverted_range() -> None:
    with pytest.raises(ValidationError, match="start_date must not be after end_date"):
        LeaveRecord(
            employee_id=EMPLOYEE_ID,
            category=LeaveCategory.SICK,
            start_date=date(2025, 1, 7),
            end_date=date(2025, 1, 2),
            days_taken=0,
        )


def test_leave_record_rejects_negative_days() -> None:
    with pytest.raises(ValidationError):
        LeaveRecord(
            employee_id=EMPLOYEE_ID,
            category=LeaveCategory.ANNUAL,
            start_date=date(2025, 1, 2),
            end_date=date(2025, 1, 2),
            days_taken=-1,
        )


@pytest.mark.parametrize("hours", [0, 5])
def test_departure_hours_bounds(hours: int) -> None:
    with pytest.raises(ValidationError):
        DepartureRecord(employee_id=EMPLOYEE_ID, date=date(2025, 1, 6), hours=hours)


def test_pending_departure_is_not_approved() -> None:
    departure = DepartureRecord(employee_id=EMPLOYEE_ID, date=date(2025, 1, 6), hours=2, status=RecordStatus.PENDING)
    assert not departure.is_approved


def test_holiday_requires_name() -> None:
    with pytest.raises(ValidationError):
        Holiday(date=date(2025, 1, 5), name="")


def test_adjustment_accepts_negative_days() -> None:
    adjustment = BalanceAdjustment(
        employee_id=EMPLOYEE_ID,
        category=LeaveCategory.SICK,
        adjustment_days=-1.5,
        date=date(2025, 1, 6),
    )
    assert adjustment.adjustment_days == -1.5
    assert adjustment.reason == ""


def test_company_policy_default_weekend() -> None:
    assert CompanyPolicy().weekend_days == frozenset({5, 6})
