# ruff: noqa: TC003
from __future__ import annotations

import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

from leave_balance.exceptions import AppError
from leave_balance.models.adjustment import BalanceAdjustment
from leave_balance.models.base import EmployeeScopedRecord
from leave_balance.models.employee import Employee
from leave_balance.models.holiday import Holiday, HolidayWorkCompensation
from leave_balance.models.leave import DepartureRecord, LeaveRecord
from leave_balance.models.policy import CompanyPolicy

_R = TypeVar("_R", bound=EmployeeScopedRecord)


@dataclass(frozen=True)
class EmployeeRecords:
    """Snapshot of every leave-related record for one employee."""

    leaves: tuple[LeaveRecord, ...] = ()
    departures: tuple[DepartureRecord, ...] = ()
    holiday_work: tuple[HolidayWorkCompensation, ...] = ()
    adjustments: tuple[BalanceAdjustment, ...] = ()


@runtime_checkable
class RecordStore(Protocol):
    """Interface for the persistence collaborator.

    Every method is scoped to a company; implementations never return or
    delete another tenant's records. Business rules (duplicate checks,
    quotas, snapshotted day counts) are applied by the services before a
    write reaches the store.
    """

    # -- reads --------------------------------------------------------------

    async def get_employee(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> Employee | None:
        """Fetch an employee. Returns None if not found."""
        ...

    async def list_employees(self, company_id: uuid.UUID) -> list[Employee]:
        """List all employees for a company."""
        ...

    async def get_company_policy(self, company_id: uuid.UUID) -> CompanyPolicy | None:
        """Fetch the company's calendar policy. Returns None when never configured."""
        ...

    async def list_holidays(self, company_id: uuid.UUID) -> list[Holiday]:
        """List the company's holiday calendar."""
        ...

    async def get_employee_records(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> EmployeeRecords:
        """Fetch a consistent snapshot of one employee's records."""
        ...

    # -- writes -------------------------------------------------------------

    async def upsert_employee(self, employee: Employee) -> None:
        """Create or replace an employee under ``employee.company_id``."""
        ...

    async def set_company_policy(self, company_id: uuid.UUID, policy: CompanyPolicy) -> None:
        """Create or replace the company's calendar policy."""
        ...

    async def add_holiday(self, company_id: uuid.UUID, holiday: Holiday) -> None:
        """Add a holiday to the company calendar."""
        ...

    async def delete_holiday(self, company_id: uuid.UUID, holiday_id: uuid.UUID) -> bool:
        """Remove a holiday. Returns False if not found."""
        ...

    async def add_leave(self, company_id: uuid.UUID, leave: LeaveRecord) -> None:
        """Store a leave record."""
        ...

    async def delete_leave(self, company_id: uuid.UUID, leave_id: uuid.UUID) -> bool:
        """Remove a leave record. Returns False if not found."""
        ...

    async def add_departure(self, company_id: uuid.UUID, departure: DepartureRecord) -> None:
        """Store a departure record."""
        ...

    async def delete_departure(self, company_id: uuid.UUID, departure_id: uuid.UUID) -> bool:
        """Remove a departure record. Returns False if not found."""
        ...

    async def add_holiday_work(self, company_id: uuid.UUID, record: HolidayWorkCompensation) -> None:
        """Store a holiday-work compensation record."""
        ...

    async def delete_holiday_work(self, company_id: uuid.UUID, record_id: uuid.UUID) -> bool:
        """Remove a holiday-work compensation record. Returns False if not found."""
        ...

    async def add_adjustment(self, company_id: uuid.UUID, adjustment: BalanceAdjustment) -> None:
        """Store a balance adjustment."""
        ...

    async def delete_adjustment(self, company_id: uuid.UUID, adjustment_id: uuid.UUID) -> bool:
        """Remove a balance adjustment. Returns False if not found."""
        ...


@dataclass
class _CompanyData:
    employees: dict[uuid.UUID, Employee] = field(default_factory=dict)
    policy: CompanyPolicy | None = None
    holidays: dict[uuid.UUID, Holiday] = field(default_factory=dict)
    leaves: dict[uuid.UUID, list[LeaveRecord]] = field(default_factory=lambda: defaultdict(list))
    departures: dict[uuid.UUID, list[DepartureRecord]] = field(default_factory=lambda: defaultdict(list))
    holiday_work: dict[uuid.UUID, list[HolidayWorkCompensation]] = field(default_factory=lambda: defaultdict(list))
    adjustments: dict[uuid.UUID, list[BalanceAdjustment]] = field(default_factory=lambda: defaultdict(list))


def _remove_by_id(records_by_employee: dict[uuid.UUID, list[_R]], record_id: uuid.UUID) -> bool:
    for records in records_by_employee.values():
        for index, record in enumerate(records):
            if record.id == record_id:
                del records[index]
                return True
    return False


class InMemoryRecordStore:
    """In-memory stub implementation for development.

    The synchronous ``seed*`` helpers back the async writes and are handy
    for setting up fixtures.
    """

    def __init__(self) -> None:
        self._companies: dict[uuid.UUID, _CompanyData] = defaultdict(_CompanyData)

    # -- seeding ------------------------------------------------------------

    def seed(self, employee: Employee) -> None:
        """Seed (or replace) an employee."""
        self._companies[employee.company_id].employees[employee.id] = employee

    def seed_policy(self, company_id: uuid.UUID, policy: CompanyPolicy) -> None:
        self._companies[company_id].policy = policy

    def seed_holiday(self, company_id: uuid.UUID, holiday: Holiday) -> None:
        self._companies[company_id].holidays[holiday.id] = holiday

    def seed_leave(self, company_id: uuid.UUID, leave: LeaveRecord) -> None:
        self._companies[company_id].leaves[leave.employee_id].append(leave)

    def seed_departure(self, company_id: uuid.UUID, departure: DepartureRecord) -> None:
        self._companies[company_id].departures[departure.employee_id].append(departure)

    def seed_holiday_work(self, company_id: uuid.UUID, record: HolidayWorkCompensation) -> None:
        """Seed a compensation record; one per employee and date."""
        existing = self._companies[company_id].holiday_work[record.employee_id]
        if any(hw.date == record.date for hw in existing):
            raise AppError("Holiday work already recorded for this employee and date", status_code=409)
        existing.append(record)

    def seed_adjustment(self, company_id: uuid.UUID, adjustment: BalanceAdjustment) -> None:
        self._companies[company_id].adjustments[adjustment.employee_id].append(adjustment)

    # -- reads --------------------------------------------------------------

    def _read(self, company_id: uuid.UUID) -> _CompanyData:
        return self._companies.get(company_id) or _CompanyData()

    async def get_employee(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> Employee | None:
        """Fetch an employee. Returns None if not found."""
        return self._read(company_id).employees.get(employee_id)

    async def list_employees(self, company_id: uuid.UUID) -> list[Employee]:
        """List all employees for a company."""
        return list(self._read(company_id).employees.values())

    async def get_company_policy(self, company_id: uuid.UUID) -> CompanyPolicy | None:
        return self._read(company_id).policy

    async def list_holidays(self, company_id: uuid.UUID) -> list[Holiday]:
        return sorted(self._read(company_id).holidays.values(), key=lambda h: h.date)

    async def get_employee_records(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> EmployeeRecords:
        data = self._read(company_id)
        return EmployeeRecords(
            leaves=tuple(data.leaves.get(employee_id, ())),
            departures=tuple(data.departures.get(employee_id, ())),
            holiday_work=tuple(data.holiday_work.get(employee_id, ())),
            adjustments=tuple(data.adjustments.get(employee_id, ())),
        )

    # -- writes -------------------------------------------------------------

    async def upsert_employee(self, employee: Employee) -> None:
        self.seed(employee)

    async def set_company_policy(self, company_id: uuid.UUID, policy: CompanyPolicy) -> None:
        self.seed_policy(company_id, policy)

    async def add_holiday(self, company_id: uuid.UUID, holiday: Holiday) -> None:
        self.seed_holiday(company_id, holiday)

    async def delete_holiday(self, company_id: uuid.UUID, holiday_id: uuid.UUID) -> bool:
        return self._read(company_id).holidays.pop(holiday_id, None) is not None

    async def add_leave(self, company_id: uuid.UUID, leave: LeaveRecord) -> None:
        self.seed_leave(company_id, leave)

    async def delete_leave(self, company_id: uuid.UUID, leave_id: uuid.UUID) -> bool:
        return _remove_by_id(self._read(company_id).leaves, leave_id)

    async def add_departure(self, company_id: uuid.UUID, departure: DepartureRecord) -> None:
        self.seed_departure(company_id, departure)

    async def delete_departure(self, company_id: uuid.UUID, departure_id: uuid.UUID) -> bool:
        return _remove_by_id(self._read(company_id).departures, departure_id)

    async def add_holiday_work(self, company_id: uuid.UUID, record: HolidayWorkCompensation) -> None:
        self.seed_holiday_work(company_id, record)

    async def delete_holiday_work(self, company_id: uuid.UUID, record_id: uuid.UUID) -> bool:
        return _remove_by_id(self._read(company_id).holiday_work, record_id)

    async def add_adjustment(self, company_id: uuid.UUID, adjustment: BalanceAdjustment) -> None:
        self.seed_adjustment(company_id, adjustment)

    async def delete_adjustment(self, company_id: uuid.UUID, adjustment_id: uuid.UUID) -> bool:
        return _remove_by_id(self._read(company_id).adjustments, adjustment_id)


_record_store: RecordStore = InMemoryRecordStore()


def get_record_store() -> RecordStore:
    """FastAPI dependency for the record store."""
    return _record_store


def set_record_store(store: RecordStore) -> None:
    """Override the store (for testing or production wiring)."""
    global _record_store
    _record_store = store
