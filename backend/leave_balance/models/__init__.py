from leave_balance.models.adjustment import BalanceAdjustment
from leave_balance.models.base import EmployeeScopedRecord, RecordBase
from leave_balance.models.employee import Employee
from leave_balance.models.enums import HolidayWorkType, LeaveCategory, RecordStatus
from leave_balance.models.holiday import Holiday, HolidayWorkCompensation
from leave_balance.models.leave import DepartureRecord, LeaveRecord
from leave_balance.models.policy import CompanyPolicy

__all__ = [
    "BalanceAdjustment",
    "CompanyPolicy",
    "DepartureRecord",
    "Employee",
    "EmployeeScopedRecord",
    "Holiday",
    "HolidayWorkCompensation",
    "HolidayWorkType",
    "LeaveCategory",
    "LeaveRecord",
    "RecordBase",
    "RecordStatus",
]
