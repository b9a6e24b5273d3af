from fastapi import APIRouter

from leave_balance.api.adjustments import adjustments_router
from leave_balance.api.balances import employee_balance_router
from leave_balance.api.employees import employees_router
from leave_balance.api.holidays import holidays_router
from leave_balance.api.leaves import leaves_router
from leave_balance.api.policy import policy_router
from leave_balance.api.reports import reports_router

api_router = APIRouter()
api_router.include_router(employees_router)
api_router.include_router(employee_balance_router)
api_router.include_router(leaves_router)
api_router.include_router(adjustments_router)
api_router.include_router(holidays_router)
api_router.include_router(policy_router)
api_router.include_router(reports_router)
