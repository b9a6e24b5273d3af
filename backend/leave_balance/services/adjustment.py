from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_balance.exceptions import NotFoundError
from leave_balance.models.adjustment import BalanceAdjustment
from leave_balance.schemas.adjustment import AdjustmentResponse
from leave_balance.services.employee import require_employee

if TYPE_CHECKING:
    import uuid
    from datetime import date

    from leave_balance.schemas.adjustment import CreateAdjustmentRequest
    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)


async def create_adjustment(
    store: RecordStore,
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateAdjustmentRequest,
    today: date,
) -> AdjustmentResponse:
    """Record a manual balance correction, dated today unless given."""
    await require_employee(store, company_id, employee_id)

    adjustment = BalanceAdjustment(
        employee_id=employee_id,
        category=payload.category,
        adjustment_days=payload.adjustment_days,
        reason=payload.reason,
        date=payload.date or today,
    )
    await store.add_adjustment(company_id, adjustment)

    logger.info(
        "Adjusted %s balance for employee=%s by %+.2f days",
        adjustment.category,
        employee_id,
        adjustment.adjustment_days,
    )
    return AdjustmentResponse(
        id=adjustment.id,
        employee_id=employee_id,
        category=adjustment.category,
        adjustment_days=adjustment.adjustment_days,
        reason=adjustment.reason,
        date=adjustment.date,
    )


async def delete_adjustment(store: RecordStore, company_id: uuid.UUID, adjustment_id: uuid.UUID) -> None:
    if not await store.delete_adjustment(company_id, adjustment_id):
        raise NotFoundError("Adjustment not found")
    logger.info("Deleted adjustment=%s company=%s", adjustment_id, company_id)
