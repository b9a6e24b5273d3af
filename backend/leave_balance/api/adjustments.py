# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leave_balance.api.deps import StoreDep, TodayDep
from leave_balance.schemas.adjustment import AdjustmentResponse, CreateAdjustmentRequest
from leave_balance.services import adjustment as adjustment_service

adjustments_router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["adjustments"],
)


@adjustments_router.post(
    "/employees/{employee_id}/adjustments",
    response_model=AdjustmentResponse,
    status_code=201,
)
async def create_adjustment(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: CreateAdjustmentRequest,
    store: StoreDep,
    today: TodayDep,
) -> AdjustmentResponse:
    """Add a signed manual correction to an annual or sick balance."""
    return await adjustment_service.create_adjustment(store, company_id, employee_id, payload, today)


@adjustments_router.delete(
    "/adjustments/{adjustment_id}",
    status_code=204,
)
async def delete_adjustment(
    company_id: uuid.UUID,
    adjustment_id: uuid.UUID,
    store: StoreDep,
) -> None:
    """Delete a balance adjustment."""
    await adjustment_service.delete_adjustment(store, company_id, adjustment_id)
