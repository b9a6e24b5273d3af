# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leave_balance.api.deps import StoreDep
from leave_balance.schemas.policy import CompanyPolicyResponse, UpdateCompanyPolicyRequest
from leave_balance.services import policy as policy_service

policy_router = APIRouter(
    prefix="/companies/{company_id}/policy",
    tags=["policy"],
)


@policy_router.get("", response_model=CompanyPolicyResponse)
async def get_company_policy(
    company_id: uuid.UUID,
    store: StoreDep,
) -> CompanyPolicyResponse:
    """Get the weekend days in force for the company."""
    return await policy_service.get_company_policy(store, company_id)


@policy_router.put("", response_model=CompanyPolicyResponse)
async def update_company_policy(
    company_id: uuid.UUID,
    payload: UpdateCompanyPolicyRequest,
    store: StoreDep,
) -> CompanyPolicyResponse:
    """Replace the company's weekend days."""
    return await policy_service.update_company_policy(store, company_id, payload)
