from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leave_balance.models.policy import CompanyPolicy
from leave_balance.schemas.policy import CompanyPolicyResponse
from leave_balance.services.duration import resolve_weekend_days

if TYPE_CHECKING:
    import uuid

    from leave_balance.schemas.policy import UpdateCompanyPolicyRequest
    from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)


async def get_company_policy(store: RecordStore, company_id: uuid.UUID) -> CompanyPolicyResponse:
    """The weekend in force for the company, falling back to the configured default."""
    stored = await store.get_company_policy(company_id)
    weekend_days = await resolve_weekend_days(store, company_id)
    return CompanyPolicyResponse(
        company_id=company_id,
        weekend_days=sorted(weekend_days),
        is_default=stored is None,
    )


async def update_company_policy(
    store: RecordStore,
    company_id: uuid.UUID,
    payload: UpdateCompanyPolicyRequest,
) -> CompanyPolicyResponse:
    """Replace the company's weekend days.

    Only future pricing and classification change; stamped records keep
    their values.
    """
    policy = CompanyPolicy(weekend_days=frozenset(payload.weekend_days))
    await store.set_company_policy(company_id, policy)
    logger.info("Updated weekend days for company=%s: %s", company_id, sorted(policy.weekend_days))
    return CompanyPolicyResponse(
        company_id=company_id,
        weekend_days=sorted(policy.weekend_days),
        is_default=False,
    )
