import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from leave_balance.api.deps import StoreDep
from leave_balance.config import get_settings
from leave_balance.services.records import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health(store: StoreDep) -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    if not isinstance(store, RecordStore):
        logger.error("Health check: record store %r does not implement RecordStore", store)
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
    )
