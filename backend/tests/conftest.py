from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from leave_balance.main import app
from leave_balance.services.records import InMemoryRecordStore, set_record_store

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator


@pytest.fixture(autouse=True)
def store() -> Iterator[InMemoryRecordStore]:
    """Install a fresh in-memory record store for every test."""
    svc = InMemoryRecordStore()
    set_record_store(svc)
    yield svc
    set_record_store(InMemoryRecordStore())


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
