from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from src.api.deps import get_payment_gateway, get_store
from src.api.main import create_app
from src.infrastructure.db.store import Store

from tests.utils import FakePaymentGateway


@pytest.fixture()
def store() -> Store:
    """In-memory store; every test gets its own database."""
    client = AsyncMongoMockClient()
    return Store(client[f"twmi_test_{uuid4().hex}"])


@pytest.fixture()
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture()
async def async_client(
    store: Store, payment_gateway: FakePaymentGateway
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client wired to the in-memory store and fake gateway."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
