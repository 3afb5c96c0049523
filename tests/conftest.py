"""
pytest configuration and fixtures for the invoice store test suite
Unit tests run against a fake asyncpg pool; integration tests need TEST_DATABASE_URL
"""

import pytest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from app import create_app
from config.settings import Settings
from services.invoices_service import InvoicesService, get_invoices_service
from tests.core.data_factory import DataFactory


class FakePool:
    """Stand-in for asyncpg.Pool handing out a single mocked connection"""

    def __init__(self, conn):
        self.conn = conn
        self.acquired = 0

    @asynccontextmanager
    async def acquire(self):
        self.acquired += 1
        yield self.conn


@pytest.fixture
def fake_conn():
    conn = AsyncMock()
    conn.fetch.return_value = []
    conn.execute.return_value = "UPDATE 1"
    conn.fetchval.return_value = 1
    return conn


@pytest.fixture
def fake_pool(fake_conn):
    return FakePool(fake_conn)


@pytest.fixture
def invoices_service(fake_pool):
    return InvoicesService(fake_pool)


@pytest.fixture
def data_factory():
    return DataFactory()


@pytest.fixture
def test_settings():
    return Settings(env="QA", database_url=None, allowed_origins=["http://localhost:3000"])


@pytest.fixture
def api_client(test_settings, invoices_service):
    """HTTP client whose routes use the fake-pool service; lifespan is not run"""
    app = create_app(test_settings)
    app.dependency_overrides[get_invoices_service] = lambda: invoices_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
