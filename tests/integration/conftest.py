"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database with foreign keys enforced.
A StaticPool keeps that single connection alive across sessions, so data
committed by one unit of work is visible to the next.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.hrdesk.api.dependencies import get_db_session
from src.hrdesk.core.context import CallerContext
from src.hrdesk.core.db import enable_sqlite_foreign_keys, unit_of_work
from src.hrdesk.main import create_app
from src.hrdesk.models import Tenant
from tests.helpers import caller_for, create_tenant


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine with every table created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(test_engine)

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide a unit of work that commits when the test body succeeds.

    Use a fresh `unit_of_work(engine)` to observe what was committed.
    """
    async with unit_of_work(engine) as session:
        yield session


@pytest.fixture
async def tenant(engine: AsyncEngine) -> Tenant:
    async with unit_of_work(engine) as session:
        return await create_tenant(session, name="Tenant A")


@pytest.fixture
async def other_tenant(engine: AsyncEngine) -> Tenant:
    async with unit_of_work(engine) as session:
        return await create_tenant(session, name="Tenant B")


@pytest.fixture
def caller(tenant: Tenant) -> CallerContext:
    return caller_for(tenant)


@pytest.fixture
def other_caller(other_tenant: Tenant) -> CallerContext:
    return caller_for(other_tenant)


@pytest.fixture
async def client(engine: AsyncEngine, tenant: Tenant) -> AsyncGenerator[AsyncClient]:
    """Create test client acting as `tenant`."""
    app = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with unit_of_work(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-Tenant-ID": str(tenant.id)},
    ) as client:
        yield client

    app.dependency_overrides.clear()
