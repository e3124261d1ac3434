"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_API_TOKEN = "test-api-token"

# Must be set before any app imports that trigger Settings validation
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["API_TOKEN"] = TEST_API_TOKEN
os.environ["CREATE_TABLES"] = "false"


@pytest.fixture
def api_token() -> str:
    """The shared secret the app under test is configured with."""
    return TEST_API_TOKEN


@pytest.fixture
def auth_headers(api_token: str) -> dict[str, str]:
    """Authorization header carrying the configured test token."""
    return {"Authorization": f"Bearer {api_token}"}


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """
    Create a fresh in-memory SQLite engine with the schema applied.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    from db.session import create_tables

    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create an async session shared by the test and the app under test."""
    session_factory = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def unauthenticated_client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client with database session override and no credentials."""
    # Clear the settings cache so it picks up the test environment
    from core.config import get_settings

    get_settings.cache_clear()

    from api.main import app
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
async def client(
    unauthenticated_client: AsyncClient,
    auth_headers: dict[str, str],
) -> AsyncClient:
    """Create a test client that sends a valid bearer token."""
    unauthenticated_client.headers.update(auth_headers)
    return unauthenticated_client
