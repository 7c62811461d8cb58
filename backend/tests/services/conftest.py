"""Service test fixtures — async DB, app factory and HTTP clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - fake_client swaps the whole repository for FakeExpenseRepository

Design Decisions:
    - StaticPool: every session shares the one in-memory connection, so the
      test_db fixture sees what requests wrote
    - ASGITransport does not run the lifespan; db_manager stays None unless a
      test sets it
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from app.api.routes.expenses import get_expense_service
from app.db.base import Base
from app.infrastructure.database import get_db
from app.main import create_app
from app.services.expense_service import ExpenseService
from tests.auth_helpers import bearer, mint_token
from tests.services.fake_repository import FakeExpenseRepository
import app.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def api(settings):
    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(api, test_session_factory):
    """HTTP client against the real repository on the test DB."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    api.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=api), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def fake_repo():
    return FakeExpenseRepository()


@pytest.fixture
async def fake_client(api, fake_repo):
    """HTTP client whose service is backed by FakeExpenseRepository."""
    api.dependency_overrides[get_expense_service] = (
        lambda: ExpenseService(fake_repo)
    )

    async with AsyncClient(
        transport=ASGITransport(app=api), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def alice_headers():
    return bearer(mint_token(1, username="alice"))


@pytest.fixture
def bob_headers():
    return bearer(mint_token(2, username="bob"))
