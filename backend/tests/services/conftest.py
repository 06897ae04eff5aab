"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness check sees the test DB
    - "today" pinned to TODAY and the receipt analyzer forced to the mock

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (the footprint upsert uses the sqlite ON CONFLICT dialect here)
    - ASGITransport does not run lifespan, so app.state is never populated:
      the analyzer comes from a dependency override instead
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from ecosmart.api.dependencies import get_receipt_analyzer, get_today
from ecosmart.db.base import Base
from ecosmart.infrastructure.database import get_db, DatabaseSessionManager
import ecosmart.infrastructure.database as db_module
from ecosmart.main import app
from ecosmart.services.receipt_analyzers import MockReceiptAnalyzer

TODAY = date(2026, 10, 18)
USER_HEADERS = {"X-User-Id": "user_test"}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB, clock, and analyzer overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_receipt_analyzer] = MockReceiptAnalyzer

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
        headers=USER_HEADERS,
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
