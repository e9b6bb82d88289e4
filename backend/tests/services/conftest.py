"""Service test fixtures — async DB, fake Google gateway, pinned clock + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db, get_google_calendar, get_reference_clock and get_settings are overridden
    - "now" is pinned to 2026-01-01 10:30 local time
    - db_manager patched for the readiness probe

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Fake gateway over patching googleapiclient: route tests stay about routing
"""

from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.core.quick_schedule import ReferenceClock
from app.db.base import Base
from app.infrastructure.clock import get_reference_clock
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.google_calendar import get_google_calendar
import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.main import app
from tests.services.fake_google import FakeGoogleCalendar

PINNED_NOW = ReferenceClock(datetime(2026, 1, 1, 10, 30))


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
def fake_google():
    return FakeGoogleCalendar()


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        api_key="",
        google_tokens_path=str(tmp_path / "google-tokens.json"),
        google_timezone="Europe/Zurich",
        quick_add_default_minutes=60,
        quick_add_placeholder_title="Termin",
    )


@pytest.fixture
async def client(test_engine, test_session_factory, fake_google, test_settings):
    """FastAPI test client with DB, gateway, clock and settings overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_google_calendar] = lambda: fake_google
    app.dependency_overrides[get_reference_clock] = lambda: PINNED_NOW
    app.dependency_overrides[get_settings] = lambda: test_settings

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
