"""Pytest configuration and shared fixtures."""

import os

# Settings are read once and cached, so the test environment must be in
# place before any study_tracker module is imported.
os.environ.setdefault("API_TITLE", "Study Tracker Test")
os.environ.setdefault("API_VERSION", "0.1.0-test")
os.environ.setdefault("DEBUG", "False")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "False")
os.environ.setdefault("API_KEY", "")

from datetime import date  # noqa: E402
from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import study_tracker.models  # noqa: E402,F401
from study_tracker.application import create_app  # noqa: E402
from study_tracker.models.profile import Profile  # noqa: E402
from study_tracker.models.subject import Subject, SubjectCategory  # noqa: E402
from study_tracker.utils.db import Base, get_db_session  # noqa: E402


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Database session bound to the in-memory engine."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def profile(db_session: AsyncSession) -> Profile:
    """A saved profile."""
    row = Profile(name="민준")
    db_session.add(row)
    await db_session.commit()
    return row


@pytest.fixture
async def subjects(db_session: AsyncSession) -> dict[str, Subject]:
    """Saved subjects keyed by a short alias."""
    rows = {
        "math": Subject(
            name="수학", category=SubjectCategory.MATH, color="#ef4444", sort_order=2
        ),
        "english": Subject(
            name="영어 독해",
            category=SubjectCategory.ENGLISH,
            color="#3b82f6",
            sort_order=1,
        ),
        "science": Subject(
            name="과학", category=SubjectCategory.OTHER, color="#a855f7", sort_order=3
        ),
    }
    db_session.add_all(rows.values())
    await db_session.commit()
    return rows


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession]):
    """FastAPI application wired to the in-memory database."""
    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client talking to the app in-process (no lifespan)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def monday() -> date:
    """Monday 2024-01-01, first day of ISO week 2024-W01."""
    return date(2024, 1, 1)
