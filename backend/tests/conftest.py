"""
Pytest configuration and shared fixtures for Washerman tests.

Provides an httpx client bound to the FastAPI app, an in-memory SQLite DB
per test, and sample users.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings
from database import Base, get_db
from main import app

# ── Test Configuration ───────────────────────────────────────────────
# Minimum bcrypt cost keeps the suite fast; production default stays 10.
settings.bcrypt_rounds = 4


# ── Database Fixtures ────────────────────────────────────────────────


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create an in-memory SQLite database session for each test.

    Uses StaticPool to allow in-memory SQLite with async SQLAlchemy.
    """
    import db_models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for the app with the in-memory database.

    Overrides the get_db dependency to use the test DB session. The app
    lifespan is not run, so the on-disk database is never touched.
    """
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


# ── Test Data Fixtures ────────────────────────────────────────────────


@pytest_asyncio.fixture
async def sample_user(db_session: AsyncSession):
    """Registered customer alice/pw."""
    from services import auth_service

    user = await auth_service.register_user(
        db_session, username="alice", password="pw", role="user"
    )
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def sample_rider(db_session: AsyncSession):
    """Registered rider bob/ride."""
    from services import auth_service

    user = await auth_service.register_user(
        db_session, username="bob", password="ride", role="rider"
    )
    await db_session.commit()
    return user

