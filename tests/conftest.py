"""Common test fixtures for the application."""

import asyncio
import os
from pathlib import Path

os.environ.setdefault("ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test_app.db")

from collections.abc import AsyncGenerator, Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bidmarket.app import app
from bidmarket.config.db import create_db_engine, get_session
from bidmarket.config.seed import seed_db

_TEST_DB = Path("test_app.db")

test_engine = create_db_engine(f"sqlite+aiosqlite:///{_TEST_DB}", poolclass=NullPool)


async def _create_and_seed() -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        await seed_db(session)


@pytest.fixture(scope="session", autouse=True)
def seeded_db() -> Generator[None]:
    """Create a fresh, seeded test database for the whole test session."""
    if _TEST_DB.exists():
        _TEST_DB.unlink()

    asyncio.run(_create_and_seed())
    yield

    asyncio.run(test_engine.dispose())
    if _TEST_DB.exists():
        _TEST_DB.unlink()


@pytest.fixture(name="client")
def client_fixture() -> Generator[TestClient]:
    """Create a test client for the FastAPI app.

    Every request gets its own session on the test database, as in production.

    Returns:
        TestClient: Configured FastAPI test client.
    """

    async def get_session_override() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(test_engine, expire_on_commit=False) as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app, base_url="http://testserver")  # NOSONAR
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="session_factory")
def session_factory_fixture() -> Callable[[], AsyncSession]:
    """Open independent sessions on the test database, one per caller."""
    return lambda: AsyncSession(test_engine, expire_on_commit=False)
