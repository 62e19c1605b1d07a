"""
Posts API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set before any `app` import so the settings
       singleton picks them up. Repository and HTTP tests run against an
       in-memory SQLite database (aiosqlite + StaticPool) that is created
       and dropped around every test.

Fixture Hierarchy:
    Function-scoped:
    ├── mock_repository: AsyncMock standing in for PostRepository
    ├── sample_post_data: Field values for a stored post
    ├── db_engine: In-memory SQLite engine with the schema created
    ├── db_session: AsyncSession on db_engine (for repository tests)
    └── test_client: HTTPX AsyncClient with get_db_session overridden
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.models.post import Post  # noqa: E402, F401
from app.repositories.base import Repository  # noqa: E402


@pytest.fixture
def mock_repository():
    """
    A Repository double whose methods are AsyncMocks.

    Usage:
        mock_repository.find_by_id.return_value = post
        service = PostService(mock_repository)
    """
    repository = AsyncMock(spec=Repository)
    # save() hands back whatever entity it was given
    repository.save.side_effect = lambda entity: entity
    return repository


@pytest.fixture
def sample_post_data():
    return {
        "id": 1,
        "author": "alice",
        "content": "hi",
        "image_url": None,
    }


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_engine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the FastAPI app over ASGITransport.

    Each request gets its own session on the in-memory engine, committed
    or rolled back exactly like the production dependency.

    Usage:
        async def test_get_post(test_client):
            response = await test_client.get("/api/posts/1")
    """
    from app.main import app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
