"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Callable, Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hackernews.database.client import PersistenceClient  # noqa: E402
from hackernews.database.connection import create_engine_for_url  # noqa: E402
from hackernews.dbmodels import Base, Comments, Links  # noqa: E402
from hackernews.graphql.context import GraphQLContext  # noqa: E402


@pytest_asyncio.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the schema created and foreign keys on."""
    engine = create_engine_for_url("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session for testing."""
    session_local = async_sessionmaker(
        engine, class_=AsyncSession, autoflush=False, expire_on_commit=False
    )
    async with session_local() as session:
        yield session


@pytest.fixture(scope="function")
def graphql_context(db_session: AsyncSession) -> GraphQLContext:
    """GraphQL context backed by the test database."""
    return GraphQLContext(db=PersistenceClient(db_session))


@pytest_asyncio.fixture(scope="function")
async def graphql_link(db_session: AsyncSession) -> Links:
    """The single link most scenarios start from."""
    link = Links(description="GraphQL", url="https://graphql.org")
    db_session.add(link)
    await db_session.commit()
    return link


@pytest.fixture
def make_link() -> Callable[..., Links]:
    """Build detached link rows, as returned by the persistence client."""

    def _make(id: int, description: str = "GraphQL", url: str = "https://graphql.org") -> Links:
        return Links(id=id, description=description, url=url, created_at=datetime.now(UTC))

    return _make


@pytest.fixture
def make_comment() -> Callable[..., Comments]:
    """Build detached comment rows created ``age`` seconds ago."""

    def _make(id: int, link_id: int, body: str = "nice", age: int = 0) -> Comments:
        return Comments(
            id=id,
            link_id=link_id,
            body=body,
            created_at=datetime.now(UTC) - timedelta(seconds=age),
        )

    return _make


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
