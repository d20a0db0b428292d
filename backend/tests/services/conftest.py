"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite file database (tmp_path) with the demo board seeded
    - get_db dependency overridden to use the test session factory
    - db_manager replaced so get_write_lock and the readiness probe see the test DB

Design Decisions:
    - File database over :memory:: every session gets its own connection, so
      reads from a second session see only committed state
    - Lifespan not run: tests build the schema and seed data themselves
"""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from shiptivity.db.base import Base
from shiptivity.db.seed import seed_clients
from shiptivity.infrastructure.database import get_db, DatabaseSessionManager
import shiptivity.infrastructure.database as db_module
from shiptivity.main import app
from shiptivity.services.client_store import ClientStore


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}", echo=False,
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
async def seeded(test_session_factory):
    """Insert the demo board; returns the number of rows."""
    async with test_session_factory() as session:
        return await seed_clients(session)


@pytest.fixture
async def fake_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine."""
    original_manager = db_module.db_manager
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    manager.write_lock = asyncio.Lock()
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original_manager


@pytest.fixture
async def client(fake_manager, test_session_factory, seeded):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def read_board(test_session_factory):
    """Callable returning the committed board as ClientRecords."""
    async def _read():
        async with test_session_factory() as session:
            return await ClientStore(session).list_clients()
    return _read
