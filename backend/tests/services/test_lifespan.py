"""App lifespan: database manager created, tables built, board seeded, then disposed."""

import pytest

import shiptivity.infrastructure.database as db_module
from shiptivity.config import Settings
from shiptivity.main import app, lifespan
from shiptivity.services.client_store import ClientStore


@pytest.fixture
def lifespan_settings(tmp_path, monkeypatch):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'life.db'}",
        seed_on_startup=True,
        log_format="text",
    )
    monkeypatch.setattr("shiptivity.main.get_settings", lambda: settings)
    monkeypatch.setattr(db_module, "db_manager", None)
    return settings


async def test_lifespan_seeds_and_disposes(lifespan_settings):
    async with lifespan(app):
        manager = db_module.db_manager
        assert manager is not None
        async with manager.session() as db:
            clients = await ClientStore(db).list_clients()
        assert len(clients) == 20
    assert db_module.db_manager is None


async def test_lifespan_does_not_reseed(lifespan_settings):
    async with lifespan(app):
        pass
    async with lifespan(app):
        async with db_module.db_manager.session() as db:
            assert len(await ClientStore(db).list_clients()) == 20
