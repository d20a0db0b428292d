"""Health probes: liveness, readiness with database and lane checks."""

from sqlalchemy import update

import shiptivity.infrastructure.database as db_module
from shiptivity.models.client import Client


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_consistent_lanes(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    body = res.json()
    assert body["checks"] == {"database": "healthy", "lanes": "consistent"}
    assert body["inconsistent_lanes"] == []


async def test_readiness_reports_broken_lane(client, test_db):
    await test_db.execute(
        update(Client).where(Client.id == 4).values(priority=9),
    )
    await test_db.commit()

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    body = res.json()
    assert body["checks"]["lanes"] == "inconsistent"
    assert body["inconsistent_lanes"] == ["complete"]


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
