"""Health Probes — liveness always up, readiness follows the database."""

import album_catalog.infrastructure.database as db_module
from album_catalog import __version__


async def test_liveness(spy_client):
    res = await spy_client.get("/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "album-catalog", "version": __version__,
    }


async def test_readiness_with_database(db_client):
    res = await db_client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(spy_client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await spy_client.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}
