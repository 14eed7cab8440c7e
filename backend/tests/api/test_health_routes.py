"""Health & Readiness Probes."""

from product_service.main import app, create_app, lifespan


async def test_liveness_probe(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "product-service"


async def test_readiness_probe_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_probe_without_database(client, monkeypatch):
    monkeypatch.setattr(app.state, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_lifespan_shares_one_db_manager_via_app_state():
    fresh = create_app()
    async with lifespan(fresh):
        manager = fresh.state.db_manager
        assert await manager.health_check() is True
        assert fresh.state.product_service._store._db is manager
    assert fresh.state.db_manager is None
    assert fresh.state.product_service is None
