from authuser.shared.infrastructure.database.connection import db_manager


async def test_liveness(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "authuser"
    assert "X-Request-ID" in response.headers


async def test_readiness_fails_without_database(client, monkeypatch):
    monkeypatch.setattr(db_manager, "_engine", None)

    response = await client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["database"]["status"] == "unhealthy"


async def test_readiness_with_database(client, engine, monkeypatch):
    monkeypatch.setattr(db_manager, "_engine", engine)

    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "ready"


async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/nowhere")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"
