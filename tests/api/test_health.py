"""Health Probe — liveness endpoint."""

from user_api import __version__


async def test_health_returns_200(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "user-api"
    assert body["version"] == __version__


async def test_health_reports_user_count(client, seed_users):
    res = await client.get("/health")
    assert res.json()["users"] == 2
