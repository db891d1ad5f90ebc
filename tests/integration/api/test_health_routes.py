def test_health_reports_checks(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["service"] == "practicals"
    assert body["version"] == "0.1.0"
    assert {c["name"] for c in body["checks"]} == {"startup", "database"}


def test_readiness(client):
    resp = client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json()["ready"] is True


def test_liveness(client):
    resp = client.get("/health/live")
    assert resp.status_code == 200
    body = resp.json()
    assert body["alive"] is True
    assert body["uptimeSeconds"] >= 0


def test_startup_creates_directories(client, test_settings):
    assert test_settings.logs_dir.is_dir()
    assert test_settings.uploads_dir.is_dir()
