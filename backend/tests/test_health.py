from dealership.core.config import SERVICE_NAME


def test_health_ok(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert "charset=utf-8" in r.headers["content-type"].lower()

    data = r.json()
    assert data["success"] is True
    assert data["data"]["service"] == SERVICE_NAME


def test_db_ping(client):
    r = client.get("/db-ping")

    assert r.status_code == 200
    assert r.json()["data"] == {"db": "ok", "select1": 1}


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/api/does-not-exist")

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]


def test_validation_error_envelope(client):
    # zorunlu alan eksik → 400 + "Missing required fields"
    r = client.post("/api/audits", json={"audit_id": "AUD-9"})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"] == "Missing required fields"
    assert any(e["type"] == "missing" for e in body["errors"])


def test_type_error_is_generic_validation_error(client, samples):
    body = samples["stock-inventory"]
    body["year"] = "not-a-year"
    r = client.post("/api/stock-inventory", json=body)

    assert r.status_code == 400
    assert r.json()["error"] == "Validation error"
