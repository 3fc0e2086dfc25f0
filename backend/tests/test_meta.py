from dealership.domain.resources import RESOURCES


def test_lists_every_resource(client):
    data = client.get("/api/meta/resources").json()["data"]

    assert {r["slug"] for r in data} == set(RESOURCES)
    assert len(data) == 13


def test_describes_parts_inventory(client):
    data = client.get("/api/meta/resources/parts-inventory").json()["data"]

    assert data["business_key"] == "part_id"
    assert data["server_generated_key"] is True
    assert data["lookup"] == ["part_id", "part_number"]
    assert "low_stock" in data["filters"]
    assert "part_id" not in data["create_schema"]["properties"]
    assert "part_name" in data["create_schema"]["required"]


def test_describes_alias_filters(client):
    data = client.get("/api/meta/resources/order-management").json()["data"]

    assert data["filters"] == ["status", "order_status", "payment_status"]
    assert data["server_generated_key"] is False


def test_unknown_resource(client):
    r = client.get("/api/meta/resources/nope")

    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Resource not found"}
