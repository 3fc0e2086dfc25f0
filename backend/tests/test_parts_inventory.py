from dealership.domain.constants import ERR_PART_HAS_ORDERS


def test_create_generates_part_id_and_restock_date(make_part):
    part = make_part()

    assert part["part_id"].startswith("PART-")
    # PART-<ms>-<9 karakter>
    prefix, stamp, suffix = part["part_id"].split("-")
    assert stamp.isdigit() and len(suffix) == 9
    assert part["last_restocked_date"]
    assert part["unit_price"] == 12.5


def test_client_supplied_part_id_is_ignored(client, samples):
    body = samples["parts-inventory"]
    body["part_id"] = "MINE"

    r = client.post("/api/parts-inventory", json=body)

    assert r.status_code == 201
    assert r.json()["data"]["part_id"] != "MINE"


def test_lookup_by_part_id_and_part_number(client, make_part):
    part = make_part(part_number="BRK-77")

    by_id = client.get(f"/api/parts-inventory/{part['part_id']}").json()["data"]
    by_number = client.get("/api/parts-inventory/BRK-77").json()["data"]

    assert by_id["id"] == by_number["id"] == part["id"]


def test_negative_quantity_rejected(client, samples):
    body = samples["parts-inventory"]
    body["quantity_available"] = -1

    r = client.post("/api/parts-inventory", json=body)

    assert r.status_code == 400


def test_update_by_part_number(client, make_part):
    part = make_part(part_number="SP-1", quantity_available=3)

    r = client.put("/api/parts-inventory/SP-1", json={"quantity_available": 8, "location": "B2"})

    data = r.json()["data"]
    assert r.status_code == 200
    assert data["quantity_available"] == 8
    assert data["location"] == "B2"
    assert data["part_id"] == part["part_id"]


def test_low_stock_filter(client, make_part):
    make_part(part_number="LOW", quantity_available=2, reorder_level=5)
    make_part(part_number="EDGE", quantity_available=5, reorder_level=5)
    make_part(part_number="OK", quantity_available=20, reorder_level=5)

    body = client.get("/api/parts-inventory", params={"low_stock": "true"}).json()

    assert body["total"] == 2
    assert sorted(p["part_number"] for p in body["data"]) == ["EDGE", "LOW"]


def test_category_and_location_filters(client, make_part):
    make_part(part_number="F1", part_category="Filters", location="A1")
    make_part(part_number="B1", part_category="Brakes", location="A1")
    make_part(part_number="B2", part_category="Brakes", location="C3")

    body = client.get("/api/parts-inventory", params={"part_category": "Brakes", "location": "A1"}).json()

    assert [p["part_number"] for p in body["data"]] == ["B1"]


def test_part_with_orders_cannot_be_deleted(client, make_part, make_order):
    part = make_part()
    make_order(part["part_id"])

    r = client.delete(f"/api/parts-inventory/{part['part_id']}")

    assert r.status_code == 400
    assert r.json()["error"] == ERR_PART_HAS_ORDERS
    assert client.get(f"/api/parts-inventory/{part['part_id']}").status_code == 200


def test_part_without_orders_can_be_deleted(client, make_part):
    part = make_part()

    r = client.delete(f"/api/parts-inventory/{part['part_id']}")

    assert r.status_code == 200
    assert r.json()["message"] == "Part deleted successfully"
    assert client.get(f"/api/parts-inventory/{part['part_id']}").status_code == 404


def test_inventory_stats(client, make_part):
    make_part(part_number="A", quantity_available=2, reorder_level=5, unit_price="10.00")
    make_part(part_number="B", quantity_available=4, reorder_level=1, unit_price="2.50")

    body = client.get("/api/parts-inventory/stats").json()

    assert body["data"] == {"low_stock": 1, "total_value": 30.0}
