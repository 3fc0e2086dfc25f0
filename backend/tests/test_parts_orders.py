import pytest
from sqlalchemy import text

from dealership.domain.constants import ERR_DELIVERED_ORDER, ERR_PART_NOT_IN_INVENTORY
from dealership.services import records


def _get_part(client, part_id):
    r = client.get(f"/api/parts-inventory/{part_id}")
    assert r.status_code == 200
    return r.json()["data"]


def _get_order(client, order_id):
    r = client.get(f"/api/parts-orders/{order_id}")
    assert r.status_code == 200
    return r.json()["data"]


def test_create_generates_key_and_total(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"], quantity_ordered=3, unit_cost="100")

    assert order["parts_order_id"].startswith("PO-")
    assert order["total_cost"] == 300.0
    assert order["order_date"]
    # parça bilgisi join ile gelir
    assert order["part_name"] == "Oil Filter"
    assert order["part_number"] == "OF-200"
    assert order["part_category"] == "Filters"


def test_create_for_unknown_part_is_rejected(client):
    r = client.post("/api/parts-orders", json={
        "part_id": "PART-nope", "quantity_ordered": 1, "supplier_id": "SUP-1",
        "order_status": "Pending", "unit_cost": "5", "payment_status": "Pending",
    })

    assert r.status_code == 400
    assert r.json()["error"] == ERR_PART_NOT_IN_INVENTORY


def test_create_rejects_unknown_status(client, make_part):
    part = make_part()
    r = client.post("/api/parts-orders", json={
        "part_id": part["part_id"], "quantity_ordered": 1, "supplier_id": "SUP-1",
        "order_status": "Lost", "unit_cost": "5", "payment_status": "Pending",
    })

    assert r.status_code == 400
    assert r.json()["error"] == "Validation error"


@pytest.mark.parametrize("status", ["Delivered", "Cancelled"])
def test_create_in_terminal_status_is_rejected(client, make_part, status):
    part = make_part(quantity_available=10)
    r = client.post("/api/parts-orders", json={
        "part_id": part["part_id"], "quantity_ordered": 7, "supplier_id": "SUP-1",
        "order_status": status, "unit_cost": "5", "payment_status": "Pending",
    })

    assert r.status_code == 400
    assert r.json()["error"] == "Validation error"
    assert client.get("/api/parts-orders").json()["total"] == 0
    assert _get_part(client, part["part_id"])["quantity_available"] == 10


def test_create_missing_fields(client):
    r = client.post("/api/parts-orders", json={"quantity_ordered": 2})

    assert r.status_code == 400
    assert r.json()["error"] == "Missing required fields"


def test_delivery_credits_stock(client, make_part, make_order):
    part = make_part(quantity_available=10)
    order = make_order(part["part_id"], quantity_ordered=4)
    before = _get_part(client, part["part_id"])

    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"order_status": "Delivered"})

    assert r.status_code == 200
    assert r.json()["data"]["order_status"] == "Delivered"
    after = _get_part(client, part["part_id"])
    assert after["quantity_available"] == 14
    assert after["last_restocked_date"] >= before["last_restocked_date"]


def test_repeated_delivery_does_not_credit_twice(client, make_part, make_order):
    part = make_part(quantity_available=10)
    order = make_order(part["part_id"], quantity_ordered=4)
    url = f"/api/parts-orders/{order['parts_order_id']}"

    client.put(url, json={"order_status": "Delivered"})
    r = client.put(url, json={"order_status": "Delivered", "delivery_tracking_id": "TRK-9"})

    assert r.status_code == 200
    assert r.json()["data"]["delivery_tracking_id"] == "TRK-9"
    assert _get_part(client, part["part_id"])["quantity_available"] == 14


def test_non_delivery_update_leaves_stock(client, make_part, make_order):
    part = make_part(quantity_available=10)
    order = make_order(part["part_id"])

    client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"order_status": "In Transit"})

    assert _get_part(client, part["part_id"])["quantity_available"] == 10


def test_failed_delivery_rolls_back_stock(client, make_part, make_order, monkeypatch):
    part = make_part(quantity_available=10)
    order = make_order(part["part_id"], quantity_ordered=4)

    def boom(row, changes):
        raise RuntimeError("order update failed")

    # stok UPDATE'i çalıştıktan sonra sipariş güncellemesi patlar
    monkeypatch.setattr(records, "apply_changes", boom)
    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"order_status": "Delivered"})
    monkeypatch.undo()

    assert r.status_code == 500
    assert r.json()["success"] is False
    assert _get_part(client, part["part_id"])["quantity_available"] == 10
    assert _get_order(client, order["parts_order_id"])["order_status"] == "Pending"


def test_constraint_violation_on_delivery_rolls_back(client, db, make_part, make_order):
    part = make_part(quantity_available=10)
    order = make_order(part["part_id"], quantity_ordered=4)
    # stok CHECK dışında negatife çekilir; +4 artış ck_parts_quantity_nonneg'i ihlal eder
    db.execute(text("PRAGMA ignore_check_constraints = ON"))
    db.execute(
        text("UPDATE parts_inventory SET quantity_available = -100 WHERE part_id = :pid"),
        {"pid": part["part_id"]},
    )
    db.commit()
    db.execute(text("PRAGMA ignore_check_constraints = OFF"))
    db.commit()

    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"order_status": "Delivered"})

    assert r.status_code == 400
    assert "CHECK constraint failed" in r.json()["error"]
    assert _get_part(client, part["part_id"])["quantity_available"] == -100
    assert _get_order(client, order["parts_order_id"])["order_status"] == "Pending"


def test_delivery_of_removed_part_is_not_found(client, db, make_part, make_order):
    from dealership.models import Part

    part = make_part(quantity_available=10)
    order = make_order(part["part_id"])
    # zayıf referans: parça API dışında silinmiş olabilir
    db.query(Part).filter(Part.part_id == part["part_id"]).delete()
    db.commit()

    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"order_status": "Delivered"})

    assert r.status_code == 404
    assert _get_order(client, order["parts_order_id"])["order_status"] == "Pending"


def test_total_cost_recomputed_from_supplied_values(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"], quantity_ordered=3, unit_cost="100")
    url = f"/api/parts-orders/{order['parts_order_id']}"

    r = client.put(url, json={"unit_cost": "150"})
    assert r.json()["data"]["total_cost"] == 450.0

    r = client.put(url, json={"quantity_ordered": 5})
    assert r.json()["data"]["total_cost"] == 750.0

    r = client.put(url, json={"supplier_id": "SUP-2"})
    assert r.json()["data"]["total_cost"] == 750.0


def test_quantity_only_update_uses_stored_unit_cost(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"], quantity_ordered=3, unit_cost="100")

    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"quantity_ordered": 5})

    assert r.json()["data"]["total_cost"] == 500.0


def test_partial_update_touches_only_supplied_field(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"])

    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"payment_status": "Paid"})
    after = r.json()["data"]

    assert after["payment_status"] == "Paid"
    for k in order:
        if k in ("payment_status", "updated_at"):
            continue
        assert after[k] == order[k], k


def test_empty_update_is_rejected(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"])

    r = client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"unknown": 1})

    assert r.status_code == 400
    assert r.json()["error"] == "No fields to update"


def test_delivered_order_cannot_be_deleted(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"])
    client.put(f"/api/parts-orders/{order['parts_order_id']}", json={"order_status": "Delivered"})

    r = client.delete(f"/api/parts-orders/{order['parts_order_id']}")

    assert r.status_code == 400
    assert r.json()["error"] == ERR_DELIVERED_ORDER
    assert _get_order(client, order["parts_order_id"])["order_status"] == "Delivered"


def test_pending_order_can_be_deleted(client, make_part, make_order):
    part = make_part()
    order = make_order(part["part_id"])

    r = client.delete(f"/api/parts-orders/{order['parts_order_id']}")

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Parts order deleted successfully"}
    assert client.get(f"/api/parts-orders/{order['parts_order_id']}").status_code == 404


def test_missing_order_is_not_found(client):
    for method, kwargs in (("get", {}), ("put", {"json": {"payment_status": "Paid"}}), ("delete", {})):
        r = getattr(client, method)("/api/parts-orders/PO-missing", **kwargs)
        assert r.status_code == 404, method
        assert r.json()["error"] == "Parts order not found"


def test_list_filters_and_total(client, make_part, make_order):
    part = make_part()
    make_order(part["part_id"], supplier_id="SUP-1")
    make_order(part["part_id"], supplier_id="SUP-2", order_status="Confirmed")
    make_order(part["part_id"], supplier_id="SUP-2")

    r = client.get("/api/parts-orders", params={"supplier_id": "SUP-2", "limit": 1})
    body = r.json()

    assert body["total"] == 2
    assert len(body["data"]) == 1
    assert body["limit"] == 1

    r = client.get("/api/parts-orders", params={"order_status": "Confirmed"})
    assert [o["supplier_id"] for o in r.json()["data"]] == ["SUP-2"]


def test_orders_stats(client, make_part, make_order):
    part = make_part()
    make_order(part["part_id"], quantity_ordered=2, unit_cost="10")
    delivered = make_order(part["part_id"], quantity_ordered=1, unit_cost="5")
    client.put(f"/api/parts-orders/{delivered['parts_order_id']}", json={"order_status": "Delivered"})

    body = client.get("/api/parts-orders/stats").json()

    assert body["count"] == 2
    assert body["data"] == {"pending": 1, "delivered": 1, "total_order_value": 25.0}
