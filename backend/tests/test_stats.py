from datetime import date

from dealership.services import stats

TODAY = date(2026, 5, 1)


def test_compliance_overdue_only_counts_open_items():
    rows = [
        {"due_date": "2026-04-01", "compliance_status": "Pending"},
        {"due_date": "2026-04-01", "compliance_status": "Compliant"},
        {"due_date": "2026-06-01", "compliance_status": "Pending"},
        {"due_date": None, "compliance_status": "Pending"},
    ]

    assert stats.compliance(rows, TODAY) == {"compliant": 1, "pending": 3, "overdue": 1}


def test_is_overdue_accepts_dates_and_datetimes():
    assert stats.is_overdue(date(2026, 4, 30), "Open", TODAY, "Done")
    assert not stats.is_overdue("2026-05-01T09:00:00", "Open", TODAY, "Done")


def test_missing_numbers_count_as_zero():
    rows = [{"debit_amount": 10.5, "credit_amount": None}, {"debit_amount": None, "credit_amount": 3}]

    out = stats.accounting(rows, TODAY)

    assert out["total_debit"] == 10.5
    assert out["total_credit"] == 3.0


def test_status_matches_are_exact():
    rows = [{"order_status": "pending"}, {"order_status": "Pending"}, {"order_status": "processing"}]

    assert stats.order_management(rows, TODAY)["pending"] == 2


def test_service_history_average_rating():
    rows = [
        {"total_cost": 100, "service_rating": 5, "warranty_claim": True},
        {"total_cost": 50.25, "service_rating": 4, "warranty_claim": False},
        {"total_cost": None, "service_rating": None, "warranty_claim": False},
    ]

    assert stats.service_history(rows, TODAY) == {
        "total_cost": 150.25, "average_rating": 4.5, "warranty_claims": 1,
    }
    assert stats.service_history([], TODAY)["average_rating"] is None


def test_engagement_totals():
    rows = [
        {"reward_points": 100, "response_received": True, "follow_up_needed": False},
        {"reward_points": None, "response_received": False, "follow_up_needed": True},
    ]

    assert stats.customer_engagements(rows, TODAY) == {
        "total_reward_points": 100, "responses": 1, "follow_ups": 1,
    }


def test_stats_endpoint_follows_list_filters(client, samples):
    for i, status in enumerate(("Available", "Sold", "Available")):
        body = dict(
            samples["stock-inventory"], vehicle_id=f"VEH-{i}", vin_number=f"VIN{i:014d}",
            stock_status=status, purchase_price="1000.00",
        )
        assert client.post("/api/stock-inventory", json=body).status_code == 201

    everything = client.get("/api/stock-inventory/stats").json()
    available = client.get("/api/stock-inventory/stats", params={"stock_status": "Available"}).json()

    assert everything["data"] == {"available": 2, "sold": 1, "total_value": 3000.0}
    assert everything["count"] == 3
    assert available["data"] == {"available": 2, "sold": 0, "total_value": 2000.0}


def test_stats_endpoint_respects_page(client, samples):
    for i in range(3):
        body = dict(samples["repair-orders"], repair_order_id=f"RO-{i}", repair_date=f"2026-03-0{i + 1}")
        client.post("/api/repair-orders", json=body)

    body = client.get("/api/repair-orders/stats", params={"limit": 2}).json()

    assert body["count"] == 2
    assert body["data"]["pending"] == 2
