"""
Pytest fixture'ları: uygulama bellek içi SQLite'a bağlanır, şema her test
için sıfırdan kurulur. Örnek gövdeler ve parça/sipariş fabrikaları burada.
"""
import os

# app import edilmeden ÖNCE: .env'deki gerçek veritabanı ezilsin
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "0"

import pytest
from fastapi.testclient import TestClient

from dealership.core.db import Base, SessionLocal, engine
from dealership.main import app


# Her kayıt tipi için geçerli bir oluşturma gövdesi
SAMPLES = {
    "accounting": {
        "accounting_id": "ACC-1001", "transaction_date": "2026-03-02", "transaction_type": "Sale",
        "account_name": "Vehicle Sales", "debit_amount": "0", "credit_amount": "24500.00",
        "payment_method": "Bank Transfer", "transaction_status": "Pending",
    },
    "audits": {
        "audit_id": "AUD-1001", "audit_type": "Financial", "audit_date": "2026-02-14",
        "auditor_name": "Selin Kaya", "area_audited": "Showroom", "audit_status": "Completed",
    },
    "communication": {
        "communication_id": "COM-1001", "customer_id": "CUST-1", "communication_date": "2026-03-01",
        "communication_type": "Email", "subject": "Service reminder", "message_content": "Your car is due.",
        "sent_by": "Service Desk", "response_status": "Pending", "follow_up_required": True,
        "channel_used": "Email",
    },
    "compliance": {
        "compliance_id": "CMP-1001", "compliance_type": "Safety", "applicable_regulation": "ISO 45001",
        "effective_date": "2026-01-01", "due_date": "2026-06-30", "responsible_person": "Ahmet Demir",
        "compliance_status": "Pending", "department": "Service",
    },
    "customer-engagements": {
        "engagement_id": "ENG-1001", "customer_id": "CUST-1", "engagement_type": "Loyalty",
        "engagement_date": "2026-02-20", "communication_method": "SMS", "reward_points": 150,
        "response_received": True,
    },
    "customer-service": {
        "customer_id": "CUST-1", "issue_type": "Billing", "issue_description": "Charged twice",
        "priority_level": "High", "communication_mode": "Phone",
    },
    "order-management": {
        "order_id": "ORD-1001", "customer_id": "CUST-1", "vehicle_id": "VEH-1", "order_date": "2026-03-03",
        "order_status": "pending", "payment_status": "unpaid", "order_value": "31000.00",
    },
    "parts-inventory": {
        "part_name": "Oil Filter", "part_number": "OF-200", "quantity_available": 10, "reorder_level": 5,
        "location": "A1", "supplier_name": "Bosch", "unit_price": "12.50", "part_category": "Filters",
    },
    "repair-orders": {
        "repair_order_id": "RO-1001", "customer_id": "CUST-1", "vehicle_id": "VEH-1",
        "issue_reported": "Brake noise", "repair_date": "2026-03-04", "repair_cost": "420.00",
        "repair_status": "Pending",
    },
    "service-history": {
        "service_history_id": "SH-1001", "vehicle_id": "VEH-1", "customer_id": "CUST-1",
        "service_date": "2026-01-18", "service_type": "Oil Change", "service_center": "Main",
        "total_cost": "89.90", "mileage_at_service": 42000, "warranty_claim": False, "service_rating": 4,
    },
    "service-scheduling": {
        "schedule_id": "SCH-1001", "customer_id": "CUST-1", "vehicle_id": "VEH-1",
        "appointment_date": "2026-04-10", "service_type": "Inspection", "preferred_time_slot": "09:00-10:00",
        "booking_channel": "Web", "confirmation_status": "pending",
    },
    "stock-inventory": {
        "vehicle_id": "VEH-1", "vin_number": "1HGCM82633A004352", "make": "Honda", "model": "Accord",
        "year": 2024, "purchase_date": "2026-01-05", "stock_status": "Available",
        "purchase_price": "21000.00", "location": "Lot B", "mileage": 12, "color": "Blue",
    },
}


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def samples():
    return {slug: dict(body) for slug, body in SAMPLES.items()}


@pytest.fixture
def make_part(client):
    """Parça oluşturur, dönen data sözlüğünü verir."""
    def _make(**overrides):
        body = dict(SAMPLES["parts-inventory"], **overrides)
        r = client.post("/api/parts-inventory", json=body)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _make


@pytest.fixture
def make_order(client):
    def _make(part_id, **overrides):
        body = {
            "part_id": part_id, "quantity_ordered": 3, "supplier_id": "SUP-1",
            "order_status": "Pending", "unit_cost": "100.00", "payment_status": "Pending",
        }
        body.update(overrides)
        r = client.post("/api/parts-orders", json=body)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _make
