# backend/dealership/scripts/seed.py
"""Demo verisi: python -m dealership.scripts.seed  (idempotent)"""
import logging
from contextlib import contextmanager
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select

from dealership.core.db import Base, SessionLocal, engine
from dealership.core.logging import setup_logging
from dealership.models import (
    AccountingEntry, Audit, Communication, ComplianceRecord, CustomerEngagement, Part,
    PartsOrder, RepairOrder, ServiceAppointment, ServiceHistory, ServiceRequest,
    StockVehicle, VehicleOrder,
)
from dealership.models.base import utcnow
from dealership.services.parts_order_service import total_cost

logger = logging.getLogger(__name__)

# ---------- küçük yardımcılar ----------

@contextmanager
def session_scope():
    """Tek seferlik session aç/kapat (hata olursa rollback)."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def get_one(db, model, **by):
    """Tekil alanlara göre satır getir (yoksa None)."""
    return db.execute(select(model).filter_by(**by)).scalars().first()

def get_or_create(db, model, unique_by: dict, defaults: dict | None = None):
    """unique_by ile ara, yoksa oluştur (idempotent)."""
    inst = get_one(db, model, **unique_by)
    if inst:
        return inst, False
    now = utcnow()
    data = {**unique_by, **(defaults or {}), "created_at": now, "updated_at": now}
    inst = model(**data)
    db.add(inst)
    # çağıran commit edeceği için burada commit yok
    return inst, True

# ---------- tohum veriler ----------

TODAY = date.today()

PARTS = [
    {"part_id": "PART-DEMO-0001", "part_name": "Brake Pad Set", "part_number": "BP-1001",
     "quantity_available": 24, "reorder_level": 10, "location": "A-1", "supplier_name": "Acme Parts",
     "unit_price": Decimal("45.00"), "part_category": "Brakes"},
    {"part_id": "PART-DEMO-0002", "part_name": "Oil Filter", "part_number": "OF-2002",
     "quantity_available": 4, "reorder_level": 12, "location": "B-3", "supplier_name": "FilterCo",
     "unit_price": Decimal("8.50"), "part_category": "Engine"},
]

PARTS_ORDERS = [
    {"parts_order_id": "PO-DEMO-0001", "part_id": "PART-DEMO-0002", "quantity_ordered": 20,
     "supplier_id": "SUP-01", "order_status": "Pending", "unit_cost": Decimal("6.00"),
     "payment_status": "Pending"},
]

SINGLE_ROWS = [
    (AccountingEntry, "accounting_id", {
        "accounting_id": "ACC-0001", "transaction_date": TODAY, "transaction_type": "Sale",
        "account_name": "Vehicle Sales", "credit_amount": Decimal("28500.00"), "payment_method": "Bank Transfer",
        "transaction_status": "Approved"}),
    (Audit, "audit_id", {
        "audit_id": "AUD-0001", "audit_type": "Safety", "audit_date": TODAY, "auditor_name": "J. Rivera",
        "area_audited": "Service Bay", "audit_status": "In Progress"}),
    (Communication, "communication_id", {
        "communication_id": "COM-0001", "customer_id": "CUST-001", "communication_date": TODAY,
        "communication_type": "Email", "subject": "Service reminder", "message_content": "Your vehicle is due.",
        "sent_by": "Service Desk", "response_status": "Pending", "follow_up_required": True, "channel_used": "Email"}),
    (ComplianceRecord, "compliance_id", {
        "compliance_id": "CMP-0001", "compliance_type": "Environmental", "applicable_regulation": "EPA 40 CFR",
        "effective_date": TODAY - timedelta(days=90), "due_date": TODAY + timedelta(days=30),
        "responsible_person": "M. Chen", "compliance_status": "Pending", "department": "Service"}),
    (CustomerEngagement, "engagement_id", {
        "engagement_id": "ENG-0001", "customer_id": "CUST-001", "engagement_type": "Loyalty",
        "engagement_date": TODAY, "reward_points": 150, "communication_method": "SMS"}),
    (ServiceRequest, "service_request_id", {
        "service_request_id": "SR-DEMO-0001", "customer_id": "CUST-001", "request_date": utcnow(),
        "issue_type": "Billing", "issue_description": "Invoice mismatch", "priority_level": "High",
        "resolution_status": "Open", "communication_mode": "Phone"}),
    (VehicleOrder, "order_id", {
        "order_id": "ORD-0001", "customer_id": "CUST-001", "vehicle_id": "VEH-001", "order_date": TODAY,
        "order_status": "pending", "payment_status": "Partial", "order_value": Decimal("31200.00")}),
    (RepairOrder, "repair_order_id", {
        "repair_order_id": "RO-0001", "customer_id": "CUST-001", "vehicle_id": "VEH-001",
        "issue_reported": "Squeaking brakes", "repair_date": TODAY, "repair_cost": Decimal("320.00"),
        "repair_status": "Pending"}),
    (ServiceHistory, "service_history_id", {
        "service_history_id": "SH-0001", "vehicle_id": "VEH-001", "customer_id": "CUST-001",
        "service_date": TODAY - timedelta(days=180), "service_type": "Oil Change", "service_center": "Main",
        "total_cost": Decimal("89.99"), "mileage_at_service": 15000, "warranty_claim": False, "service_rating": 5}),
    (ServiceAppointment, "schedule_id", {
        "schedule_id": "SCH-0001", "customer_id": "CUST-001", "vehicle_id": "VEH-001",
        "appointment_date": TODAY + timedelta(days=7), "service_type": "Inspection",
        "preferred_time_slot": "09:00-11:00", "booking_channel": "Online", "confirmation_status": "pending"}),
    (StockVehicle, "vehicle_id", {
        "vehicle_id": "VEH-001", "vin_number": "1HGCM82633A004352", "make": "Honda", "model": "Accord",
        "year": 2024, "purchase_date": TODAY - timedelta(days=30), "stock_status": "Available",
        "purchase_price": Decimal("24500.00"), "location": "Lot A", "mileage": 12, "color": "Blue"}),
]

def run():
    Base.metadata.create_all(bind=engine, checkfirst=True)
    with session_scope() as db:
        logger.info(">> Seeding: parts / parts orders")
        for p in PARTS:
            get_or_create(db, Part, {"part_id": p["part_id"]}, defaults={**p, "last_restocked_date": utcnow()})
        for o in PARTS_ORDERS:
            defaults = {**o, "order_date": utcnow(), "total_cost": total_cost(o["quantity_ordered"], o["unit_cost"])}
            get_or_create(db, PartsOrder, {"parts_order_id": o["parts_order_id"]}, defaults=defaults)

        logger.info(">> Seeding: one row per remaining resource")
        created = 0
        for model, key, row in SINGLE_ROWS:
            _, was_created = get_or_create(db, model, {key: row[key]}, defaults=row)
            created += int(was_created)
        logger.info(">> Seed done (%d new rows)", created)

if __name__ == "__main__":
    setup_logging()
    run()
