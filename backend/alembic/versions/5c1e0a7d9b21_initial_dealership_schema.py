"""initial dealership schema

Revision ID: 5c1e0a7d9b21
Revises:
Create Date: 2026-10-18 10:12:44.503119
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d9b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    """Her tabloda ortak: id + created_at/updated_at."""
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _money():
    return sa.Numeric(12, 2)


def upgrade() -> None:
    op.create_table(
        "accounting", *_record_columns(),
        sa.Column("accounting_id", sa.String(50), nullable=False, unique=True),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        sa.Column("transaction_type", sa.String(50), nullable=False),
        sa.Column("account_name", sa.String(200), nullable=False),
        sa.Column("debit_amount", _money()),
        sa.Column("credit_amount", _money()),
        sa.Column("payment_method", sa.String(50), nullable=False),
        sa.Column("reference_id", sa.String(100)),
        sa.Column("description", sa.Text()),
        sa.Column("transaction_status", sa.String(30), nullable=False),
        sa.Column("processed_by", sa.String(100)),
        sa.Column("approval_date", sa.Date()),
    )
    op.create_index("ix_accounting_transaction_status", "accounting", ["transaction_status"])

    op.create_table(
        "audits", *_record_columns(),
        sa.Column("audit_id", sa.String(50), nullable=False, unique=True),
        sa.Column("audit_type", sa.String(100), nullable=False),
        sa.Column("audit_date", sa.Date(), nullable=False),
        sa.Column("auditor_name", sa.String(200), nullable=False),
        sa.Column("area_audited", sa.String(200), nullable=False),
        sa.Column("audit_status", sa.String(30), nullable=False),
        sa.Column("non_compliance_issues", sa.Text()),
        sa.Column("corrective_actions", sa.Text()),
        sa.Column("report_submission_date", sa.Date()),
        sa.Column("follow_up_date", sa.Date()),
        sa.Column("audit_summary", sa.Text()),
    )
    op.create_index("ix_audits_audit_type", "audits", ["audit_type"])
    op.create_index("ix_audits_audit_status", "audits", ["audit_status"])

    op.create_table(
        "communication", *_record_columns(),
        sa.Column("communication_id", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("communication_date", sa.Date(), nullable=False),
        sa.Column("communication_type", sa.String(50), nullable=False),
        sa.Column("subject", sa.String(300), nullable=False),
        sa.Column("message_content", sa.Text(), nullable=False),
        sa.Column("sent_by", sa.String(100), nullable=False),
        sa.Column("response_status", sa.String(30), nullable=False),
        sa.Column("follow_up_required", sa.Boolean(), nullable=False),
        sa.Column("follow_up_date", sa.Date()),
        sa.Column("channel_used", sa.String(50), nullable=False),
    )
    op.create_index("ix_communication_customer_id", "communication", ["customer_id"])
    op.create_index("ix_communication_response_status", "communication", ["response_status"])

    op.create_table(
        "compliance", *_record_columns(),
        sa.Column("compliance_id", sa.String(50), nullable=False, unique=True),
        sa.Column("compliance_type", sa.String(100), nullable=False),
        sa.Column("applicable_regulation", sa.String(200), nullable=False),
        sa.Column("effective_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("responsible_person", sa.String(200), nullable=False),
        sa.Column("compliance_status", sa.String(30), nullable=False),
        sa.Column("documentation_link", sa.String(500)),
        sa.Column("audit_trail_id", sa.String(50)),
        sa.Column("remarks", sa.Text()),
        sa.Column("department", sa.String(100), nullable=False),
    )
    op.create_index("ix_compliance_compliance_status", "compliance", ["compliance_status"])
    op.create_index("ix_compliance_department", "compliance", ["department"])

    op.create_table(
        "customer_engagements", *_record_columns(),
        sa.Column("engagement_id", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("engagement_type", sa.String(100), nullable=False),
        sa.Column("engagement_date", sa.Date(), nullable=False),
        sa.Column("campaign_id", sa.String(50)),
        sa.Column("response_received", sa.Boolean(), nullable=False),
        sa.Column("reward_points", sa.Integer()),
        sa.Column("communication_method", sa.String(50), nullable=False),
        sa.Column("engagement_outcome", sa.Text()),
        sa.Column("follow_up_needed", sa.Boolean(), nullable=False),
        sa.Column("next_engagement_date", sa.Date()),
    )
    op.create_index("ix_customer_engagements_customer_id", "customer_engagements", ["customer_id"])
    op.create_index("ix_customer_engagements_engagement_type", "customer_engagements", ["engagement_type"])

    op.create_table(
        "customer_service", *_record_columns(),
        sa.Column("service_request_id", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("request_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("issue_type", sa.String(100), nullable=False),
        sa.Column("issue_description", sa.Text(), nullable=False),
        sa.Column("assigned_agent", sa.String(100)),
        sa.Column("priority_level", sa.String(20), nullable=False),
        sa.Column("resolution_status", sa.String(30), nullable=False),
        sa.Column("resolution_date", sa.DateTime(timezone=True)),
        sa.Column("feedback_score", sa.Integer()),
        sa.Column("communication_mode", sa.String(50), nullable=False),
    )
    op.create_index("ix_customer_service_customer_id", "customer_service", ["customer_id"])
    op.create_index("ix_customer_service_priority_level", "customer_service", ["priority_level"])
    op.create_index("ix_customer_service_resolution_status", "customer_service", ["resolution_status"])

    op.create_table(
        "order_management", *_record_columns(),
        sa.Column("order_id", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("vehicle_id", sa.String(50), nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("expected_delivery_date", sa.Date()),
        sa.Column("order_status", sa.String(30), nullable=False),
        sa.Column("salesperson_id", sa.String(50)),
        sa.Column("payment_status", sa.String(30), nullable=False),
        sa.Column("order_value", _money(), nullable=False),
        sa.Column("deposit_amount", _money()),
        sa.Column("trade_in_vehicle_id", sa.String(50)),
        sa.Column("notes", sa.Text()),
    )
    op.create_index("ix_order_management_order_status", "order_management", ["order_status"])
    op.create_index("ix_order_management_payment_status", "order_management", ["payment_status"])

    op.create_table(
        "parts_inventory", *_record_columns(),
        sa.Column("part_id", sa.String(50), nullable=False, unique=True),
        sa.Column("part_name", sa.String(200), nullable=False),
        sa.Column("part_number", sa.String(100), nullable=False),
        sa.Column("quantity_available", sa.Integer(), nullable=False),
        sa.Column("reorder_level", sa.Integer(), nullable=False),
        sa.Column("location", sa.String(100), nullable=False),
        sa.Column("supplier_name", sa.String(200), nullable=False),
        sa.Column("unit_price", _money(), nullable=False),
        sa.Column("part_category", sa.String(100), nullable=False),
        sa.Column("compatibility_info", sa.Text()),
        sa.Column("last_restocked_date", sa.DateTime(timezone=True)),
        sa.CheckConstraint("quantity_available >= 0", name="ck_parts_quantity_nonneg"),
        sa.CheckConstraint("reorder_level >= 0", name="ck_parts_reorder_nonneg"),
    )
    op.create_index("ix_parts_inventory_part_number", "parts_inventory", ["part_number"])
    op.create_index("ix_parts_inventory_location", "parts_inventory", ["location"])
    op.create_index("ix_parts_inventory_part_category", "parts_inventory", ["part_category"])

    op.create_table(
        "parts_orders", *_record_columns(),
        sa.Column("parts_order_id", sa.String(50), nullable=False, unique=True),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("part_id", sa.String(50), nullable=False),
        sa.Column("quantity_ordered", sa.Integer(), nullable=False),
        sa.Column("supplier_id", sa.String(50), nullable=False),
        sa.Column("expected_delivery", sa.DateTime(timezone=True)),
        sa.Column("order_status", sa.String(20), nullable=False),
        sa.Column("unit_cost", _money(), nullable=False),
        sa.Column("total_cost", sa.Numeric(14, 2), nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False),
        sa.Column("delivery_tracking_id", sa.String(100)),
        sa.CheckConstraint("quantity_ordered > 0", name="ck_parts_orders_qty_positive"),
        sa.CheckConstraint(
            "order_status IN ('Pending','Confirmed','In Transit','Delivered','Cancelled')",
            name="ck_parts_orders_status",
        ),
        sa.CheckConstraint(
            "payment_status IN ('Pending','Paid','Partial','Overdue')",
            name="ck_parts_orders_payment",
        ),
    )
    op.create_index("ix_parts_orders_part_id", "parts_orders", ["part_id"])
    op.create_index("ix_parts_orders_supplier_id", "parts_orders", ["supplier_id"])
    op.create_index("ix_parts_orders_order_status", "parts_orders", ["order_status"])
    op.create_index("ix_parts_orders_payment_status", "parts_orders", ["payment_status"])

    op.create_table(
        "repair_orders", *_record_columns(),
        sa.Column("repair_order_id", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("vehicle_id", sa.String(50), nullable=False),
        sa.Column("issue_reported", sa.Text(), nullable=False),
        sa.Column("diagnosis_summary", sa.Text()),
        sa.Column("repair_date", sa.Date(), nullable=False),
        sa.Column("parts_replaced", sa.Text()),
        sa.Column("labor_hours", sa.Numeric(6, 2)),
        sa.Column("repair_cost", _money(), nullable=False),
        sa.Column("warranty_details", sa.Text()),
        sa.Column("technician_id", sa.String(50)),
        sa.Column("repair_status", sa.String(30), nullable=False),
    )
    op.create_index("ix_repair_orders_repair_status", "repair_orders", ["repair_status"])

    op.create_table(
        "service_history", *_record_columns(),
        sa.Column("service_history_id", sa.String(50), nullable=False, unique=True),
        sa.Column("vehicle_id", sa.String(50), nullable=False),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("service_date", sa.Date(), nullable=False),
        sa.Column("service_type", sa.String(100), nullable=False),
        sa.Column("service_details", sa.Text()),
        sa.Column("technician_name", sa.String(200)),
        sa.Column("service_center", sa.String(200), nullable=False),
        sa.Column("total_cost", _money(), nullable=False),
        sa.Column("mileage_at_service", sa.Integer(), nullable=False),
        sa.Column("warranty_claim", sa.Boolean(), nullable=False),
        sa.Column("service_rating", sa.Integer()),
    )
    op.create_index("ix_service_history_vehicle_id", "service_history", ["vehicle_id"])
    op.create_index("ix_service_history_customer_id", "service_history", ["customer_id"])

    op.create_table(
        "service_scheduling", *_record_columns(),
        sa.Column("schedule_id", sa.String(50), nullable=False, unique=True),
        sa.Column("customer_id", sa.String(50), nullable=False),
        sa.Column("vehicle_id", sa.String(50), nullable=False),
        sa.Column("appointment_date", sa.Date(), nullable=False),
        sa.Column("service_type", sa.String(100), nullable=False),
        sa.Column("preferred_time_slot", sa.String(50), nullable=False),
        sa.Column("technician_id", sa.String(50)),
        sa.Column("booking_channel", sa.String(50), nullable=False),
        sa.Column("confirmation_status", sa.String(30), nullable=False),
        sa.Column("remarks", sa.Text()),
    )
    op.create_index("ix_service_scheduling_service_type", "service_scheduling", ["service_type"])
    op.create_index("ix_service_scheduling_confirmation_status", "service_scheduling", ["confirmation_status"])

    op.create_table(
        "stock_inventory", *_record_columns(),
        sa.Column("vehicle_id", sa.String(50), nullable=False, unique=True),
        sa.Column("vin_number", sa.String(17), nullable=False, unique=True),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("purchase_date", sa.Date(), nullable=False),
        sa.Column("stock_status", sa.String(30), nullable=False),
        sa.Column("purchase_price", _money(), nullable=False),
        sa.Column("location", sa.String(100), nullable=False),
        sa.Column("mileage", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(50), nullable=False),
        sa.Column("last_inspection_date", sa.Date()),
    )
    op.create_index("ix_stock_inventory_stock_status", "stock_inventory", ["stock_status"])


TABLES = (
    "stock_inventory", "service_scheduling", "service_history", "repair_orders", "parts_orders",
    "parts_inventory", "order_management", "customer_service", "customer_engagements",
    "compliance", "communication", "audits", "accounting",
)


def downgrade() -> None:
    # indeksler tabloyla birlikte düşer
    for name in TABLES:
        op.drop_table(name)
