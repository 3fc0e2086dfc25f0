from sqlalchemy import Column, String, Integer, Numeric, DateTime, CheckConstraint
from ..core.db import Base
from .base import RecordMixin, utcnow

class PartsOrder(RecordMixin, Base):
    __tablename__ = "parts_orders"

    parts_order_id       = Column(String(50), nullable=False, unique=True)
    order_date           = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    part_id              = Column(String(50), nullable=False, index=True)
    quantity_ordered     = Column(Integer,    nullable=False)
    supplier_id          = Column(String(50), nullable=False, index=True)
    expected_delivery    = Column(DateTime(timezone=True))
    order_status         = Column(String(20), nullable=False, index=True)
    unit_cost            = Column(Numeric(12, 2), nullable=False)
    total_cost           = Column(Numeric(14, 2), nullable=False)
    payment_status       = Column(String(20), nullable=False, index=True)
    delivery_tracking_id = Column(String(100))

    __table_args__ = (
        CheckConstraint("quantity_ordered > 0", name="ck_parts_orders_qty_positive"),
        CheckConstraint(
            "order_status IN ('Pending','Confirmed','In Transit','Delivered','Cancelled')",
            name="ck_parts_orders_status",
        ),
        CheckConstraint(
            "payment_status IN ('Pending','Paid','Partial','Overdue')",
            name="ck_parts_orders_payment",
        ),
    )
