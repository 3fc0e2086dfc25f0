from sqlalchemy import Column, String, Date, Numeric, Text
from ..core.db import Base
from .base import RecordMixin

class RepairOrder(RecordMixin, Base):
    __tablename__ = "repair_orders"

    repair_order_id   = Column(String(50), nullable=False, unique=True)
    customer_id       = Column(String(50), nullable=False)
    vehicle_id        = Column(String(50), nullable=False)
    issue_reported    = Column(Text,       nullable=False)
    diagnosis_summary = Column(Text)
    repair_date       = Column(Date,       nullable=False)
    parts_replaced    = Column(Text)
    labor_hours       = Column(Numeric(6, 2))
    repair_cost       = Column(Numeric(12, 2), nullable=False)
    warranty_details  = Column(Text)
    technician_id     = Column(String(50))
    repair_status     = Column(String(30), nullable=False, index=True)
