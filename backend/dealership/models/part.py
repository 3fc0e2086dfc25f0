from sqlalchemy import Column, String, Integer, Numeric, DateTime, Text, CheckConstraint
from ..core.db import Base
from .base import RecordMixin, utcnow

class Part(RecordMixin, Base):
    __tablename__ = "parts_inventory"

    part_id             = Column(String(50),  nullable=False, unique=True)
    part_name           = Column(String(200), nullable=False)
    part_number         = Column(String(100), nullable=False, index=True)
    quantity_available  = Column(Integer,     nullable=False, default=0)
    reorder_level       = Column(Integer,     nullable=False, default=0)
    location            = Column(String(100), nullable=False, index=True)
    supplier_name       = Column(String(200), nullable=False)
    unit_price          = Column(Numeric(12, 2), nullable=False)
    part_category       = Column(String(100), nullable=False, index=True)
    compatibility_info  = Column(Text)
    last_restocked_date = Column(DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        CheckConstraint("quantity_available >= 0", name="ck_parts_quantity_nonneg"),
        CheckConstraint("reorder_level >= 0",      name="ck_parts_reorder_nonneg"),
    )
