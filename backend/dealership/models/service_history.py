from sqlalchemy import Column, String, Date, Integer, Numeric, Boolean, Text
from ..core.db import Base
from .base import RecordMixin

class ServiceHistory(RecordMixin, Base):
    __tablename__ = "service_history"

    service_history_id = Column(String(50),  nullable=False, unique=True)
    vehicle_id         = Column(String(50),  nullable=False, index=True)
    customer_id        = Column(String(50),  nullable=False, index=True)
    service_date       = Column(Date,        nullable=False)
    service_type       = Column(String(100), nullable=False)
    service_details    = Column(Text)
    technician_name    = Column(String(200))
    service_center     = Column(String(200), nullable=False)
    total_cost         = Column(Numeric(12, 2), nullable=False)
    mileage_at_service = Column(Integer,     nullable=False)
    warranty_claim     = Column(Boolean,     nullable=False, default=False)
    service_rating     = Column(Integer)
