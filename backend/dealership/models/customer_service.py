from sqlalchemy import Column, String, DateTime, Integer, Text
from ..core.db import Base
from .base import RecordMixin, utcnow

class ServiceRequest(RecordMixin, Base):
    __tablename__ = "customer_service"

    service_request_id = Column(String(50),  nullable=False, unique=True)
    customer_id        = Column(String(50),  nullable=False, index=True)
    request_date       = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    issue_type         = Column(String(100), nullable=False)
    issue_description  = Column(Text,        nullable=False)
    assigned_agent     = Column(String(100))
    priority_level     = Column(String(20),  nullable=False, index=True)
    resolution_status  = Column(String(30),  nullable=False, default="Open", index=True)
    resolution_date    = Column(DateTime(timezone=True))
    feedback_score     = Column(Integer)
    communication_mode = Column(String(50),  nullable=False)
