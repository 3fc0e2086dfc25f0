from sqlalchemy import Column, String, Date, Text
from ..core.db import Base
from .base import RecordMixin

class ComplianceRecord(RecordMixin, Base):
    __tablename__ = "compliance"

    compliance_id         = Column(String(50),  nullable=False, unique=True)
    compliance_type       = Column(String(100), nullable=False)
    applicable_regulation = Column(String(200), nullable=False)
    effective_date        = Column(Date,        nullable=False)
    due_date              = Column(Date,        nullable=False)
    responsible_person    = Column(String(200), nullable=False)
    compliance_status     = Column(String(30),  nullable=False, index=True)
    documentation_link    = Column(String(500))
    audit_trail_id        = Column(String(50))
    remarks               = Column(Text)
    department            = Column(String(100), nullable=False, index=True)
