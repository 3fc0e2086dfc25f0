from sqlalchemy import Column, String, Date, Text
from ..core.db import Base
from .base import RecordMixin

class Audit(RecordMixin, Base):
    __tablename__ = "audits"

    audit_id               = Column(String(50),  nullable=False, unique=True)
    audit_type             = Column(String(100), nullable=False, index=True)
    audit_date             = Column(Date,        nullable=False)
    auditor_name           = Column(String(200), nullable=False)
    area_audited           = Column(String(200), nullable=False)
    audit_status           = Column(String(30),  nullable=False, index=True)
    non_compliance_issues  = Column(Text)
    corrective_actions     = Column(Text)
    report_submission_date = Column(Date)
    follow_up_date         = Column(Date)
    audit_summary          = Column(Text)
