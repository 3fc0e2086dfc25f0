from sqlalchemy import Column, String, Date, Boolean, Text
from ..core.db import Base
from .base import RecordMixin

class Communication(RecordMixin, Base):
    __tablename__ = "communication"

    communication_id   = Column(String(50),  nullable=False, unique=True)
    customer_id        = Column(String(50),  nullable=False, index=True)
    communication_date = Column(Date,        nullable=False)
    communication_type = Column(String(50),  nullable=False)
    subject            = Column(String(300), nullable=False)
    message_content    = Column(Text,        nullable=False)
    sent_by            = Column(String(100), nullable=False)
    response_status    = Column(String(30),  nullable=False, index=True)
    follow_up_required = Column(Boolean,     nullable=False, default=False)
    follow_up_date     = Column(Date)
    channel_used       = Column(String(50),  nullable=False)
