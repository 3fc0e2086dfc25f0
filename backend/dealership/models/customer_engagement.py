from sqlalchemy import Column, String, Date, Integer, Boolean, Text
from ..core.db import Base
from .base import RecordMixin

class CustomerEngagement(RecordMixin, Base):
    __tablename__ = "customer_engagements"

    engagement_id        = Column(String(50),  nullable=False, unique=True)
    customer_id          = Column(String(50),  nullable=False, index=True)
    engagement_type      = Column(String(100), nullable=False, index=True)
    engagement_date      = Column(Date,        nullable=False)
    campaign_id          = Column(String(50))
    response_received    = Column(Boolean,     nullable=False, default=False)
    reward_points        = Column(Integer)
    communication_method = Column(String(50),  nullable=False)
    engagement_outcome   = Column(Text)
    follow_up_needed     = Column(Boolean,     nullable=False, default=False)
    next_engagement_date = Column(Date)
