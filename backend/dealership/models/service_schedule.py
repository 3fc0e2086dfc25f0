from sqlalchemy import Column, String, Date, Text
from ..core.db import Base
from .base import RecordMixin

class ServiceAppointment(RecordMixin, Base):
    __tablename__ = "service_scheduling"

    schedule_id         = Column(String(50),  nullable=False, unique=True)
    customer_id         = Column(String(50),  nullable=False)
    vehicle_id          = Column(String(50),  nullable=False)
    appointment_date    = Column(Date,        nullable=False)
    service_type        = Column(String(100), nullable=False, index=True)
    preferred_time_slot = Column(String(50),  nullable=False)
    technician_id       = Column(String(50))
    booking_channel     = Column(String(50),  nullable=False)
    confirmation_status = Column(String(30),  nullable=False, index=True)
    remarks             = Column(Text)
