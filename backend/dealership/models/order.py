from sqlalchemy import Column, String, Date, Numeric, Text
from ..core.db import Base
from .base import RecordMixin

class VehicleOrder(RecordMixin, Base):
    __tablename__ = "order_management"

    order_id               = Column(String(50), nullable=False, unique=True)
    customer_id            = Column(String(50), nullable=False)
    vehicle_id             = Column(String(50), nullable=False)
    order_date             = Column(Date,       nullable=False)
    expected_delivery_date = Column(Date)
    order_status           = Column(String(30), nullable=False, index=True)
    salesperson_id         = Column(String(50))
    payment_status         = Column(String(30), nullable=False, index=True)
    order_value            = Column(Numeric(12, 2), nullable=False)
    deposit_amount         = Column(Numeric(12, 2))
    trade_in_vehicle_id    = Column(String(50))
    notes                  = Column(Text)
