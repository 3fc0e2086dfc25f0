from sqlalchemy import Column, String, Date, Integer, Numeric
from ..core.db import Base
from .base import RecordMixin

class StockVehicle(RecordMixin, Base):
    __tablename__ = "stock_inventory"

    vehicle_id           = Column(String(50),  nullable=False, unique=True)
    vin_number           = Column(String(17),  nullable=False, unique=True)
    make                 = Column(String(100), nullable=False)
    model                = Column(String(100), nullable=False)
    year                 = Column(Integer,     nullable=False)
    purchase_date        = Column(Date,        nullable=False)
    stock_status         = Column(String(30),  nullable=False, index=True)
    purchase_price       = Column(Numeric(12, 2), nullable=False)
    location             = Column(String(100), nullable=False)
    mileage              = Column(Integer,     nullable=False)
    color                = Column(String(50),  nullable=False)
    last_inspection_date = Column(Date)
