from datetime import date
from typing import Optional

from pydantic import Field

from .common import CreateModel, Money, PatchModel, Text


# ---- Vehicle orders ----
class VehicleOrderCreate(CreateModel):
    order_id: Text
    customer_id: Text
    vehicle_id: Text
    order_date: date
    expected_delivery_date: Optional[date] = None
    order_status: Text
    salesperson_id: Optional[str] = None
    payment_status: Text
    order_value: Money
    deposit_amount: Optional[Money] = None
    trade_in_vehicle_id: Optional[str] = None
    notes: Optional[str] = None


class VehicleOrderUpdate(PatchModel):
    order_id: Optional[Text] = None
    customer_id: Optional[Text] = None
    vehicle_id: Optional[Text] = None
    order_date: Optional[date] = None
    expected_delivery_date: Optional[date] = None
    order_status: Optional[Text] = None
    salesperson_id: Optional[str] = None
    payment_status: Optional[Text] = None
    order_value: Optional[Money] = None
    deposit_amount: Optional[Money] = None
    trade_in_vehicle_id: Optional[str] = None
    notes: Optional[str] = None


# ---- Stock inventory (satıştaki araçlar) ----
class StockVehicleCreate(CreateModel):
    vehicle_id: Text
    vin_number: Text
    make: Text
    model: Text
    year: int = Field(ge=1900, le=2100)
    purchase_date: date
    stock_status: Text
    purchase_price: Money
    location: Text
    mileage: int = Field(ge=0)
    color: Text
    last_inspection_date: Optional[date] = None


class StockVehicleUpdate(PatchModel):
    vehicle_id: Optional[Text] = None
    vin_number: Optional[Text] = None
    make: Optional[Text] = None
    model: Optional[Text] = None
    year: Optional[int] = Field(default=None, ge=1900, le=2100)
    purchase_date: Optional[date] = None
    stock_status: Optional[Text] = None
    purchase_price: Optional[Money] = None
    location: Optional[Text] = None
    mileage: Optional[int] = Field(default=None, ge=0)
    color: Optional[Text] = None
    last_inspection_date: Optional[date] = None
