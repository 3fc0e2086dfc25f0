# dealership/schemas/parts.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .common import CreateModel, Money, PatchModel, Text

OrderStatus = Literal["Pending", "Confirmed", "In Transit", "Delivered", "Cancelled"]
# Sipariş yalnız açık bir durumda oluşturulur; Delivered/Cancelled sonradan PUT ile
OpenOrderStatus = Literal["Pending", "Confirmed", "In Transit"]
PaymentStatus = Literal["Pending", "Paid", "Partial", "Overdue"]


# ---- Parts inventory (part_id sunucuda üretilir) ----
class PartCreate(CreateModel):
    part_name: Text
    part_number: Text
    quantity_available: int = Field(ge=0)
    reorder_level: int = Field(ge=0)
    location: Text
    supplier_name: Text
    unit_price: Money
    part_category: Text
    compatibility_info: Optional[str] = None


class PartUpdate(PatchModel):
    part_name: Optional[Text] = None
    part_number: Optional[Text] = None
    quantity_available: Optional[int] = Field(default=None, ge=0)
    reorder_level: Optional[int] = Field(default=None, ge=0)
    location: Optional[Text] = None
    supplier_name: Optional[Text] = None
    unit_price: Optional[Money] = None
    part_category: Optional[Text] = None
    compatibility_info: Optional[str] = None
    last_restocked_date: Optional[datetime] = None


# ---- Parts orders (parts_order_id sunucuda üretilir, total_cost türetilir) ----
class PartsOrderCreate(CreateModel):
    part_id: Text
    quantity_ordered: int = Field(gt=0)
    supplier_id: Text
    expected_delivery: Optional[datetime] = None
    order_status: OpenOrderStatus
    unit_cost: Money
    payment_status: PaymentStatus
    delivery_tracking_id: Optional[str] = None


class PartsOrderUpdate(PatchModel):
    quantity_ordered: Optional[int] = Field(default=None, gt=0)
    supplier_id: Optional[Text] = None
    expected_delivery: Optional[datetime] = None
    order_status: Optional[OrderStatus] = None
    unit_cost: Optional[Money] = None
    payment_status: Optional[PaymentStatus] = None
    delivery_tracking_id: Optional[str] = None
