from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import Field

from .common import CreateModel, Money, PatchModel, Text


# ---- Repair orders ----
class RepairOrderCreate(CreateModel):
    repair_order_id: Text
    customer_id: Text
    vehicle_id: Text
    issue_reported: Text
    diagnosis_summary: Optional[str] = None
    repair_date: date
    parts_replaced: Optional[str] = None
    labor_hours: Optional[Decimal] = Field(default=None, ge=0)
    repair_cost: Money
    warranty_details: Optional[str] = None
    technician_id: Optional[str] = None
    repair_status: Text


class RepairOrderUpdate(PatchModel):
    repair_order_id: Optional[Text] = None
    customer_id: Optional[Text] = None
    vehicle_id: Optional[Text] = None
    issue_reported: Optional[Text] = None
    diagnosis_summary: Optional[str] = None
    repair_date: Optional[date] = None
    parts_replaced: Optional[str] = None
    labor_hours: Optional[Decimal] = Field(default=None, ge=0)
    repair_cost: Optional[Money] = None
    warranty_details: Optional[str] = None
    technician_id: Optional[str] = None
    repair_status: Optional[Text] = None


# ---- Service history ----
class ServiceHistoryCreate(CreateModel):
    service_history_id: Text
    vehicle_id: Text
    customer_id: Text
    service_date: date
    service_type: Text
    service_details: Optional[str] = None
    technician_name: Optional[str] = None
    service_center: Text
    total_cost: Money
    mileage_at_service: int = Field(gt=0)
    warranty_claim: bool
    service_rating: Optional[int] = Field(default=None, ge=1, le=5)


class ServiceHistoryUpdate(PatchModel):
    service_history_id: Optional[Text] = None
    vehicle_id: Optional[Text] = None
    customer_id: Optional[Text] = None
    service_date: Optional[date] = None
    service_type: Optional[Text] = None
    service_details: Optional[str] = None
    technician_name: Optional[str] = None
    service_center: Optional[Text] = None
    total_cost: Optional[Money] = None
    mileage_at_service: Optional[int] = Field(default=None, gt=0)
    warranty_claim: Optional[bool] = None
    service_rating: Optional[int] = Field(default=None, ge=1, le=5)


# ---- Service scheduling ----
class AppointmentCreate(CreateModel):
    schedule_id: Text
    customer_id: Text
    vehicle_id: Text
    appointment_date: date
    service_type: Text
    preferred_time_slot: Text
    technician_id: Optional[str] = None
    booking_channel: Text
    confirmation_status: Text
    remarks: Optional[str] = None


class AppointmentUpdate(PatchModel):
    schedule_id: Optional[Text] = None
    customer_id: Optional[Text] = None
    vehicle_id: Optional[Text] = None
    appointment_date: Optional[date] = None
    service_type: Optional[Text] = None
    preferred_time_slot: Optional[Text] = None
    technician_id: Optional[str] = None
    booking_channel: Optional[Text] = None
    confirmation_status: Optional[Text] = None
    remarks: Optional[str] = None
