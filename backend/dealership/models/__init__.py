from .accounting import AccountingEntry
from .audit import Audit
from .communication import Communication
from .compliance import ComplianceRecord
from .customer_engagement import CustomerEngagement
from .customer_service import ServiceRequest
from .order import VehicleOrder
from .part import Part
from .parts_order import PartsOrder
from .repair_order import RepairOrder
from .service_history import ServiceHistory
from .service_schedule import ServiceAppointment
from .stock_vehicle import StockVehicle
__all__ = [
    "AccountingEntry", "Audit", "Communication", "ComplianceRecord", "CustomerEngagement",
    "ServiceRequest", "VehicleOrder", "Part", "PartsOrder", "RepairOrder", "ServiceHistory",
    "ServiceAppointment", "StockVehicle",
]
