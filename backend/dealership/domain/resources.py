# backend/dealership/domain/resources.py
"""
Her kayıt tipinin tek yerde tanımı: URL adı, model, şemalar, izinli
filtreler, varsayılan sıralama ve sayfa boyutu, {id} ile hangi sütunun
aranacağı ve varsa özel kancalar.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from sqlalchemy.orm import Query, Session

from dealership.domain.constants import PREFIX_PART, PREFIX_PARTS_ORDER, PREFIX_SERVICE_REQUEST
from dealership.models import (
    AccountingEntry, Audit, Communication, ComplianceRecord, CustomerEngagement, Part,
    PartsOrder, RepairOrder, ServiceAppointment, ServiceHistory, ServiceRequest,
    StockVehicle, VehicleOrder,
)
from dealership.schemas.customers import (
    CommunicationCreate, CommunicationUpdate, EngagementCreate, EngagementUpdate,
    ServiceRequestCreate, ServiceRequestUpdate,
)
from dealership.schemas.finance import AccountingCreate, AccountingUpdate
from dealership.schemas.governance import AuditCreate, AuditUpdate, ComplianceCreate, ComplianceUpdate
from dealership.schemas.parts import PartCreate, PartUpdate, PartsOrderCreate, PartsOrderUpdate
from dealership.schemas.sales import StockVehicleCreate, StockVehicleUpdate, VehicleOrderCreate, VehicleOrderUpdate
from dealership.schemas.service import (
    AppointmentCreate, AppointmentUpdate, RepairOrderCreate, RepairOrderUpdate,
    ServiceHistoryCreate, ServiceHistoryUpdate,
)
from dealership.services import parts_service, stats


@dataclass(frozen=True)
class Resource:
    slug: str
    label: str
    model: Any
    create_schema: Any
    update_schema: Any
    business_key: str
    filters: Dict[str, str]
    order_by: Tuple[Tuple[str, bool], ...]
    default_limit: int = 50
    search_filters: Tuple[str, ...] = ()
    lookup: Tuple[str, ...] = ("id",)
    key_prefix: Optional[str] = None
    create_defaults: Optional[Callable[[datetime], dict]] = None
    prepare_create: Optional[Callable[[Session, dict], None]] = None
    list_hook: Optional[Callable[[Query, Mapping[str, str]], Query]] = None
    delete_guard: Optional[Callable[[Session, Any], None]] = None
    stats: Optional[stats.StatsFn] = None
    extra_params: Tuple[str, ...] = field(default=())

    @property
    def title(self) -> str:
        return self.slug.replace("-", " ").title()

    def query_params(self) -> Tuple[str, ...]:
        return tuple(self.filters) + self.search_filters + self.extra_params


def _service_request_defaults(now: datetime) -> dict:
    return {"request_date": now, "resolution_status": "Open"}


ACCOUNTING = Resource(
    slug="accounting",
    label="Transaction",
    model=AccountingEntry,
    create_schema=AccountingCreate,
    update_schema=AccountingUpdate,
    business_key="accounting_id",
    filters={"transaction_status": "transaction_status"},
    order_by=(("transaction_date", True),),
    default_limit=50,
    stats=stats.accounting,
)

AUDITS = Resource(
    slug="audits",
    label="Audit",
    model=Audit,
    create_schema=AuditCreate,
    update_schema=AuditUpdate,
    business_key="audit_id",
    filters={"audit_status": "audit_status", "audit_type": "audit_type"},
    order_by=(("audit_date", True),),
    default_limit=10,
    stats=stats.audits,
)

COMMUNICATION = Resource(
    slug="communication",
    label="Communication record",
    model=Communication,
    create_schema=CommunicationCreate,
    update_schema=CommunicationUpdate,
    business_key="communication_id",
    filters={"customer_id": "customer_id", "response_status": "response_status"},
    order_by=(("communication_date", True),),
    default_limit=10,
    stats=stats.communication,
)

COMPLIANCE = Resource(
    slug="compliance",
    label="Compliance record",
    model=ComplianceRecord,
    create_schema=ComplianceCreate,
    update_schema=ComplianceUpdate,
    business_key="compliance_id",
    filters={"compliance_status": "compliance_status", "department": "department"},
    order_by=(("due_date", False),),
    default_limit=50,
    stats=stats.compliance,
)

CUSTOMER_ENGAGEMENTS = Resource(
    slug="customer-engagements",
    label="Customer engagement",
    model=CustomerEngagement,
    create_schema=EngagementCreate,
    update_schema=EngagementUpdate,
    business_key="engagement_id",
    filters={"customer_id": "customer_id", "engagement_type": "engagement_type"},
    order_by=(("engagement_date", True),),
    default_limit=50,
    stats=stats.customer_engagements,
)

CUSTOMER_SERVICE = Resource(
    slug="customer-service",
    label="Customer service request",
    model=ServiceRequest,
    create_schema=ServiceRequestCreate,
    update_schema=ServiceRequestUpdate,
    business_key="service_request_id",
    filters={
        "customer_id": "customer_id",
        "resolution_status": "resolution_status",
        "priority_level": "priority_level",
    },
    order_by=(("request_date", True),),
    default_limit=100,
    key_prefix=PREFIX_SERVICE_REQUEST,
    create_defaults=_service_request_defaults,
    stats=stats.customer_service,
)

ORDER_MANAGEMENT = Resource(
    slug="order-management",
    label="Order",
    model=VehicleOrder,
    create_schema=VehicleOrderCreate,
    update_schema=VehicleOrderUpdate,
    business_key="order_id",
    filters={"status": "order_status", "order_status": "order_status", "payment_status": "payment_status"},
    order_by=(("created_at", True),),
    default_limit=20,
    stats=stats.order_management,
)

PARTS_INVENTORY = Resource(
    slug="parts-inventory",
    label="Part",
    model=Part,
    create_schema=PartCreate,
    update_schema=PartUpdate,
    business_key="part_id",
    filters={"part_category": "part_category", "location": "location"},
    order_by=(("created_at", True),),
    default_limit=100,
    lookup=("part_id", "part_number"),
    key_prefix=PREFIX_PART,
    create_defaults=parts_service.restock_defaults,
    list_hook=parts_service.low_stock_filter,
    delete_guard=parts_service.guard_part_delete,
    stats=stats.parts_inventory,
    extra_params=("low_stock",),
)

PARTS_ORDERS = Resource(
    slug="parts-orders",
    label="Parts order",
    model=PartsOrder,
    create_schema=PartsOrderCreate,
    update_schema=PartsOrderUpdate,
    business_key="parts_order_id",
    filters={
        "order_status": "order_status",
        "payment_status": "payment_status",
        "supplier_id": "supplier_id",
    },
    order_by=(("created_at", True),),
    default_limit=100,
    lookup=("parts_order_id",),
    key_prefix=PREFIX_PARTS_ORDER,
    stats=stats.parts_orders,
)

REPAIR_ORDERS = Resource(
    slug="repair-orders",
    label="Repair order",
    model=RepairOrder,
    create_schema=RepairOrderCreate,
    update_schema=RepairOrderUpdate,
    business_key="repair_order_id",
    filters={"status": "repair_status", "repair_status": "repair_status"},
    order_by=(("repair_date", True), ("created_at", True)),
    default_limit=50,
    stats=stats.repair_orders,
)

SERVICE_HISTORY = Resource(
    slug="service-history",
    label="Service history record",
    model=ServiceHistory,
    create_schema=ServiceHistoryCreate,
    update_schema=ServiceHistoryUpdate,
    business_key="service_history_id",
    filters={"vehicle_id": "vehicle_id", "customer_id": "customer_id"},
    order_by=(("service_date", True), ("created_at", True)),
    default_limit=50,
    stats=stats.service_history,
)

SERVICE_SCHEDULING = Resource(
    slug="service-scheduling",
    label="Service appointment",
    model=ServiceAppointment,
    create_schema=AppointmentCreate,
    update_schema=AppointmentUpdate,
    business_key="schedule_id",
    filters={
        "status": "confirmation_status",
        "confirmation_status": "confirmation_status",
        "service_type": "service_type",
    },
    order_by=(("appointment_date", True),),
    default_limit=20,
    stats=stats.service_scheduling,
)

STOCK_INVENTORY = Resource(
    slug="stock-inventory",
    label="Stock inventory item",
    model=StockVehicle,
    create_schema=StockVehicleCreate,
    update_schema=StockVehicleUpdate,
    business_key="vehicle_id",
    filters={"stock_status": "stock_status"},
    search_filters=("make", "model"),
    order_by=(("purchase_date", True),),
    default_limit=50,
    stats=stats.stock_inventory,
)

RESOURCES: Dict[str, Resource] = {
    r.slug: r
    for r in (
        ACCOUNTING, AUDITS, COMMUNICATION, COMPLIANCE, CUSTOMER_ENGAGEMENTS, CUSTOMER_SERVICE,
        ORDER_MANAGEMENT, PARTS_INVENTORY, PARTS_ORDERS, REPAIR_ORDERS, SERVICE_HISTORY,
        SERVICE_SCHEDULING, STOCK_INVENTORY,
    )
}

# Genel CRUD router'ı ile yayınlananlar; parça siparişlerinin kendi router'ı var
GENERIC_RESOURCES = tuple(r for r in RESOURCES.values() if r is not PARTS_ORDERS)
