# backend/dealership/services/stats.py
"""
Liste sayfalarındaki özet kartlar: sayfadaki kayıtlar üzerinde basit
toplam / duruma göre sayım / gecikme hesapları. Kalıcı değildir, her
listelemede yeniden hesaplanır.
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

Row = Mapping[str, Any]


def _count(rows: Iterable[Row], field: str, *values: Any) -> int:
    return sum(1 for r in rows if r.get(field) in values)


def _flagged(rows: Iterable[Row], field: str) -> int:
    return sum(1 for r in rows if r.get(field) is True)


def _sum(rows: Iterable[Row], field: str) -> float:
    total = sum((Decimal(str(r.get(field) or 0)) for r in rows), Decimal("0"))
    return round(float(total), 2)


def _as_date(v: Any) -> Optional[date]:
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    return date.fromisoformat(str(v)[:10])


def accounting(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "total_debit": _sum(rows, "debit_amount"),
        "total_credit": _sum(rows, "credit_amount"),
        "pending": _count(rows, "transaction_status", "Pending"),
        "approved": _count(rows, "transaction_status", "Approved"),
    }


def audits(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "completed": _count(rows, "audit_status", "Completed"),
        "in_progress": _count(rows, "audit_status", "In Progress"),
        "pending": _count(rows, "audit_status", "Pending"),
    }


def communication(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "responded": _count(rows, "response_status", "Responded"),
        "pending": _count(rows, "response_status", "Pending"),
        "follow_up_required": _flagged(rows, "follow_up_required"),
    }


def is_overdue(due: Any, status: Any, today: date, terminal: str) -> bool:
    """due_date < bugün VE durum terminal değil."""
    d = _as_date(due)
    return d is not None and d < today and status != terminal


def compliance(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "compliant": _count(rows, "compliance_status", "Compliant"),
        "pending": _count(rows, "compliance_status", "Pending"),
        "overdue": sum(
            1 for r in rows
            if is_overdue(r.get("due_date"), r.get("compliance_status"), today, "Compliant")
        ),
    }


def customer_engagements(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "total_reward_points": int(sum(int(r.get("reward_points") or 0) for r in rows)),
        "responses": _flagged(rows, "response_received"),
        "follow_ups": _flagged(rows, "follow_up_needed"),
    }


def customer_service(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "open": _count(rows, "resolution_status", "Open"),
        "in_progress": _count(rows, "resolution_status", "In Progress"),
        "resolved": _count(rows, "resolution_status", "Resolved"),
    }


def order_management(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "total_value": _sum(rows, "order_value"),
        "pending": _count(rows, "order_status", "pending", "processing"),
        "completed": _count(rows, "order_status", "delivered", "completed"),
    }


def parts_inventory(rows: List[Row], today: date) -> Dict[str, Any]:
    low = [
        r for r in rows
        if int(r.get("quantity_available") or 0) <= int(r.get("reorder_level") or 0)
    ]
    value = sum(
        (Decimal(int(r.get("quantity_available") or 0)) * Decimal(str(r.get("unit_price") or 0)) for r in rows),
        Decimal("0"),
    )
    return {"low_stock": len(low), "total_value": round(float(value), 2)}


def parts_orders(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "pending": _count(rows, "order_status", "Pending", "Confirmed"),
        "delivered": _count(rows, "order_status", "Delivered"),
        "total_order_value": _sum(rows, "total_cost"),
    }


def repair_orders(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "pending": _count(rows, "repair_status", "Pending"),
        "in_progress": _count(rows, "repair_status", "In Progress"),
        "completed": _count(rows, "repair_status", "Completed"),
    }


def service_history(rows: List[Row], today: date) -> Dict[str, Any]:
    rated = [int(r["service_rating"]) for r in rows if r.get("service_rating")]
    return {
        "total_cost": _sum(rows, "total_cost"),
        "average_rating": round(sum(rated) / len(rated), 1) if rated else None,
        "warranty_claims": _flagged(rows, "warranty_claim"),
    }


def service_scheduling(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "confirmed": _count(rows, "confirmation_status", "confirmed"),
        "pending": _count(rows, "confirmation_status", "pending"),
        "completed": _count(rows, "confirmation_status", "completed"),
    }


def stock_inventory(rows: List[Row], today: date) -> Dict[str, Any]:
    return {
        "available": _count(rows, "stock_status", "Available"),
        "sold": _count(rows, "stock_status", "Sold"),
        "total_value": _sum(rows, "purchase_price"),
    }


StatsFn = Callable[[List[Row], date], Dict[str, Any]]
