# backend/dealership/services/parts_order_service.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy import update
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from dealership.domain.constants import (
    DELIVERED,
    ERR_DELIVERED_ORDER,
    ERR_PART_NOT_IN_INVENTORY,
)
from dealership.domain.resources import PARTS_ORDERS
from dealership.models import Part, PartsOrder
from dealership.models.base import utcnow
from dealership.schemas.common import MONEY_PLACES
from dealership.schemas.parts import PartsOrderCreate, PartsOrderUpdate
from dealership.services import records

logger = logging.getLogger(__name__)

# Okumalarda parçadan eklenen alanlar (LEFT JOIN)
PART_FIELDS = ("part_name", "part_number", "part_category")


def total_cost(quantity: int, unit_cost) -> Decimal:
    return (Decimal(int(quantity)) * Decimal(str(unit_cost))).quantize(MONEY_PLACES)


def serialize(order: PartsOrder, part: Optional[Tuple[Any, ...]] = None) -> Dict[str, Any]:
    data = order.as_dict()
    values = part if part is not None else (None,) * len(PART_FIELDS)
    data.update(zip(PART_FIELDS, values))
    return data


def _with_part(db: Session):
    return db.query(PartsOrder, Part.part_name, Part.part_number, Part.part_category).outerjoin(
        Part, Part.part_id == PartsOrder.part_id
    )


# ---- Listeleme ----
def list_orders(
    db: Session, *, params: Mapping[str, str], limit: int, offset: int = 0
) -> Tuple[List[Dict[str, Any]], int]:
    q = records.filtered_query(db, PARTS_ORDERS, params)
    total = q.count()
    q = records.filtered_query(db, PARTS_ORDERS, params, _with_part(db))
    rows = records.ordered(q, PARTS_ORDERS).offset(max(0, offset)).limit(max(1, limit)).all()
    return [serialize(order, tuple(extra)) for order, *extra in rows], total


def get_order(db: Session, order_id: str) -> Optional[Dict[str, Any]]:
    row = _with_part(db).filter(PartsOrder.parts_order_id == order_id).first()
    if row is None:
        return None
    order, *extra = row
    return serialize(order, tuple(extra))


def _require_detail(db: Session, order_id: str) -> Dict[str, Any]:
    data = get_order(db, order_id)
    if data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parts order not found")
    return data


# ---- Oluştur ----
def create_order(db: Session, payload: PartsOrderCreate) -> Dict[str, Any]:
    # varlık kontrolü: sipariş yalnızca envanterdeki bir parça için açılır
    if db.query(Part.id).filter(Part.part_id == payload.part_id).first() is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERR_PART_NOT_IN_INVENTORY)

    now = utcnow()
    order = PartsOrder(
        **payload.model_dump(),
        parts_order_id=records.new_business_key(PARTS_ORDERS.key_prefix),
        order_date=now,
        total_cost=total_cost(payload.quantity_ordered, payload.unit_cost),
        created_at=now,
        updated_at=now,
    )
    db.add(order)
    records.commit_or_raise(db, "create", PARTS_ORDERS, order.parts_order_id)
    db.refresh(order)
    logger.info("created parts order %s (part_id=%s, qty=%s)", order.parts_order_id, order.part_id, order.quantity_ordered)
    return _require_detail(db, order.parts_order_id)


# ---- Teslim mutabakatı ----
def credit_stock(db: Session, *, part_id: str, quantity: int) -> None:
    """Parça stoğunu SQL tarafında artırır; yeniden stoklama tarihini damgalar."""
    now = utcnow()
    result = db.execute(
        update(Part)
        .where(Part.part_id == part_id)
        .values(
            quantity_available=Part.quantity_available + int(quantity),
            last_restocked_date=now,
            updated_at=now,
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Part not found")
    logger.info("stock credited: part_id=%s +%s", part_id, quantity)


def _order_changes(order: PartsOrder, patch: PartsOrderUpdate) -> Dict[str, Any]:
    changes = records.patch_changes(PARTS_ORDERS, patch)
    if "quantity_ordered" in changes or "unit_cost" in changes:
        qty = changes.get("quantity_ordered", order.quantity_ordered)
        cost = changes.get("unit_cost", order.unit_cost)
        changes["total_cost"] = total_cost(qty, cost)
    return changes


def update_order(db: Session, order_id: str, patch: PartsOrderUpdate) -> Dict[str, Any]:
    """
    Kısmi güncelleme. order_status 'Delivered' yapılıyorsa sipariş satırı
    kilitlenir ve önceki durum 'Delivered' değilse parçanın stoğu
    quantity_ordered kadar artırılır. Stok artışı ile sipariş güncellemesi
    tek transaction'dır: biri başarısızsa ikisi de geri alınır.
    """
    order = records.require_record(db, PARTS_ORDERS, order_id, for_update=True)
    try:
        changes = _order_changes(order, patch)

        # --- DOUBLE DELIVERY GUARD: zaten Delivered ise stok tekrar artmaz
        delivering = changes.get("order_status") == DELIVERED and order.order_status != DELIVERED
        if delivering:
            credit_stock(db, part_id=order.part_id, quantity=order.quantity_ordered)
        elif changes.get("order_status") == DELIVERED:
            logger.info("parts order %s already delivered; stock not credited again", order_id)

        records.apply_changes(order, changes)
        db.commit()
        db.refresh(order)
    except HTTPException:
        db.rollback()
        raise
    except (IntegrityError, DBAPIError) as e:
        # kısıt ihlali: stok artışı da geri alınır
        db.rollback()
        msg = str(getattr(e, "orig", e))
        logger.warning("update_order failed (parts_order_id=%s): %s", order_id, msg)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=msg)
    except Exception as e:
        db.rollback()
        logger.exception("update_order error (parts_order_id=%s)", order_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    logger.info("updated parts order %s fields=%s", order_id, sorted(changes))
    return _require_detail(db, order_id)


# ---- Sil ----
def delete_order(db: Session, order_id: str) -> None:
    order = records.require_record(db, PARTS_ORDERS, order_id)
    # Teslim edilmiş sipariş stoğa işlenmiştir, tarihçe olarak kalır
    if order.order_status == DELIVERED:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERR_DELIVERED_ORDER)
    db.delete(order)
    records.commit_or_raise(db, "delete", PARTS_ORDERS, order_id)
    logger.info("deleted parts order %s", order_id)
