# backend/dealership/services/parts_service.py
from __future__ import annotations

import logging
from typing import Mapping

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from dealership.domain.constants import ERR_PART_HAS_ORDERS
from dealership.models import Part, PartsOrder

logger = logging.getLogger(__name__)


def low_stock_filter(q: Query, params: Mapping[str, str]) -> Query:
    """?low_stock=true → quantity_available <= reorder_level"""
    if (params.get("low_stock") or "").strip().lower() == "true":
        q = q.filter(Part.quantity_available <= Part.reorder_level)
    return q


def restock_defaults(now) -> dict:
    return {"last_restocked_date": now}


def order_count(db: Session, part_id: str) -> int:
    return db.query(func.count(PartsOrder.id)).filter(PartsOrder.part_id == part_id).scalar() or 0


def guard_part_delete(db: Session, part: Part) -> None:
    # Referans eden sipariş varsa silme reddedilir (zincirleme silme yok)
    n = order_count(db, part.part_id)
    if n:
        logger.info("delete refused: part %s referenced by %d order(s)", part.part_id, n)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERR_PART_HAS_ORDERS)
