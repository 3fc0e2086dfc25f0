# backend/dealership/routers/parts_orders.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from dealership.core.api import fail, message, ok, page_meta
from dealership.core.db import get_db
from dealership.domain.resources import PARTS_ORDERS
from dealership.routers.common import Page, pagination, today
from dealership.schemas.parts import PartsOrderCreate, PartsOrderUpdate
from dealership.services import parts_order_service

router = APIRouter(prefix="/api/parts-orders", tags=["parts-orders"])

Paging = pagination(PARTS_ORDERS.default_limit)


# --- LIST ---
@router.get("")
def list_parts_orders(request: Request, page: Page = Depends(Paging), db: Session = Depends(get_db)):
    """?order_status, ?payment_status, ?supplier_id eşitlik filtreleri; created_at azalan."""
    rows, total = parts_order_service.list_orders(
        db, params=request.query_params, limit=page.limit, offset=page.offset
    )
    return ok(rows, **page_meta(total, page.limit, page.offset, page.page))


@router.get("/stats")
def parts_order_stats(request: Request, page: Page = Depends(Paging), db: Session = Depends(get_db)):
    rows, _ = parts_order_service.list_orders(
        db, params=request.query_params, limit=page.limit, offset=page.offset
    )
    return ok(PARTS_ORDERS.stats(rows, today()), count=len(rows))


# --- DETAIL ---
@router.get("/{order_id}")
def get_parts_order(order_id: str, db: Session = Depends(get_db)):
    data = parts_order_service.get_order(db, order_id)
    if data is None:
        return fail("Parts order not found", status_code=status.HTTP_404_NOT_FOUND)
    return ok(data)


# --- CREATE ---
@router.post("", status_code=status.HTTP_201_CREATED)
def create_parts_order(payload: PartsOrderCreate, db: Session = Depends(get_db)):
    return ok(parts_order_service.create_order(db, payload), status_code=status.HTTP_201_CREATED)


# --- UPDATE (Delivered → stok mutabakatı) ---
@router.put("/{order_id}")
def update_parts_order(order_id: str, payload: PartsOrderUpdate, db: Session = Depends(get_db)):
    """
    Yalnızca gönderilen alanlar yazılır. order_status 'Delivered' yapılınca
    parçanın quantity_available değeri aynı transaction içinde artırılır.
    """
    return ok(parts_order_service.update_order(db, order_id, payload))


# --- DELETE (Delivered olan silinemez) ---
@router.delete("/{order_id}")
def delete_parts_order(order_id: str, db: Session = Depends(get_db)):
    parts_order_service.delete_order(db, order_id)
    return message("Parts order deleted successfully")
