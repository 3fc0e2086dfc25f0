# backend/dealership/routers/crud.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from dealership.core.api import fail, message, ok, page_meta
from dealership.core.db import get_db
from dealership.domain.resources import Resource
from dealership.routers.common import Page, pagination, today
from dealership.services import records


def build_router(res: Resource) -> APIRouter:
    """Bir kayıt tipi için GET liste/istatistik/detay, POST, PUT, DELETE uçları."""
    router = APIRouter(prefix=f"/api/{res.slug}", tags=[res.slug])
    CreateIn = res.create_schema
    UpdateIn = res.update_schema
    Paging = pagination(res.default_limit)

    # --- LIST ---
    @router.get("")
    def list_records(request: Request, page: Page = Depends(Paging), db: Session = Depends(get_db)):
        rows, total = records.list_records(
            db, res, params=request.query_params, limit=page.limit, offset=page.offset
        )
        return ok([r.as_dict() for r in rows], **page_meta(total, page.limit, page.offset, page.page))

    # --- STATS (aynı filtre + sayfa üzerinde) ---
    @router.get("/stats")
    def record_stats(request: Request, page: Page = Depends(Paging), db: Session = Depends(get_db)):
        rows, _ = records.list_records(
            db, res, params=request.query_params, limit=page.limit, offset=page.offset
        )
        data = [r.as_dict() for r in rows]
        return ok(res.stats(data, today()) if res.stats else {}, count=len(data))

    # --- DETAIL ---
    @router.get("/{key}")
    def get_record(key: str, db: Session = Depends(get_db)):
        row = records.get_record(db, res, key)
        if row is None:
            return fail(f"{res.label} not found", status_code=status.HTTP_404_NOT_FOUND)
        return ok(row.as_dict())

    # --- CREATE ---
    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_record(payload: CreateIn, db: Session = Depends(get_db)):
        row = records.create_record(db, res, payload)
        return ok(row.as_dict(), status_code=status.HTTP_201_CREATED)

    # --- UPDATE ---
    @router.put("/{key}")
    def update_record(key: str, payload: UpdateIn, db: Session = Depends(get_db)):
        row = records.update_record(db, res, key, payload)
        return ok(row.as_dict())

    # --- DELETE ---
    @router.delete("/{key}")
    def delete_record(key: str, db: Session = Depends(get_db)):
        records.delete_record(db, res, key)
        return message(f"{res.label} deleted successfully")

    return router
