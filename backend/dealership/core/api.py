# backend/dealership/core/api.py
from __future__ import annotations
from typing import Any, Dict

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


# Tüm JSON cevaplarda UTF-8 charset
class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


def ok(data: Any = True, status_code: int = 200, **extra: Any):
    payload: Dict[str, Any] = {"success": True, "data": data}
    payload.update(extra)
    return UTF8JSONResponse(content=jsonable_encoder(payload), status_code=status_code)


def fail(error: str, status_code: int = 400, **extra: Any):
    payload: Dict[str, Any] = {"success": False, "error": error}
    payload.update(extra)
    return UTF8JSONResponse(content=jsonable_encoder(payload), status_code=status_code)


def message(text: str, status_code: int = 200):
    return UTF8JSONResponse(content={"success": True, "message": text}, status_code=status_code)


def page_meta(total: int, limit: int, offset: int, page: int | None = None) -> Dict[str, Any]:
    meta: Dict[str, Any] = {"total": total, "limit": limit, "offset": offset}
    if page is not None:
        meta["page"] = page
        meta["pages"] = (total + limit - 1) // limit if limit else 0
    return meta
