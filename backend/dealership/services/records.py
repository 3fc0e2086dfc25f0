# backend/dealership/services/records.py
"""
Tüm kayıt tipleri için ortak erişim katmanı: listele / getir / oluştur /
kısmi güncelle / sil. Hangi sütunların filtrelenebileceği ve yazılabileceği
``Resource`` tanımından gelir; SQL elle birleştirilmez.
"""
from __future__ import annotations

import logging
import secrets
import string
import time
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Query, Session

from dealership.domain.constants import ERR_NOTHING_TO_UPDATE
from dealership.models.base import utcnow

logger = logging.getLogger(__name__)

_KEY_ALPHABET = string.digits + string.ascii_uppercase


def new_business_key(prefix: str) -> str:
    stamp = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_KEY_ALPHABET) for _ in range(9))
    return f"{prefix}-{stamp}-{suffix}"


def _coerce(column, name: str, raw: str) -> Any:
    """Sorgu dizesini sütun tipine çevir (tamsayı, ondalık, tarih, bool)."""
    try:
        py = column.type.python_type
    except NotImplementedError:
        return raw
    try:
        if py is bool:
            return raw.strip().lower() in ("1", "true", "yes", "on")
        if py is int:
            return int(raw)
        if py is Decimal:
            return Decimal(raw)
        if py is datetime:
            return datetime.fromisoformat(raw)
        if py is date:
            return date.fromisoformat(raw)
    except (ValueError, InvalidOperation):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid value for '{name}'")
    return raw


def filtered_query(db: Session, res, params: Mapping[str, str], q: Optional[Query] = None) -> Query:
    model = res.model
    q = q if q is not None else db.query(model)

    for param, column_name in res.filters.items():
        raw = params.get(param)
        if raw is None or raw == "":
            continue
        column = getattr(model, column_name)
        q = q.filter(column == _coerce(column, param, raw))

    for param in res.search_filters:
        raw = params.get(param)
        if raw:
            q = q.filter(getattr(model, param).ilike(f"%{raw}%"))

    if res.list_hook is not None:
        q = res.list_hook(q, params)
    return q


def ordered(q: Query, res) -> Query:
    clauses = []
    for column_name, descending in res.order_by:
        col = getattr(res.model, column_name)
        clauses.append(col.desc() if descending else col.asc())
    return q.order_by(*clauses)


# ---- Listeleme ----
def list_records(
    db: Session,
    res,
    *,
    params: Mapping[str, str],
    limit: int,
    offset: int = 0,
) -> Tuple[List[Any], int]:
    q = filtered_query(db, res, params)
    total = q.count()
    rows = ordered(q, res).offset(max(0, offset)).limit(max(1, limit)).all()
    return rows, total


# ---- Tekil kayıt ----
def _lookup_clause(res, key: str):
    clauses = []
    for column_name in res.lookup:
        column = getattr(res.model, column_name)
        if column_name == "id":
            try:
                clauses.append(column == int(key))
            except ValueError:
                continue
        else:
            clauses.append(column == key)
    if not clauses:
        return None
    return clauses[0] if len(clauses) == 1 else or_(*clauses)


def get_record(db: Session, res, key: str, *, for_update: bool = False):
    """Bulunamazsa None döner; 404'e çevirmek çağıranın işi."""
    clause = _lookup_clause(res, key)
    if clause is None:
        return None
    q = db.query(res.model).filter(clause)
    if for_update:
        q = q.with_for_update()
    return q.first()


def require_record(db: Session, res, key: str, *, for_update: bool = False):
    row = get_record(db, res, key, for_update=for_update)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{res.label} not found")
    return row


# ---- Ortak commit kalıbı ----
def commit_or_raise(db: Session, op: str, res, key: Any) -> None:
    try:
        db.commit()
    except (IntegrityError, DBAPIError) as e:
        db.rollback()
        msg = str(getattr(e, "orig", e))
        logger.warning("%s %s failed (%s): %s", op, res.slug, key, msg)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=msg)
    except Exception as e:
        db.rollback()
        logger.exception("%s %s error (%s)", op, res.slug, key)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


# ---- Oluştur ----
def create_record(db: Session, res, payload) -> Any:
    data = payload.model_dump()
    if res.key_prefix:
        data[res.business_key] = new_business_key(res.key_prefix)
    now = utcnow()
    if res.create_defaults is not None:
        data.update(res.create_defaults(now))
    if res.prepare_create is not None:
        res.prepare_create(db, data)

    row = res.model(**data, created_at=now, updated_at=now)
    db.add(row)
    commit_or_raise(db, "create", res, data.get(res.business_key))
    db.refresh(row)
    logger.info("created %s %s", res.slug, getattr(row, res.business_key))
    return row


# ---- Kısmi güncelleme ----
def patch_changes(res, patch) -> dict:
    changes = patch.changes()
    if not changes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERR_NOTHING_TO_UPDATE)
    for name, value in changes.items():
        column = res.model.__table__.columns[name]
        if value is None and not column.nullable:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"'{name}' cannot be null")
    return changes


def apply_changes(row, changes: Mapping[str, Any]) -> None:
    for name, value in changes.items():
        setattr(row, name, value)
    row.updated_at = utcnow()


def update_record(db: Session, res, key: str, patch) -> Any:
    row = require_record(db, res, key)
    changes = patch_changes(res, patch)
    apply_changes(row, changes)
    commit_or_raise(db, "update", res, key)
    db.refresh(row)
    logger.info("updated %s %s fields=%s", res.slug, key, sorted(changes))
    return row


# ---- Sil ----
def delete_record(db: Session, res, key: str) -> Any:
    row = require_record(db, res, key)
    if res.delete_guard is not None:
        res.delete_guard(db, row)
    db.delete(row)
    commit_or_raise(db, "delete", res, key)
    logger.info("deleted %s %s", res.slug, key)
    return row
