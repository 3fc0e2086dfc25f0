# backend/dealership/routers/common.py
from datetime import date
from typing import NamedTuple, Optional

from fastapi import Query

from dealership.core.config import MAX_PAGE_LIMIT


class Page(NamedTuple):
    limit: int
    offset: int
    page: Optional[int]


def pagination(default_limit: int):
    """limit/offset ya da page/limit; page verilirse offset = (page-1)*limit."""
    def _dep(
        limit: Optional[int] = Query(None, ge=1),
        offset: int = Query(0, ge=0),
        page: Optional[int] = Query(None, ge=1),
    ) -> Page:
        lim = min(limit or default_limit, MAX_PAGE_LIMIT)
        off = (page - 1) * lim if page else offset
        return Page(lim, off, page)
    return _dep


def today() -> date:
    return date.today()
