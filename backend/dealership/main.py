# backend/dealership/main.py
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from dealership.core.api import UTF8JSONResponse, fail, ok
from dealership.core.config import AUTO_CREATE_TABLES, CORS_ALLOW_ORIGINS, SERVICE_NAME
from dealership.core.db import Base, engine, get_db
from dealership.core.logging import setup_logging
from dealership.domain.constants import ERR_MISSING_FIELDS
from dealership.domain.resources import GENERIC_RESOURCES
from dealership import models  # noqa: F401  (metadata dolsun)

# --- Router importları ---
from dealership.routers.crud import build_router
from dealership.routers.meta import router as meta_router
from dealership.routers.parts_orders import router as parts_orders_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=SERVICE_NAME, default_response_class=UTF8JSONResponse)


# JSON Content-Type charset düzeltmesi
@app.middleware("http")
async def _force_json_charset(request, call_next):
    resp = await call_next(request)
    ct = resp.headers.get("content-type", "")
    if ct.lower().startswith("application/json") and "charset=" not in ct.lower():
        resp.headers["content-type"] = "application/json; charset=utf-8"
    return resp


# -----------------------------
# Global hata zarfı
# -----------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
    return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
    errors = [{k: e.get(k) for k in ("type", "loc", "msg")} for e in exc.errors()]
    missing = any(e["type"] == "missing" for e in errors)
    return fail(ERR_MISSING_FIELDS if missing else "Validation error", status_code=400, errors=errors)


@app.exception_handler(Exception)
async def unhandled_exception_to_envelope(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return fail(str(exc) or exc.__class__.__name__, status_code=500)


# -----------------------------
# CORS yapılandırması (.env)
# -----------------------------
logger.info("CORS allow_origins = %s", CORS_ALLOW_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- startup: tablolar yoksa oluştur ----
@app.on_event("startup")
def _ensure_tables():
    if AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine, checkfirst=True)


# ---- Sağlık uçları ----
@app.get("/health")
def health():
    return ok({"service": SERVICE_NAME})


@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    val = db.execute(text("SELECT 1")).scalar()
    return ok({"db": "ok", "select1": val})


# =========================
# Router kayıtları
# =========================
app.include_router(meta_router)
app.include_router(parts_orders_router)
for res in GENERIC_RESOURCES:
    app.include_router(build_router(res))
    logger.debug(">>> /api/%s routes registered", res.slug)
