# backend/dealership/core/db.py
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL, dotenv_path

if not DATABASE_URL:
    raise RuntimeError(f"DATABASE_URL tanımlı değil. .env: {dotenv_path or '(bulunamadı)'}")

url = make_url(DATABASE_URL)
engine_kwargs = dict(pool_pre_ping=True)

# Dialect'e göre güvenli ayarlar
backend = url.get_backend_name()  # örn: 'sqlite', 'postgresql'
if backend.startswith("sqlite"):
    # SQLite'ta thread check'i kapat; bellek içi veritabanı tek bağlantıyı paylaşmalı
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        engine_kwargs["poolclass"] = StaticPool
else:
    engine_kwargs.update(pool_size=5, max_overflow=10)

engine = create_engine(DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
