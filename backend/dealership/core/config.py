# backend/dealership/core/config.py
import json
import os

from dotenv import dotenv_values, find_dotenv, load_dotenv

# backend/ kökü ve .env yolu
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_DOTENV = os.path.join(BASE_DIR, ".env")


def _norm_key(k: str) -> str:
    return k.replace("\ufeff", "").strip() if isinstance(k, str) else k


# .env yüklenir ama süreçte zaten tanımlı değişkenler ezilmez (CI / test)
dotenv_path = DEFAULT_DOTENV if os.path.exists(DEFAULT_DOTENV) else find_dotenv(filename=".env", usecwd=True)
if dotenv_path:
    cfg = dotenv_values(dotenv_path, encoding="utf-8-sig")
    for k, v in cfg.items():
        nk = _norm_key(k)
        if v is not None and (nk not in os.environ or not os.environ[nk].strip()):
            os.environ[nk] = v
    load_dotenv(dotenv_path, override=False)


def parse_origins(env_val: str | None) -> list[str]:
    if not env_val or env_val.strip() == "*":
        return ["*"]
    try:
        parsed = json.loads(env_val)
        if isinstance(parsed, list):
            return [str(x) for x in parsed]
    except ValueError:
        pass
    return [s.strip() for s in env_val.split(",") if s.strip()]


DATABASE_URL = os.environ.get("DATABASE_URL", "").strip()
CORS_ALLOW_ORIGINS = parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "500"))
SERVICE_NAME = os.getenv("SERVICE_NAME", "Dealership Management API")
# Açılışta eksik tabloları oluştur (Alembic kullanılan ortamlarda 0 yapılır)
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "1").strip().lower() in ("1", "true", "yes")
