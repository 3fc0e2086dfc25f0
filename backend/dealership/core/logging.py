# backend/dealership/core/logging.py
import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Uygulama açılışında bir kez çağrılır; kök logger'a tek stream handler ekler."""
    root = logging.getLogger()
    if not any(getattr(h, "_dealership", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._dealership = True
        root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
