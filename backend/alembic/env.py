# backend/alembic/env.py
import logging
from logging.config import fileConfig

from alembic import context

# Uygulamanın engine & metadata'sı; modeller import edilince metadata dolar
from dealership.core.db import Base, engine
from dealership import models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")
target_metadata = Base.metadata

# SQLite ALTER TABLE kısıtlı: batch modunda tablo yeniden kurulur
IS_SQLITE = engine.dialect.name == "sqlite"


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=False,
        render_as_batch=IS_SQLITE,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """SQL betiği üretir; veritabanına bağlanmaz."""
    _configure(url=engine.url.render_as_string(hide_password=False), literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    logger.info("migrating %s", engine.url.render_as_string(hide_password=True))
    with engine.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
