"""Alembic environment configuration for admin catalog migrations."""

from logging.config import fileConfig
from typing import Any

from sqlalchemy import create_engine, event, pool

from admin_catalog import models  # noqa: F401
from admin_catalog.config import get_settings
from admin_catalog.database import Base
from alembic import context

# Interpret the config file for Python logging
if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _database_url() -> str:
    """Prefer the URL from alembic.ini; fall back to application settings."""
    return context.config.get_main_option("sqlalchemy.url") or get_settings().DATABASE_URL


def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting SQL to stdout."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against a live database connection."""
    url = _database_url()
    connectable = create_engine(url, poolclass=pool.NullPool)
    if url.startswith("sqlite"):
        event.listen(connectable, "connect", _set_sqlite_pragma)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
