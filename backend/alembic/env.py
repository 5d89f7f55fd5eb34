"""Alembic Environment — migrations for the users table over an async engine.

Invariants:
    - The migration URL resolves exactly like the app's: DATABASE_URL when set,
      passed through normalize_database_url, else sqlalchemy.url from alembic.ini
    - target_metadata is Base.metadata with the User model registered

Design Decisions:
    - NullPool: a migration run opens one connection and exits
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from user_api.config import normalize_database_url
from user_api.db.base import Base
from user_api.models import User  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def resolve_url() -> str:
    env_url = os.environ.get("DATABASE_URL")
    return normalize_database_url(env_url or config.get_main_option("sqlalchemy.url"))


def _configure_and_run(**configure_kwargs) -> None:
    context.configure(target_metadata=target_metadata, **configure_kwargs)
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection) -> None:
    _configure_and_run(connection=connection)


async def _run_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = resolve_url()
    engine = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    # Emit SQL to stdout instead of executing it
    _configure_and_run(
        url=resolve_url(), literal_binds=True, dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_run_online())
