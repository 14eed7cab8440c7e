"""Alembic environment for the products schema (async engine, online mode only).

The database URL comes from product_service Settings, so DATABASE_URL and .env
apply here exactly as they do to the running service.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from product_service.config import get_settings
from product_service.db.base import Base
import product_service.models  # noqa: F401  (registers tables on Base.metadata)

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _migrate(connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _upgrade() -> None:
    engine = create_async_engine(get_settings().database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    raise RuntimeError("Offline SQL generation is not supported; run against a database")
asyncio.run(_upgrade())
