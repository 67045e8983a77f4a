"""Alembic environment — runs WallRide migrations on the async engine.

The database URL comes from wallride.config.Settings (DATABASE_URL / .env), so
migrations and the API always target the same database with the same driver.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from wallride.config import get_settings
from wallride.db.base import Base
import wallride.models  # noqa: F401  (custom_fields, articles, custom_field_values)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
# ConfigParser interpolates %, which URL-encoded passwords contain
config.set_main_option("sqlalchemy.url", get_settings().database_url.replace("%", "%%"))


def _configure(**kwargs) -> None:
    # compare_type: catches Numeric precision / String length changes on autogenerate
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def run_migrations_offline() -> None:
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync_migrations(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_run_sync_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
