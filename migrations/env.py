# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic where the SnapThePlant database is and which tables should exist, so
# schema upgrades can be applied (or written out as SQL) before the app starts.
# 🧪 Purpose (Technical Summary):
# Alembic environment reading the database URL from the application Settings (same
# .env handling as the API), targeting the metadata of every registered ORM model,
# and running online migrations over an async engine (asyncpg / aiosqlite).
# 🔗 Dependencies:
# - alembic
# - SQLAlchemy async engine
# - snaptheplant.shared.config.settings, snaptheplant.shared.infrastructure.database.models
# 🔄 Connected Modules / Calls From:
# - alembic CLI (upgrade, downgrade, revision --autogenerate)

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from snaptheplant.shared.config.settings import Settings
from snaptheplant.shared.infrastructure.database.models import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def resolve_url() -> str:
    url = Settings().async_database_url or config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("DATABASE_URL is not set; nothing to migrate")
    return url


def configure(**options) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **options)


def run_offline() -> None:
    """Write the migration SQL to stdout instead of executing it."""
    configure(url=resolve_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def apply(connection: Connection) -> None:
    # SQLite cannot ALTER most constraints in place
    configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    engine = create_async_engine(resolve_url(), poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(apply)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
