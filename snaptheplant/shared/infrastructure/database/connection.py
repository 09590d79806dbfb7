# 📄 File: snaptheplant/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and looks after the pipe to our database (PostgreSQL for the real app, a small
# SQLite file in tests), and knows how to build the tables when they don't exist yet.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle: dialect-specific engine options (pooling for
# PostgreSQL, foreign-key pragma for SQLite), create_all, a SELECT 1 probe with backoff,
# and the declarative Base plus the UTC-normalizing DateTime used by every ORM model.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine), asyncpg / aiosqlite drivers
# - snaptheplant.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.database.session
# - snaptheplant.shared.infrastructure.storage.sql (initialize, health, close)
# - Every module's ORM models (Base, UTCDateTime)

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

from snaptheplant.shared.config.settings import Settings
from snaptheplant.shared.utils.helpers import ensure_utc
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

HEALTH_CHECK_ATTEMPTS = 3
HEALTH_CHECK_BACKOFF_SECONDS = 0.5


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware DateTime that always round-trips as aware UTC.

    PostgreSQL returns aware values already; SQLite returns naive ones,
    which are stamped as UTC on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        value = ensure_utc(value)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseConnectionManager:
    """Owns the async engine for the SQL storage backend."""

    def __init__(self, settings: Settings):
        if not settings.DATABASE_URL:
            raise ValueError("DATABASE_URL must be set for SQL storage")
        self._settings = settings
        self._url = settings.async_database_url
        self._engine: Optional[AsyncEngine] = None

    @property
    def is_sqlite(self) -> bool:
        return self._url.startswith("sqlite")

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database engine not initialized. Call initialize() first.")
        return self._engine

    def _engine_options(self) -> Dict[str, Any]:
        settings = self._settings
        if self.is_sqlite:
            options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            # an in-memory database exists only on its one connection
            if ":memory:" in self._url or self._url.rstrip("/").endswith(":"):
                options["poolclass"] = StaticPool
            return options

        return {
            "pool_pre_ping": True,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "connect_args": {
                "server_settings": {"application_name": "snaptheplant_backend"},
                "command_timeout": 60,
            },
        }

    async def initialize(self) -> None:
        if self._engine is not None:
            return

        self._engine = create_async_engine(self._url, echo=self._settings.DB_ECHO, **self._engine_options())
        if self.is_sqlite:
            event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        logger.info(f"Database engine created for dialect '{self._engine.dialect.name}'")

    async def create_all(self) -> None:
        """Create every table registered on ``Base.metadata``."""
        # importing the registry attaches every model to the metadata
        from snaptheplant.shared.infrastructure.database import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> Dict[str, Any]:
        """SELECT 1 with a short exponential backoff between attempts."""
        checked_at = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {"status": "unhealthy", "error": "Database engine not initialized", "timestamp": checked_at}

        last_error = ""
        for attempt in range(1, HEALTH_CHECK_ATTEMPTS + 1):
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
                return {"status": "healthy", "backend": self._engine.dialect.name, "timestamp": checked_at}
            except (SQLAlchemyError, OSError) as e:
                last_error = str(e)
                logger.warning(f"Database health check failed (attempt {attempt}/{HEALTH_CHECK_ATTEMPTS}): {e}")
                if attempt < HEALTH_CHECK_ATTEMPTS:
                    await asyncio.sleep(HEALTH_CHECK_BACKOFF_SECONDS * 2 ** (attempt - 1))

        return {"status": "unhealthy", "error": last_error, "timestamp": checked_at}

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed")
