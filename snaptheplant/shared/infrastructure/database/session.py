# 📄 File: snaptheplant/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Opens one conversation with the database per operation and either saves everything
# that was changed in it or throws all of it away if anything failed.
#
# 🧪 Purpose (Technical Summary):
# Session factory plus the ``transaction()`` scope used by the SQL storage backend:
# commit on success, rollback on any exception. SQLAlchemy failures surface as
# DatabaseError; domain errors raised mid-transaction propagate unchanged.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - snaptheplant.shared.infrastructure.database.connection
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.sql (unit_of_work)

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from snaptheplant.shared.core.exceptions import DatabaseError
from snaptheplant.shared.infrastructure.database.connection import DatabaseConnectionManager
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class DatabaseSessionManager:
    """Hands out transactional AsyncSessions bound to the shared engine."""

    def __init__(self, connection: DatabaseConnectionManager):
        self._connection = connection
        self._factory: Optional[async_sessionmaker] = None

    @property
    def is_initialized(self) -> bool:
        return self._factory is not None

    async def initialize(self) -> None:
        if not self._connection.is_initialized:
            await self._connection.initialize()
        # objects stay readable after commit; repositories hydrate domain models from them
        self._factory = async_sessionmaker(
            self._connection.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """
        One session, one transaction.

        Raises:
            DatabaseError: If the factory is not initialized or SQLAlchemy fails
        """
        if self._factory is None:
            raise DatabaseError("Session manager not initialized")

        async with self._factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Transaction rolled back after database error: {e}", error_type=type(e).__name__)
                raise DatabaseError(f"Database operation failed: {e}") from e
            except BaseException:
                await session.rollback()
                raise
