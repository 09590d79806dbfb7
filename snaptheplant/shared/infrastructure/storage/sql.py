# 📄 File: snaptheplant/shared/infrastructure/storage/sql.py

# 🧭 Purpose (Layman Explanation):
# Connects the app to the real database and makes sure each operation's changes are saved
# together, or undone together if something goes wrong.

# 🧪 Purpose (Technical Summary):
# StorageBackend over SQLAlchemy async. Each unit of work is one AsyncSession transaction
# from DatabaseSessionManager.transaction (commit on success, rollback on error) with the SQLAlchemy
# repository implementations bound to it.

# 🔗 Dependencies:
# - snaptheplant.shared.infrastructure.database (connection, session)
# - SQLAlchemy repository implementations from every module

# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.core.container (STORAGE_BACKEND=sql or DATABASE_URL set)

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from snaptheplant.modules.community_social.infrastructure.database.community_share_repository_impl import (
    CommunityShareRepositoryImpl,
)
from snaptheplant.modules.plant_management.infrastructure.database.plant_repository_impl import (
    CareActionRepositoryImpl,
    PlantRepositoryImpl,
)
from snaptheplant.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from snaptheplant.shared.config.settings import Settings
from snaptheplant.shared.infrastructure.database.connection import DatabaseConnectionManager
from snaptheplant.shared.infrastructure.database.session import DatabaseSessionManager
from snaptheplant.shared.infrastructure.storage.base import Repositories, StorageBackend
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class SqlStorageBackend(StorageBackend):
    """Relational storage backend (PostgreSQL in production, SQLite in tests)."""

    name = "sql"

    def __init__(self, settings: Settings):
        self._settings = settings
        self.connection = DatabaseConnectionManager(settings)
        self.sessions = DatabaseSessionManager(self.connection)

    async def initialize(self) -> None:
        await self.connection.initialize()
        await self.sessions.initialize()
        if self._settings.DB_AUTO_CREATE_TABLES:
            await self.connection.create_all()
        logger.info("SQL storage backend ready", dialect=self.connection.engine.dialect.name)

    async def close(self) -> None:
        await self.connection.close()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[Repositories]:
        async with self.sessions.transaction() as session:
            yield Repositories(
                users=UserRepositoryImpl(session),
                plants=PlantRepositoryImpl(session),
                care_actions=CareActionRepositoryImpl(session),
                shares=CommunityShareRepositoryImpl(session),
            )

    async def health_check(self) -> Dict[str, Any]:
        health = await self.connection.health_check()
        health["session_factory"] = self.sessions.is_initialized
        return health
