# 📄 File: snaptheplant/shared/infrastructure/storage/memory.py

# 🧭 Purpose (Layman Explanation):
# Runs the whole app on data kept in memory, which is handy for local development and tests.

# 🧪 Purpose (Technical Summary):
# StorageBackend over process-local MemoryTables. Units of work share the same tables; every
# repository call completes without yielding to the event loop, so each one is atomic.

# 🔗 Dependencies:
# - Memory repository implementations from every module

# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.core.container (STORAGE_BACKEND=memory)
# - tests

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from snaptheplant.modules.community_social.domain.models.community_share import CommunityShare
from snaptheplant.modules.community_social.infrastructure.memory.community_share_repository_memory import (
    MemoryCommunityShareRepository,
)
from snaptheplant.modules.plant_management.domain.models.care_action import CareAction
from snaptheplant.modules.plant_management.domain.models.plant import Plant
from snaptheplant.modules.plant_management.infrastructure.memory.plant_repository_memory import (
    MemoryCareActionRepository,
    MemoryPlantRepository,
)
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.modules.user_management.infrastructure.memory.user_repository_memory import (
    MemoryUserRepository,
)
from snaptheplant.shared.infrastructure.storage.base import Repositories, StorageBackend
from snaptheplant.shared.infrastructure.storage.memory_tables import MemoryTable


class MemoryStorageBackend(StorageBackend):
    """Process-local storage backend."""

    name = "memory"

    def __init__(self):
        self.users: MemoryTable[User] = MemoryTable(User)
        self.plants: MemoryTable[Plant] = MemoryTable(Plant)
        self.care_actions: MemoryTable[CareAction] = MemoryTable(CareAction)
        self.shares: MemoryTable[CommunityShare] = MemoryTable(CommunityShare)

        self._repositories = Repositories(
            users=MemoryUserRepository(self.users),
            plants=MemoryPlantRepository(self.plants),
            care_actions=MemoryCareActionRepository(self.care_actions),
            shares=MemoryCommunityShareRepository(self.shares),
        )

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[Repositories]:
        yield self._repositories

    async def health_check(self) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "backend": self.name,
            "rows": {
                "users": len(self.users.rows),
                "plants": len(self.plants.rows),
                "care_actions": len(self.care_actions.rows),
                "community_shares": len(self.shares.rows),
            },
        }
