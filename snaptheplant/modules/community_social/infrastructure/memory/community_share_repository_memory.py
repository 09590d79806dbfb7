# 📄 File: snaptheplant/modules/community_social/infrastructure/memory/community_share_repository_memory.py
# 🧭 Purpose (Layman Explanation):
# Keeps community posts in memory, for local development and tests.
# 🧪 Purpose (Technical Summary):
# In-memory CommunityShareRepository over a shared MemoryTable; newest posts first.
# 🔗 Dependencies:
# - community_social.domain.repositories (interface)
# - snaptheplant.shared.infrastructure.storage.memory_tables
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.memory (MemoryStorageBackend)

from typing import List, Optional

from snaptheplant.modules.community_social.domain.models.community_share import CommunityShare
from snaptheplant.modules.community_social.domain.repositories.community_share_repository import (
    CommunityShareRepository,
)
from snaptheplant.shared.infrastructure.storage.memory_tables import MemoryTable


def _newest_first(row: CommunityShare):
    return (row.date_posted, row.id)


class MemoryCommunityShareRepository(CommunityShareRepository):
    """In-memory implementation of the CommunityShareRepository interface."""

    def __init__(self, table: MemoryTable[CommunityShare]):
        self._table = table

    async def create(self, share: CommunityShare) -> CommunityShare:
        return self._table.insert(share)

    async def get_by_id(self, share_id: int) -> Optional[CommunityShare]:
        return self._table.get(share_id)

    async def list_all(self) -> List[CommunityShare]:
        return self._table.select(key=_newest_first, reverse=True)

    async def list_for_user(self, user_id: int) -> List[CommunityShare]:
        return self._table.select(lambda row: row.user_id == user_id, key=_newest_first, reverse=True)

    async def like(self, share_id: int) -> Optional[CommunityShare]:
        row = self._table.rows.get(share_id)
        if row is None:
            return None
        return self._table.update(share_id, {"likes": row.likes + 1})

    async def delete(self, share_id: int) -> bool:
        return self._table.delete(share_id)

    async def delete_for_plant(self, plant_id: int) -> int:
        return self._table.delete_where(lambda row: row.plant_id == plant_id)
