# 📄 File: snaptheplant/modules/community_social/infrastructure/database/community_share_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for community posts, including likes.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CommunityShareRepository. Likes are an in-database
# increment so concurrent likes are never lost.
#
# 🔗 Dependencies:
# - community_social.domain.repositories (interface)
# - community_social.infrastructure.database.models (CommunityShareModel)
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.sql (SqlStorageBackend)

from typing import List, Optional

from sqlalchemy import delete, select, update

from snaptheplant.modules.community_social.domain.models.community_share import CommunityShare
from snaptheplant.modules.community_social.domain.repositories.community_share_repository import (
    CommunityShareRepository,
)
from snaptheplant.modules.community_social.infrastructure.database.models import CommunityShareModel
from snaptheplant.shared.infrastructure.database.repository import SqlRepository


class CommunityShareRepositoryImpl(SqlRepository[CommunityShare], CommunityShareRepository):
    """SQLAlchemy implementation of the CommunityShareRepository interface."""

    orm_model = CommunityShareModel
    domain_model = CommunityShare

    _newest_first = (CommunityShareModel.date_posted.desc(), CommunityShareModel.id.desc())

    async def create(self, share: CommunityShare) -> CommunityShare:
        return await self._insert(share)

    async def get_by_id(self, share_id: int) -> Optional[CommunityShare]:
        return self._to_domain(await self._get(share_id))

    async def list_all(self) -> List[CommunityShare]:
        result = await self._session.execute(select(CommunityShareModel).order_by(*self._newest_first))
        return self._to_domain_list(result.scalars().all())

    async def list_for_user(self, user_id: int) -> List[CommunityShare]:
        stmt = (
            select(CommunityShareModel)
            .where(CommunityShareModel.user_id == user_id)
            .order_by(*self._newest_first)
        )
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())

    async def like(self, share_id: int) -> Optional[CommunityShare]:
        stmt = (
            update(CommunityShareModel)
            .where(CommunityShareModel.id == share_id)
            .values(likes=CommunityShareModel.likes + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None

        refreshed = await self._session.execute(
            select(CommunityShareModel)
            .where(CommunityShareModel.id == share_id)
            .execution_options(populate_existing=True)
        )
        return self._to_domain(refreshed.scalars().first())

    async def delete(self, share_id: int) -> bool:
        return await self._delete(share_id)

    async def delete_for_plant(self, plant_id: int) -> int:
        stmt = (
            delete(CommunityShareModel)
            .where(CommunityShareModel.plant_id == plant_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0
