# 📄 File: snaptheplant/modules/community_social/domain/services/community_service.py
# 🧭 Purpose (Layman Explanation):
# Lets users share their plants with everyone, like other people's posts, and remove
# their own posts.
# 🧪 Purpose (Technical Summary):
# Community share operations; posting requires owning the plant and deleting requires
# owning the share. Likes are monotonic.
# 🔗 Dependencies:
# community_social.domain.models, plant_service.get_owned_plant, storage unit of work
# 🔄 Connected Modules / Calls From:
# community endpoints

from typing import Any, Dict, List

from snaptheplant.modules.community_social.domain.models.community_share import CommunityShare
from snaptheplant.modules.plant_management.domain.services.plant_service import get_owned_plant
from snaptheplant.shared.core.exceptions import AuthorizationError, NotFoundError
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.helpers import Clock, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class CommunityService:
    """Community feed operations."""

    def __init__(self, storage: StorageBackend, clock: Clock = utc_now):
        self._storage = storage
        self._clock = clock

    async def list_shares(self) -> List[CommunityShare]:
        async with self._storage.unit_of_work() as repos:
            return await repos.shares.list_all()

    async def create_share(self, user_id: int, data: Dict[str, Any]) -> CommunityShare:
        """Post a plant to the community feed; the plant must belong to the poster."""
        async with self._storage.unit_of_work() as repos:
            plant = await get_owned_plant(repos, data["plant_id"], user_id)
            share = await repos.shares.create(CommunityShare(
                user_id=user_id,
                plant_id=plant.id,
                title=data["title"],
                content=data.get("content"),
                image_url=data.get("image_url") or plant.image_url,
                date_posted=self._clock(),
            ))

        logger.log_user_action("create_share", user_id, resource=f"share:{share.id}")
        return share

    async def like_share(self, share_id: int) -> CommunityShare:
        async with self._storage.unit_of_work() as repos:
            share = await repos.shares.like(share_id)
        if share is None:
            raise NotFoundError("Post not found", resource_type="community_share", resource_id=share_id)
        return share

    async def delete_share(self, share_id: int, user_id: int) -> None:
        async with self._storage.unit_of_work() as repos:
            share = await repos.shares.get_by_id(share_id)
            if share is None:
                raise NotFoundError("Post not found", resource_type="community_share", resource_id=share_id)
            if share.user_id != user_id:
                raise AuthorizationError(
                    "You can only delete your own posts",
                    resource_type="community_share",
                    resource_id=share_id,
                )
            await repos.shares.delete(share_id)
