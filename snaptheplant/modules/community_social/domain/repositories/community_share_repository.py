# 📄 File: snaptheplant/modules/community_social/domain/repositories/community_share_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how community posts are saved, listed, liked and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for CommunityShare entities. Reads return None/empty instead of raising.
# 🔗 Dependencies:
# CommunityShare domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# community_service.py, plant_service.py (cascade on plant delete), storage backends

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.community_share import CommunityShare


class CommunityShareRepository(ABC):
    """Repository interface for CommunityShare entity data access operations."""

    @abstractmethod
    async def create(self, share: CommunityShare) -> CommunityShare:
        """Persist a new share and return it with its generated ID."""

    @abstractmethod
    async def get_by_id(self, share_id: int) -> Optional[CommunityShare]:
        """Get share by ID."""

    @abstractmethod
    async def list_all(self) -> List[CommunityShare]:
        """Every share, newest first."""

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[CommunityShare]:
        """Shares posted by ``user_id``, newest first."""

    @abstractmethod
    async def like(self, share_id: int) -> Optional[CommunityShare]:
        """Increment the like counter by one; None if the share does not exist."""

    @abstractmethod
    async def delete(self, share_id: int) -> bool:
        """Delete one share; False if not found."""

    @abstractmethod
    async def delete_for_plant(self, plant_id: int) -> int:
        """Delete every share referencing a plant and return how many were removed."""
