# 📄 File: snaptheplant/shared/infrastructure/storage/base.py

# 🧭 Purpose (Layman Explanation):
# A single doorway to all of our saved data. Services ask it for a "unit of work" and get
# every repository they need, knowing that their changes are saved together or not at all.

# 🧪 Purpose (Technical Summary):
# StorageBackend abstraction yielding a Repositories bundle per unit of work. The SQL backend
# scopes the bundle to one AsyncSession transaction; the memory backend shares in-process stores.

# 🔗 Dependencies:
# - Domain repository interfaces from every module

# 🔄 Connected Modules / Calls From:
# - Domain services (plant, care scheduler, auth, identification, payments, trial sweep)
# - snaptheplant.shared.core.container (backend selection)

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Any, Dict

from snaptheplant.modules.community_social.domain.repositories.community_share_repository import (
    CommunityShareRepository,
)
from snaptheplant.modules.plant_management.domain.repositories.care_action_repository import (
    CareActionRepository,
)
from snaptheplant.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from snaptheplant.modules.user_management.domain.repositories.user_repository import UserRepository


@dataclass
class Repositories:
    """Repositories bound to one unit of work."""
    users: UserRepository
    plants: PlantRepository
    care_actions: CareActionRepository
    shares: CommunityShareRepository


class StorageBackend(ABC):
    """Source of units of work."""

    name: str = "storage"

    async def initialize(self) -> None:
        return None

    async def close(self) -> None:
        return None

    @abstractmethod
    def unit_of_work(self) -> AbstractAsyncContextManager[Repositories]:
        """
        Open a unit of work.

        Changes made through the yielded repositories are committed when the
        block exits normally and discarded when it raises.
        """

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Structured health status for the health endpoints."""
