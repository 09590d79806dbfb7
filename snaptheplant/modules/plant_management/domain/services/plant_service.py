# 📄 File: snaptheplant/modules/plant_management/domain/services/plant_service.py
# 🧭 Purpose (Layman Explanation):
# Handles everything you can do with the plants in your collection: add them, edit them,
# remove them, and record that you watered or fed them.
# 🧪 Purpose (Technical Summary):
# Plant CRUD with owner checks before any mutation. Creating a plant schedules its initial
# care actions in the same unit of work; deleting it removes its care actions and
# community shares first.
# 🔗 Dependencies:
# plant_management.domain.models, care_scheduler.py, storage backend unit of work
# 🔄 Connected Modules / Calls From:
# plant endpoints, community endpoints (public plants)

from typing import Any, Dict, List

from snaptheplant.modules.plant_management.domain.models.care_action import CareActionType
from snaptheplant.modules.plant_management.domain.models.plant import Plant
from snaptheplant.modules.plant_management.domain.services.care_scheduler import CareScheduler
from snaptheplant.shared.core.exceptions import AuthorizationError, NotFoundError
from snaptheplant.shared.infrastructure.storage.base import Repositories, StorageBackend
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Fields a client may change on an existing plant
EDITABLE_FIELDS = frozenset({
    "name",
    "scientific_name",
    "image_url",
    "water_frequency",
    "fertilize_frequency",
    "last_watered",
    "last_fertilized",
    "light_needs",
    "notes",
    "care_health",
    "is_public",
})


async def get_owned_plant(repos: Repositories, plant_id: int, user_id: int) -> Plant:
    """
    Load a plant and check the caller owns it.

    Raises:
        NotFoundError: If the plant does not exist
        AuthorizationError: If it belongs to another user
    """
    plant = await repos.plants.get_by_id(plant_id)
    if plant is None:
        raise NotFoundError("Plant not found", resource_type="plant", resource_id=plant_id)
    if not plant.is_owned_by(user_id):
        raise AuthorizationError(
            "You do not have access to this plant",
            resource_type="plant",
            resource_id=plant_id,
        )
    return plant


class PlantService:
    """Plant collection operations."""

    def __init__(self, storage: StorageBackend, scheduler: CareScheduler):
        self._storage = storage
        self._scheduler = scheduler

    async def list_plants(self, user_id: int) -> List[Plant]:
        async with self._storage.unit_of_work() as repos:
            return await repos.plants.list_for_user(user_id)

    async def list_public_plants(self) -> List[Plant]:
        async with self._storage.unit_of_work() as repos:
            return await repos.plants.list_public()

    async def get_plant(self, plant_id: int, user_id: int) -> Plant:
        async with self._storage.unit_of_work() as repos:
            return await get_owned_plant(repos, plant_id, user_id)

    async def create_plant(self, user_id: int, data: Dict[str, Any]) -> Plant:
        """
        Add a plant to the user's collection.

        Every cadence set on the plant gets one pending care action due
        ``now + frequency days``.
        """
        plant = Plant(user_id=user_id, **{k: v for k, v in data.items() if k in EDITABLE_FIELDS})

        async with self._storage.unit_of_work() as repos:
            created = await repos.plants.create(plant)
            actions = await self._scheduler.schedule_initial_actions(repos, created)

        logger.log_user_action(
            "create_plant",
            user_id,
            resource=f"plant:{created.id}",
            extra={"initial_care_actions": len(actions)},
        )
        return created

    async def update_plant(self, plant_id: int, user_id: int, changes: Dict[str, Any]) -> Plant:
        """Partial update; unknown and immutable fields are ignored."""
        changes = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}

        async with self._storage.unit_of_work() as repos:
            plant = await get_owned_plant(repos, plant_id, user_id)
            if not changes:
                return plant
            return await repos.plants.update(plant_id, changes)

    async def delete_plant(self, plant_id: int, user_id: int) -> None:
        async with self._storage.unit_of_work() as repos:
            await get_owned_plant(repos, plant_id, user_id)
            removed_actions = await repos.care_actions.delete_for_plant(plant_id)
            removed_shares = await repos.shares.delete_for_plant(plant_id)
            await repos.plants.delete(plant_id)

        logger.log_user_action(
            "delete_plant",
            user_id,
            resource=f"plant:{plant_id}",
            extra={"removed_care_actions": removed_actions, "removed_shares": removed_shares},
        )

    async def water_plant(self, plant_id: int, user_id: int) -> Plant:
        return await self._record_care(plant_id, user_id, CareActionType.WATER)

    async def fertilize_plant(self, plant_id: int, user_id: int) -> Plant:
        return await self._record_care(plant_id, user_id, CareActionType.FERTILIZE)

    async def _record_care(self, plant_id: int, user_id: int, action_type: CareActionType) -> Plant:
        async with self._storage.unit_of_work() as repos:
            plant = await get_owned_plant(repos, plant_id, user_id)
            return await self._scheduler.record_care_event(repos, plant, action_type)
