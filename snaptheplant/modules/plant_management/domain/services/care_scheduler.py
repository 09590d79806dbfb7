# 📄 File: snaptheplant/modules/plant_management/domain/services/care_scheduler.py
# 🧭 Purpose (Layman Explanation):
# Keeps each plant's care calendar going: when you water or feed a plant, it ticks off the
# task and puts the next one on the calendar based on how often that plant needs it.
# 🧪 Purpose (Technical Summary):
# Care-action scheduling service. Completing an action of a recurring kind updates the
# plant's last-care timestamp and creates exactly one pending action due
# ``now + frequency days``. Completion is a guarded conditional write, so only the caller that
# actually closed the action schedules the next one. A plant missing at completion time is a
# soft failure: the completion is kept and nothing else happens.
# 🔗 Dependencies:
# plant_management.domain.models, storage backend unit of work, clock helpers
# 🔄 Connected Modules / Calls From:
# plant_service.py, care action endpoints, plant water/fertilize endpoints

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from snaptheplant.modules.plant_management.domain.models.care_action import (
    RECURRING_ACTION_TYPES,
    CareAction,
    CareActionType,
)
from snaptheplant.modules.plant_management.domain.models.plant import Plant
from snaptheplant.shared.core.exceptions import AuthorizationError, NotFoundError
from snaptheplant.shared.infrastructure.storage.base import Repositories, StorageBackend
from snaptheplant.shared.utils.helpers import Clock, add_days, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PendingCareAction:
    """Pending action with its plant, for the care schedule view."""
    action: CareAction
    plant: Optional[Plant]


def frequency_for(plant: Plant, action_type: CareActionType) -> Optional[int]:
    """Cadence in days configured on ``plant`` for ``action_type``, if any."""
    if action_type == CareActionType.WATER:
        return plant.water_frequency
    if action_type == CareActionType.FERTILIZE:
        return plant.fertilize_frequency
    return None


class CareScheduler:
    """
    Creates, completes and regenerates care actions.

    Methods taking ``repos`` run inside the caller's unit of work; the others
    open their own.
    """

    def __init__(self, storage: StorageBackend, clock: Clock = utc_now):
        self._storage = storage
        self._clock = clock

    # =========================================================================
    # SCHEDULING PRIMITIVES (caller's unit of work)
    # =========================================================================

    async def schedule_next(
        self,
        repos: Repositories,
        plant: Plant,
        action_type: CareActionType,
        now: datetime,
    ) -> Optional[CareAction]:
        """Create the next pending action of ``action_type`` if the plant has a cadence for it."""
        frequency = frequency_for(plant, action_type)
        if not frequency:
            return None

        action = await repos.care_actions.create(CareAction(
            plant_id=plant.id,
            user_id=plant.user_id,
            action_type=action_type,
            due_date=add_days(now, frequency),
        ))
        logger.debug(
            f"Scheduled {action_type.value} for plant {plant.id} on {action.due_date.isoformat()}"
        )
        return action

    async def schedule_initial_actions(self, repos: Repositories, plant: Plant) -> List[CareAction]:
        """One pending action per cadence defined on a newly added plant."""
        now = self._clock()
        created = []
        for action_type in RECURRING_ACTION_TYPES:
            action = await self.schedule_next(repos, plant, action_type, now)
            if action is not None:
                created.append(action)
        return created

    async def _apply_care(
        self,
        repos: Repositories,
        plant_id: int,
        action_type: CareActionType,
        now: datetime,
    ) -> Optional[Plant]:
        """Stamp the plant's last-care field for recurring kinds."""
        if action_type == CareActionType.WATER:
            return await repos.plants.mark_watered(plant_id, now)
        if action_type == CareActionType.FERTILIZE:
            return await repos.plants.mark_fertilized(plant_id, now)
        return await repos.plants.get_by_id(plant_id)

    async def record_care_event(
        self,
        repos: Repositories,
        plant: Plant,
        action_type: CareActionType,
    ) -> Plant:
        """
        Care given outside the schedule (the water/fertilize buttons).

        Closes every pending action of that kind for the plant and schedules
        exactly one replacement. When a concurrent request closed the same
        pending actions first, that request owns the replacement.

        Raises:
            NotFoundError: If the plant was deleted in the meantime
        """
        now = self._clock()
        updated = await self._apply_care(repos, plant.id, action_type, now)
        if updated is None:
            raise NotFoundError("Plant not found", resource_type="plant", resource_id=plant.id)

        pending = [
            action for action in await repos.care_actions.list_for_plant(plant.id)
            if action.action_type == action_type and not action.is_completed
        ]
        closed = 0
        for action in pending:
            if await repos.care_actions.mark_complete(action.id, now) is not None:
                closed += 1

        if pending and not closed:
            logger.info(
                f"Pending {action_type.value} actions for plant {plant.id} already closed elsewhere",
                plant_id=plant.id,
            )
            return updated

        await self.schedule_next(repos, updated, action_type, now)
        return updated

    # =========================================================================
    # OPERATIONS (own unit of work)
    # =========================================================================

    async def complete_care_action(self, action_id: int, user_id: int) -> CareAction:
        """
        Complete a care action and regenerate the next occurrence.

        Args:
            action_id: Action to complete
            user_id: Caller; must own the action

        Returns:
            CareAction: The completed action

        Raises:
            NotFoundError: If the action does not exist
            AuthorizationError: If the action belongs to another user
        """
        async with self._storage.unit_of_work() as repos:
            action = await repos.care_actions.get_by_id(action_id)
            if action is None:
                raise NotFoundError("Care action not found", resource_type="care_action", resource_id=action_id)
            if action.user_id != user_id:
                raise AuthorizationError(
                    "You do not have access to this care action",
                    resource_type="care_action",
                    resource_id=action_id,
                )
            if action.is_completed:
                return action

            now = self._clock()
            completed = await repos.care_actions.mark_complete(action_id, now)
            if completed is None:
                # lost the race; the winner schedules the next occurrence
                current = await repos.care_actions.get_by_id(action_id)
                if current is None:
                    raise NotFoundError(
                        "Care action not found", resource_type="care_action", resource_id=action_id
                    )
                return current

            plant = await self._apply_care(repos, action.plant_id, action.action_type, now)
            if plant is None:
                logger.warning(
                    f"Plant {action.plant_id} missing while completing care action {action_id}",
                    plant_id=action.plant_id,
                    care_action_id=action_id,
                )
                return completed

            await self.schedule_next(repos, plant, action.action_type, now)

        logger.info(f"Care action {action_id} completed", care_action_id=action_id, action_type=action.action_type.value)
        return completed

    async def create_care_action(
        self,
        user_id: int,
        plant_id: int,
        action_type: CareActionType,
        due_date: datetime,
    ) -> CareAction:
        """Manually schedule a care action on an owned plant."""
        async with self._storage.unit_of_work() as repos:
            plant = await repos.plants.get_by_id(plant_id)
            if plant is None:
                raise NotFoundError("Plant not found", resource_type="plant", resource_id=plant_id)
            if not plant.is_owned_by(user_id):
                raise AuthorizationError(
                    "You do not have access to this plant",
                    resource_type="plant",
                    resource_id=plant_id,
                )
            return await repos.care_actions.create(CareAction(
                plant_id=plant_id,
                user_id=user_id,
                action_type=action_type,
                due_date=due_date,
            ))

    async def list_care_actions(self, user_id: int) -> List[CareAction]:
        async with self._storage.unit_of_work() as repos:
            return await repos.care_actions.list_for_user(user_id)

    async def get_pending_with_plants(self, user_id: int) -> List[PendingCareAction]:
        """Pending actions with their plant embedded, earliest due first."""
        async with self._storage.unit_of_work() as repos:
            actions = await repos.care_actions.list_pending_for_user(user_id)
            plants = {plant.id: plant for plant in await repos.plants.list_for_user(user_id)}

        pending = [PendingCareAction(action=a, plant=plants.get(a.plant_id)) for a in actions]
        pending.sort(key=lambda item: (item.action.due_date, item.action.id))
        return pending
