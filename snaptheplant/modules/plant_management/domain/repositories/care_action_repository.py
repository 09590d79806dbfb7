# 📄 File: snaptheplant/modules/plant_management/domain/repositories/care_action_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how care tasks are saved, listed and ticked off.
# 🧪 Purpose (Technical Summary):
# Repository interface for CareAction entities. Reads return None/empty instead of raising.
# 🔗 Dependencies:
# CareAction domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# care_scheduler.py, plant_service.py, storage backends

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..models.care_action import CareAction


class CareActionRepository(ABC):
    """Repository interface for CareAction entity data access operations."""

    @abstractmethod
    async def create(self, action: CareAction) -> CareAction:
        """Persist a new care action and return it with its generated ID."""

    @abstractmethod
    async def get_by_id(self, action_id: int) -> Optional[CareAction]:
        """Get care action by ID."""

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[CareAction]:
        """Every action (pending and completed) owned by ``user_id``, by due date."""

    @abstractmethod
    async def list_for_plant(self, plant_id: int) -> List[CareAction]:
        """Every action attached to ``plant_id``, by due date."""

    @abstractmethod
    async def list_pending_for_user(self, user_id: int) -> List[CareAction]:
        """Incomplete actions owned by ``user_id``, earliest due first."""

    @abstractmethod
    async def update(self, action_id: int, changes: Dict[str, Any]) -> Optional[CareAction]:
        """Apply field changes; None if the action does not exist."""

    @abstractmethod
    async def mark_complete(self, action_id: int, when: datetime) -> Optional[CareAction]:
        """
        Flag a pending action completed at ``when``.

        The pending check and the write are one atomic step. Returns None when
        the action is missing or was already completed, so exactly one of
        several concurrent callers gets the completed action back.
        """

    @abstractmethod
    async def delete(self, action_id: int) -> bool:
        """Delete one action; False if not found."""

    @abstractmethod
    async def delete_for_plant(self, plant_id: int) -> int:
        """Delete every action of a plant and return how many were removed."""
