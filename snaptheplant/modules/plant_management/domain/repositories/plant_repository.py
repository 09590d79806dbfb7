# 📄 File: snaptheplant/modules/plant_management/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how plants are saved, found, changed and removed, without caring whether they
# live in memory or in the database.
# 🧪 Purpose (Technical Summary):
# Repository interface for the Plant aggregate. Reads return None/empty instead of raising.
# 🔗 Dependencies:
# Plant domain model, typing, abc
# 🔄 Connected Modules / Calls From:
# plant_service.py, care_scheduler.py, community service, storage backends

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """Repository interface for Plant entity data access operations."""

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """Persist a new plant and return it with its generated ID."""

    @abstractmethod
    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        """Get plant by ID."""

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[Plant]:
        """Plants owned by ``user_id``, ordered by ID."""

    @abstractmethod
    async def update(self, plant_id: int, changes: Dict[str, Any]) -> Optional[Plant]:
        """Apply field changes; None if the plant does not exist."""

    @abstractmethod
    async def delete(self, plant_id: int) -> bool:
        """
        Delete a plant.

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def mark_watered(self, plant_id: int, when: datetime) -> Optional[Plant]:
        """Set ``last_watered`` and restore full care health."""

    @abstractmethod
    async def mark_fertilized(self, plant_id: int, when: datetime) -> Optional[Plant]:
        """Set ``last_fertilized``."""

    @abstractmethod
    async def list_public(self) -> List[Plant]:
        """Plants flagged ``is_public`` across all users."""
