# 📄 File: snaptheplant/modules/plant_management/infrastructure/memory/plant_repository_memory.py
# 🧭 Purpose (Layman Explanation):
# Keeps plants and their care tasks in memory, for local development and tests.
# 🧪 Purpose (Technical Summary):
# In-memory PlantRepository and CareActionRepository over shared MemoryTables.
# 🔗 Dependencies:
# - plant_management.domain.repositories (interfaces)
# - snaptheplant.shared.infrastructure.storage.memory_tables
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.memory (MemoryStorageBackend)

from datetime import datetime
from typing import Any, Dict, List, Optional

from snaptheplant.modules.plant_management.domain.models.care_action import CareAction
from snaptheplant.modules.plant_management.domain.models.plant import FULL_CARE_HEALTH, Plant
from snaptheplant.modules.plant_management.domain.repositories.care_action_repository import (
    CareActionRepository,
)
from snaptheplant.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from snaptheplant.shared.infrastructure.storage.memory_tables import MemoryTable


class MemoryPlantRepository(PlantRepository):
    """In-memory implementation of the PlantRepository interface."""

    def __init__(self, table: MemoryTable[Plant]):
        self._table = table

    async def create(self, plant: Plant) -> Plant:
        return self._table.insert(plant)

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        return self._table.get(plant_id)

    async def list_for_user(self, user_id: int) -> List[Plant]:
        return self._table.select(lambda row: row.user_id == user_id)

    async def update(self, plant_id: int, changes: Dict[str, Any]) -> Optional[Plant]:
        return self._table.update(plant_id, changes)

    async def delete(self, plant_id: int) -> bool:
        return self._table.delete(plant_id)

    async def mark_watered(self, plant_id: int, when: datetime) -> Optional[Plant]:
        return self._table.update(plant_id, {"last_watered": when, "care_health": FULL_CARE_HEALTH})

    async def mark_fertilized(self, plant_id: int, when: datetime) -> Optional[Plant]:
        return self._table.update(plant_id, {"last_fertilized": when})

    async def list_public(self) -> List[Plant]:
        return self._table.select(lambda row: row.is_public)


class MemoryCareActionRepository(CareActionRepository):
    """In-memory implementation of the CareActionRepository interface."""

    def __init__(self, table: MemoryTable[CareAction]):
        self._table = table

    @staticmethod
    def _by_due_date(row: CareAction):
        return (row.due_date, row.id)

    async def create(self, action: CareAction) -> CareAction:
        return self._table.insert(action)

    async def get_by_id(self, action_id: int) -> Optional[CareAction]:
        return self._table.get(action_id)

    async def list_for_user(self, user_id: int) -> List[CareAction]:
        return self._table.select(lambda row: row.user_id == user_id, key=self._by_due_date)

    async def list_for_plant(self, plant_id: int) -> List[CareAction]:
        return self._table.select(lambda row: row.plant_id == plant_id, key=self._by_due_date)

    async def list_pending_for_user(self, user_id: int) -> List[CareAction]:
        return self._table.select(
            lambda row: row.user_id == user_id and not row.is_completed,
            key=self._by_due_date,
        )

    async def update(self, action_id: int, changes: Dict[str, Any]) -> Optional[CareAction]:
        return self._table.update(action_id, changes)

    async def mark_complete(self, action_id: int, when: datetime) -> Optional[CareAction]:
        row = self._table.rows.get(action_id)
        if row is None or row.is_completed:
            return None
        return self._table.update(action_id, {"is_completed": True, "completed_at": when})

    async def delete(self, action_id: int) -> bool:
        return self._table.delete(action_id)

    async def delete_for_plant(self, plant_id: int) -> int:
        return self._table.delete_where(lambda row: row.plant_id == plant_id)
