# 📄 File: snaptheplant/modules/plant_management/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for plants and their care tasks.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of PlantRepository and CareActionRepository bound to the unit
# of work's AsyncSession.
#
# 🔗 Dependencies:
# - plant_management.domain.repositories (interfaces)
# - plant_management.infrastructure.database.models (PlantModel, CareActionModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.sql (SqlStorageBackend)

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update

from snaptheplant.modules.plant_management.domain.models.care_action import CareAction
from snaptheplant.modules.plant_management.domain.models.plant import FULL_CARE_HEALTH, Plant
from snaptheplant.modules.plant_management.domain.repositories.care_action_repository import (
    CareActionRepository,
)
from snaptheplant.modules.plant_management.domain.repositories.plant_repository import PlantRepository
from snaptheplant.modules.plant_management.infrastructure.database.models import (
    CareActionModel,
    PlantModel,
)
from snaptheplant.shared.infrastructure.database.repository import SqlRepository

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(SqlRepository[Plant], PlantRepository):
    """SQLAlchemy implementation of the PlantRepository interface."""

    orm_model = PlantModel
    domain_model = Plant

    async def create(self, plant: Plant) -> Plant:
        created = await self._insert(plant)
        logger.info(f"Created plant {created.id} for user {created.user_id}")
        return created

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        return self._to_domain(await self._get(plant_id))

    async def list_for_user(self, user_id: int) -> List[Plant]:
        stmt = select(PlantModel).where(PlantModel.user_id == user_id).order_by(PlantModel.id)
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())

    async def update(self, plant_id: int, changes: Dict[str, Any]) -> Optional[Plant]:
        return await self._update(plant_id, changes)

    async def delete(self, plant_id: int) -> bool:
        return await self._delete(plant_id)

    async def mark_watered(self, plant_id: int, when: datetime) -> Optional[Plant]:
        return await self._update(plant_id, {"last_watered": when, "care_health": FULL_CARE_HEALTH})

    async def mark_fertilized(self, plant_id: int, when: datetime) -> Optional[Plant]:
        return await self._update(plant_id, {"last_fertilized": when})

    async def list_public(self) -> List[Plant]:
        stmt = select(PlantModel).where(PlantModel.is_public.is_(True)).order_by(PlantModel.id)
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())


class CareActionRepositoryImpl(SqlRepository[CareAction], CareActionRepository):
    """SQLAlchemy implementation of the CareActionRepository interface."""

    orm_model = CareActionModel
    domain_model = CareAction

    _by_due_date = (CareActionModel.due_date, CareActionModel.id)

    async def create(self, action: CareAction) -> CareAction:
        return await self._insert(action)

    async def get_by_id(self, action_id: int) -> Optional[CareAction]:
        # re-read so a row completed by another transaction is not served stale
        row = await self._session.get(CareActionModel, action_id, populate_existing=True)
        return self._to_domain(row)

    async def list_for_user(self, user_id: int) -> List[CareAction]:
        stmt = select(CareActionModel).where(CareActionModel.user_id == user_id).order_by(*self._by_due_date)
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())

    async def list_for_plant(self, plant_id: int) -> List[CareAction]:
        stmt = select(CareActionModel).where(CareActionModel.plant_id == plant_id).order_by(*self._by_due_date)
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())

    async def list_pending_for_user(self, user_id: int) -> List[CareAction]:
        stmt = (
            select(CareActionModel)
            .where(
                CareActionModel.user_id == user_id,
                CareActionModel.is_completed.is_(False),
            )
            .order_by(*self._by_due_date)
        )
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())

    async def update(self, action_id: int, changes: Dict[str, Any]) -> Optional[CareAction]:
        return await self._update(action_id, changes)

    async def mark_complete(self, action_id: int, when: datetime) -> Optional[CareAction]:
        """Single guarded UPDATE; the row lock decides which concurrent caller wins."""
        stmt = (
            update(CareActionModel)
            .where(
                CareActionModel.id == action_id,
                CareActionModel.is_completed.is_(False),
            )
            .values(is_completed=True, completed_at=when)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        if result.rowcount != 1:
            logger.debug(f"Care action {action_id} was not pending; nothing to complete")
            return None
        row = await self._session.get(CareActionModel, action_id, populate_existing=True)
        return self._to_domain(row)

    async def delete(self, action_id: int) -> bool:
        return await self._delete(action_id)

    async def delete_for_plant(self, plant_id: int) -> int:
        stmt = (
            delete(CareActionModel)
            .where(CareActionModel.plant_id == plant_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0
