# 📄 File: snaptheplant/shared/infrastructure/database/repository.py
#
# 🧭 Purpose (Layman Explanation):
# Shared plumbing for every repository that talks to the database, so each one only has to
# describe its own queries.
#
# 🧪 Purpose (Technical Summary):
# Base class for SQLAlchemy repositories bound to one AsyncSession: column value coercion
# (enums to their values), generic get/update/delete helpers and domain model hydration.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession)
# - pydantic (domain model validation)
#
# 🔄 Connected Modules / Calls From:
# - SQLAlchemy repository implementations in every module

from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from snaptheplant.shared.infrastructure.database.connection import Base

DomainT = TypeVar("DomainT", bound=BaseModel)


def to_column_values(values: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce domain values (enums) into plain column values."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in values.items()
    }


class SqlRepository(Generic[DomainT]):
    """Common helpers for repositories backed by one ORM model."""

    orm_model: Type[Base]
    domain_model: Type[BaseModel]

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_domain(self, row: Optional[Base]) -> Optional[DomainT]:
        if row is None:
            return None
        return self.domain_model.model_validate(row)

    def _to_domain_list(self, rows: Iterable[Base]) -> List[DomainT]:
        return [self.domain_model.model_validate(row) for row in rows]

    async def _insert(self, entity: DomainT) -> DomainT:
        row = self.orm_model(**to_column_values(entity.model_dump(exclude={"id"})))
        self._session.add(row)
        await self._session.flush()
        return self._to_domain(row)

    async def _get(self, row_id: int) -> Optional[Base]:
        return await self._session.get(self.orm_model, row_id)

    async def _update(self, row_id: int, changes: Dict[str, Any]) -> Optional[DomainT]:
        row = await self._get(row_id)
        if row is None:
            return None
        for key, value in to_column_values(changes).items():
            if key == "id":
                continue
            setattr(row, key, value)
        await self._session.flush()
        return self._to_domain(row)

    async def _delete(self, row_id: int) -> bool:
        row = await self._get(row_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        return True
