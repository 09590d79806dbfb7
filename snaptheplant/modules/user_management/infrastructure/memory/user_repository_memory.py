# 📄 File: snaptheplant/modules/user_management/infrastructure/memory/user_repository_memory.py
# 🧭 Purpose (Layman Explanation):
# Keeps user accounts in memory, for local development and tests without a database.
# 🧪 Purpose (Technical Summary):
# In-memory UserRepository over a shared MemoryTable, with case-insensitive lookups and
# the same duplicate/quota rules as the SQLAlchemy implementation.
# 🔗 Dependencies:
# - user_management.domain.repositories.user_repository (interface)
# - snaptheplant.shared.infrastructure.storage.memory_tables
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.memory (MemoryStorageBackend)

from typing import Any, Dict, List, Optional

from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.modules.user_management.domain.repositories.user_repository import UserRepository
from snaptheplant.shared.core.exceptions import DuplicateResourceError
from snaptheplant.shared.infrastructure.storage.memory_tables import MemoryTable


class MemoryUserRepository(UserRepository):
    """In-memory implementation of the UserRepository interface."""

    def __init__(self, table: MemoryTable[User]):
        self._table = table

    def _check_unique(self, username: str, email: str, exclude_id: Optional[int] = None) -> None:
        for row in self._table.rows.values():
            if row.id == exclude_id:
                continue
            if row.username.lower() == username.lower():
                raise DuplicateResourceError("Username already exists", resource_type="user", field="username")
            if row.email.lower() == email.lower():
                raise DuplicateResourceError("Email already exists", resource_type="user", field="email")

    async def create(self, user: User) -> User:
        self._check_unique(user.username, user.email)
        return self._table.insert(user)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        matches = self._table.select(lambda row: row.username.lower() == username.lower())
        return matches[0] if matches else None

    async def get_by_email(self, email: str) -> Optional[User]:
        matches = self._table.select(lambda row: row.email.lower() == email.strip().lower())
        return matches[0] if matches else None

    async def get_by_stripe_customer_id(self, customer_id: str) -> Optional[User]:
        matches = self._table.select(lambda row: row.stripe_customer_id == customer_id)
        return matches[0] if matches else None

    async def update(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        current = self._table.rows.get(user_id)
        if current is None:
            return None
        if "username" in changes or "email" in changes:
            self._check_unique(
                changes.get("username", current.username),
                changes.get("email", current.email),
                exclude_id=user_id,
            )
        return self._table.update(user_id, changes)

    async def list_all(self) -> List[User]:
        return self._table.select()

    async def list_by_subscription_type(self, subscription_type: SubscriptionType) -> List[User]:
        return self._table.select(lambda row: row.subscription_type == SubscriptionType(subscription_type))

    async def consume_identification(self, user_id: int) -> bool:
        row = self._table.rows.get(user_id)
        if row is None or row.subscription_type != SubscriptionType.FREE:
            return False
        if row.identifications_remaining <= 0:
            return False
        self._table.update(user_id, {"identifications_remaining": row.identifications_remaining - 1})
        return True
