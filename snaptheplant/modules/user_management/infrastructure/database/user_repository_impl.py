# 📄 File: snaptheplant/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users,
# finding them by name or email, and using up one of their free identifications.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface using SQLAlchemy ORM bound to the
# unit of work's AsyncSession. Quota consumption is a single conditional UPDATE.
#
# 🔗 Dependencies:
# - user_management.domain.repositories.user_repository (interface)
# - user_management.infrastructure.database.models (UserModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.storage.sql (SqlStorageBackend)

"""
User Repository Implementation

Handles the mapping between domain User entities and UserModel database
records. Username and email lookups compare lower-cased values.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError

from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.modules.user_management.domain.repositories.user_repository import UserRepository
from snaptheplant.modules.user_management.infrastructure.database.models import UserModel
from snaptheplant.shared.core.exceptions import DuplicateResourceError
from snaptheplant.shared.infrastructure.database.repository import SqlRepository

logger = logging.getLogger(__name__)


class UserRepositoryImpl(SqlRepository[User], UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    orm_model = UserModel
    domain_model = User

    async def _check_unique(self, username: str, email: str, exclude_id: Optional[int] = None) -> None:
        stmt = select(UserModel).where(
            or_(
                func.lower(UserModel.username) == username.lower(),
                func.lower(UserModel.email) == email.lower(),
            )
        )
        if exclude_id is not None:
            stmt = stmt.where(UserModel.id != exclude_id)

        result = await self._session.execute(stmt)
        existing = result.scalars().first()
        if existing is None:
            return
        if existing.username.lower() == username.lower():
            raise DuplicateResourceError("Username already exists", resource_type="user", field="username")
        raise DuplicateResourceError("Email already exists", resource_type="user", field="email")

    async def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Raises:
            DuplicateResourceError: If username or email is already registered
        """
        await self._check_unique(user.username, user.email)
        try:
            created = await self._insert(user)
        except IntegrityError as e:
            logger.warning(f"User creation failed on unique constraint: {user.username}")
            raise DuplicateResourceError("User already exists", resource_type="user") from e

        logger.info(f"Created user with ID: {created.id}")
        return created

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self._to_domain(await self._get(user_id))

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(func.lower(UserModel.username) == username.lower())
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalars().first())

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalars().first())

    async def get_by_stripe_customer_id(self, customer_id: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.stripe_customer_id == customer_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalars().first())

    async def update(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        if "username" in changes or "email" in changes:
            current = await self._get(user_id)
            if current is None:
                return None
            await self._check_unique(
                changes.get("username", current.username),
                changes.get("email", current.email),
                exclude_id=user_id,
            )
        return await self._update(user_id, changes)

    async def list_all(self) -> List[User]:
        result = await self._session.execute(select(UserModel).order_by(UserModel.id))
        return self._to_domain_list(result.scalars().all())

    async def list_by_subscription_type(self, subscription_type: SubscriptionType) -> List[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.subscription_type == SubscriptionType(subscription_type).value)
            .order_by(UserModel.id)
        )
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars().all())

    async def consume_identification(self, user_id: int) -> bool:
        """Decrement the quota in one statement guarded by the free/positive check."""
        stmt = (
            update(UserModel)
            .where(
                UserModel.id == user_id,
                UserModel.subscription_type == SubscriptionType.FREE.value,
                UserModel.identifications_remaining > 0,
            )
            .values(identifications_remaining=UserModel.identifications_remaining - 1)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        consumed = result.rowcount == 1
        logger.debug(f"Identification quota consumed for user {user_id}: {consumed}")
        return consumed
