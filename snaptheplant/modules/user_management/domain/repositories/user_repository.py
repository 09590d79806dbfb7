# 📄 File: snaptheplant/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and update user accounts without saying
# which kind of storage (memory or database) actually keeps them.
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities following the Repository pattern and dependency
# inversion. Reads return None/empty instead of raising.
# 🔗 Dependencies:
# Domain models (User, SubscriptionType), typing, abc
# 🔄 Connected Modules / Calls From:
# Domain services, memory and SQLAlchemy implementations, storage backends

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.user import SubscriptionType, User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Methods return domain entities (User), never storage records
    - Username and email lookups are case-insensitive
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create (``id`` is ignored)

        Returns:
            Created User entity with generated fields populated

        Raises:
            DuplicateResourceError: If username or email is taken
        """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username (case-insensitive)."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)."""

    @abstractmethod
    async def get_by_stripe_customer_id(self, customer_id: str) -> Optional[User]:
        """Get the user owning a payment-processor customer reference."""

    @abstractmethod
    async def update(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        """
        Apply field changes to a user.

        Args:
            user_id: User to update
            changes: Mapping of field name to new value

        Returns:
            Updated User entity, or None if not found
        """

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users ordered by ID."""

    @abstractmethod
    async def list_by_subscription_type(self, subscription_type: SubscriptionType) -> List[User]:
        """Users currently in ``subscription_type``, ordered by ID."""

    @abstractmethod
    async def consume_identification(self, user_id: int) -> bool:
        """
        Atomically decrement the identification quota of a free user.

        Returns:
            True if a unit was consumed; False when the user is not free or
            already at zero (the counter never goes negative)
        """
