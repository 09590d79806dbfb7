# 📄 File: snaptheplant/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# Account housekeeping for admins: list everyone and flag people as beta testers.
# 🧪 Purpose (Technical Summary):
# User administration operations over the user repository.
# 🔗 Dependencies:
# user_management.domain.models, storage unit of work
# 🔄 Connected Modules / Calls From:
# admin endpoints, send-test-email endpoint

from typing import List

from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.exceptions import NotFoundError
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """User administration."""

    def __init__(self, storage: StorageBackend):
        self._storage = storage

    async def list_users(self) -> List[User]:
        async with self._storage.unit_of_work() as repos:
            return await repos.users.list_all()

    async def get_user(self, user_id: int) -> User:
        async with self._storage.unit_of_work() as repos:
            user = await repos.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

    async def set_beta_tester(self, user_id: int, is_beta_tester: bool, actor_id: int) -> User:
        async with self._storage.unit_of_work() as repos:
            user = await repos.users.update(user_id, {"is_beta_tester": is_beta_tester})
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)

        logger.log_user_action(
            "toggle_beta_tester",
            actor_id,
            resource=f"user:{user_id}",
            extra={"is_beta_tester": is_beta_tester},
        )
        return user
