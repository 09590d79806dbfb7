# 📄 File: snaptheplant/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles signing up, logging in and logging out, and figures out who is making a request
# from the session cookie their browser sends.
# 🧪 Purpose (Technical Summary):
# Authentication service over the user repository and the server-side SessionStore.
# Passwords are hashed with passlib; sessions are opaque ids mapped to user ids.
# 🔗 Dependencies:
# user_management.domain.models, shared.core.security, shared.infrastructure.sessions
# 🔄 Connected Modules / Calls From:
# auth endpoints, snaptheplant.shared.core.dependencies (current user), startup seeding

from typing import Optional, Tuple

from snaptheplant.modules.user_management.domain.models.user import User, UserRole
from snaptheplant.shared.core.exceptions import AuthenticationError
from snaptheplant.shared.core.security import get_password_hash
from snaptheplant.shared.infrastructure.sessions.session_store import SessionStore
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.helpers import Clock, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class AuthService:
    """
    Authentication service.

    Handles account registration, credential checks and the session lifecycle.
    """

    def __init__(self, storage: StorageBackend, sessions: SessionStore, clock: Clock = utc_now):
        self._storage = storage
        self._sessions = sessions
        self._clock = clock

    async def register(
        self,
        username: str,
        password: str,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Tuple[User, str]:
        """
        Create a free account and log it in.

        Returns:
            Tuple of the created user and the new session id

        Raises:
            DuplicateResourceError: If username or email is taken
        """
        async with self._storage.unit_of_work() as repos:
            user = await repos.users.create(User(
                username=username,
                password_hash=get_password_hash(password),
                email=email,
                first_name=first_name,
                last_name=last_name,
                created_at=self._clock(),
            ))

        session_id = await self._sessions.create(user.id)
        logger.log_user_action("register", user.id)
        return user, session_id

    async def authenticate(self, username: str, password: str) -> User:
        """
        Check credentials.

        Raises:
            AuthenticationError: On unknown user or wrong password
        """
        async with self._storage.unit_of_work() as repos:
            user = await repos.users.get_by_username(username)

        if user is None or not user.verify_password(password):
            logger.warning("Failed login attempt", attempted_username=username)
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user

    async def login(self, username: str, password: str) -> Tuple[User, str]:
        user = await self.authenticate(username, password)
        session_id = await self._sessions.create(user.id)
        logger.log_user_action("login", user.id)
        return user, session_id

    async def logout(self, session_id: Optional[str]) -> None:
        if session_id:
            await self._sessions.delete(session_id)

    async def resolve_session(self, session_id: Optional[str]) -> Optional[User]:
        """The user behind a session cookie, or None if the session is unknown or expired."""
        if not session_id:
            return None
        user_id = await self._sessions.get_user_id(session_id)
        if user_id is None:
            return None

        async with self._storage.unit_of_work() as repos:
            user = await repos.users.get_by_id(user_id)

        if user is None:
            # Account removed behind a live session
            await self._sessions.delete(session_id)
        return user

    async def ensure_user(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        """Create an account if the username is free; used for startup seeding."""
        async with self._storage.unit_of_work() as repos:
            existing = await repos.users.get_by_username(username)
            if existing is not None:
                return existing
            user = await repos.users.create(User(
                username=username,
                password_hash=get_password_hash(password),
                email=email,
                role=role,
                first_name=first_name,
                last_name=last_name,
                created_at=self._clock(),
            ))

        logger.info(f"👤 Seeded {role.value} account '{username}'")
        return user
