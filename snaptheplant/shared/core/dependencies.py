# 📄 File: snaptheplant/shared/core/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Small helpers every endpoint uses to get at the app's services and to find out who is
# logged in (and whether they are an admin).
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies: the ServiceContainer from app.state, session-cookie
# authentication (resolved once per request and cached on request.state) and the admin
# role check.
# 🔗 Dependencies:
# FastAPI, snaptheplant.shared.core.container
# 🔄 Connected Modules / Calls From:
# Every presentation/api/v1 router

from typing import Optional

from fastapi import Depends, Request

from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.exceptions import AuthenticationError, AuthorizationError
from snaptheplant.shared.utils.logging import get_logger, user_id_var

logger = get_logger(__name__)


def get_container(request: Request) -> ServiceContainer:
    """The application's service container."""
    return request.app.state.container


def get_session_id(request: Request) -> Optional[str]:
    container = get_container(request)
    return request.cookies.get(container.settings.SESSION_COOKIE_NAME)


async def get_optional_user(request: Request) -> Optional[User]:
    """
    The logged-in user, or None.

    The lookup happens once per request; the result is kept on ``request.state.user``.
    """
    if hasattr(request.state, "user"):
        return request.state.user

    container = get_container(request)
    user = await container.auth.resolve_session(get_session_id(request))
    request.state.user = user
    if user is not None:
        user_id_var.set(str(user.id))
    return user


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """
    The logged-in user.

    Raises:
        AuthenticationError: If the request carries no live session
    """
    if user is None:
        raise AuthenticationError("Not authenticated")
    return user


async def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """
    The logged-in user, who must be an admin.

    Raises:
        AuthorizationError: For non-admin accounts
    """
    if not current_user.is_admin:
        logger.warning(f"Non-admin user {current_user.id} attempted admin access")
        raise AuthorizationError("Admin access required")
    return current_user
