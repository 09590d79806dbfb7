# 📄 File: snaptheplant/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for signing up, logging in, logging out and asking "who am I?".
#
# 🧪 Purpose (Technical Summary):
# FastAPI session-lifecycle endpoints. Successful register/login set an HttpOnly session
# cookie backed by the server-side SessionStore; logout clears both.
#
# 🔗 Dependencies:
# - FastAPI router, Response cookies
# - snaptheplant.modules.user_management.domain.services.auth_service
# - snaptheplant.shared.core.dependencies (container, current user)
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.api.v1.router (router inclusion)
# - Web client login/signup pages

"""
Authentication API Endpoints

Endpoints:
- POST /register: Create an account and log it in
- POST /login: Username/password login
- POST /logout: Destroy the session
- GET /me: Current account
"""

from fastapi import APIRouter, Depends, Request, Response, status

from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.modules.user_management.presentation.api.schemas.auth_schemas import (
    LoginRequest,
    RegisterRequest,
)
from snaptheplant.modules.user_management.presentation.api.schemas.user_schemas import UserResponse
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user, get_session_id
from snaptheplant.shared.core.schemas import MessageResponse
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

auth_router = APIRouter()


def _set_session_cookie(response: Response, container: ServiceContainer, session_id: str) -> None:
    settings = container.settings
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


@auth_router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account",
    responses={409: {"description": "Username or email already in use"}},
)
async def register(
    registration_data: RegisterRequest,
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> User:
    """Create a free account (with the sign-up identification grant) and log it in."""
    user, session_id = await container.auth.register(
        username=registration_data.username,
        password=registration_data.password,
        email=registration_data.email,
        first_name=registration_data.first_name,
        last_name=registration_data.last_name,
    )
    _set_session_cookie(response, container, session_id)
    return user


@auth_router.post(
    "/login",
    response_model=UserResponse,
    summary="Log in",
    responses={401: {"description": "Invalid username or password"}},
)
async def login(
    credentials: LoginRequest,
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> User:
    user, session_id = await container.auth.login(credentials.username, credentials.password)
    _set_session_cookie(response, container, session_id)
    return user


@auth_router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout(
    request: Request,
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    await container.auth.logout(get_session_id(request))
    response.delete_cookie(container.settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@auth_router.get("/me", response_model=UserResponse, summary="Current user")
async def me(current_user: User = Depends(get_current_user)) -> User:
    return current_user
