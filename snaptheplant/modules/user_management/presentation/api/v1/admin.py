# 📄 File: snaptheplant/modules/user_management/presentation/api/v1/admin.py
# 🧭 Purpose (Layman Explanation):
# Admin-only pages for looking at every account and marking people as beta testers.
# 🧪 Purpose (Technical Summary):
# FastAPI admin endpoints for user administration, guarded by the admin role dependency.
# 🔗 Dependencies:
# FastAPI, user_service, snaptheplant.shared.core.dependencies
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, admin dashboard

from typing import List

from fastapi import APIRouter, Depends

from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.modules.user_management.presentation.api.schemas.user_schemas import (
    ToggleBetaTesterRequest,
    UserResponse,
)
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_admin_user

admin_users_router = APIRouter()


@admin_users_router.get("/users", response_model=List[UserResponse], summary="List all users")
async def list_users(
    admin: User = Depends(get_current_admin_user),
    container: ServiceContainer = Depends(get_container),
) -> List[User]:
    return await container.users.list_users()


@admin_users_router.post(
    "/toggle-beta-tester",
    response_model=UserResponse,
    summary="Set a user's beta tester flag",
)
async def toggle_beta_tester(
    body: ToggleBetaTesterRequest,
    admin: User = Depends(get_current_admin_user),
    container: ServiceContainer = Depends(get_container),
) -> User:
    return await container.users.set_beta_tester(body.user_id, body.is_beta_tester, actor_id=admin.id)
