# 📄 File: snaptheplant/modules/payment_subscription/presentation/api/v1/subscriptions.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for trials and plan changes: a free user starting their trial, and
# admins granting trials or switching someone's plan by hand.
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints over SubscriptionService. Invalid transitions answer 409 before
# anything is written.
# 🔗 Dependencies:
# FastAPI, subscription_service, snaptheplant.shared.core.dependencies
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, web client subscribe page, admin dashboard

from fastapi import APIRouter, Depends

from snaptheplant.modules.payment_subscription.presentation.api.schemas.payment_schemas import (
    AdminStartTrialRequest,
    AdminTrialResponse,
    FreeTrialResponse,
    UpdateUserStatusRequest,
)
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.modules.user_management.presentation.api.schemas.user_schemas import UserResponse
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import (
    get_container,
    get_current_admin_user,
    get_current_user,
)

subscriptions_router = APIRouter()


@subscriptions_router.post(
    "/start-free-trial",
    response_model=FreeTrialResponse,
    summary="Start the free premium trial",
    responses={409: {"description": "Only free accounts can start a trial"}},
)
async def start_free_trial(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> FreeTrialResponse:
    updated = await container.subscriptions.start_free_trial(current_user)
    return FreeTrialResponse(trial_end_date=updated.trial_end_date)


@subscriptions_router.post(
    "/admin/start-trial",
    response_model=AdminTrialResponse,
    summary="Grant a trial to a free user",
)
async def admin_start_trial(
    body: AdminStartTrialRequest,
    admin: User = Depends(get_current_admin_user),
    container: ServiceContainer = Depends(get_container),
) -> AdminTrialResponse:
    updated = await container.subscriptions.admin_start_trial(body.user_id, body.days, actor_id=admin.id)
    return AdminTrialResponse.model_validate(updated)


@subscriptions_router.post(
    "/admin/update-user-status",
    response_model=UserResponse,
    summary="Set a user's subscription type",
)
async def admin_update_user_status(
    body: UpdateUserStatusRequest,
    admin: User = Depends(get_current_admin_user),
    container: ServiceContainer = Depends(get_container),
) -> User:
    return await container.subscriptions.admin_update_status(
        body.user_id,
        body.subscription_type,
        actor_id=admin.id,
    )
