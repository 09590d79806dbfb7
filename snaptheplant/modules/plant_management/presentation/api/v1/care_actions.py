# 📄 File: snaptheplant/modules/plant_management/presentation/api/v1/care_actions.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the care schedule: see your upcoming tasks, add one, and tick one
# off (which automatically plans the next one).
# 🧪 Purpose (Technical Summary):
# FastAPI care-action endpoints over the CareScheduler.
# 🔗 Dependencies:
# FastAPI, care_scheduler, snaptheplant.shared.core.dependencies
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, web client care schedule page

from typing import List

from fastapi import APIRouter, Depends, status

from snaptheplant.modules.plant_management.domain.models.care_action import CareAction
from snaptheplant.modules.plant_management.presentation.api.schemas.plant_schemas import (
    CareActionCreateRequest,
    CareActionResponse,
    PendingCareActionResponse,
    PlantResponse,
)
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user

care_actions_router = APIRouter()


@care_actions_router.get(
    "/care-actions",
    response_model=List[CareActionResponse],
    summary="List my care actions",
)
async def list_care_actions(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> List[CareAction]:
    return await container.scheduler.list_care_actions(current_user.id)


@care_actions_router.get(
    "/care-actions/pending",
    response_model=List[PendingCareActionResponse],
    summary="Pending care actions with their plants, earliest first",
)
async def list_pending_care_actions(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> List[PendingCareActionResponse]:
    pending = await container.scheduler.get_pending_with_plants(current_user.id)
    return [
        PendingCareActionResponse(
            **CareActionResponse.model_validate(item.action).model_dump(),
            plant=PlantResponse.model_validate(item.plant) if item.plant else None,
        )
        for item in pending
    ]


@care_actions_router.post(
    "/care-actions",
    response_model=CareActionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a care action",
)
async def create_care_action(
    body: CareActionCreateRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> CareAction:
    return await container.scheduler.create_care_action(
        current_user.id,
        body.plant_id,
        body.action_type,
        body.due_date,
    )


@care_actions_router.post(
    "/care-actions/{action_id}/complete",
    response_model=CareActionResponse,
    summary="Complete a care action",
)
async def complete_care_action(
    action_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> CareAction:
    return await container.scheduler.complete_care_action(action_id, current_user.id)
