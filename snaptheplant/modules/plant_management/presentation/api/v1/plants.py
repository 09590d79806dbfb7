# 📄 File: snaptheplant/modules/plant_management/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for your plant collection: list, add, view, edit, delete, and the
# "I watered it" / "I fertilized it" buttons.
#
# 🧪 Purpose (Technical Summary):
# FastAPI plant endpoints. Ownership is checked by PlantService before any mutation;
# water/fertilize delegate to the care scheduler so the next task is regenerated.
#
# 🔗 Dependencies:
# - FastAPI router
# - snaptheplant.modules.plant_management.domain.services.plant_service
# - snaptheplant.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.api.v1.router
# - Web client plant pages

from typing import List

from fastapi import APIRouter, Depends, status

from snaptheplant.modules.plant_management.domain.models.plant import Plant
from snaptheplant.modules.plant_management.presentation.api.schemas.plant_schemas import (
    PlantCreateRequest,
    PlantResponse,
    PlantUpdateRequest,
)
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user
from snaptheplant.shared.core.schemas import MessageResponse

plants_router = APIRouter()

# Fields that cannot be cleared with an explicit null
_REQUIRED_ON_UPDATE = frozenset({"name", "care_health", "is_public"})


@plants_router.get("/plants", response_model=List[PlantResponse], summary="List my plants")
async def list_plants(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> List[Plant]:
    return await container.plants.list_plants(current_user.id)


@plants_router.post(
    "/plants",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
)
async def create_plant(
    body: PlantCreateRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> Plant:
    return await container.plants.create_plant(current_user.id, body.model_dump(exclude_unset=True))


@plants_router.get("/plants/{plant_id}", response_model=PlantResponse, summary="Get a plant")
async def get_plant(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> Plant:
    return await container.plants.get_plant(plant_id, current_user.id)


@plants_router.put("/plants/{plant_id}", response_model=PlantResponse, summary="Update a plant")
async def update_plant(
    plant_id: int,
    body: PlantUpdateRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> Plant:
    changes = {
        field: value
        for field, value in body.model_dump(exclude_unset=True).items()
        if value is not None or field not in _REQUIRED_ON_UPDATE
    }
    return await container.plants.update_plant(plant_id, current_user.id, changes)


@plants_router.delete("/plants/{plant_id}", response_model=MessageResponse, summary="Delete a plant")
async def delete_plant(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    await container.plants.delete_plant(plant_id, current_user.id)
    return MessageResponse(message="Plant deleted successfully")


@plants_router.post("/plants/{plant_id}/water", response_model=PlantResponse, summary="Record watering")
async def water_plant(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> Plant:
    return await container.plants.water_plant(plant_id, current_user.id)


@plants_router.post(
    "/plants/{plant_id}/fertilize",
    response_model=PlantResponse,
    summary="Record fertilizing",
)
async def fertilize_plant(
    plant_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> Plant:
    return await container.plants.fertilize_plant(plant_id, current_user.id)
