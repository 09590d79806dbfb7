# 📄 File: snaptheplant/modules/community_social/presentation/api/v1/community.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the community feed: see what others shared, share your own
# plant, like a post, remove your post, and browse plants people made public.
# 🧪 Purpose (Technical Summary):
# FastAPI community endpoints. Reading the feed and public plants needs no session;
# posting, liking and deleting do.
# 🔗 Dependencies:
# FastAPI, community_service, plant_service, snaptheplant.shared.core.dependencies
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, web client community page

from typing import List

from fastapi import APIRouter, Depends, status

from snaptheplant.modules.community_social.domain.models.community_share import CommunityShare
from snaptheplant.modules.community_social.presentation.api.schemas.community_schemas import (
    ShareCreateRequest,
    ShareResponse,
)
from snaptheplant.modules.plant_management.domain.models.plant import Plant
from snaptheplant.modules.plant_management.presentation.api.schemas.plant_schemas import PlantResponse
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user
from snaptheplant.shared.core.schemas import MessageResponse

community_router = APIRouter()


@community_router.get("/community", response_model=List[ShareResponse], summary="Community feed")
async def list_shares(container: ServiceContainer = Depends(get_container)) -> List[CommunityShare]:
    return await container.community.list_shares()


@community_router.get(
    "/community/plants",
    response_model=List[PlantResponse],
    summary="Plants their owners made public",
)
async def list_public_plants(container: ServiceContainer = Depends(get_container)) -> List[Plant]:
    return await container.plants.list_public_plants()


@community_router.post(
    "/community",
    response_model=ShareResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Share a plant",
)
async def create_share(
    body: ShareCreateRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> CommunityShare:
    return await container.community.create_share(current_user.id, body.model_dump())


@community_router.post("/community/{share_id}/like", response_model=ShareResponse, summary="Like a post")
async def like_share(
    share_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> CommunityShare:
    return await container.community.like_share(share_id)


@community_router.delete("/community/{share_id}", response_model=MessageResponse, summary="Delete my post")
async def delete_share(
    share_id: int,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> MessageResponse:
    await container.community.delete_share(share_id, current_user.id)
    return MessageResponse(message="Post deleted successfully")
