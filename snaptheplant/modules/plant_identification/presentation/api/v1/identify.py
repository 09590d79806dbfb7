# 📄 File: snaptheplant/modules/plant_identification/presentation/api/v1/identify.py
# 🧭 Purpose (Layman Explanation):
# The "what plant is this?" endpoint: upload a photo, get back likely species.
# 🧪 Purpose (Technical Summary):
# Multipart upload endpoint delegating to IdentificationService. Quota exhaustion answers
# 403 with ``upgrade: true``; recognizer failures answer 502 without consuming quota.
# 🔗 Dependencies:
# FastAPI (UploadFile via python-multipart), identification_service
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, web client identify page

from fastapi import APIRouter, Depends, File, UploadFile

from snaptheplant.modules.plant_identification.presentation.api.schemas.identification_schemas import (
    IdentificationResponse,
)
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user

identify_router = APIRouter()


@identify_router.post(
    "/identify",
    response_model=IdentificationResponse,
    summary="Identify a plant from a photo",
    responses={
        403: {"description": "No identifications remaining (body carries upgrade: true)"},
        413: {"description": "Image too large"},
        502: {"description": "Plant recognition service failed"},
        503: {"description": "Plant recognition is not configured"},
    },
)
async def identify_plant(
    image: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> IdentificationResponse:
    # Capped read: MAX_IMAGE_SIZE + 1 bytes is enough to reject an oversized upload
    image_bytes = await image.read(container.settings.MAX_IMAGE_SIZE + 1)
    outcome = await container.identification.identify(current_user.id, image_bytes)

    return IdentificationResponse(
        **outcome.result.model_dump(),
        identifications_remaining=outcome.identifications_remaining,
    )
