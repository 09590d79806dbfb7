# 📄 File: snaptheplant/modules/analytics/presentation/api/v1/analytics.py
# 🧭 Purpose (Layman Explanation):
# Endpoints the app calls to note what people do, and for beta testers to send feedback.
# 🧪 Purpose (Technical Summary):
# FastAPI analytics and beta-feedback endpoints over AnalyticsRecorder. Event tracking
# always answers success; recorder failures are only logged.
# 🔗 Dependencies:
# FastAPI, pydantic, analytics_recorder
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, web client analytics helper and feedback modal

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user
from snaptheplant.shared.core.schemas import APIModel, SuccessResponse

analytics_router = APIRouter()


class TrackEventRequest(APIModel):
    event: str = Field(..., min_length=1, max_length=100)
    properties: Dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[str] = None


class BetaFeedbackRequest(APIModel):
    feedback_type: str = Field(..., alias="type", min_length=1, max_length=50)
    feedback: str = Field(..., min_length=1, max_length=10000)
    email: Optional[str] = None


@analytics_router.post("/analytics/track", response_model=SuccessResponse, summary="Track an event")
async def track_event(
    body: TrackEventRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> SuccessResponse:
    await container.analytics.track(current_user, body.event, body.properties, body.timestamp)
    return SuccessResponse()


@analytics_router.post("/beta-feedback", response_model=SuccessResponse, summary="Send beta feedback")
async def beta_feedback(
    body: BetaFeedbackRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> SuccessResponse:
    await container.analytics.record_feedback(
        current_user,
        body.feedback_type,
        body.feedback,
        email=body.email,
    )
    return SuccessResponse(message="Feedback received")
