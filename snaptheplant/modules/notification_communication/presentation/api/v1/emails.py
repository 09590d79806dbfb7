# 📄 File: snaptheplant/modules/notification_communication/presentation/api/v1/emails.py
# 🧭 Purpose (Layman Explanation):
# Lets an admin send themselves (or a given address) a sample of any email the app sends.
# 🧪 Purpose (Technical Summary):
# Admin preview endpoint over NotificationService.send_test_email. A rejected delivery is
# reported as an upstream failure.
# 🔗 Dependencies:
# FastAPI, notification_service
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, admin dashboard

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import EmailStr

from snaptheplant.modules.notification_communication.domain.services.notification_service import (
    PreviewEmailType,
)
from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_admin_user
from snaptheplant.shared.core.exceptions import ExternalServiceError
from snaptheplant.shared.core.schemas import APIModel, SuccessResponse

emails_router = APIRouter()

PREVIEW_DOWNLOAD_LINK = "https://snaptheplant.com/pro-pack/download?token=test-token"


class SendTestEmailRequest(APIModel):
    email_type: PreviewEmailType
    email: Optional[EmailStr] = None


@emails_router.post(
    "/admin/send-test-email",
    response_model=SuccessResponse,
    summary="Send a sample email",
)
async def send_test_email(
    body: SendTestEmailRequest,
    admin: User = Depends(get_current_admin_user),
    container: ServiceContainer = Depends(get_container),
) -> SuccessResponse:
    recipient = body.email or admin.email
    sent = await container.notifications.send_test_email(
        body.email_type,
        recipient,
        now=container.clock(),
        download_link=PREVIEW_DOWNLOAD_LINK,
    )
    if not sent:
        raise ExternalServiceError("Failed to send test email", service="email")
    return SuccessResponse(message="Test email sent successfully")
