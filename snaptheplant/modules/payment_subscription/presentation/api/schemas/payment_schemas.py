# 📄 File: snaptheplant/modules/payment_subscription/presentation/api/schemas/payment_schemas.py
# 🧭 Purpose (Layman Explanation):
# What the app sends and gets back when paying, subscribing, starting a trial or
# downloading the Pro Pack, plus the admin forms for changing someone's plan.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for payment, subscription, trial and Pro Pack
# endpoints.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas, user_schemas
# 🔄 Connected Modules / Calls From:
# payments.py, subscriptions.py

from datetime import datetime
from typing import Optional

from pydantic import Field

from snaptheplant.modules.user_management.domain.models.user import SubscriptionType
from snaptheplant.modules.user_management.presentation.api.schemas.user_schemas import UserResponse
from snaptheplant.shared.core.schemas import APIModel

PRO_PACK_FILE_NAME = "SnapThePlant-ProPack.zip"
PRO_PACK_FILE_SIZE = "15.2 MB"
PRO_PACK_INSTRUCTIONS = (
    "Download and extract this ZIP file to access offline plant identification features."
)


class PaymentIntentResponse(APIModel):
    client_secret: Optional[str] = None


class PaymentSuccessRequest(APIModel):
    payment_intent_id: Optional[str] = None


class PaymentSuccessResponse(APIModel):
    success: bool = True
    download_available: bool = True


class SubscriptionResponse(APIModel):
    subscription_id: str
    client_secret: Optional[str] = None


class ProPackResponse(APIModel):
    download_url: str
    file_name: str = PRO_PACK_FILE_NAME
    file_size: str = PRO_PACK_FILE_SIZE
    instructions: str = PRO_PACK_INSTRUCTIONS


class FreeTrialResponse(APIModel):
    success: bool = True
    message: str = "Free trial started successfully"
    trial_end_date: Optional[datetime] = None


class AdminStartTrialRequest(APIModel):
    user_id: int
    days: int = Field(3, ge=1, le=365)


class AdminTrialResponse(UserResponse):
    """Updated account plus a confirmation message."""
    message: str = "Trial started successfully"


class UpdateUserStatusRequest(APIModel):
    user_id: int
    subscription_type: SubscriptionType
