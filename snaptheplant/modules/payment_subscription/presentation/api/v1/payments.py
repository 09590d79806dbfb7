# 📄 File: snaptheplant/modules/payment_subscription/presentation/api/v1/payments.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for paying: buying the lifetime Pro Pack, starting the monthly plan,
# confirming a payment, receiving Stripe's notifications, and downloading the Pro Pack.
#
# 🧪 Purpose (Technical Summary):
# FastAPI payment endpoints over PaymentService. The webhook reads the raw body for
# signature verification and needs no session. All answer 503 when payments are not
# configured.
#
# 🔗 Dependencies:
# - FastAPI router, Request (raw body), Header
# - snaptheplant.modules.payment_subscription.domain.services.payment_service
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.api.v1.router
# - Web client checkout/subscribe pages, Stripe webhooks

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, Request

from snaptheplant.modules.payment_subscription.presentation.api.schemas.payment_schemas import (
    PaymentIntentResponse,
    PaymentSuccessRequest,
    PaymentSuccessResponse,
    ProPackResponse,
    SubscriptionResponse,
)
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.shared.core.container import ServiceContainer
from snaptheplant.shared.core.dependencies import get_container, get_current_user
from snaptheplant.shared.core.exceptions import AuthorizationError
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

payments_router = APIRouter()


@payments_router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    summary="Start a lifetime purchase",
)
async def create_payment_intent(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> PaymentIntentResponse:
    client_secret = await container.payments.create_payment_intent(current_user)
    return PaymentIntentResponse(client_secret=client_secret)


@payments_router.post(
    "/payment-success",
    response_model=PaymentSuccessResponse,
    summary="Confirm a lifetime purchase",
)
async def payment_success(
    body: PaymentSuccessRequest,
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> PaymentSuccessResponse:
    await container.payments.confirm_payment(current_user, body.payment_intent_id)
    return PaymentSuccessResponse()


@payments_router.post(
    "/create-subscription",
    response_model=SubscriptionResponse,
    summary="Start the monthly subscription checkout",
)
async def create_subscription(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> SubscriptionResponse:
    subscription = await container.payments.create_subscription(current_user)
    return SubscriptionResponse(
        subscription_id=subscription.id,
        client_secret=subscription.client_secret,
    )


@payments_router.post("/webhook", summary="Payment processor webhook")
async def webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="stripe-signature"),
    container: ServiceContainer = Depends(get_container),
) -> Dict[str, Any]:
    payload = await request.body()
    return await container.payments.handle_webhook(payload, stripe_signature)


@payments_router.get(
    "/download-pro-pack",
    response_model=ProPackResponse,
    summary="Pro Pack download link (lifetime members)",
)
async def download_pro_pack(
    current_user: User = Depends(get_current_user),
    container: ServiceContainer = Depends(get_container),
) -> ProPackResponse:
    if not current_user.is_admin and current_user.subscription_type != SubscriptionType.PREMIUM_LIFETIME:
        raise AuthorizationError("Only lifetime premium users can download the Pro Pack")

    settings = container.settings
    response = ProPackResponse(download_url=settings.PRO_PACK_DOWNLOAD_PATH)

    if not current_user.is_admin and current_user.email:
        sent = await container.notifications.send_pro_pack(current_user.email, settings.pro_pack_download_url)
        if not sent:
            logger.warning(f"Failed to send Pro Pack download email to user {current_user.id}")

    logger.log_user_action("download_pro_pack", current_user.id)
    return response
