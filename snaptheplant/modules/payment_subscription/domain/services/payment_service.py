# 📄 File: snaptheplant/modules/payment_subscription/domain/services/payment_service.py
# 🧭 Purpose (Layman Explanation):
# Handles buying the lifetime Pro Pack, signing up for the monthly plan, and reacting when
# the payment company tells us a subscription started or was cancelled.
# 🧪 Purpose (Technical Summary):
# Payment orchestration over a PaymentGateway. Premium is only granted after the processor
# confirms the payment (intent status or verified webhook); gateway failures propagate as
# ExternalServiceError before any entitlement write.
# 🔗 Dependencies:
# payment_subscription.domain.models.payment, subscription_service, notification_service
# 🔄 Connected Modules / Calls From:
# payment endpoints, webhook endpoint

from typing import Any, Dict, Optional

from snaptheplant.modules.notification_communication.domain.services.notification_service import (
    NotificationService,
)
from snaptheplant.modules.payment_subscription.domain.models.payment import (
    EVENT_SUBSCRIPTION_CREATED,
    EVENT_SUBSCRIPTION_DELETED,
    EVENT_SUBSCRIPTION_UPDATED,
    PAYMENT_SUCCEEDED,
    SUBSCRIPTION_ACTIVE,
    PaymentGateway,
    SubscriptionInfo,
    WebhookEvent,
)
from snaptheplant.modules.payment_subscription.domain.services.subscription_service import (
    SubscriptionService,
)
from snaptheplant.modules.user_management.domain.models.subscription import SubscriptionEvent
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.shared.core.exceptions import BadRequestError, NotFoundError, ServiceNotConfiguredError
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

PAYMENT_SERVICE_NAME = "Payment processing"
DEFAULT_CURRENCY = "usd"
ONE_TIME_PAYMENT = "one-time"

_PAID_TYPES = frozenset({SubscriptionType.PREMIUM, SubscriptionType.PREMIUM_LIFETIME})


class PaymentService:
    """Lifetime purchases, monthly subscriptions and processor webhooks."""

    def __init__(
        self,
        storage: StorageBackend,
        gateway: Optional[PaymentGateway],
        subscriptions: SubscriptionService,
        notifications: NotificationService,
        lifetime_price_cents: int = 4999,
        currency: str = DEFAULT_CURRENCY,
        price_id: Optional[str] = None,
        webhook_secret: Optional[str] = None,
    ):
        self._storage = storage
        self._gateway = gateway
        self._subscriptions = subscriptions
        self._notifications = notifications
        self._lifetime_price_cents = lifetime_price_cents
        self._currency = currency
        self._price_id = price_id
        self._webhook_secret = webhook_secret

    @property
    def is_configured(self) -> bool:
        return self._gateway is not None

    def _require_gateway(self) -> PaymentGateway:
        if self._gateway is None:
            raise ServiceNotConfiguredError(PAYMENT_SERVICE_NAME)
        return self._gateway

    # =============================================================================
    # LIFETIME PURCHASE
    # =============================================================================

    async def create_payment_intent(self, user: User) -> str:
        """
        Open a one-time payment for the lifetime tier.

        Returns:
            str: Client secret the browser uses to confirm the payment

        Raises:
            BadRequestError: If the user already pays for premium
            ServiceNotConfiguredError: If no payment processor is configured
        """
        gateway = self._require_gateway()
        if user.subscription_type in _PAID_TYPES:
            raise BadRequestError("You already have premium access")

        intent = await gateway.create_payment_intent(
            amount=self._lifetime_price_cents,
            currency=self._currency,
            metadata={"userId": str(user.id), "type": ONE_TIME_PAYMENT},
        )
        logger.info(
            f"Created payment intent {intent.id} for user {user.id}",
            payment_intent_id=intent.id,
            amount=intent.amount,
        )
        return intent.client_secret

    async def confirm_payment(self, user: User, payment_intent_id: Optional[str]) -> User:
        """
        Grant the lifetime tier once the processor reports the intent as paid.

        Raises:
            BadRequestError: If the intent is missing, unpaid or belongs to someone else
            ExternalServiceError: If the lookup fails; nothing is granted
        """
        gateway = self._require_gateway()
        if not payment_intent_id:
            raise BadRequestError("Payment intent ID is required")

        intent = await gateway.retrieve_payment_intent(payment_intent_id)
        if intent.status != PAYMENT_SUCCEEDED:
            raise BadRequestError(
                "Payment not completed",
                details={"payment_status": intent.status},
            )
        if intent.metadata.get("userId") != str(user.id):
            logger.warning(
                f"User {user.id} tried to confirm a foreign payment intent",
                payment_intent_id=payment_intent_id,
            )
            raise BadRequestError("Payment does not belong to this user")

        if user.subscription_type == SubscriptionType.PREMIUM_LIFETIME:
            return user

        updated = await self._subscriptions.apply_event(user.id, SubscriptionEvent.LIFETIME_PURCHASED)
        if updated.email:
            await self._notifications.send_subscription_confirmation(updated.email, monthly=False)

        logger.log_user_action("purchase_lifetime", user.id, resource=f"payment_intent:{payment_intent_id}")
        return updated

    # =============================================================================
    # MONTHLY SUBSCRIPTION
    # =============================================================================

    async def create_subscription(self, user: User) -> SubscriptionInfo:
        """
        Start (or resume) the monthly subscription checkout.

        Only the billing references are stored here; premium is granted when the
        processor reports the subscription as active.
        """
        gateway = self._require_gateway()

        if user.stripe_subscription_id:
            return await gateway.retrieve_subscription(user.stripe_subscription_id)

        if not self._price_id:
            raise ServiceNotConfiguredError(
                PAYMENT_SERVICE_NAME,
                message="Subscription price is not configured",
            )

        customer_id = user.stripe_customer_id
        if not customer_id:
            customer_id = await gateway.create_customer(email=user.email, name=user.username)

        subscription = await gateway.create_subscription(customer_id, self._price_id)

        async with self._storage.unit_of_work() as repos:
            stored = await repos.users.update(user.id, {
                "stripe_customer_id": customer_id,
                "stripe_subscription_id": subscription.id,
            })
        if stored is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user.id)

        logger.log_user_action("create_subscription", user.id, resource=f"subscription:{subscription.id}")
        return subscription

    # =============================================================================
    # WEBHOOKS
    # =============================================================================

    async def handle_webhook(self, payload: bytes, signature: Optional[str]) -> Dict[str, Any]:
        """
        Verify and apply one processor webhook delivery.

        Returns:
            Dict: Acknowledgement body for the processor

        Raises:
            BadRequestError: If the signature header is missing or invalid
        """
        gateway = self._require_gateway()

        if not self._webhook_secret:
            logger.warning("Webhook received but no webhook secret is configured; ignoring")
            return {"received": True, "processed": False}
        if not signature:
            raise BadRequestError("Missing stripe-signature header")

        event = gateway.construct_webhook_event(payload, signature, self._webhook_secret)
        logger.info(f"Webhook event received: {event.type}", webhook_event_id=event.id)

        if event.type in (EVENT_SUBSCRIPTION_CREATED, EVENT_SUBSCRIPTION_UPDATED):
            await self._on_subscription_changed(event)
        elif event.type == EVENT_SUBSCRIPTION_DELETED:
            await self._on_subscription_deleted(event)

        return {"received": True}

    async def _find_customer(self, event: WebhookEvent) -> Optional[User]:
        subscription = event.data.get("object", {})
        customer_id = subscription.get("customer")
        if not customer_id:
            return None

        async with self._storage.unit_of_work() as repos:
            user = await repos.users.get_by_stripe_customer_id(customer_id)
        if user is None:
            logger.warning(f"No user for customer {customer_id}", webhook_event_id=event.id)
        return user

    async def _on_subscription_changed(self, event: WebhookEvent) -> None:
        subscription = event.data.get("object", {})
        if subscription.get("status") != SUBSCRIPTION_ACTIVE:
            return

        user = await self._find_customer(event)
        if user is None or user.subscription_type == SubscriptionType.PREMIUM:
            return
        if user.subscription_type == SubscriptionType.PREMIUM_LIFETIME:
            logger.info(f"User {user.id} already has lifetime access; subscription ignored")
            return

        updated = await self._subscriptions.apply_event(
            user.id,
            SubscriptionEvent.SUBSCRIPTION_ACTIVATED,
            extra_changes={"stripe_subscription_id": subscription.get("id")},
        )
        if updated.email:
            await self._notifications.send_subscription_confirmation(updated.email, monthly=True)

    async def _on_subscription_deleted(self, event: WebhookEvent) -> None:
        user = await self._find_customer(event)
        if user is None or user.subscription_type != SubscriptionType.PREMIUM:
            return

        await self._subscriptions.apply_event(
            user.id,
            SubscriptionEvent.SUBSCRIPTION_CANCELLED,
            extra_changes={"stripe_subscription_id": None},
        )
