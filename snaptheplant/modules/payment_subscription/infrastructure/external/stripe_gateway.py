# 📄 File: snaptheplant/modules/payment_subscription/infrastructure/external/stripe_gateway.py
# 🧭 Purpose (Layman Explanation):
# Talks to Stripe, the payment company, to take one-time payments, start monthly
# subscriptions, and check that notifications claiming to come from Stripe really do.
# 🧪 Purpose (Technical Summary):
# PaymentGateway adapter over the official stripe SDK (StripeClient). Blocking SDK calls
# run in a worker thread; SDK errors become ExternalServiceError and webhook signature
# failures become BadRequestError.
# 🔗 Dependencies:
# stripe, asyncio, json
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.core.container (wiring), payment_service.py

import asyncio
import json
from typing import Any, Callable, Dict, Optional

import stripe

from snaptheplant.modules.payment_subscription.domain.models.payment import (
    PaymentGateway,
    PaymentIntentInfo,
    SubscriptionInfo,
    WebhookEvent,
)
from snaptheplant.shared.core.exceptions import BadRequestError, ExternalServiceError
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

SERVICE_NAME = "stripe"


def _client_secret_from_subscription(subscription: Any) -> Optional[str]:
    """Client secret of the first invoice, if Stripe expanded it."""
    invoice = getattr(subscription, "latest_invoice", None)
    if invoice is None or isinstance(invoice, str):
        return None
    confirmation = getattr(invoice, "confirmation_secret", None)
    if confirmation is not None and not isinstance(confirmation, str):
        return getattr(confirmation, "client_secret", None)
    payment_intent = getattr(invoice, "payment_intent", None)
    if payment_intent is not None and not isinstance(payment_intent, str):
        return getattr(payment_intent, "client_secret", None)
    return None


def _to_payment_intent(intent: Any) -> PaymentIntentInfo:
    metadata = getattr(intent, "metadata", None) or {}
    return PaymentIntentInfo(
        id=intent.id,
        status=intent.status,
        amount=intent.amount,
        currency=intent.currency,
        client_secret=getattr(intent, "client_secret", None),
        metadata={str(k): str(v) for k, v in dict(metadata).items()},
    )


def _to_subscription(subscription: Any) -> SubscriptionInfo:
    customer = subscription.customer
    return SubscriptionInfo(
        id=subscription.id,
        customer_id=customer if isinstance(customer, str) else customer.id,
        status=subscription.status,
        client_secret=_client_secret_from_subscription(subscription),
    )


class StripePaymentGateway(PaymentGateway):
    """Stripe-backed payment gateway."""

    INVOICE_EXPANSION = ["latest_invoice.confirmation_secret"]

    def __init__(self, secret_key: str):
        self._client = stripe.StripeClient(secret_key)

    async def _call(self, operation: str, func: Callable[..., Any], *args, **kwargs) -> Any:
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except stripe.StripeError as e:
            logger.error(
                f"Stripe {operation} failed: {e.user_message or e}",
                stripe_operation=operation,
                http_status=e.http_status,
            )
            raise ExternalServiceError(
                f"Payment processor error during {operation}",
                service=SERVICE_NAME,
                service_response=str(e.user_message or e),
            ) from e

    async def create_payment_intent(
        self, amount: int, currency: str, metadata: Dict[str, str]
    ) -> PaymentIntentInfo:
        intent = await self._call(
            "create_payment_intent",
            self._client.payment_intents.create,
            params={"amount": amount, "currency": currency, "metadata": metadata},
        )
        return _to_payment_intent(intent)

    async def retrieve_payment_intent(self, payment_intent_id: str) -> PaymentIntentInfo:
        intent = await self._call(
            "retrieve_payment_intent",
            self._client.payment_intents.retrieve,
            payment_intent_id,
        )
        return _to_payment_intent(intent)

    async def create_customer(self, email: str, name: str) -> str:
        customer = await self._call(
            "create_customer",
            self._client.customers.create,
            params={"email": email, "name": name},
        )
        return customer.id

    async def create_subscription(self, customer_id: str, price_id: str) -> SubscriptionInfo:
        subscription = await self._call(
            "create_subscription",
            self._client.subscriptions.create,
            params={
                "customer": customer_id,
                "items": [{"price": price_id}],
                "payment_behavior": "default_incomplete",
                "expand": self.INVOICE_EXPANSION,
            },
        )
        return _to_subscription(subscription)

    async def retrieve_subscription(self, subscription_id: str) -> SubscriptionInfo:
        subscription = await self._call(
            "retrieve_subscription",
            self._client.subscriptions.retrieve,
            subscription_id,
            params={"expand": self.INVOICE_EXPANSION},
        )
        return _to_subscription(subscription)

    def construct_webhook_event(self, payload: bytes, signature: str, secret: str) -> WebhookEvent:
        try:
            stripe.Webhook.construct_event(payload, signature, secret)
        except stripe.SignatureVerificationError as e:
            raise BadRequestError(f"Webhook Error: {e}") from e
        except ValueError as e:
            raise BadRequestError(f"Webhook Error: invalid payload ({e})") from e

        body = json.loads(payload)
        return WebhookEvent(
            id=body.get("id", ""),
            type=body.get("type", ""),
            data=body.get("data", {}),
        )
