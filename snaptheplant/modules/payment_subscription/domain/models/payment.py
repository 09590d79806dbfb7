# 📄 File: snaptheplant/modules/payment_subscription/domain/models/payment.py
# 🧭 Purpose (Layman Explanation):
# Describes what we need to know back from the payment company: a payment, a monthly
# subscription, or a notification it sent us about a subscription changing.
# 🧪 Purpose (Technical Summary):
# Provider-neutral payment value objects and the PaymentGateway contract. The Stripe adapter
# maps SDK objects onto these; tests supply a fake gateway.
# 🔗 Dependencies:
# dataclasses, abc
# 🔄 Connected Modules / Calls From:
# payment_service.py, stripe_gateway.py, tests

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

PAYMENT_SUCCEEDED = "succeeded"
SUBSCRIPTION_ACTIVE = "active"

EVENT_SUBSCRIPTION_CREATED = "customer.subscription.created"
EVENT_SUBSCRIPTION_UPDATED = "customer.subscription.updated"
EVENT_SUBSCRIPTION_DELETED = "customer.subscription.deleted"


@dataclass(frozen=True)
class PaymentIntentInfo:
    """One-time payment as seen by the processor."""
    id: str
    status: str
    amount: int
    currency: str
    client_secret: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SubscriptionInfo:
    """Recurring subscription as seen by the processor."""
    id: str
    customer_id: str
    status: str
    client_secret: Optional[str] = None


@dataclass(frozen=True)
class WebhookEvent:
    """Signature-verified processor event."""
    id: str
    type: str
    data: Dict[str, Any]


class PaymentGateway(ABC):
    """Payment processor contract."""

    @abstractmethod
    async def create_payment_intent(
        self, amount: int, currency: str, metadata: Dict[str, str]
    ) -> PaymentIntentInfo:
        """Open a one-time payment."""

    @abstractmethod
    async def retrieve_payment_intent(self, payment_intent_id: str) -> PaymentIntentInfo:
        """Look up a one-time payment."""

    @abstractmethod
    async def create_customer(self, email: str, name: str) -> str:
        """Create a customer and return its id."""

    @abstractmethod
    async def create_subscription(self, customer_id: str, price_id: str) -> SubscriptionInfo:
        """Start an incomplete subscription awaiting its first payment."""

    @abstractmethod
    async def retrieve_subscription(self, subscription_id: str) -> SubscriptionInfo:
        """Look up a subscription."""

    @abstractmethod
    def construct_webhook_event(self, payload: bytes, signature: str, secret: str) -> WebhookEvent:
        """
        Verify and parse a webhook delivery.

        Raises:
            BadRequestError: If the signature or payload is invalid
        """
