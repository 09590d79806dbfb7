# 📄 File: tests/support.py
# 🧭 Purpose (Layman Explanation):
# Stand-ins for the outside services (plant recognition, payments, email), a clock the
# tests can move forward, and small shortcuts for signing up and adding plants.
# 🧪 Purpose (Technical Summary):
# In-process fakes for the collaborator contracts (PlantIdentifier, PaymentGateway,
# EmailService), a FrozenClock and TestClient helpers shared by the test modules.
# 🔗 Dependencies:
# fastapi.testclient (httpx), snaptheplant domain contracts
# 🔄 Connected Modules / Calls From:
# tests/conftest.py, test modules

import json
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from fastapi.testclient import TestClient

from snaptheplant.modules.notification_communication.domain.models.email_message import (
    EmailMessage,
    EmailService,
)
from snaptheplant.modules.payment_subscription.domain.models.payment import (
    PAYMENT_SUCCEEDED,
    PaymentGateway,
    PaymentIntentInfo,
    SubscriptionInfo,
    WebhookEvent,
)
from snaptheplant.modules.plant_identification.domain.models.identification import (
    IdentificationResult,
    PlantIdentifier,
    PlantSuggestion,
)
from snaptheplant.shared.core.exceptions import BadRequestError, ExternalServiceError

ADMIN_PASSWORD = "adminpass"
WEBHOOK_SIGNATURE = "valid"
MAX_TEST_IMAGE_SIZE = 1024

# =============================================================================
# FAKES
# =============================================================================

class FrozenClock:
    """Clock that only moves when a test says so."""

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: float = 0, hours: float = 0) -> datetime:
        self.now = self.now + timedelta(days=days, hours=hours)
        return self.now

class FakeIdentifier(PlantIdentifier):
    def __init__(self):
        self.calls = 0
        self.fail = False

    async def identify(self, image_bytes: bytes) -> IdentificationResult:
        self.calls += 1
        if self.fail:
            raise ExternalServiceError("Plant identification failed", service=self.service_name)
        return IdentificationResult(
            id="ident-1",
            is_plant=True,
            is_plant_probability=0.97,
            suggestions=[
                PlantSuggestion(
                    id="s1",
                    plant_name="Monstera deliciosa",
                    probability=0.91,
                    common_names=["Swiss cheese plant"],
                ),
                PlantSuggestion(id="s2", plant_name="Philodendron", probability=0.05),
            ],
        )

class FakePaymentGateway(PaymentGateway):
    """In-memory processor; ``succeed`` flips an intent to paid."""

    def __init__(self):
        self.intents: Dict[str, PaymentIntentInfo] = {}
        self.customers: Dict[str, str] = {}
        self.subscriptions: Dict[str, SubscriptionInfo] = {}

    async def create_payment_intent(self, amount, currency, metadata) -> PaymentIntentInfo:
        intent_id = f"pi_{len(self.intents) + 1}"
        intent = PaymentIntentInfo(
            id=intent_id,
            status="requires_payment_method",
            amount=amount,
            currency=currency,
            client_secret=f"{intent_id}_secret",
            metadata=dict(metadata),
        )
        self.intents[intent_id] = intent
        return intent

    def succeed(self, intent_id: str) -> None:
        intent = self.intents[intent_id]
        self.intents[intent_id] = PaymentIntentInfo(
            id=intent.id,
            status=PAYMENT_SUCCEEDED,
            amount=intent.amount,
            currency=intent.currency,
            client_secret=intent.client_secret,
            metadata=intent.metadata,
        )

    async def retrieve_payment_intent(self, payment_intent_id: str) -> PaymentIntentInfo:
        if payment_intent_id not in self.intents:
            raise ExternalServiceError("No such payment intent", service="Payment processing")
        return self.intents[payment_intent_id]

    async def create_customer(self, email: str, name: str) -> str:
        customer_id = f"cus_{len(self.customers) + 1}"
        self.customers[customer_id] = email
        return customer_id

    async def create_subscription(self, customer_id: str, price_id: str) -> SubscriptionInfo:
        subscription = SubscriptionInfo(
            id=f"sub_{len(self.subscriptions) + 1}",
            customer_id=customer_id,
            status="incomplete",
            client_secret="seti_secret",
        )
        self.subscriptions[subscription.id] = subscription
        return subscription

    async def retrieve_subscription(self, subscription_id: str) -> SubscriptionInfo:
        return self.subscriptions[subscription_id]

    def construct_webhook_event(self, payload: bytes, signature: str, secret: str) -> WebhookEvent:
        if signature != WEBHOOK_SIGNATURE:
            raise BadRequestError("Invalid webhook signature")
        body = json.loads(payload)
        return WebhookEvent(id=body.get("id", "evt_test"), type=body["type"], data=body["data"])

class FakeEmailService(EmailService):
    def __init__(self):
        self.sent: List[EmailMessage] = []
        self.fail = False

    async def send(self, message: EmailMessage) -> bool:
        if self.fail:
            return False
        self.sent.append(message)
        return True

    def subjects(self) -> List[str]:
        return [message.subject for message in self.sent]


# =============================================================================
# HELPERS
# =============================================================================

def register(client: TestClient, username: str = "alice", password: str = "secret123", **extra) -> dict:
    """Register (and thereby log in) a user; returns the camelCase user body."""
    client.cookies.clear()
    response = client.post("/api/register", json={
        "username": username,
        "password": password,
        "passwordConfirm": password,
        "email": extra.pop("email", f"{username}@example.com"),
        **extra,
    })
    assert response.status_code == 201, response.text
    return response.json()

def login(client: TestClient, username: str, password: str) -> dict:
    client.cookies.clear()
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()

def login_admin(client: TestClient) -> dict:
    return login(client, "admin", ADMIN_PASSWORD)

def create_plant(client: TestClient, name: str = "Fern", **fields) -> dict:
    response = client.post("/api/plants", json={"name": name, **fields})
    assert response.status_code == 201, response.text
    return response.json()
