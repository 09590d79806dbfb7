# 📄 File: tests/test_payments.py
# 🧭 Purpose (Layman Explanation):
# Walks through buying lifetime access, starting a monthly plan, and the payment
# company telling us a subscription started or ended.
# 🧪 Purpose (Technical Summary):
# Payment endpoint and PaymentService tests against the fake gateway: intent
# confirmation rules, subscription checkout, signed webhooks and the unconfigured paths.
# 🔗 Dependencies:
# pytest, fastapi.testclient, tests.support, snaptheplant.modules.payment_subscription
# 🔄 Connected Modules / Calls From:
# pytest

import json

import pytest

from snaptheplant.modules.notification_communication.domain.models.email_message import EmailTemplate
from snaptheplant.modules.payment_subscription.domain.models.payment import (
    EVENT_SUBSCRIPTION_CREATED,
    EVENT_SUBSCRIPTION_DELETED,
    EVENT_SUBSCRIPTION_UPDATED,
)
from snaptheplant.modules.payment_subscription.domain.services.payment_service import PaymentService
from snaptheplant.modules.user_management.domain.models.subscription import UNLIMITED_IDENTIFICATIONS
from snaptheplant.shared.core.exceptions import ServiceNotConfiguredError
from tests.support import WEBHOOK_SIGNATURE, login_admin, register


def post_webhook(client, event_type, subscription, signature=WEBHOOK_SIGNATURE):
    payload = json.dumps({"id": "evt_1", "type": event_type, "data": {"object": subscription}})
    headers = {"Content-Type": "application/json"}
    if signature is not None:
        headers["stripe-signature"] = signature
    return client.post("/api/webhook", content=payload, headers=headers)


# =============================================================================
# LIFETIME PURCHASE
# =============================================================================

class TestLifetimePurchase:
    def test_intent_then_confirm_grants_lifetime(self, client, gateway, email_service):
        register(client, "alice")

        intent = client.post("/api/create-payment-intent")
        assert intent.status_code == 200
        assert intent.json() == {"clientSecret": "pi_1_secret"}
        assert gateway.intents["pi_1"].amount == 4999
        assert gateway.intents["pi_1"].metadata["type"] == "one-time"

        gateway.succeed("pi_1")
        confirmed = client.post("/api/payment-success", json={"paymentIntentId": "pi_1"})
        assert confirmed.status_code == 200
        assert confirmed.json() == {"success": True, "downloadAvailable": True}

        me = client.get("/api/me").json()
        assert me["subscriptionType"] == "premium-lifetime"
        assert me["identificationsRemaining"] == UNLIMITED_IDENTIFICATIONS
        assert [m.template for m in email_service.sent] == [EmailTemplate.SUBSCRIPTION_CONFIRMATION]

    def test_confirm_is_idempotent(self, client, gateway, email_service):
        register(client, "alice")
        client.post("/api/create-payment-intent")
        gateway.succeed("pi_1")

        assert client.post("/api/payment-success", json={"paymentIntentId": "pi_1"}).status_code == 200
        assert client.post("/api/payment-success", json={"paymentIntentId": "pi_1"}).status_code == 200
        assert len(email_service.sent) == 1

    def test_unpaid_intent_is_rejected(self, client):
        register(client, "alice")
        client.post("/api/create-payment-intent")

        response = client.post("/api/payment-success", json={"paymentIntentId": "pi_1"})
        assert response.status_code == 400
        assert response.json()["error"]["details"]["payment_status"] == "requires_payment_method"
        assert client.get("/api/me").json()["subscriptionType"] == "free"

    def test_missing_intent_id(self, client):
        register(client, "alice")
        response = client.post("/api/payment-success", json={})
        assert response.status_code == 400

    def test_foreign_intent_is_rejected(self, client, gateway):
        register(client, "alice")
        client.post("/api/create-payment-intent")
        gateway.succeed("pi_1")

        register(client, "bob")
        response = client.post("/api/payment-success", json={"paymentIntentId": "pi_1"})
        assert response.status_code == 400
        assert client.get("/api/me").json()["subscriptionType"] == "free"

    def test_paying_users_cannot_buy_again(self, client, gateway):
        register(client, "alice")
        client.post("/api/create-payment-intent")
        gateway.succeed("pi_1")
        client.post("/api/payment-success", json={"paymentIntentId": "pi_1"})

        assert client.post("/api/create-payment-intent").status_code == 400

    def test_trial_user_can_buy_lifetime(self, client, gateway):
        register(client, "alice")
        client.post("/api/start-free-trial")
        client.post("/api/create-payment-intent")
        gateway.succeed("pi_1")

        assert client.post("/api/payment-success", json={"paymentIntentId": "pi_1"}).status_code == 200
        me = client.get("/api/me").json()
        assert me["subscriptionType"] == "premium-lifetime"
        assert me["trialEndDate"] is None


class TestProPack:
    def test_free_user_is_refused(self, client):
        register(client, "alice")
        assert client.get("/api/download-pro-pack").status_code == 403

    def test_lifetime_user_gets_link_and_email(self, client, gateway, email_service):
        register(client, "alice")
        client.post("/api/create-payment-intent")
        gateway.succeed("pi_1")
        client.post("/api/payment-success", json={"paymentIntentId": "pi_1"})

        response = client.get("/api/download-pro-pack")
        assert response.status_code == 200
        body = response.json()
        assert body["fileName"] == "SnapThePlant-ProPack.zip"
        assert body["downloadUrl"]
        assert email_service.sent[-1].template == EmailTemplate.PRO_PACK_DOWNLOAD

    def test_admin_gets_link_without_email(self, client, email_service):
        login_admin(client)
        assert client.get("/api/download-pro-pack").status_code == 200
        assert email_service.sent == []


# =============================================================================
# MONTHLY SUBSCRIPTION AND WEBHOOKS
# =============================================================================

class TestSubscriptionCheckout:
    def test_create_subscription_stores_billing_ids(self, client, gateway):
        register(client, "alice")

        response = client.post("/api/create-subscription")
        assert response.status_code == 200
        assert response.json() == {"subscriptionId": "sub_1", "clientSecret": "seti_secret"}

        me = client.get("/api/me").json()
        assert me["stripeCustomerId"] == "cus_1"
        assert me["stripeSubscriptionId"] == "sub_1"
        assert me["subscriptionType"] == "free"

    def test_second_checkout_reuses_subscription(self, client, gateway):
        register(client, "alice")
        client.post("/api/create-subscription")

        again = client.post("/api/create-subscription")
        assert again.json()["subscriptionId"] == "sub_1"
        assert len(gateway.subscriptions) == 1
        assert len(gateway.customers) == 1


class TestWebhook:
    def test_active_subscription_grants_premium_then_cancel_downgrades(self, client, email_service):
        register(client, "alice")
        client.post("/api/create-subscription")

        activated = post_webhook(client, EVENT_SUBSCRIPTION_CREATED, {
            "id": "sub_1", "customer": "cus_1", "status": "active",
        })
        assert activated.status_code == 200
        assert activated.json() == {"received": True}

        me = client.get("/api/me").json()
        assert me["subscriptionType"] == "premium"
        assert me["identificationsRemaining"] == UNLIMITED_IDENTIFICATIONS
        assert email_service.sent[-1].template == EmailTemplate.SUBSCRIPTION_CONFIRMATION

        post_webhook(client, EVENT_SUBSCRIPTION_DELETED, {"id": "sub_1", "customer": "cus_1", "status": "canceled"})

        me = client.get("/api/me").json()
        assert me["subscriptionType"] == "free"
        assert me["identificationsRemaining"] == 3
        assert me["stripeSubscriptionId"] is None

    def test_incomplete_subscription_changes_nothing(self, client):
        register(client, "alice")
        client.post("/api/create-subscription")

        post_webhook(client, EVENT_SUBSCRIPTION_UPDATED, {"id": "sub_1", "customer": "cus_1", "status": "incomplete"})
        assert client.get("/api/me").json()["subscriptionType"] == "free"

    def test_repeated_activation_is_harmless(self, client, email_service):
        register(client, "alice")
        client.post("/api/create-subscription")
        subscription = {"id": "sub_1", "customer": "cus_1", "status": "active"}

        post_webhook(client, EVENT_SUBSCRIPTION_CREATED, subscription)
        post_webhook(client, EVENT_SUBSCRIPTION_UPDATED, subscription)

        assert client.get("/api/me").json()["subscriptionType"] == "premium"
        assert len(email_service.sent) == 1

    def test_unknown_customer_is_acknowledged(self, client):
        response = post_webhook(client, EVENT_SUBSCRIPTION_CREATED, {"id": "sub_x", "customer": "cus_x", "status": "active"})
        assert response.status_code == 200

    def test_bad_or_missing_signature(self, client):
        bad = post_webhook(client, EVENT_SUBSCRIPTION_CREATED, {}, signature="forged")
        missing = post_webhook(client, EVENT_SUBSCRIPTION_CREATED, {}, signature=None)

        assert bad.status_code == 400
        assert missing.status_code == 400
        assert missing.json()["error"]["code"] == "BAD_REQUEST"

    def test_lifetime_user_ignores_subscription_activation(self, client, gateway):
        register(client, "alice")
        client.post("/api/create-subscription")
        client.post("/api/create-payment-intent")
        gateway.succeed("pi_1")
        client.post("/api/payment-success", json={"paymentIntentId": "pi_1"})

        post_webhook(client, EVENT_SUBSCRIPTION_CREATED, {"id": "sub_1", "customer": "cus_1", "status": "active"})
        assert client.get("/api/me").json()["subscriptionType"] == "premium-lifetime"

        post_webhook(client, EVENT_SUBSCRIPTION_DELETED, {"id": "sub_1", "customer": "cus_1"})
        assert client.get("/api/me").json()["subscriptionType"] == "premium-lifetime"


# =============================================================================
# UNCONFIGURED PROCESSOR
# =============================================================================

def make_payments(container, gateway=None, webhook_secret=None) -> PaymentService:
    return PaymentService(
        container.storage,
        gateway,
        container.subscriptions,
        container.notifications,
        webhook_secret=webhook_secret,
    )


async def test_webhook_without_secret_is_acknowledged_unprocessed(container, gateway):
    payments = make_payments(container, gateway=gateway, webhook_secret=None)
    result = await payments.handle_webhook(b"{}", "anything")
    assert result == {"received": True, "processed": False}


async def test_payments_without_gateway_are_unavailable(container):
    payments = make_payments(container)
    user, _ = await container.auth.register("alice", "secret123", "alice@example.com")

    assert not payments.is_configured
    with pytest.raises(ServiceNotConfiguredError) as exc_info:
        await payments.create_payment_intent(user)
    assert exc_info.value.status_code == 503


def test_payment_endpoint_without_gateway_answers_503(client, container):
    register(client, "alice")
    container.payments._gateway = None

    response = client.post("/api/create-payment-intent")
    assert response.status_code == 503
    assert response.json()["error"]["code"] == "SERVICE_NOT_CONFIGURED"
