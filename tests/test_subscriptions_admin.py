# 📄 File: tests/test_subscriptions_admin.py
# 🧭 Purpose (Layman Explanation):
# Checks starting the free trial and the admin tools: listing accounts, marking beta
# testers, granting trials, changing plans and sending sample emails.
# 🧪 Purpose (Technical Summary):
# HTTP tests for the subscription and admin endpoints, including the admin guard and the
# test-email failure path.
# 🔗 Dependencies:
# pytest, fastapi.testclient, tests.support
# 🔄 Connected Modules / Calls From:
# pytest

import json
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from snaptheplant.modules.notification_communication.domain.models.email_message import EmailTemplate
from tests.support import login_admin, register


def parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# =============================================================================
# SELF-SERVICE TRIAL
# =============================================================================

class TestFreeTrial:
    def test_start_trial_keeps_quota_and_sends_welcome(self, client, clock, email_service):
        register(client, "alice")

        response = client.post("/api/start-free-trial")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert parse_datetime(body["trialEndDate"]) == clock() + timedelta(days=3)

        me = client.get("/api/me").json()
        assert me["subscriptionType"] == "trial"
        assert me["identificationsRemaining"] == 5
        assert email_service.subjects() == ["Welcome to Your SnapThePlant Premium Trial!"]

    def test_trial_start_is_recorded_in_analytics(self, client, settings, clock):
        register(client, "alice")
        client.post("/api/start-free-trial")

        log_file = Path(settings.ANALYTICS_LOG_DIR) / f"analytics_{clock():%Y-%m-%d}.log"
        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert [e["event"] for e in entries] == ["started_trial"]
        assert entries[0]["username"] == "alice"

    def test_second_trial_is_a_conflict(self, client):
        register(client, "alice")
        client.post("/api/start-free-trial")

        response = client.post("/api/start-free-trial")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVALID_SUBSCRIPTION_TRANSITION"

    def test_failed_welcome_email_does_not_block_trial(self, client, email_service):
        email_service.fail = True
        register(client, "alice")

        assert client.post("/api/start-free-trial").status_code == 200
        assert client.get("/api/me").json()["subscriptionType"] == "trial"


# =============================================================================
# ADMIN
# =============================================================================

@pytest.mark.parametrize("method, path, body", [
    ("get", "/api/admin/users", None),
    ("post", "/api/admin/toggle-beta-tester", {"userId": 1, "isBetaTester": True}),
    ("post", "/api/admin/start-trial", {"userId": 1}),
    ("post", "/api/admin/update-user-status", {"userId": 1, "subscriptionType": "premium"}),
    ("post", "/api/admin/send-test-email", {"emailType": "trial_started"}),
])
def test_admin_endpoints_refuse_regular_users(client, method, path, body):
    register(client, "alice")

    kwargs = {"json": body} if body is not None else {}
    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"


class TestAdminUsers:
    def test_list_users(self, client):
        register(client, "alice")
        register(client, "bob")
        login_admin(client)

        response = client.get("/api/admin/users")
        assert response.status_code == 200
        usernames = {u["username"] for u in response.json()}
        assert usernames == {"admin", "alice", "bob"}
        assert all("passwordHash" not in u for u in response.json())

    def test_toggle_beta_tester(self, client):
        alice = register(client, "alice")
        login_admin(client)

        on = client.post("/api/admin/toggle-beta-tester", json={"userId": alice["id"], "isBetaTester": True})
        assert on.status_code == 200
        assert on.json()["isBetaTester"] is True

        off = client.post("/api/admin/toggle-beta-tester", json={"userId": alice["id"], "isBetaTester": False})
        assert off.json()["isBetaTester"] is False

    def test_toggle_unknown_user(self, client):
        login_admin(client)
        response = client.post("/api/admin/toggle-beta-tester", json={"userId": 9999, "isBetaTester": True})
        assert response.status_code == 404


class TestAdminSubscriptions:
    def test_admin_trial_grants_trial_quota(self, client, clock, email_service):
        alice = register(client, "alice")
        login_admin(client)

        response = client.post("/api/admin/start-trial", json={"userId": alice["id"], "days": 7})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Trial started successfully"
        assert body["subscriptionType"] == "trial"
        assert body["identificationsRemaining"] == 10
        assert parse_datetime(body["trialEndDate"]) == clock() + timedelta(days=7)
        assert email_service.sent[-1].template == EmailTemplate.TRIAL_STARTED

    def test_admin_trial_for_paying_user_conflicts(self, client):
        alice = register(client, "alice")
        login_admin(client)
        client.post("/api/admin/update-user-status", json={"userId": alice["id"], "subscriptionType": "premium"})

        response = client.post("/api/admin/start-trial", json={"userId": alice["id"]})
        assert response.status_code == 409

    def test_update_status_sets_matching_quota(self, client):
        alice = register(client, "alice")
        login_admin(client)

        premium = client.post(
            "/api/admin/update-user-status",
            json={"userId": alice["id"], "subscriptionType": "premium"},
        )
        assert premium.status_code == 200
        assert premium.json()["subscriptionType"] == "premium"
        assert premium.json()["identificationsRemaining"] == 999999

        free = client.post(
            "/api/admin/update-user-status",
            json={"userId": alice["id"], "subscriptionType": "free"},
        )
        assert free.json()["identificationsRemaining"] == 3
        assert free.json()["trialEndDate"] is None

    def test_update_status_rejects_unknown_type(self, client):
        alice = register(client, "alice")
        login_admin(client)

        response = client.post(
            "/api/admin/update-user-status",
            json={"userId": alice["id"], "subscriptionType": "gold"},
        )
        assert response.status_code == 422


class TestTestEmails:
    @pytest.mark.parametrize("email_type, subject", [
        ("trial_started", "Welcome to Your SnapThePlant Premium Trial!"),
        ("trial_ending_1day", "Your SnapThePlant Trial Ends in 1 Day"),
        ("trial_ending_2days", "Your SnapThePlant Trial Ends in 2 Days"),
        ("subscription_monthly", "Thank You for Your SnapThePlant Subscription!"),
        ("pro_pack_download", "Your SnapThePlant Pro Pack is Ready to Download!"),
    ])
    def test_send_each_template(self, client, email_service, email_type, subject):
        login_admin(client)

        response = client.post("/api/admin/send-test-email", json={"emailType": email_type})
        assert response.status_code == 200
        assert response.json()["message"] == "Test email sent successfully"
        assert email_service.sent[-1].subject == subject
        assert email_service.sent[-1].to == "admin@snaptheplant.com"

    def test_explicit_recipient(self, client, email_service):
        login_admin(client)

        client.post("/api/admin/send-test-email", json={"emailType": "subscription_lifetime", "email": "qa@example.com"})
        assert email_service.sent[-1].to == "qa@example.com"

    def test_delivery_failure_is_reported(self, client, email_service):
        login_admin(client)
        email_service.fail = True

        response = client.post("/api/admin/send-test-email", json={"emailType": "trial_started"})
        assert response.status_code == 502
        assert response.json()["error"]["code"] == "EXTERNAL_SERVICE_ERROR"

    def test_unknown_template_is_rejected(self, client):
        login_admin(client)
        response = client.post("/api/admin/send-test-email", json={"emailType": "newsletter"})
        assert response.status_code == 422
