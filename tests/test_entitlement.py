# 📄 File: tests/test_entitlement.py
# 🧭 Purpose (Layman Explanation):
# Checks the plan rules: who counts as premium, who may still identify plants, and which
# plan changes are allowed.
# 🧪 Purpose (Technical Summary):
# Unit tests for the pure entitlement functions and the quota table.
# 🔗 Dependencies:
# pytest, snaptheplant.modules.user_management
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import datetime, timezone

import pytest

from snaptheplant.modules.user_management.domain.models.subscription import (
    UNLIMITED_IDENTIFICATIONS,
    SubscriptionEvent,
    quota_for,
)
from snaptheplant.modules.user_management.domain.models.user import (
    MeteredFeature,
    SubscriptionType,
    User,
)
from snaptheplant.modules.user_management.domain.services.entitlement_service import (
    has_premium_access,
    has_remaining_usage,
    subscription_changes,
    transition,
)
from snaptheplant.shared.core.exceptions import InvalidSubscriptionTransitionError

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_user(subscription_type=SubscriptionType.FREE, remaining=5, **fields) -> User:
    return User(
        id=1,
        username="rosa",
        password_hash="x",
        email="Rosa@Example.com",
        subscription_type=subscription_type,
        identifications_remaining=remaining,
        **fields,
    )


def test_new_user_defaults():
    user = User(username="rosa", password_hash="x", email="  Rosa@Example.COM ")
    assert user.email == "rosa@example.com"
    assert user.subscription_type == SubscriptionType.FREE
    assert user.identifications_remaining == 5
    assert not user.is_admin


def test_negative_quota_is_rejected():
    with pytest.raises(ValueError):
        make_user(remaining=-1)


@pytest.mark.parametrize("subscription_type,expected", [
    (SubscriptionType.FREE, False),
    (SubscriptionType.TRIAL, True),
    (SubscriptionType.PREMIUM, True),
    (SubscriptionType.PREMIUM_LIFETIME, True),
])
def test_premium_access(subscription_type, expected):
    assert has_premium_access(make_user(subscription_type)) is expected


def test_free_user_usage_depends_on_quota():
    assert has_remaining_usage(make_user(remaining=1), MeteredFeature.IDENTIFICATIONS)
    assert not has_remaining_usage(make_user(remaining=0), MeteredFeature.IDENTIFICATIONS)


def test_trial_user_with_empty_counter_still_has_usage():
    user = make_user(SubscriptionType.TRIAL, remaining=0)
    assert has_remaining_usage(user, MeteredFeature.IDENTIFICATIONS)


def test_quota_table():
    assert quota_for(SubscriptionType.FREE) == 3
    assert quota_for(SubscriptionType.TRIAL) == 10
    assert quota_for(SubscriptionType.PREMIUM) == UNLIMITED_IDENTIFICATIONS
    assert quota_for("premium-lifetime") == UNLIMITED_IDENTIFICATIONS


class TestTransition:
    def test_trial_only_from_free(self):
        assert transition(SubscriptionType.FREE, SubscriptionEvent.TRIAL_STARTED) == SubscriptionType.TRIAL
        for current in (SubscriptionType.TRIAL, SubscriptionType.PREMIUM, SubscriptionType.PREMIUM_LIFETIME):
            with pytest.raises(InvalidSubscriptionTransitionError):
                transition(current, SubscriptionEvent.TRIAL_STARTED)

    def test_trial_expiry_only_from_trial(self):
        assert transition(SubscriptionType.TRIAL, SubscriptionEvent.TRIAL_EXPIRED) == SubscriptionType.FREE
        with pytest.raises(InvalidSubscriptionTransitionError):
            transition(SubscriptionType.FREE, SubscriptionEvent.TRIAL_EXPIRED)

    def test_lifetime_is_terminal_for_purchases(self):
        with pytest.raises(InvalidSubscriptionTransitionError):
            transition(SubscriptionType.PREMIUM_LIFETIME, SubscriptionEvent.SUBSCRIPTION_ACTIVATED)
        with pytest.raises(InvalidSubscriptionTransitionError):
            transition(SubscriptionType.PREMIUM_LIFETIME, SubscriptionEvent.LIFETIME_PURCHASED)

    def test_premium_can_upgrade_to_lifetime(self):
        result = transition(SubscriptionType.PREMIUM, SubscriptionEvent.LIFETIME_PURCHASED)
        assert result == SubscriptionType.PREMIUM_LIFETIME

    def test_cancel_only_from_premium(self):
        assert transition(SubscriptionType.PREMIUM, SubscriptionEvent.SUBSCRIPTION_CANCELLED) == SubscriptionType.FREE
        with pytest.raises(InvalidSubscriptionTransitionError):
            transition(SubscriptionType.PREMIUM_LIFETIME, SubscriptionEvent.SUBSCRIPTION_CANCELLED)

    def test_admin_override_needs_target(self):
        with pytest.raises(InvalidSubscriptionTransitionError) as exc_info:
            transition(SubscriptionType.FREE, SubscriptionEvent.ADMIN_OVERRIDE)
        assert exc_info.value.status_code == 409

        result = transition(
            SubscriptionType.PREMIUM_LIFETIME,
            SubscriptionEvent.ADMIN_OVERRIDE,
            target=SubscriptionType.FREE,
        )
        assert result == SubscriptionType.FREE


class TestSubscriptionChanges:
    def test_trial_start_keeps_quota_and_sets_deadline(self):
        deadline = datetime(2025, 6, 4, 12, 0, tzinfo=timezone.utc)
        changes = subscription_changes(
            make_user(remaining=2),
            SubscriptionEvent.TRIAL_STARTED,
            NOW,
            trial_end_date=deadline,
        )
        assert changes == {"subscription_type": SubscriptionType.TRIAL, "trial_end_date": deadline}

    def test_trial_expiry_resets_to_free_quota_and_clears_deadline(self):
        user = make_user(SubscriptionType.TRIAL, remaining=7, trial_end_date=NOW)
        changes = subscription_changes(user, SubscriptionEvent.TRIAL_EXPIRED, NOW)
        assert changes == {
            "subscription_type": SubscriptionType.FREE,
            "identifications_remaining": 3,
            "trial_end_date": None,
        }

    def test_activation_grants_unlimited(self):
        changes = subscription_changes(make_user(), SubscriptionEvent.SUBSCRIPTION_ACTIVATED, NOW)
        assert changes["subscription_type"] == SubscriptionType.PREMIUM
        assert changes["identifications_remaining"] == UNLIMITED_IDENTIFICATIONS
        assert "trial_end_date" not in changes

    def test_admin_override_into_trial_without_deadline_uses_now(self):
        changes = subscription_changes(
            make_user(),
            SubscriptionEvent.ADMIN_OVERRIDE,
            NOW,
            target=SubscriptionType.TRIAL,
        )
        assert changes["trial_end_date"] == NOW
        assert changes["identifications_remaining"] == 10
