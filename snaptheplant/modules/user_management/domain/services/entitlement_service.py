# 📄 File: snaptheplant/modules/user_management/domain/services/entitlement_service.py
# 🧭 Purpose (Layman Explanation):
# Decides what each user is allowed to do based on their plan, and which plan changes are
# allowed (for example, you cannot start a free trial while already paying).
# 🧪 Purpose (Technical Summary):
# Pure entitlement rules: premium access, metered usage checks and the validated
# subscription transition function. No I/O; callers persist the resulting changes.
# 🔗 Dependencies:
# user_management.domain.models (User, SubscriptionType, SubscriptionEvent)
# 🔄 Connected Modules / Calls From:
# identification service, subscription service, payment service, trial sweep, admin endpoints

from datetime import datetime
from typing import Any, Dict, FrozenSet, Optional

from snaptheplant.modules.user_management.domain.models.subscription import (
    SubscriptionEvent,
    quota_for,
)
from snaptheplant.modules.user_management.domain.models.user import (
    MeteredFeature,
    SubscriptionType,
    User,
)
from snaptheplant.shared.core.exceptions import InvalidSubscriptionTransitionError

PREMIUM_ACCESS_TYPES: FrozenSet[SubscriptionType] = frozenset({
    SubscriptionType.PREMIUM,
    SubscriptionType.PREMIUM_LIFETIME,
    SubscriptionType.TRIAL,
})

_UPGRADEABLE = frozenset({SubscriptionType.FREE, SubscriptionType.TRIAL, SubscriptionType.PREMIUM})

# event -> (allowed source states, fixed target)
TRANSITIONS = {
    SubscriptionEvent.TRIAL_STARTED: (frozenset({SubscriptionType.FREE}), SubscriptionType.TRIAL),
    SubscriptionEvent.TRIAL_EXPIRED: (frozenset({SubscriptionType.TRIAL}), SubscriptionType.FREE),
    SubscriptionEvent.SUBSCRIPTION_ACTIVATED: (_UPGRADEABLE, SubscriptionType.PREMIUM),
    SubscriptionEvent.LIFETIME_PURCHASED: (_UPGRADEABLE, SubscriptionType.PREMIUM_LIFETIME),
    SubscriptionEvent.SUBSCRIPTION_CANCELLED: (frozenset({SubscriptionType.PREMIUM}), SubscriptionType.FREE),
}


def has_premium_access(user: User) -> bool:
    """True for premium, lifetime and trial accounts."""
    return user.subscription_type in PREMIUM_ACCESS_TYPES


def has_remaining_usage(user: User, feature: MeteredFeature) -> bool:
    """
    Whether ``user`` may use a metered feature right now.

    Args:
        user: Account to check
        feature: Metered feature being requested

    Returns:
        bool: True when premium access holds or the free quota is not exhausted
    """
    if has_premium_access(user):
        return True
    if feature == MeteredFeature.IDENTIFICATIONS:
        return user.identifications_remaining > 0
    return False


def transition(
    current: SubscriptionType,
    event: SubscriptionEvent,
    target: Optional[SubscriptionType] = None,
) -> SubscriptionType:
    """
    Validate a subscription event against the current state.

    Args:
        current: Current subscription type
        event: Event being applied
        target: Destination for ``ADMIN_OVERRIDE`` (ignored otherwise)

    Returns:
        SubscriptionType: The resulting subscription type

    Raises:
        InvalidSubscriptionTransitionError: If the event is not allowed from ``current``
    """
    current = SubscriptionType(current)
    event = SubscriptionEvent(event)

    if event == SubscriptionEvent.ADMIN_OVERRIDE:
        if target is None:
            raise InvalidSubscriptionTransitionError(
                "Admin override requires a target subscription type",
                current=current.value,
                event=event.value,
            )
        return SubscriptionType(target)

    allowed_from, result = TRANSITIONS[event]
    if current not in allowed_from:
        raise InvalidSubscriptionTransitionError(
            f"Cannot apply {event.value} to a {current.value} account",
            current=current.value,
            event=event.value,
        )
    return result


def subscription_changes(
    user: User,
    event: SubscriptionEvent,
    now: datetime,
    target: Optional[SubscriptionType] = None,
    trial_end_date: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Repository changes produced by applying ``event`` to ``user``.

    A self-service trial start keeps the user's current quota; every other
    transition resets it to the grant of the new state. Leaving the trial
    state clears ``trial_end_date``.
    """
    new_type = transition(user.subscription_type, event, target)
    changes: Dict[str, Any] = {"subscription_type": new_type}

    if event != SubscriptionEvent.TRIAL_STARTED:
        changes["identifications_remaining"] = quota_for(new_type)

    if new_type == SubscriptionType.TRIAL:
        if trial_end_date is not None:
            changes["trial_end_date"] = trial_end_date
        elif user.trial_end_date is None or user.subscription_type != SubscriptionType.TRIAL:
            # A trial state needs a deadline for the sweep to act on
            changes["trial_end_date"] = now
    elif user.subscription_type == SubscriptionType.TRIAL:
        changes["trial_end_date"] = None

    return changes
