# 📄 File: snaptheplant/modules/user_management/domain/models/subscription.py
# 🧭 Purpose (Layman Explanation):
# Lists the things that can happen to someone's plan (trial starts, trial ends, they pay,
# they cancel) and how many identifications each plan comes with.
# 🧪 Purpose (Technical Summary):
# Subscription event enum and per-state identification grants used by the entitlement
# state machine.
# 🔗 Dependencies:
# enum, snaptheplant.modules.user_management.domain.models.user
# 🔄 Connected Modules / Calls From:
# entitlement_service.py, payment services, trial sweep, admin endpoints

from enum import Enum
from typing import Dict

from .user import SubscriptionType

# Premium tiers keep the counter check but can never realistically hit zero
UNLIMITED_IDENTIFICATIONS = 999999
FREE_IDENTIFICATIONS_GRANT = 3
TRIAL_IDENTIFICATIONS_GRANT = 10


class SubscriptionEvent(str, Enum):
    """Events that move an account between subscription states"""
    TRIAL_STARTED = "trial_started"
    TRIAL_EXPIRED = "trial_expired"
    SUBSCRIPTION_ACTIVATED = "subscription_activated"
    LIFETIME_PURCHASED = "lifetime_purchased"
    SUBSCRIPTION_CANCELLED = "subscription_cancelled"
    ADMIN_OVERRIDE = "admin_override"


IDENTIFICATION_GRANTS: Dict[SubscriptionType, int] = {
    SubscriptionType.FREE: FREE_IDENTIFICATIONS_GRANT,
    SubscriptionType.TRIAL: TRIAL_IDENTIFICATIONS_GRANT,
    SubscriptionType.PREMIUM: UNLIMITED_IDENTIFICATIONS,
    SubscriptionType.PREMIUM_LIFETIME: UNLIMITED_IDENTIFICATIONS,
}


def quota_for(subscription_type: SubscriptionType) -> int:
    """Identification quota granted on entering ``subscription_type``."""
    return IDENTIFICATION_GRANTS[SubscriptionType(subscription_type)]
