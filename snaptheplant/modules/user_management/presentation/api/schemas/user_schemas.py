# 📄 File: snaptheplant/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what account information the API sends back (never the password) and what
# admins send when flagging beta testers.
# 🧪 Purpose (Technical Summary):
# Pydantic user response schema built from the User domain model, plus admin request
# bodies for user administration.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# auth and admin endpoints, subscription endpoints (user echo)

from datetime import datetime
from typing import Optional

from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, UserRole
from snaptheplant.shared.core.schemas import APIModel


class UserResponse(APIModel):
    """Public view of an account; the password hash is never included."""
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole
    subscription_type: SubscriptionType
    identifications_remaining: int
    trial_end_date: Optional[datetime] = None
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    is_beta_tester: bool = False
    created_at: datetime


class ToggleBetaTesterRequest(APIModel):
    user_id: int
    is_beta_tester: bool = False
