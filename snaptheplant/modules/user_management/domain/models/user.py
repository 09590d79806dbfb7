# 📄 File: snaptheplant/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in SnapThePlant - their login details, which plan they are on
# (free, trial or premium) and how many free plant identifications they have left.
# 🧪 Purpose (Technical Summary):
# Domain model for the User aggregate with role and subscription enums; storage-agnostic
# pydantic model hydrated from either repository backend.
# 🔗 Dependencies:
# pydantic, datetime, typing, snaptheplant.shared.core.security
# 🔄 Connected Modules / Calls From:
# auth_service.py, entitlement_service.py, user_repository.py, payment and trial services

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from snaptheplant.shared.core.security import verify_password
from snaptheplant.shared.utils.helpers import ensure_utc, utc_now

# Quota a brand-new account starts with
DEFAULT_SIGNUP_IDENTIFICATIONS = 5


class UserRole(str, Enum):
    """User role enumeration"""
    USER = "user"
    ADMIN = "admin"


class SubscriptionType(str, Enum):
    """Subscription state of an account"""
    FREE = "free"
    TRIAL = "trial"
    PREMIUM = "premium"
    PREMIUM_LIFETIME = "premium-lifetime"


class MeteredFeature(str, Enum):
    """Features whose usage is counted for free accounts"""
    IDENTIFICATIONS = "identifications"


class User(BaseModel):
    """
    User domain model.

    ``identifications_remaining`` only matters while the account is free;
    premium tiers carry an effectively unlimited sentinel instead.
    """

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    username: str
    password_hash: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    role: UserRole = UserRole.USER
    subscription_type: SubscriptionType = SubscriptionType.FREE
    identifications_remaining: int = DEFAULT_SIGNUP_IDENTIFICATIONS
    trial_end_date: Optional[datetime] = None

    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    is_beta_tester: bool = False

    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("trial_end_date", "created_at")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("identifications_remaining")
    @classmethod
    def validate_quota(cls, v: int) -> int:
        if v < 0:
            raise ValueError("identifications_remaining cannot be negative")
        return v

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def verify_password(self, password: str) -> bool:
        """Check a plain text password against the stored hash."""
        return verify_password(password, self.password_hash)
