# 📄 File: snaptheplant/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user accounts are stored in the database table, including their
# plan, remaining identifications and billing references.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``users`` table, mapped to the User domain model by the
# repository implementation.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - snaptheplant.shared.infrastructure.database.connection (Base, UTCDateTime)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations (schema generation)

from sqlalchemy import Boolean, Column, Integer, String

from snaptheplant.shared.infrastructure.database.connection import Base, UTCDateTime
from snaptheplant.shared.utils.helpers import utc_now


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """SQLAlchemy model for user accounts and subscription state."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)

    role = Column(String(20), nullable=False, default="user")
    subscription_type = Column(
        String(30),
        nullable=False,
        default="free",
        index=True,
        comment="free, trial, premium or premium-lifetime"
    )
    identifications_remaining = Column(Integer, nullable=False, default=5)
    trial_end_date = Column(UTCDateTime, nullable=True)

    stripe_customer_id = Column(String(255), nullable=True, index=True)
    stripe_subscription_id = Column(String(255), nullable=True)
    is_beta_tester = Column(Boolean, nullable=False, default=False)

    created_at = Column(UTCDateTime, nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username='{self.username}', subscription='{self.subscription_type}')>"
