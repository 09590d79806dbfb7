# 📄 File: snaptheplant/modules/plant_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plants and their care tasks are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the ``plants`` and ``care_actions`` tables. Care actions
# cascade with their plant at the database level.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - snaptheplant.shared.infrastructure.database.connection (Base, UTCDateTime)
#
# 🔄 Connected Modules / Calls From:
# - plant_repository_impl.py (CRUD operations)
# - migrations (schema generation)

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text

from snaptheplant.shared.infrastructure.database.connection import Base, UTCDateTime
from snaptheplant.shared.utils.helpers import utc_now


# =============================================================================
# PLANT MODEL
# =============================================================================

class PlantModel(Base):
    """SQLAlchemy model for a user's plant."""

    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    name = Column(String(200), nullable=False)
    scientific_name = Column(String(200), nullable=True)
    image_url = Column(Text, nullable=True)
    date_added = Column(UTCDateTime, nullable=False, default=utc_now)

    water_frequency = Column(Integer, nullable=True, comment="Days between waterings")
    fertilize_frequency = Column(Integer, nullable=True, comment="Days between feedings")
    last_watered = Column(UTCDateTime, nullable=True)
    last_fertilized = Column(UTCDateTime, nullable=True)

    light_needs = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    care_health = Column(Float, nullable=False, default=100.0)
    is_public = Column(Boolean, nullable=False, default=False, index=True)

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, name='{self.name}', user_id={self.user_id})>"


# =============================================================================
# CARE ACTION MODEL
# =============================================================================

class CareActionModel(Base):
    """SQLAlchemy model for a scheduled or completed care task."""

    __tablename__ = "care_actions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plant_id = Column(
        Integer,
        ForeignKey("plants.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    action_type = Column(String(20), nullable=False)
    due_date = Column(UTCDateTime, nullable=False, index=True)
    is_completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<CareActionModel(id={self.id}, type='{self.action_type}', plant_id={self.plant_id})>"
