# 📄 File: snaptheplant/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant in someone's collection: its name, photo, how often it needs water and
# fertilizer, when it last got them, and a simple health score.
# 🧪 Purpose (Technical Summary):
# Plant aggregate domain model. Frequencies are whole days; a null frequency means the
# plant has no recurring schedule for that kind of care.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# plant_service.py, care_scheduler.py, plant_repository.py, community module

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from snaptheplant.shared.utils.helpers import ensure_utc, utc_now

FULL_CARE_HEALTH = 100.0


class Plant(BaseModel):
    """Plant domain model owned by exactly one user."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    name: str
    scientific_name: Optional[str] = None
    image_url: Optional[str] = None
    date_added: datetime = Field(default_factory=utc_now)

    # Cadences in days; None means no recurring schedule
    water_frequency: Optional[int] = Field(None, gt=0)
    fertilize_frequency: Optional[int] = Field(None, gt=0)
    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None

    light_needs: Optional[str] = None
    notes: Optional[str] = None
    care_health: float = FULL_CARE_HEALTH
    is_public: bool = False

    @field_validator("date_added", "last_watered", "last_fertilized")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive values are read as UTC; aware ones are converted."""
        return ensure_utc(v)

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
