# 📄 File: snaptheplant/modules/plant_management/domain/models/care_action.py
# 🧭 Purpose (Layman Explanation):
# A single care task on the calendar, like "water the fern on Tuesday", and whether it is done.
# 🧪 Purpose (Technical Summary):
# CareAction domain model and CareActionType enum. Only water and fertilize actions recur;
# the other kinds are one-off reminders.
# 🔗 Dependencies:
# pydantic, datetime, enum, snaptheplant.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# care_scheduler.py, care_action_repository.py, care action endpoints

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from snaptheplant.shared.utils.helpers import ensure_utc


class CareActionType(str, Enum):
    """Kinds of care a plant can receive"""
    WATER = "water"
    FERTILIZE = "fertilize"
    REPOT = "repot"
    PRUNE = "prune"
    MIST = "mist"
    OTHER = "other"


# Kinds that have a cadence on the plant
RECURRING_ACTION_TYPES = (CareActionType.WATER, CareActionType.FERTILIZE)


class CareAction(BaseModel):
    """Scheduled (or completed) care task for a plant."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    plant_id: int
    user_id: int
    action_type: CareActionType
    due_date: datetime
    is_completed: bool = False
    completed_at: Optional[datetime] = None

    @field_validator("due_date", "completed_at")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)
