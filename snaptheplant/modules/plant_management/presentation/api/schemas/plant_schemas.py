# 📄 File: snaptheplant/modules/plant_management/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends when adding or editing a plant, and what plant and care
# task information comes back.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for plants and care actions. Update bodies are
# partial (only fields the client sent are applied).
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# plant and care action endpoints, community endpoints (public plants)

from datetime import datetime
from typing import Optional

from pydantic import Field

from snaptheplant.modules.plant_management.domain.models.care_action import CareActionType
from snaptheplant.shared.core.schemas import APIModel


class PlantCreateRequest(APIModel):
    """New plant; each cadence set here schedules a first care action."""
    name: str = Field(..., min_length=1, max_length=200)
    scientific_name: Optional[str] = None
    image_url: Optional[str] = None
    water_frequency: Optional[int] = Field(None, gt=0, le=365)
    fertilize_frequency: Optional[int] = Field(None, gt=0, le=365)
    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    light_needs: Optional[str] = None
    notes: Optional[str] = None
    is_public: bool = False


class PlantUpdateRequest(APIModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    scientific_name: Optional[str] = None
    image_url: Optional[str] = None
    water_frequency: Optional[int] = Field(None, gt=0, le=365)
    fertilize_frequency: Optional[int] = Field(None, gt=0, le=365)
    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    light_needs: Optional[str] = None
    notes: Optional[str] = None
    care_health: Optional[float] = Field(None, ge=0, le=100)
    is_public: Optional[bool] = None


class PlantResponse(APIModel):
    id: int
    user_id: int
    name: str
    scientific_name: Optional[str] = None
    image_url: Optional[str] = None
    date_added: datetime
    water_frequency: Optional[int] = None
    fertilize_frequency: Optional[int] = None
    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    light_needs: Optional[str] = None
    notes: Optional[str] = None
    care_health: float
    is_public: bool


class CareActionCreateRequest(APIModel):
    plant_id: int
    action_type: CareActionType
    due_date: datetime


class CareActionResponse(APIModel):
    id: int
    plant_id: int
    user_id: int
    action_type: CareActionType
    due_date: datetime
    is_completed: bool
    completed_at: Optional[datetime] = None


class PendingCareActionResponse(CareActionResponse):
    """Pending action with its plant embedded."""
    plant: Optional[PlantResponse] = None
