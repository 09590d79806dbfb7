# 📄 File: snaptheplant/modules/plant_identification/presentation/api/schemas/identification_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of the answer you get after uploading a plant photo: the likely species and
# how many free identifications you have left.
# 🧪 Purpose (Technical Summary):
# camelCase response schemas mirroring the IdentificationResult domain model.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# snaptheplant.modules.plant_identification.presentation.api.v1.identify

from typing import Dict, List, Optional

from pydantic import Field

from snaptheplant.shared.core.schemas import APIModel


class WateringResponse(APIModel):
    min: Optional[int] = None
    max: Optional[int] = None


class SuggestionResponse(APIModel):
    id: Optional[str] = None
    plant_name: str
    probability: float
    scientific_name: Optional[str] = None
    common_names: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    description: Optional[str] = None
    taxonomy: Dict[str, str] = Field(default_factory=dict)
    synonyms: List[str] = Field(default_factory=list)
    watering: Optional[WateringResponse] = None
    propagation: List[str] = Field(default_factory=list)
    similar_images: List[str] = Field(default_factory=list)


class IdentificationResponse(APIModel):
    """Ranked suggestions, best match first."""
    id: Optional[str] = None
    is_plant: Optional[bool] = None
    is_plant_probability: Optional[float] = None
    suggestions: List[SuggestionResponse] = Field(default_factory=list)
    identifications_remaining: int
