# 📄 File: snaptheplant/modules/plant_identification/domain/models/identification.py
# 🧭 Purpose (Layman Explanation):
# Describes what we get back when we ask the plant-recognition service "what plant is
# this?": a list of likely species, best guess first, with how sure the service is.
# 🧪 Purpose (Technical Summary):
# Identification result models (ranked suggestions with probability, common names and
# watering metadata) and the PlantIdentifier collaborator contract.
# 🔗 Dependencies:
# pydantic, abc
# 🔄 Connected Modules / Calls From:
# identification_service.py, plant_id_client.py, identification endpoint, tests

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class WateringInfo(BaseModel):
    """Watering need on the recognizer's 1 (dry) to 3 (wet) scale."""
    min: Optional[int] = None
    max: Optional[int] = None


class PlantSuggestion(BaseModel):
    """One candidate species."""
    id: Optional[str] = None
    plant_name: str
    probability: float = Field(ge=0.0, le=1.0)
    scientific_name: Optional[str] = None
    common_names: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    description: Optional[str] = None
    taxonomy: Dict[str, str] = Field(default_factory=dict)
    synonyms: List[str] = Field(default_factory=list)
    watering: Optional[WateringInfo] = None
    propagation: List[str] = Field(default_factory=list)
    similar_images: List[str] = Field(default_factory=list)


class IdentificationResult(BaseModel):
    """Recognizer answer; ``suggestions`` is ordered by descending probability."""
    id: Optional[str] = None
    is_plant: Optional[bool] = None
    is_plant_probability: Optional[float] = None
    suggestions: List[PlantSuggestion] = Field(default_factory=list)
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    @property
    def best_match(self) -> Optional[PlantSuggestion]:
        return self.suggestions[0] if self.suggestions else None


def rank_suggestions(suggestions: List[PlantSuggestion]) -> List[PlantSuggestion]:
    return sorted(suggestions, key=lambda suggestion: suggestion.probability, reverse=True)


class PlantIdentifier(ABC):
    """Plant recognition collaborator."""

    service_name = "Plant identification"

    @abstractmethod
    async def identify(self, image_bytes: bytes) -> IdentificationResult:
        """
        Identify the plant in an image.

        Raises:
            ExternalServiceError: If the recognizer fails or answers with an error
        """

    async def close(self) -> None:
        """Release transport resources."""
