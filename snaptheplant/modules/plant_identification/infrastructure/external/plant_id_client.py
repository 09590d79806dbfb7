# 📄 File: snaptheplant/modules/plant_identification/infrastructure/external/plant_id_client.py
# 🧭 Purpose (Layman Explanation):
# Sends a plant photo to the Plant.id recognition service and turns its answer into our
# own list of "this is probably..." suggestions.
# 🧪 Purpose (Technical Summary):
# PlantIdentifier adapter for the Plant.id v2 identify endpoint, built on the shared
# APIClient (aiohttp + tenacity retries). Images are sent base64-encoded with the
# ``Api-Key`` header; suggestions are mapped and ranked by probability.
# 🔗 Dependencies:
# base64, snaptheplant.shared.infrastructure.external_apis.api_client
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.core.container (wiring), identification_service.py

import base64
from typing import Any, Dict, List

from snaptheplant.modules.plant_identification.domain.models.identification import (
    IdentificationResult,
    PlantIdentifier,
    PlantSuggestion,
    WateringInfo,
    rank_suggestions,
)
from snaptheplant.shared.infrastructure.external_apis.api_client import APIClient
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

PLANT_ID_MODIFIERS = ["crops_fast", "similar_images"]
PLANT_ID_DETAILS = [
    "common_names",
    "url",
    "wiki_description",
    "taxonomy",
    "synonyms",
    "watering",
    "propagation",
]


def build_identify_payload(image_bytes: bytes, language: str = "en") -> Dict[str, Any]:
    return {
        "images": [base64.b64encode(image_bytes).decode("ascii")],
        "modifiers": PLANT_ID_MODIFIERS,
        "plant_language": language,
        "plant_details": PLANT_ID_DETAILS,
    }


def _parse_suggestion(raw: Dict[str, Any]) -> PlantSuggestion:
    details = raw.get("plant_details") or {}
    wiki = details.get("wiki_description") or {}
    watering = details.get("watering")
    similar = [
        image.get("url") if isinstance(image, dict) else image
        for image in raw.get("similar_images") or []
    ]

    return PlantSuggestion(
        id=str(raw["id"]) if raw.get("id") is not None else None,
        plant_name=raw.get("plant_name") or raw.get("name") or "Unknown plant",
        probability=float(raw.get("probability") or 0.0),
        scientific_name=details.get("scientific_name"),
        common_names=details.get("common_names") or [],
        url=details.get("url"),
        description=wiki.get("value") if isinstance(wiki, dict) else None,
        taxonomy=details.get("taxonomy") or {},
        synonyms=details.get("synonyms") or [],
        watering=WateringInfo(**watering) if isinstance(watering, dict) else None,
        propagation=details.get("propagation") or [],
        similar_images=[url for url in similar if url],
    )


def parse_identify_response(data: Dict[str, Any]) -> IdentificationResult:
    """
    Map a Plant.id v2 identify response onto an IdentificationResult.

    Args:
        data: Decoded response body

    Returns:
        IdentificationResult: Suggestions ranked by descending probability
    """
    suggestions: List[PlantSuggestion] = [
        _parse_suggestion(raw) for raw in data.get("suggestions") or []
    ]
    is_plant = data.get("is_plant")

    return IdentificationResult(
        id=str(data["id"]) if data.get("id") is not None else None,
        is_plant=is_plant.get("binary") if isinstance(is_plant, dict) else is_plant,
        is_plant_probability=data.get("is_plant_probability"),
        suggestions=rank_suggestions(suggestions),
        raw=data,
    )


class PlantIdClient(PlantIdentifier):
    """Plant.id v2 recognizer."""

    service_name = "Plant.id"

    def __init__(self, api_key: str, api_url: str, timeout: int = 30, max_retries: int = 3):
        self.api_url = api_url
        self._client = APIClient(
            api_name=self.service_name,
            api_key=api_key,
            auth_header="Api-Key",
            timeout=timeout,
            max_retries=max_retries,
        )

    async def identify(self, image_bytes: bytes) -> IdentificationResult:
        data = await self._client.post_json(self.api_url, build_identify_payload(image_bytes))
        result = parse_identify_response(data)
        logger.info(
            f"Plant.id returned {len(result.suggestions)} suggestions",
            best_match=result.best_match.plant_name if result.best_match else None,
        )
        return result

    def get_stats(self) -> Dict[str, Any]:
        return self._client.get_stats()

    async def close(self) -> None:
        await self._client.close()
