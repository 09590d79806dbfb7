# 📄 File: snaptheplant/modules/plant_identification/domain/services/identification_service.py
# 🧭 Purpose (Layman Explanation):
# Runs a plant identification for a user: checks they still have identifications left,
# asks the recognition service, and only then uses up one of their free identifications.
# 🧪 Purpose (Technical Summary):
# Metered identification flow. The quota check and the atomic decrement each run in their
# own unit of work; the recognizer call happens between them, outside any transaction, so
# a failed call never consumes quota.
# 🔗 Dependencies:
# entitlement_service, PlantIdentifier, storage unit of work
# 🔄 Connected Modules / Calls From:
# identification endpoint

from dataclasses import dataclass
from typing import Optional

from snaptheplant.modules.plant_identification.domain.models.identification import (
    IdentificationResult,
    PlantIdentifier,
)
from snaptheplant.modules.user_management.domain.models.user import (
    MeteredFeature,
    SubscriptionType,
    User,
)
from snaptheplant.modules.user_management.domain.services.entitlement_service import (
    has_remaining_usage,
)
from snaptheplant.shared.core.exceptions import (
    FileTooLargeError,
    NotFoundError,
    ServiceNotConfiguredError,
    UpgradeRequiredError,
    ValidationError,
)
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class IdentificationOutcome:
    result: IdentificationResult
    identifications_remaining: int


class IdentificationService:
    """Quota-aware plant identification."""

    def __init__(
        self,
        storage: StorageBackend,
        identifier: Optional[PlantIdentifier],
        max_image_size: int,
    ):
        self._storage = storage
        self._identifier = identifier
        self._max_image_size = max_image_size

    @property
    def is_configured(self) -> bool:
        return self._identifier is not None

    def _validate_image(self, image_bytes: bytes) -> None:
        if not image_bytes:
            raise ValidationError("No image provided", field="image")
        if len(image_bytes) > self._max_image_size:
            raise FileTooLargeError(
                f"Image exceeds the {self._max_image_size} byte limit",
                max_size_bytes=self._max_image_size,
            )

    async def identify(self, user_id: int, image_bytes: bytes) -> IdentificationOutcome:
        """
        Identify a plant image on behalf of ``user_id``.

        Args:
            user_id: Requesting user
            image_bytes: Raw uploaded image

        Returns:
            IdentificationOutcome: Ranked result and the quota left afterwards

        Raises:
            UpgradeRequiredError: If a free user has no identifications left
            ServiceNotConfiguredError: If no recognizer is configured
            ExternalServiceError: If the recognizer fails; no quota is consumed
        """
        self._validate_image(image_bytes)

        async with self._storage.unit_of_work() as repos:
            user = await repos.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)

        if not has_remaining_usage(user, MeteredFeature.IDENTIFICATIONS):
            logger.info(f"User {user_id} is out of identifications", feature="identifications")
            raise UpgradeRequiredError(feature=MeteredFeature.IDENTIFICATIONS.value)

        if self._identifier is None:
            raise ServiceNotConfiguredError(PlantIdentifier.service_name)

        result = await self._identifier.identify(image_bytes)

        remaining = await self._consume(user)
        logger.log_user_action(
            "identify_plant",
            user_id,
            extra={
                "suggestion_count": len(result.suggestions),
                "identifications_remaining": remaining,
            },
        )
        return IdentificationOutcome(result=result, identifications_remaining=remaining)

    async def _consume(self, user: User) -> int:
        if user.subscription_type != SubscriptionType.FREE:
            return user.identifications_remaining

        async with self._storage.unit_of_work() as repos:
            consumed = await repos.users.consume_identification(user.id)
            current = await repos.users.get_by_id(user.id)

        if not consumed:
            # A concurrent request used the last identification first
            logger.warning(f"Identification quota already exhausted for user {user.id}")
        return current.identifications_remaining if current else 0
