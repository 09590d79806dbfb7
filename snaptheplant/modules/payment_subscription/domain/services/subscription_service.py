# 📄 File: snaptheplant/modules/payment_subscription/domain/services/subscription_service.py
# 🧭 Purpose (Layman Explanation):
# Moves people between plans: starting a free trial, admins giving someone a trial or
# changing their plan by hand, and the upgrades/downgrades that payments cause.
# 🧪 Purpose (Technical Summary):
# Applies validated SubscriptionEvents to users inside a unit of work, then performs the
# best-effort side effects (emails, analytics) after the change has been persisted.
# 🔗 Dependencies:
# entitlement_service, notification_service, analytics_recorder, storage unit of work
# 🔄 Connected Modules / Calls From:
# subscription endpoints, admin endpoints, payment_service.py

from datetime import datetime
from typing import Any, Dict, Optional

from snaptheplant.modules.analytics.domain.services.analytics_recorder import AnalyticsRecorder
from snaptheplant.modules.notification_communication.domain.services.notification_service import (
    NotificationService,
)
from snaptheplant.modules.user_management.domain.models.subscription import (
    TRIAL_IDENTIFICATIONS_GRANT,
    SubscriptionEvent,
)
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.modules.user_management.domain.services.entitlement_service import (
    subscription_changes,
)
from snaptheplant.shared.core.exceptions import NotFoundError
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.helpers import Clock, add_days, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TRIAL_DAYS = 3


class SubscriptionService:
    """
    Subscription lifecycle service.

    Every state change goes through the entitlement transition function, so an
    invalid move (a trial for a paying user, say) fails before anything is written.
    """

    def __init__(
        self,
        storage: StorageBackend,
        notifications: NotificationService,
        analytics: AnalyticsRecorder,
        trial_duration_days: int = DEFAULT_TRIAL_DAYS,
        clock: Clock = utc_now,
    ):
        self._storage = storage
        self._notifications = notifications
        self._analytics = analytics
        self._trial_duration_days = trial_duration_days
        self._clock = clock

    async def apply_event(
        self,
        user_id: int,
        event: SubscriptionEvent,
        target: Optional[SubscriptionType] = None,
        trial_end_date: Optional[datetime] = None,
        extra_changes: Optional[Dict[str, Any]] = None,
    ) -> User:
        """
        Apply one subscription event to a user and persist the result.

        Args:
            user_id: Account to change
            event: Subscription event
            target: Destination type for admin overrides
            trial_end_date: Deadline when the event enters the trial state
            extra_changes: Additional fields written in the same unit of work

        Returns:
            User: The updated account

        Raises:
            NotFoundError: If the user does not exist
            InvalidSubscriptionTransitionError: If the event is not allowed
        """
        now = self._clock()
        async with self._storage.unit_of_work() as repos:
            user = await repos.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found", resource_type="user", resource_id=user_id)

            changes = subscription_changes(user, event, now, target=target, trial_end_date=trial_end_date)
            if extra_changes:
                changes.update(extra_changes)
            updated = await repos.users.update(user_id, changes)

        logger.log_business_event(
            "subscription_changed",
            f"User {user_id} moved from {user.subscription_type.value} "
            f"to {updated.subscription_type.value}",
            entity_id=user_id,
            entity_type="user",
            extra={"subscription_event": SubscriptionEvent(event).value},
        )
        return updated

    async def start_free_trial(self, user: User) -> User:
        """
        Self-service trial for a free account.

        The trial keeps the user's current identification quota.
        """
        trial_end_date = add_days(self._clock(), self._trial_duration_days)
        updated = await self.apply_event(
            user.id,
            SubscriptionEvent.TRIAL_STARTED,
            trial_end_date=trial_end_date,
        )

        await self._analytics.track(updated, "started_trial")
        if updated.email:
            sent = await self._notifications.send_trial_started(updated.email, trial_end_date)
            if not sent:
                logger.warning(f"Failed to send trial started email to user {updated.id}")

        logger.log_user_action("start_free_trial", updated.id, result="success")
        return updated

    async def admin_start_trial(
        self,
        user_id: int,
        days: int = DEFAULT_TRIAL_DAYS,
        actor_id: Optional[int] = None,
    ) -> User:
        """Admin-granted trial: the target must be free and receives the trial quota."""
        trial_end_date = add_days(self._clock(), days)
        updated = await self.apply_event(
            user_id,
            SubscriptionEvent.TRIAL_STARTED,
            trial_end_date=trial_end_date,
            extra_changes={"identifications_remaining": TRIAL_IDENTIFICATIONS_GRANT},
        )

        if updated.email:
            await self._notifications.send_trial_started(updated.email, trial_end_date)

        logger.log_user_action(
            "admin_start_trial",
            actor_id,
            resource=f"user:{user_id}",
            extra={"days": days},
        )
        return updated

    async def admin_update_status(
        self,
        user_id: int,
        subscription_type: SubscriptionType,
        actor_id: Optional[int] = None,
    ) -> User:
        """Admin override to any subscription type; the quota follows the target."""
        subscription_type = SubscriptionType(subscription_type)
        trial_end_date = None
        if subscription_type == SubscriptionType.TRIAL:
            trial_end_date = add_days(self._clock(), self._trial_duration_days)

        updated = await self.apply_event(
            user_id,
            SubscriptionEvent.ADMIN_OVERRIDE,
            target=subscription_type,
            trial_end_date=trial_end_date,
        )

        logger.log_user_action(
            "admin_update_status",
            actor_id,
            resource=f"user:{user_id}",
            extra={"subscription_type": subscription_type.value},
        )
        return updated
