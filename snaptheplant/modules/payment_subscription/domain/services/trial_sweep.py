# 📄 File: snaptheplant/modules/payment_subscription/domain/services/trial_sweep.py
# 🧭 Purpose (Layman Explanation):
# Every so often, looks at everyone on a free trial: reminds them by email when the trial
# has two days or one day left, and moves them back to the free plan once it has ended.
# 🧪 Purpose (Technical Summary):
# TrialSweeper runs one guarded pass over trial users (per-user error isolation, a lock
# so passes never overlap). TrialSweepScheduler wraps it in a cancellable asyncio task with
# explicit start/stop and a fixed interval.
# 🔗 Dependencies:
# asyncio, entitlement_service, notification_service, storage unit of work
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.core.container (scheduler lifecycle),
# snaptheplant.background_jobs.tasks.trial_sweep (Celery entry point)

import asyncio
import contextlib
from dataclasses import dataclass, field
from datetime import datetime
from typing import Awaitable, Callable, FrozenSet, List, Optional

from snaptheplant.modules.notification_communication.domain.services.notification_service import (
    NotificationService,
)
from snaptheplant.modules.user_management.domain.models.subscription import SubscriptionEvent
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.modules.user_management.domain.services.entitlement_service import (
    subscription_changes,
)
from snaptheplant.shared.infrastructure.storage.base import StorageBackend
from snaptheplant.shared.utils.helpers import Clock, days_until, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)

REMINDER_DAYS: FrozenSet[int] = frozenset({1, 2})


@dataclass
class TrialSweepReport:
    """Outcome of one sweep tick."""
    started_at: datetime
    scanned: int = 0
    reminders_sent: int = 0
    expired: int = 0
    skipped: int = 0
    errors: int = 0
    skipped_tick: bool = False
    expired_user_ids: List[int] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "started_at": self.started_at.isoformat(),
            "scanned": self.scanned,
            "reminders_sent": self.reminders_sent,
            "expired": self.expired,
            "skipped": self.skipped,
            "errors": self.errors,
            "skipped_tick": self.skipped_tick,
        }


class TrialSweeper:
    """
    One pass of the trial lifecycle check.

    Re-running a pass is safe: only users still on a trial are selected, and
    the downgrade re-checks the state inside its own unit of work.
    """

    def __init__(
        self,
        storage: StorageBackend,
        notifications: NotificationService,
        clock: Clock = utc_now,
    ):
        self._storage = storage
        self._notifications = notifications
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    async def run_once(self) -> TrialSweepReport:
        """
        Run one sweep tick.

        Returns:
            TrialSweepReport: Counters for the tick; ``skipped_tick`` is set when a
            previous tick still held the guard
        """
        if self._lock.locked():
            logger.warning("Trial sweep already running; skipping this tick")
            return TrialSweepReport(started_at=self._clock(), skipped_tick=True)

        async with self._lock:
            return await self._sweep()

    async def _sweep(self) -> TrialSweepReport:
        now = self._clock()
        report = TrialSweepReport(started_at=now)
        logger.info("Running scheduled check for trials ending soon")

        async with self._storage.unit_of_work() as repos:
            trial_users = await repos.users.list_by_subscription_type(SubscriptionType.TRIAL)

        for user in trial_users:
            report.scanned += 1
            try:
                await self._check_user(user, now, report)
            except Exception as e:
                report.errors += 1
                logger.error(
                    f"Trial sweep failed for user {user.id}: {e}",
                    exc_info=True,
                    swept_user_id=user.id,
                )

        logger.log_business_event(
            "trial_sweep_completed",
            f"Trial sweep checked {report.scanned} users",
            extra=report.as_dict(),
        )
        return report

    async def _check_user(self, user: User, now: datetime, report: TrialSweepReport) -> None:
        if user.trial_end_date is None:
            logger.warning(f"Trial user {user.id} has no trial end date; skipping", swept_user_id=user.id)
            report.skipped += 1
            return

        days_remaining = days_until(user.trial_end_date, now)

        if days_remaining <= 0:
            if await self._expire(user.id, now):
                report.expired += 1
                report.expired_user_ids.append(user.id)
            return

        if days_remaining in REMINDER_DAYS and user.email:
            logger.info(
                f"Sending trial ending reminder to user {user.id} ({days_remaining} days remaining)"
            )
            sent = await self._notifications.send_trial_ending(user.email, days_remaining)
            if sent:
                report.reminders_sent += 1
            else:
                logger.warning(f"Failed to send trial ending email to user {user.id}")

    async def _expire(self, user_id: int, now: datetime) -> bool:
        async with self._storage.unit_of_work() as repos:
            current = await repos.users.get_by_id(user_id)
            if current is None or current.subscription_type != SubscriptionType.TRIAL:
                return False
            await repos.users.update(
                user_id,
                subscription_changes(current, SubscriptionEvent.TRIAL_EXPIRED, now),
            )

        logger.info(f"Trial ended for user {user_id}, downgraded to free")
        return True


class TrialSweepScheduler:
    """
    Periodic driver for a TrialSweeper.

    Ticks are spaced by a fixed interval measured from the end of the previous
    tick; the first tick runs one interval after ``start()``.
    """

    def __init__(
        self,
        sweeper: TrialSweeper,
        interval_seconds: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._sweeper = sweeper
        self._interval = interval_seconds
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self._run(), name="trial-sweep")
        logger.info(f"⏰ Trial sweep scheduled every {self._interval:g}s")

    async def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("⏰ Trial sweep stopped")

    async def _run(self) -> None:
        while True:
            await self._sleep(self._interval)
            try:
                await self._sweeper.run_once()
            except Exception as e:
                logger.error(f"Trial sweep tick failed: {e}", exc_info=True)
            self.ticks += 1
