# 📄 File: tests/test_trial_sweep.py
# 🧭 Purpose (Layman Explanation):
# Checks the trial watchdog: reminders go out two days and one day before a trial ends,
# and finished trials drop back to the free plan.
# 🧪 Purpose (Technical Summary):
# Tests for TrialSweeper (reminders, expiry, skip/guard behaviour, report counters) and
# TrialSweepScheduler (start/stop lifecycle with an injected sleep).
# 🔗 Dependencies:
# pytest, pytest-asyncio, asyncio, snaptheplant.modules.payment_subscription
# 🔄 Connected Modules / Calls From:
# pytest

import asyncio
from datetime import timedelta

from snaptheplant.modules.notification_communication.domain.models.email_message import EmailTemplate
from snaptheplant.modules.payment_subscription.domain.services.trial_sweep import TrialSweepScheduler
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User


async def seed(storage, username, subscription_type=SubscriptionType.TRIAL, trial_end_date=None, **fields):
    async with storage.unit_of_work() as repos:
        return await repos.users.create(User(
            username=username,
            password_hash="hash",
            email=f"{username}@example.com",
            subscription_type=subscription_type,
            trial_end_date=trial_end_date,
            **fields,
        ))


async def reload(storage, user_id) -> User:
    async with storage.unit_of_work() as repos:
        return await repos.users.get_by_id(user_id)


async def test_reminders_two_days_and_one_day_out(container, storage, clock, email_service):
    await seed(storage, "two", trial_end_date=clock() + timedelta(days=2))
    await seed(storage, "one", trial_end_date=clock() + timedelta(hours=20))
    await seed(storage, "three", trial_end_date=clock() + timedelta(days=3))

    report = await container.trial_sweeper.run_once()

    assert report.scanned == 3
    assert report.reminders_sent == 2
    assert report.expired == 0
    assert sorted(m.to for m in email_service.sent) == ["one@example.com", "two@example.com"]
    assert all(m.template == EmailTemplate.TRIAL_ENDING for m in email_service.sent)
    assert "Your SnapThePlant Trial Ends in 1 Day" in email_service.subjects()


async def test_ended_trial_is_downgraded_to_free(container, storage, clock):
    user = await seed(
        storage,
        "late",
        trial_end_date=clock() - timedelta(hours=1),
        identifications_remaining=10,
    )

    report = await container.trial_sweeper.run_once()

    assert report.expired == 1
    assert report.expired_user_ids == [user.id]

    after = await reload(storage, user.id)
    assert after.subscription_type == SubscriptionType.FREE
    assert after.identifications_remaining == 3
    assert after.trial_end_date is None


async def test_sweep_is_idempotent(container, storage, clock, email_service):
    await seed(storage, "late", trial_end_date=clock() - timedelta(days=1))

    first = await container.trial_sweeper.run_once()
    second = await container.trial_sweeper.run_once()

    assert first.expired == 1
    assert second.scanned == 0
    assert second.expired == 0
    assert email_service.sent == []


async def test_only_trial_users_are_considered(container, storage, clock):
    await seed(storage, "free", subscription_type=SubscriptionType.FREE, trial_end_date=clock() - timedelta(days=1))
    await seed(storage, "paid", subscription_type=SubscriptionType.PREMIUM)

    report = await container.trial_sweeper.run_once()

    assert report.scanned == 0


async def test_trial_without_deadline_is_skipped(container, storage):
    await seed(storage, "odd", trial_end_date=None)

    report = await container.trial_sweeper.run_once()

    assert report.skipped == 1
    assert report.errors == 0


async def test_failed_email_is_not_counted_and_does_not_abort(container, storage, clock, email_service):
    email_service.fail = True
    await seed(storage, "soon", trial_end_date=clock() + timedelta(days=1))
    late = await seed(storage, "late", trial_end_date=clock() - timedelta(days=1))

    report = await container.trial_sweeper.run_once()

    assert report.reminders_sent == 0
    assert report.errors == 0
    assert (await reload(storage, late.id)).subscription_type == SubscriptionType.FREE


async def test_overlapping_tick_is_skipped(container):
    sweeper = container.trial_sweeper
    async with sweeper._lock:
        assert sweeper.is_running
        report = await sweeper.run_once()

    assert report.skipped_tick
    assert report.scanned == 0
    assert report.as_dict()["skipped_tick"] is True


async def test_clock_advance_moves_trial_through_reminders_to_expiry(container, storage, clock, email_service):
    user = await seed(storage, "ivy", trial_end_date=clock() + timedelta(days=3))

    assert (await container.trial_sweeper.run_once()).reminders_sent == 0
    clock.advance(days=1)
    assert (await container.trial_sweeper.run_once()).reminders_sent == 1
    clock.advance(days=1)
    assert (await container.trial_sweeper.run_once()).reminders_sent == 1
    clock.advance(days=1)
    assert (await container.trial_sweeper.run_once()).expired == 1

    assert len(email_service.sent) == 2
    assert (await reload(storage, user.id)).subscription_type == SubscriptionType.FREE


# =============================================================================
# SCHEDULER
# =============================================================================

class RecordingSleep:
    def __init__(self):
        self.intervals = []

    async def __call__(self, seconds: float) -> None:
        self.intervals.append(seconds)
        await asyncio.sleep(0)


async def spin(iterations: int = 20) -> None:
    for _ in range(iterations):
        await asyncio.sleep(0)


async def test_scheduler_ticks_until_stopped(container):
    sleep = RecordingSleep()
    scheduler = TrialSweepScheduler(container.trial_sweeper, 60, sleep=sleep)

    scheduler.start()
    assert scheduler.is_running
    await spin()
    await scheduler.stop()

    assert not scheduler.is_running
    assert scheduler.ticks >= 2
    assert set(sleep.intervals) == {60}

    ticks = scheduler.ticks
    await spin()
    assert scheduler.ticks == ticks


async def test_scheduler_survives_failing_tick():
    class BrokenSweeper:
        async def run_once(self):
            raise RuntimeError("storage down")

    scheduler = TrialSweepScheduler(BrokenSweeper(), 1, sleep=RecordingSleep())
    scheduler.start()
    await spin()
    await scheduler.stop()

    assert scheduler.ticks >= 2


async def test_scheduler_stop_without_start_is_noop(container):
    scheduler = TrialSweepScheduler(container.trial_sweeper, 60)
    await scheduler.stop()
    assert not scheduler.is_running
