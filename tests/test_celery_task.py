# 📄 File: tests/test_celery_task.py
# 🧭 Purpose (Layman Explanation):
# Checks the scheduled background job that tidies up trials, and that the job
# scheduler is told to run it regularly.
# 🧪 Purpose (Technical Summary):
# Runs the sweep_trials coroutine against the test container and inspects the Celery
# configuration (beat schedule, routing, registered task name).
# 🔗 Dependencies:
# pytest, pytest-asyncio, celery
# 🔄 Connected Modules / Calls From:
# pytest

from datetime import timedelta

from snaptheplant.background_jobs.celery_app import TRIAL_SWEEP_TASK, CeleryConfig, celery_app
from snaptheplant.background_jobs.tasks.trial_sweep import run_trial_sweep, sweep_trials
from snaptheplant.modules.user_management.domain.models.user import SubscriptionType, User
from snaptheplant.shared.config.settings import Settings


async def test_sweep_trials_returns_report(container, storage, clock):
    async with storage.unit_of_work() as repos:
        await repos.users.create(User(
            username="late",
            password_hash="hash",
            email="late@example.com",
            subscription_type=SubscriptionType.TRIAL,
            trial_end_date=clock() - timedelta(minutes=5),
        ))

    result = await sweep_trials(container=container)

    assert result["scanned"] == 1
    assert result["expired"] == 1
    assert result["errors"] == 0
    assert result["skipped_tick"] is False


async def test_sweep_trials_with_nothing_to_do(container):
    result = await sweep_trials(container=container)
    assert result["scanned"] == 0
    assert result["reminders_sent"] == 0


async def test_worker_without_database_skips_the_sweep():
    settings = Settings(_env_file=None, ENVIRONMENT="test", STORAGE_BACKEND="memory")

    result = await sweep_trials(settings=settings)

    assert result["skipped_tick"] is True
    assert result["scanned"] == 0
    assert result["expired"] == 0


def test_beat_schedule_runs_sweep_on_configured_interval(settings):
    config = CeleryConfig(settings)

    entry = config.beat_schedule["sweep-trials"]
    assert entry["task"] == TRIAL_SWEEP_TASK
    assert entry["schedule"] == timedelta(seconds=settings.TRIAL_SWEEP_INTERVAL_SECONDS)
    assert config.task_routes[TRIAL_SWEEP_TASK] == {"queue": "maintenance"}
    assert config.broker_url == settings.CELERY_BROKER_URL


def test_task_is_registered_under_its_name():
    assert run_trial_sweep.name == TRIAL_SWEEP_TASK
    assert TRIAL_SWEEP_TASK in celery_app.tasks
