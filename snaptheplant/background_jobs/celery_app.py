# 📄 File: snaptheplant/background_jobs/celery_app.py
#
# 🧭 Purpose (Layman Explanation):
# Sets up the background worker that runs scheduled chores, like checking every hour
# whose free trial is about to end or has ended.
#
# 🧪 Purpose (Technical Summary):
# Celery application and configuration: Redis broker/result backend from Settings, JSON
# serialization, a dedicated maintenance queue and the beat schedule for the trial sweep.
# Used when the sweep runs out of process (TRIAL_SWEEP_ENABLED=false on the API).
#
# 🔗 Dependencies:
# - celery, kombu
# - snaptheplant.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - celery worker / celery beat CLI (-A snaptheplant.background_jobs.celery_app)
# - snaptheplant.background_jobs.tasks.trial_sweep

from datetime import timedelta

from celery import Celery
from kombu import Queue

from snaptheplant.shared.config.settings import Settings, get_settings

TRIAL_SWEEP_TASK = "snaptheplant.background_jobs.tasks.trial_sweep.run_trial_sweep"


# =============================================================================
# CELERY CONFIGURATION CLASS
# =============================================================================

class CeleryConfig:
    """
    Celery configuration for SnapThePlant.

    Broker and schedule values come from Settings so the worker and the API
    read the same environment.
    """

    def __init__(self, settings: Settings):
        self.broker_url = settings.CELERY_BROKER_URL
        self.result_backend = settings.CELERY_RESULT_BACKEND
        self.beat_schedule = {
            "sweep-trials": {
                "task": TRIAL_SWEEP_TASK,
                "schedule": timedelta(seconds=settings.TRIAL_SWEEP_INTERVAL_SECONDS),
                "options": {"queue": "maintenance"},
            },
        }
        self.worker_log_color = not settings.is_production

    # =========================================================================
    # BROKER AND BACKEND SETTINGS
    # =========================================================================

    broker_connection_retry_on_startup = True
    broker_connection_max_retries = 10
    result_expires = timedelta(hours=24)

    # =========================================================================
    # TASK SETTINGS
    # =========================================================================

    task_serializer = "json"
    result_serializer = "json"
    accept_content = ["json"]
    timezone = "UTC"
    enable_utc = True

    task_default_queue = "default"
    task_time_limit = 300
    task_soft_time_limit = 240
    task_acks_late = True
    worker_prefetch_multiplier = 1
    task_reject_on_worker_lost = True

    task_routes = {
        TRIAL_SWEEP_TASK: {"queue": "maintenance"},
    }

    task_queues = (
        Queue("default", routing_key="default"),
        Queue("maintenance", routing_key="maintenance"),
    )

    # =========================================================================
    # WORKER SETTINGS
    # =========================================================================

    worker_max_tasks_per_child = 1000
    worker_hijack_root_logger = False
    task_track_started = True


def create_celery_app(settings: Settings = None) -> Celery:
    """
    Build the Celery application.

    Args:
        settings: Settings to configure from (defaults to the environment)

    Returns:
        Celery: Configured application with the task modules registered
    """
    settings = settings or get_settings()
    celery = Celery(
        "snaptheplant",
        include=["snaptheplant.background_jobs.tasks.trial_sweep"],
    )
    celery.config_from_object(CeleryConfig(settings))
    return celery


celery_app = create_celery_app()
