# 📄 File: snaptheplant/background_jobs/tasks/trial_sweep.py
# 🧭 Purpose (Layman Explanation):
# The scheduled chore that reminds people their trial is ending and moves expired trials
# back to the free plan, run by the background worker instead of the web server.
# 🧪 Purpose (Technical Summary):
# Celery task wrapping TrialSweeper.run_once. Each run wires its own container against
# the configured storage, performs one sweep and returns the report as a JSON-friendly dict.
# 🔗 Dependencies:
# celery, snaptheplant.shared.core.container, trial_sweep domain service
# 🔄 Connected Modules / Calls From:
# celery beat ("sweep-trials"), ops tooling

import asyncio
from typing import Any, Dict, Optional

from snaptheplant.background_jobs.celery_app import celery_app
from snaptheplant.modules.payment_subscription.domain.services.trial_sweep import TrialSweepReport
from snaptheplant.shared.config.settings import Settings, get_settings
from snaptheplant.shared.core.container import ServiceContainer, build_container
from snaptheplant.shared.utils.helpers import utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


async def sweep_trials(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> Dict[str, Any]:
    """
    Run one trial sweep outside the API process.

    A worker that builds its own container only sweeps SQL storage; with
    memory storage the tick is skipped and reported as ``skipped_tick``.

    Args:
        settings: Settings used to build a container when none is given
        container: Pre-wired services (tests)

    Returns:
        The sweep report as a dict
    """
    owns_container = container is None
    if owns_container:
        settings = settings or get_settings()
        if not settings.use_sql_storage:
            logger.warning(
                "Trial sweep skipped: worker has no database configured (memory storage is per-process)",
                storage_backend=settings.STORAGE_BACKEND,
            )
            return TrialSweepReport(started_at=utc_now(), skipped_tick=True).as_dict()
        container = build_container(settings)
        await container.storage.initialize()

    try:
        report = await container.trial_sweeper.run_once()
    finally:
        if owns_container:
            await container.shutdown()

    return report.as_dict()


@celery_app.task(bind=True, name="snaptheplant.background_jobs.tasks.trial_sweep.run_trial_sweep")
def run_trial_sweep(self) -> Dict[str, Any]:
    """Celery entry point for the scheduled trial sweep."""
    logger.info(f"Trial sweep task {self.request.id} started")
    result = asyncio.run(sweep_trials())
    logger.info(
        f"Trial sweep task finished: {result['expired']} expired, "
        f"{result['reminders_sent']} reminders sent",
        task_id=self.request.id,
    )
    return result
