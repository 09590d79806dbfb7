# 📄 File: snaptheplant/modules/analytics/domain/services/analytics_recorder.py
# 🧭 Purpose (Layman Explanation):
# Writes down what people do in the app (and any feedback beta testers send us) in simple
# daily log files, so we can learn how SnapThePlant is used.
# 🧪 Purpose (Technical Summary):
# Append-only JSON-lines recorder: analytics events go to ``analytics_YYYY-MM-DD.log`` and
# beta feedback to ``beta_feedback_YYYY-MM-DD.log`` under a configured directory. File I/O
# runs in a worker thread; write failures are logged and never surface to callers.
# 🔗 Dependencies:
# json, pathlib, asyncio, snaptheplant.shared.utils
# 🔄 Connected Modules / Calls From:
# analytics endpoints, subscription service (started_trial event)

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional

from snaptheplant.modules.user_management.domain.models.user import User
from snaptheplant.shared.utils.helpers import Clock, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class AnalyticsRecorder:
    """Daily JSON-lines files for analytics events and beta feedback."""

    def __init__(self, log_dir: str, clock: Clock = utc_now):
        self._log_dir = Path(log_dir)
        self._clock = clock

    @property
    def log_dir(self) -> Path:
        return self._log_dir

    def _daily_file(self, prefix: str) -> Path:
        return self._log_dir / f"{prefix}_{self._clock():%Y-%m-%d}.log"

    def _append(self, path: Path, entry: Dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, default=str) + "\n")

    async def _write(self, prefix: str, entry: Dict[str, Any]) -> bool:
        path = self._daily_file(prefix)
        try:
            await asyncio.to_thread(self._append, path, entry)
        except OSError as e:
            logger.error(f"Failed to write {prefix} entry: {e}", log_path=str(path))
            return False
        return True

    async def track(
        self,
        user: User,
        event: str,
        properties: Optional[Dict[str, Any]] = None,
        timestamp: Optional[str] = None,
    ) -> bool:
        """
        Record one analytics event.

        Args:
            user: Acting user
            event: Event name
            properties: Free-form event properties
            timestamp: Client-supplied timestamp; defaults to now

        Returns:
            bool: Whether the entry reached disk
        """
        entry = {
            "userId": user.id,
            "username": user.username,
            "event": event,
            "properties": properties or {},
            "timestamp": timestamp or self._clock().isoformat(),
        }
        return await self._write("analytics", entry)

    async def record_feedback(
        self,
        user: User,
        feedback_type: str,
        feedback: str,
        email: Optional[str] = None,
    ) -> bool:
        """Record one piece of beta-tester feedback."""
        entry = {
            "userId": user.id,
            "username": user.username,
            "email": email or user.email,
            "type": feedback_type,
            "feedback": feedback,
            "timestamp": self._clock().isoformat(),
        }
        written = await self._write("beta_feedback", entry)
        logger.info(f"Feedback received: {feedback_type}", feedback_type=feedback_type)
        return written
