# 📄 File: snaptheplant/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small helpers used all over the app, mainly "what time is it now" in a way that tests can
# freeze or fast-forward, plus the date math used for schedules and trials.

# 🧪 Purpose (Technical Summary):
# Clock abstraction (injectable callable returning an aware UTC datetime), UTC normalization,
# and day-based arithmetic helpers shared by the scheduler, trial sweep and services.

# 🔗 Dependencies:
# - datetime, math

# 🔄 Connected Modules / Calls From:
# Used by: care scheduler, trial sweep, subscription/payment services, analytics recorder,
# session store, repository implementations

import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]

SECONDS_PER_DAY = 24 * 60 * 60


def utc_now() -> datetime:
    """Default clock: the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to aware UTC.

    Naive values are assumed to already be UTC (SQLite drops the offset).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def add_days(moment: datetime, days: int) -> datetime:
    return moment + timedelta(days=days)


def days_until(deadline: datetime, now: datetime) -> int:
    """
    Whole days remaining until ``deadline``, rounded up.

    Exactly 24h ahead is 1; anything in the past or now is <= 0.
    """
    delta = (ensure_utc(deadline) - ensure_utc(now)).total_seconds()
    return math.ceil(delta / SECONDS_PER_DAY)
