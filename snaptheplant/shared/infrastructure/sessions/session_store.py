# 📄 File: snaptheplant/shared/infrastructure/sessions/session_store.py

# 🧭 Purpose (Layman Explanation):
# Remembers who is logged in. When a user signs in we hand their browser a random ticket
# (a cookie) and write down which user that ticket belongs to, either in memory or in Redis.

# 🧪 Purpose (Technical Summary):
# Server-side session store abstraction keyed by an opaque session id carried in an HttpOnly
# cookie. MemorySessionStore keeps entries in-process with an injectable clock for expiry;
# RedisSessionStore persists them with SETEX so sessions survive restarts and scale out.

# 🔗 Dependencies:
# - redis.asyncio (RedisSessionStore)
# - snaptheplant.shared.core.security (session id generation)

# 🔄 Connected Modules / Calls From:
# - user_management.domain.services.auth_service (login/logout/resolve)
# - snaptheplant.shared.core.container (backend selection)

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from redis.asyncio import Redis

from snaptheplant.shared.core.security import generate_session_id
from snaptheplant.shared.utils.helpers import Clock, utc_now
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class SessionStore(ABC):
    """Maps opaque session ids to user ids."""

    @abstractmethod
    async def create(self, user_id: int) -> str:
        """Open a session for ``user_id`` and return its id."""

    @abstractmethod
    async def get_user_id(self, session_id: str) -> Optional[int]:
        """Return the user id for a live session, or None."""

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Destroy a session. Unknown ids are ignored."""

    async def close(self) -> None:
        return None


class MemorySessionStore(SessionStore):
    """In-process session store for development and tests."""

    def __init__(self, ttl_seconds: int, clock: Clock = utc_now):
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._sessions: Dict[str, Tuple[int, datetime]] = {}
        self._lock = asyncio.Lock()

    async def create(self, user_id: int) -> str:
        session_id = generate_session_id()
        async with self._lock:
            self._sessions[session_id] = (user_id, self._clock() + self._ttl)
        return session_id

    async def get_user_id(self, session_id: str) -> Optional[int]:
        async with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at <= self._clock():
                del self._sessions[session_id]
                return None
            return user_id

    async def delete(self, session_id: str) -> None:
        async with self._lock:
            self._sessions.pop(session_id, None)


class RedisSessionStore(SessionStore):
    """Redis-backed session store."""

    KEY_PATTERN = "session:{session_id}"

    def __init__(self, client: Redis, ttl_seconds: int):
        self._client = client
        self._ttl = ttl_seconds

    def _key(self, session_id: str) -> str:
        return self.KEY_PATTERN.format(session_id=session_id)

    async def create(self, user_id: int) -> str:
        session_id = generate_session_id()
        await self._client.setex(self._key(session_id), self._ttl, str(user_id))
        return session_id

    async def get_user_id(self, session_id: str) -> Optional[int]:
        value = await self._client.get(self._key(session_id))
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning("Discarding malformed session entry", session_key=self._key(session_id))
            await self._client.delete(self._key(session_id))
            return None

    async def delete(self, session_id: str) -> None:
        await self._client.delete(self._key(session_id))
