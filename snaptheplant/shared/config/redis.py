# 📄 File: snaptheplant/shared/config/redis.py
#
# 🧭 Purpose (Layman Explanation):
# Sets up the connection to Redis, which remembers who is logged in so people stay
# signed in across restarts and when several copies of the app run side by side.
#
# 🧪 Purpose (Technical Summary):
# Lazily built redis.asyncio client over a shared pool for the session store. Socket
# timeouts depend on the environment; the probe feeds the detailed health endpoint.
#
# 🔗 Dependencies:
# - redis (redis.asyncio)
# - snaptheplant.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.shared.infrastructure.sessions.session_store (RedisSessionStore)
# - snaptheplant.shared.core.container (wiring, health, shutdown)

from typing import Any, Dict, Optional

import redis.asyncio as redis
from redis.asyncio import ConnectionPool, Redis

from .settings import Settings

# (socket_timeout, socket_connect_timeout) per environment
SOCKET_TIMEOUTS = {
    "production": (5.0, 5.0),
    "development": (10.0, 10.0),
}


class RedisConfig:
    """Owns the pool and client used for server-side sessions."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._pool: Optional[ConnectionPool] = None
        self._client: Optional[Redis] = None

    def _pool_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "max_connections": self.settings.REDIS_MAX_CONNECTIONS,
            "decode_responses": True,
            "encoding": "utf-8",
            "retry_on_timeout": True,
            "health_check_interval": 30,
        }
        timeouts = SOCKET_TIMEOUTS.get(self.settings.ENVIRONMENT)
        if timeouts:
            options["socket_timeout"], options["socket_connect_timeout"] = timeouts
        if self.settings.is_production:
            options["socket_keepalive"] = True
        return options

    def create_redis_client(self) -> Redis:
        """Shared client; the pool is created on first use."""
        if self._client is None:
            self._pool = ConnectionPool.from_url(self.settings.REDIS_URL, **self._pool_options())
            self._client = Redis(connection_pool=self._pool)
        return self._client

    async def close_connections(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._pool is not None:
            await self._pool.disconnect()
            self._pool = None

    async def health_check(self) -> Dict[str, Any]:
        """PING plus a few INFO fields; errors are reported, not raised."""
        client = self.create_redis_client()
        try:
            await client.ping()
            info = await client.info(section="server")
            clients = await client.info(section="clients")
        except redis.RedisError as e:
            return {"status": "unhealthy", "error": str(e), "type": type(e).__name__}

        return {
            "status": "healthy",
            "version": info.get("redis_version", "unknown"),
            "connected_clients": clients.get("connected_clients", 0),
        }
