# 📄 File: snaptheplant/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A careful messenger for outside services: it sends our request, tries again a few times
# when the other side is slow or briefly broken, and keeps a tally of how things went.

# 🧪 Purpose (Technical Summary):
# JSON-over-HTTP client on a lazily opened aiohttp ClientSession. Transport errors and 5xx
# answers are retried with tenacity's exponential backoff; 4xx answers and exhausted retries
# become ExternalServiceError. RequestStats keeps counters and a bounded deque of failures
# for the health endpoint.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies

# 🔄 Connected Modules / Calls From:
# Used by: plant_identification.infrastructure.external.plant_id_client

import asyncio
import logging
import time
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, Optional

import aiohttp
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from snaptheplant.shared.core.exceptions import ExternalServiceError
from snaptheplant.shared.utils.logging import get_logger

logger = get_logger(__name__)
# before_sleep_log wants a plain logging.Logger
retry_logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)
RESPONSE_EXCERPT = 500
ERROR_HISTORY_SIZE = 100


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class RequestStats:
    """Running counters for one upstream service."""

    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    average_response_time: float = 0.0
    last_request_time: Optional[str] = None
    errors: Deque[Dict[str, Any]] = field(default_factory=lambda: deque(maxlen=ERROR_HISTORY_SIZE))

    def success(self, elapsed: float) -> None:
        self.total_requests += 1
        self.successful_requests += 1
        self.last_request_time = _now_iso()
        if self.average_response_time:
            self.average_response_time = self.average_response_time * 0.7 + elapsed * 0.3
        else:
            self.average_response_time = elapsed

    def failure(self, record: Dict[str, Any]) -> None:
        self.total_requests += 1
        self.failed_requests += 1
        self.last_request_time = record["timestamp"]
        self.errors.append(record)


class APIClient:
    """
    Async JSON client for one external API.

    ``post_json`` is the only verb the app needs today. Each call gets up to
    ``max_retries`` attempts; only transport failures and 5xx responses are
    attempted again.
    """

    def __init__(
        self,
        api_name: str,
        api_key: Optional[str] = None,
        auth_header: str = "Authorization",
        timeout: int = 30,
        max_retries: int = 3,
        backoff_min: float = 1.0,
        backoff_max: float = 10.0,
    ):
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_min = backoff_min
        self.backoff_max = backoff_max
        self.headers = self._build_headers(api_key, auth_header)
        self.stats = RequestStats()
        self.session: Optional[aiohttp.ClientSession] = None

    def _build_headers(self, api_key: Optional[str], auth_header: str) -> Dict[str, str]:
        headers = {
            "User-Agent": f"SnapThePlant/1.0 ({self.api_name}-client)",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if not api_key:
            return headers
        if auth_header.lower() == "authorization":
            headers["Authorization"] = f"Bearer {api_key}"
        else:
            headers[auth_header] = api_key
        return headers

    async def initialize(self) -> None:
        if self.session is not None and not self.session.closed:
            return
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            connector=aiohttp.TCPConnector(limit=10, limit_per_host=5, ttl_dns_cache=300),
            headers=self.headers,
        )
        logger.info(f"HTTP session opened for {self.api_name}")

    async def close(self) -> None:
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=self.backoff_min, max=self.backoff_max),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(retry_logger, logging.WARNING),
            reraise=True,
        )

    async def post_json(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST ``payload`` as JSON and return the decoded JSON answer.

        Raises:
            ExternalServiceError: On 4xx, non-JSON bodies, or once retries run out
        """
        await self.initialize()
        started = time.monotonic()

        try:
            async for attempt in self._retrying():
                with attempt:
                    data = await self._attempt("POST", url, payload)
        except TRANSIENT_ERRORS as e:
            self._failed(e, "POST", url)
            if isinstance(e, asyncio.TimeoutError):
                message = f"Timeout for {self.api_name}: POST {url}"
            else:
                message = f"Request to {self.api_name} failed: {e}"
            raise ExternalServiceError(message, service=self.api_name) from e
        except ExternalServiceError as e:
            self._failed(e, "POST", url)
            raise

        elapsed = time.monotonic() - started
        self.stats.success(elapsed)
        logger.info(f"{self.api_name} POST {url} succeeded in {elapsed:.2f}s")
        return data

    async def _attempt(self, method: str, url: str, payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        async with self.session.request(method, url, json=payload) as response:
            if response.status >= 300:
                await self._raise_for_status(response)
            try:
                return await response.json(content_type=None)
            except ValueError:
                body = await response.text()
                raise ExternalServiceError(
                    f"{self.api_name} returned a non-JSON response",
                    service=self.api_name,
                    service_response=body[:RESPONSE_EXCERPT],
                )

    async def _raise_for_status(self, response: aiohttp.ClientResponse) -> None:
        body = (await response.text())[:RESPONSE_EXCERPT]

        if response.status >= 500:
            # ClientResponseError is a ClientError, so the retry loop picks it up
            raise aiohttp.ClientResponseError(
                response.request_info,
                response.history,
                status=response.status,
                message=body,
            )

        reasons = {
            401: "Authentication failed",
            403: "Authentication failed",
            429: "Rate limit exceeded",
        }
        reason = reasons.get(response.status, f"Client error ({response.status})")
        raise ExternalServiceError(f"{reason} for {self.api_name}", service=self.api_name, service_response=body)

    def _failed(self, error: Exception, method: str, url: str) -> None:
        record = {
            "timestamp": _now_iso(),
            "error_type": type(error).__name__,
            "error_message": str(error),
            "method": method,
            "url": url,
        }
        self.stats.failure(record)
        logger.error(
            f"{self.api_name} request failed",
            api_name=self.api_name,
            error_type=record["error_type"],
            error_message=record["error_message"],
            url=url,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Counters plus the five most recent failures."""
        stats = self.stats
        return {
            "api_name": self.api_name,
            "total_requests": stats.total_requests,
            "successful_requests": stats.successful_requests,
            "failed_requests": stats.failed_requests,
            "average_response_time": stats.average_response_time,
            "last_request_time": stats.last_request_time,
            "recent_errors": list(stats.errors)[-5:],
        }
