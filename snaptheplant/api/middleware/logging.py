# 📄 File: snaptheplant/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to SnapThePlant: what was asked for, who asked,
# how long it took and how it ended.
# 🧪 Purpose (Technical Summary):
# Request logging middleware emitting one structured record per request and one per
# response, with sensitive header filtering, slow-request classification and request/user
# correlation through log_context.
# 🔗 Dependencies:
# FastAPI, starlette, snaptheplant.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# snaptheplant.main (middleware registration), monitoring systems

import logging
import time
import uuid
from typing import Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from snaptheplant.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

EXCLUDED_PATHS = {"/health", "/api/health", "/favicon.ico"}

SENSITIVE_HEADERS = {
    "authorization",
    "cookie",
    "set-cookie",
    "stripe-signature",
    "x-api-key",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Structured request/response records
    - Request timing with slow-request classification
    - User context once the session has been resolved
    - Cookie and signature headers kept out of the logs
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

        self.slow_request_threshold = 2.0
        self.very_slow_request_threshold = 5.0
        self.request_id_header = "X-Request-ID"

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        request_id = self._get_or_create_request_id(request)

        with log_context(request_id=request_id):
            start_time = time.perf_counter()
            logger.info(
                f"HTTP Request: {request.method} {request.url.path}",
                event_type="http_request",
                request_method=request.method,
                request_path=request.url.path,
                client_ip=request.client.host if request.client else None,
                request_headers=self._filter_sensitive_headers(dict(request.headers)),
            )

            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(
                    f"HTTP Error: {request.method} {request.url.path} -> {type(exc).__name__}: {exc}",
                    event_type="http_error",
                    request_method=request.method,
                    request_path=request.url.path,
                    exception_type=type(exc).__name__,
                    processing_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
                )
                raise

            processing_time = time.perf_counter() - start_time
            self._log_response(request, response, processing_time)

        response.headers[self.request_id_header] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        """
        Get existing request ID or create new one

        The error handling middleware normally assigns one first.
        """
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            return request_id

        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, response: Response, processing_time: float) -> None:
        processing_time_ms = round(processing_time * 1000, 2)

        if processing_time > self.very_slow_request_threshold:
            performance = "very_slow"
        elif processing_time > self.slow_request_threshold:
            performance = "slow"
        else:
            performance = "normal"

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400 or performance == "very_slow":
            level = logging.WARNING
        else:
            level = logging.INFO

        user = getattr(request.state, "user", None)
        fields = {
            "event_type": "http_response",
            "request_method": request.method,
            "request_path": request.url.path,
            "status_code": response.status_code,
            "processing_time_ms": processing_time_ms,
            "performance": performance,
            "actor_id": str(user.id) if user is not None else None,
        }

        logger.log(
            level,
            f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({processing_time_ms}ms)",
            extra=fields,
        )

    def _filter_sensitive_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        return {
            key: ("[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value)
            for key, value in headers.items()
        }

