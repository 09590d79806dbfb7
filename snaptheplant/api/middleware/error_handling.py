# 📄 File: snaptheplant/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches anything that goes wrong while answering a request and turns it into a tidy,
# consistent error message instead of a crash page.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware plus FastAPI exception handlers. Every error body has
# the shape {"error": {code, message, details, request_id}}; unexpected exceptions become
# 500s without leaking internals, and each response carries correlation headers.
# 🔗 Dependencies:
# FastAPI, starlette, snaptheplant.shared.core.exceptions, snaptheplant.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# snaptheplant.main (middleware and handler registration), all API endpoints

import time
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from snaptheplant.shared.config.settings import Settings, get_settings
from snaptheplant.shared.core.exceptions import SnapThePlantException
from snaptheplant.shared.utils.logging import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the SnapThePlant API

    Assigns a request id (reusing an inbound X-Request-ID when present), times
    the request, and converts any exception that escaped the registered
    exception handlers into a generic 500 JSON response.
    """

    def __init__(self, app: ASGIApp, settings: Optional[Settings] = None):
        super().__init__(app)
        self.settings = settings or get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = self._handle_exception(request, exc, request_id)
            response.headers["X-Error-Code"] = "INTERNAL_SERVER_ERROR"
        finally:
            request_id_var.reset(token)

        processing_time = time.perf_counter() - start_time
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{processing_time:.3f}s"
        return response

    def _handle_exception(self, request: Request, exc: Exception, request_id: str) -> JSONResponse:
        """
        Log an unhandled exception and build the 500 response

        Args:
            request: HTTP request
            exc: Exception that escaped the route
            request_id: Request correlation ID

        Returns:
            JSON error response
        """
        logger.error(
            f"Server error in {request.method} {request.url.path}",
            exc_info=exc,
            request_method=request.method,
            request_path=str(request.url.path),
            client_ip=_get_client_ip(request),
            exception_type=type(exc).__name__,
        )

        details: Dict[str, Any] = {}
        if self.settings.DEBUG and not self.settings.is_production:
            details["exception_type"] = type(exc).__name__
            details["exception_message"] = str(exc)

        return JSONResponse(
            status_code=500,
            content=error_body(
                "INTERNAL_SERVER_ERROR",
                "An internal server error occurred",
                details,
                request_id,
            ),
        )


def _get_client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request_id_var.get() or None


def error_body(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the standard error envelope."""
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "request_id": request_id,
        }
    }


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def snaptheplant_exception_handler(request: Request, exc: SnapThePlantException) -> JSONResponse:
    """Render a domain exception with its own status code and error code."""
    content = exc.to_dict()
    content["error"]["request_id"] = _request_id(request)

    if exc.status_code >= 500:
        logger.error(
            f"{exc.error_code} in {request.method} {request.url.path}: {exc.message}",
            error_code=exc.error_code,
            status_code=exc.status_code,
        )
    else:
        logger.info(
            f"Client error in {request.method} {request.url.path}: {exc.error_code}",
            error_code=exc.error_code,
            status_code=exc.status_code,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(content),
        headers={"X-Error-Code": exc.error_code},
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies, query strings and uploads answer 422."""
    logger.info(
        f"Request validation failed for {request.method} {request.url.path}",
        error_count=len(exc.errors()),
    )
    return JSONResponse(
        status_code=422,
        content=error_body(
            "VALIDATION_ERROR",
            "Request validation failed",
            {"validation_errors": jsonable_encoder(exc.errors())},
            _request_id(request),
        ),
        headers={"X-Error-Code": "VALIDATION_ERROR"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404 for unknown paths, 405) in the same envelope."""
    code = f"HTTP_{exc.status_code}"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(code, str(exc.detail), None, _request_id(request)),
        headers={**(exc.headers or {}), "X-Error-Code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(SnapThePlantException, snaptheplant_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
