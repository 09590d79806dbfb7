# 📄 File: snaptheplant/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# The named kinds of "something went wrong" in SnapThePlant (not logged in, not your plant,
# out of identifications, payment company unreachable...), each with the answer the app gives.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy rooted at SnapThePlantException. Each class fixes its HTTP status and
# machine-readable error code at class level; keyword context is folded into ``details``.
# The exception handler serializes them with ``to_dict``.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, external adapters, api.middleware.error_handling

from typing import Any, Dict, Optional

from fastapi import status


def _context(details: Optional[Dict[str, Any]], **context: Any) -> Dict[str, Any]:
    """Merge non-empty keyword context into a details dict."""
    merged = dict(details or {})
    for key, value in context.items():
        if value is None or value == "":
            continue
        merged[key] = value
    return merged


class SnapThePlantException(Exception):
    """
    Base class for every error the API reports on purpose.

    Subclasses set ``status_code`` and ``error_code``; anything else that
    escapes a request is a 500 from the error-handling middleware.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# AUTHENTICATION & AUTHORIZATION
# =============================================================================

class AuthenticationError(SnapThePlantException):
    """No valid session, or wrong username/password."""
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"


class AuthorizationError(SnapThePlantException):
    """Logged in, but not allowed to touch this resource."""
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "AUTHORIZATION_ERROR"
    default_message = "Access denied"

    def __init__(
        self,
        message: Optional[str] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, _context(
            details,
            resource_type=resource_type,
            resource_id=str(resource_id) if resource_id is not None else None,
        ))


class UpgradeRequiredError(AuthorizationError):
    """
    A metered feature is used up on a free account.

    The body repeats the message at the top level next to ``upgrade: true``
    so the web client can jump straight to the subscribe page.
    """
    error_code = "UPGRADE_REQUIRED"
    default_message = (
        "No plant identifications remaining. Upgrade to premium for unlimited identifications."
    )

    def __init__(self, message: Optional[str] = None, feature: Optional[str] = None):
        super().__init__(message, details=_context(None, feature=feature))

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["message"] = self.message
        body["upgrade"] = True
        return body


# =============================================================================
# REQUEST & DATA
# =============================================================================

class ValidationError(SnapThePlantException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, _context(details, field=field))


class BadRequestError(SnapThePlantException):
    """Well-formed request that cannot be honoured right now (unpaid intent, unsigned webhook...)."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "BAD_REQUEST"
    default_message = "Bad request"


class FileTooLargeError(SnapThePlantException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    error_code = "FILE_TOO_LARGE"
    default_message = "Uploaded file is too large"

    def __init__(self, message: Optional[str] = None, max_size_bytes: Optional[int] = None):
        super().__init__(message, _context(None, max_size_bytes=max_size_bytes))


class NotFoundError(SnapThePlantException):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"
    default_message = "Resource not found"

    def __init__(
        self,
        message: Optional[str] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ):
        super().__init__(message, _context(
            None,
            resource_type=resource_type,
            resource_id=str(resource_id) if resource_id is not None else None,
        ))


class DuplicateResourceError(SnapThePlantException):
    """Unique username or email already taken."""
    status_code = status.HTTP_409_CONFLICT
    error_code = "DUPLICATE_RESOURCE"
    default_message = "Resource already exists"

    def __init__(
        self,
        message: Optional[str] = None,
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message, _context(None, resource_type=resource_type, field=field))


# =============================================================================
# SUBSCRIPTIONS
# =============================================================================

class InvalidSubscriptionTransitionError(SnapThePlantException):
    """The subscription event is not allowed from the account's current type."""
    status_code = status.HTTP_409_CONFLICT
    error_code = "INVALID_SUBSCRIPTION_TRANSITION"
    default_message = "Subscription change not allowed"

    def __init__(
        self,
        message: Optional[str] = None,
        current: Optional[str] = None,
        event: Optional[str] = None,
    ):
        super().__init__(message, _context(None, current_subscription=current, event=event))


# =============================================================================
# COLLABORATORS & INFRASTRUCTURE
# =============================================================================

class ExternalServiceError(SnapThePlantException):
    """Plant.id, Stripe or SendGrid failed or answered with an error."""
    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "EXTERNAL_SERVICE_ERROR"
    default_message = "External service error"

    def __init__(
        self,
        message: Optional[str] = None,
        service: Optional[str] = None,
        service_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, _context(details, service=service, service_response=service_response))


class ServiceNotConfiguredError(ExternalServiceError):
    """The collaborator has no credentials in this deployment."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "SERVICE_NOT_CONFIGURED"

    def __init__(self, service: str, message: Optional[str] = None):
        super().__init__(message or f"{service} is not configured", service=service)


class DatabaseError(SnapThePlantException):
    error_code = "DATABASE_ERROR"
    default_message = "Database operation failed"
