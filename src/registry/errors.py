"""
Custom exceptions and error handling for the booking registry.

Every error carries an error code that maps to an HTTP status and a plain-text
body, so the router can render any registry failure without knowing which
component raised it.

Usage:
    from registry.errors import ConfigurationError, ErrorCode

    raise ConfigurationError(code=ErrorCode.STORAGE_UNAVAILABLE)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error responses."""

    # Deployment errors
    SERVER_MISCONFIGURED = "SERVER_MISCONFIGURED"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"

    # Authentication errors
    UNAUTHORIZED = "UNAUTHORIZED"

    # Validation errors
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    MISSING_FIELD = "MISSING_FIELD"

    # Routing errors
    NOT_FOUND = "NOT_FOUND"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.SERVER_MISCONFIGURED: "Server misconfigured",
    ErrorCode.STORAGE_UNAVAILABLE: "Storage unavailable",
    ErrorCode.UNAUTHORIZED: "Unauthorized",
    ErrorCode.INVALID_PAYLOAD: "Invalid JSON",
    ErrorCode.MISSING_FIELD: "Missing field",
    ErrorCode.NOT_FOUND: "Not Found",
    ErrorCode.INTERNAL_ERROR: "Internal Server Error",
}

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.SERVER_MISCONFIGURED: 500,
    ErrorCode.STORAGE_UNAVAILABLE: 500,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.INVALID_PAYLOAD: 400,
    ErrorCode.MISSING_FIELD: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}


class BookingRegistryError(Exception):
    """Base exception for all booking registry errors."""

    def __init__(self, message: str | None = None, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message or USER_MESSAGES[code]
        self.code = code
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class ConfigurationError(BookingRegistryError):
    """The deployment is missing the access token or the storage binding."""

    pass


class AuthenticationError(BookingRegistryError):
    """Bearer token missing or not matching the configured secret."""

    def __init__(self, message: str | None = None, code: ErrorCode = ErrorCode.UNAUTHORIZED):
        super().__init__(message, code=code)


class ValidationError(BookingRegistryError):
    """Request body could not be parsed or failed field validation."""

    def __init__(self, message: str | None = None, code: ErrorCode = ErrorCode.INVALID_PAYLOAD):
        super().__init__(message, code=code)


class MissingFieldError(ValidationError):
    """A required booking field is absent or blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing field: {field}", code=ErrorCode.MISSING_FIELD)


class RouteNotFoundError(BookingRegistryError):
    """No operation is registered for the request's method and path."""

    def __init__(self, message: str | None = None):
        super().__init__(message, code=ErrorCode.NOT_FOUND)
