"""Error taxonomy: a closed set of error kinds and the exception that carries them.

Route handlers and services raise AppError (usually through one of the
factory classmethods) and never catch it themselves; the exception handlers
in app.core.exception_handlers turn it into the JSON error body.
"""

from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    """Kind of failure, used for both logging and the HTTP status mapping."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    DATABASE_ERROR = "DATABASE_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    CONFLICT = "CONFLICT"
    RATE_LIMIT = "RATE_LIMIT"
    UNKNOWN = "UNKNOWN"


DEFAULT_STATUS_CODES: dict[ErrorType, int] = {
    ErrorType.VALIDATION_ERROR: 400,
    ErrorType.AUTH_ERROR: 401,
    ErrorType.FORBIDDEN: 403,
    ErrorType.NOT_FOUND: 404,
    ErrorType.DATABASE_ERROR: 500,
    ErrorType.BAD_REQUEST: 400,
    ErrorType.INTERNAL_SERVER_ERROR: 500,
    ErrorType.CONFLICT: 409,
    ErrorType.RATE_LIMIT: 429,
    ErrorType.UNKNOWN: 500,
}


class AppError(Exception):
    """Raised for any expected failure; carries message, HTTP status, kind and optional metadata."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: ErrorType = ErrorType.INTERNAL_SERVER_ERROR,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.status_code = (
            status_code if status_code is not None else DEFAULT_STATUS_CODES[error_type]
        )
        self.metadata = metadata
        super().__init__(message)

    def __repr__(self) -> str:
        return f"AppError({self.error_type.value}, {self.status_code}, {self.message!r})"

    @classmethod
    def validation_error(
        cls, message: str, metadata: dict[str, Any] | None = None
    ) -> "AppError":
        return cls(message, error_type=ErrorType.VALIDATION_ERROR, metadata=metadata)

    @classmethod
    def auth_error(cls, message: str) -> "AppError":
        return cls(message, error_type=ErrorType.AUTH_ERROR)

    @classmethod
    def forbidden(cls, message: str) -> "AppError":
        return cls(message, error_type=ErrorType.FORBIDDEN)

    @classmethod
    def not_found(cls, message: str) -> "AppError":
        return cls(message, error_type=ErrorType.NOT_FOUND)

    @classmethod
    def conflict(cls, message: str) -> "AppError":
        return cls(message, error_type=ErrorType.CONFLICT)

    @classmethod
    def database_error(
        cls, message: str, metadata: dict[str, Any] | None = None
    ) -> "AppError":
        return cls(message, error_type=ErrorType.DATABASE_ERROR, metadata=metadata)

    @classmethod
    def bad_request(cls, message: str) -> "AppError":
        return cls(message, error_type=ErrorType.BAD_REQUEST)

    @classmethod
    def rate_limit(cls, message: str) -> "AppError":
        return cls(message, error_type=ErrorType.RATE_LIMIT)

    @classmethod
    def internal(
        cls, message: str = "Internal Server Error", metadata: dict[str, Any] | None = None
    ) -> "AppError":
        return cls(message, error_type=ErrorType.INTERNAL_SERVER_ERROR, metadata=metadata)
