"""Single error boundary: turns AppError and unexpected exceptions into the JSON error body.

Body shape: {success: false, message, type} plus stack, metadata, path and
method outside production.
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.errors import DEFAULT_STATUS_CODES, AppError, ErrorType

logger = logging.getLogger(__name__)

# Status codes raised by the framework itself (routing, method checks) mapped to a kind.
FRAMEWORK_STATUS_TYPES: dict[int, ErrorType] = {
    400: ErrorType.BAD_REQUEST,
    401: ErrorType.AUTH_ERROR,
    403: ErrorType.FORBIDDEN,
    404: ErrorType.NOT_FOUND,
    405: ErrorType.BAD_REQUEST,
    409: ErrorType.CONFLICT,
    429: ErrorType.RATE_LIMIT,
}


def _is_production(request: Request) -> bool:
    # Resolve through dependency_overrides so tests can swap settings per app.
    provider = request.app.dependency_overrides.get(get_settings, get_settings)
    return provider().is_production


def build_error_body(
    request: Request,
    exc: BaseException,
    message: str,
    error_type: ErrorType,
    metadata: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the error payload; debug fields only outside production."""
    body: dict[str, Any] = {
        "success": False,
        "message": message,
        "type": error_type.value,
    }
    if not _is_production(request):
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        body["metadata"] = metadata
        body["path"] = request.url.path
        body["method"] = request.method
    return body


def _error_response(
    request: Request,
    exc: BaseException,
    status_code: int,
    message: str,
    error_type: ErrorType,
    metadata: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = build_error_body(request, exc, message, error_type, metadata)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message
        )
    headers = {"WWW-Authenticate": "Bearer"} if exc.error_type == ErrorType.AUTH_ERROR else None
    return _error_response(
        request,
        exc,
        exc.status_code,
        exc.message,
        exc.error_type,
        exc.metadata,
        headers=headers,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return _error_response(
        request,
        exc,
        DEFAULT_STATUS_CODES[ErrorType.VALIDATION_ERROR],
        "Validation failed",
        ErrorType.VALIDATION_ERROR,
        {"errors": errors},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error_type = FRAMEWORK_STATUS_TYPES.get(exc.status_code, ErrorType.UNKNOWN)
    if exc.status_code == 404:
        message = "Page not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(
        request,
        exc,
        exc.status_code,
        message,
        error_type,
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        exc,
        DEFAULT_STATUS_CODES[ErrorType.DATABASE_ERROR],
        "Database error",
        ErrorType.DATABASE_ERROR,
        {"error": type(exc).__name__},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        exc,
        DEFAULT_STATUS_CODES[ErrorType.INTERNAL_SERVER_ERROR],
        "Internal Server Error",
        ErrorType.INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error boundary on an application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
