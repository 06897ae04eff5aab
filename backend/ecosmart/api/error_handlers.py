"""Error Handlers — map every failure onto the EcoSmartError JSON envelope.

Invariants:
    - Domain and infrastructure errors answer with their own http_status
    - Request validation failures answer 400 VALIDATION_ERROR, first bad field
      in context.field, every failure listed in details
    - Unhandled exceptions answer 500 INTERNAL_ERROR without internal details
    - All three paths share the {"error": {...}} shape from EcoSmartError.to_response()
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ecosmart.core.errors import (
    EcoSmartError, ErrorCategory, ErrorContext, ErrorSeverity,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(EcoSmartError, _handle_ecosmart_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


async def _handle_ecosmart_error(request: Request, exc: EcoSmartError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "user_id": exc.context.user_id,
        },
    )
    return _respond(exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": _field_name(e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    error = EcoSmartError(
        "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        ErrorSeverity.ERROR,
        ErrorContext(field=details[0]["field"] if details else None),
        400,
    )
    logger.warning(
        f"Validation error: {details}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return _respond(error, details=details)


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception: {exc}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        exc_info=True,
    )
    return _respond(EcoSmartError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, None, 500,
    ))


def _field_name(loc) -> str:
    """("body", "amount") → "amount"; ("query", "limit") → "limit"."""
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "header", "path"):
        parts = parts[1:]
    return ".".join(parts)


def _respond(error: EcoSmartError, details: list | None = None) -> JSONResponse:
    body = error.to_response()
    if details is not None:
        body["error"]["details"] = details
    return JSONResponse(status_code=error.http_status, content=body)
