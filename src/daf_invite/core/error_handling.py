"""Exception handlers producing structured JSON error responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog
from litestar import Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_422_UNPROCESSABLE_ENTITY,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

if TYPE_CHECKING:
    from litestar import Request
    from litestar.exceptions import HTTPException, ValidationException

logger = structlog.get_logger(__name__)

HTTP_ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    413: "payload_too_large",
    415: "unsupported_media_type",
    422: "validation_error",
    500: "internal_error",
    503: "service_unavailable",
}


@dataclass
class ErrorDetail:
    """Details about a specific error."""

    field: str | None = None
    message: str = ""
    code: str = "error"


@dataclass
class ErrorResponse:
    """Structured error response body."""

    status: str = "error"
    message: str = ""
    code: str = "internal_error"
    correlation_id: str | None = None
    details: list[ErrorDetail] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result: dict[str, Any] = {"status": self.status, "message": self.message, "code": self.code}
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        if self.details:
            result["details"] = [{"field": d.field, "message": d.message, "code": d.code} for d in self.details]
        return result


def get_correlation_id(request: Request) -> str | None:
    """Extract the correlation ID from request state or headers."""
    state_id = request.scope.get("state", {}).get("correlation_id")
    if state_id:
        return state_id
    return request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID")


def _respond(body: ErrorResponse, status_code: int) -> Response[dict[str, Any]]:
    return Response(content=body.to_dict(), status_code=status_code, media_type="application/json")


def validation_exception_handler(request: Request, exc: ValidationException) -> Response[dict[str, Any]]:
    """Handle request validation errors with per-field details."""
    correlation_id = get_correlation_id(request)
    details: list[ErrorDetail] = []
    for error in exc.extra or []:
        if isinstance(error, dict):
            loc = error.get("loc") or error.get("key")
            field_path = ".".join(str(p) for p in loc) if isinstance(loc, list | tuple) else loc
            details.append(
                ErrorDetail(
                    field=field_path,
                    message=error.get("msg", error.get("message", str(error))),
                    code=error.get("type", "validation_error"),
                )
            )
        else:
            details.append(ErrorDetail(message=str(error), code="validation_error"))
    if not details:
        details.append(ErrorDetail(message=str(exc.detail), code="validation_error"))

    logger.warning("Validation error", path=request.url.path, method=request.method, error_count=len(details))
    return _respond(
        ErrorResponse(
            message="Validation failed",
            code="validation_error",
            correlation_id=correlation_id,
            details=details,
        ),
        HTTP_422_UNPROCESSABLE_ENTITY,
    )


def http_exception_handler(request: Request, exc: HTTPException) -> Response[dict[str, Any]]:
    """Handle HTTP exceptions raised by Litestar or route handlers."""
    error_code = HTTP_ERROR_CODES.get(exc.status_code, "error")
    log = logger.warning if exc.status_code < 500 else logger.error
    log("HTTP exception", path=request.url.path, status_code=exc.status_code, error_code=error_code)
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _respond(
        ErrorResponse(message=message, code=error_code, correlation_id=get_correlation_id(request)),
        exc.status_code,
    )


def event_not_found_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle EventNotFoundError exceptions."""
    event_id = getattr(exc, "event_id", "unknown")
    logger.warning("Event not found", event_id=str(event_id), path=request.url.path)
    return _respond(
        ErrorResponse(
            message=f"Event not found: {event_id}",
            code="event_not_found",
            correlation_id=get_correlation_id(request),
            details=[ErrorDetail(field="event_id", message=str(exc), code="not_found")],
        ),
        HTTP_404_NOT_FOUND,
    )


def invalid_design_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle InvalidDesignError exceptions."""
    logger.warning("Invalid design document", error=str(exc), path=request.url.path)
    return _respond(
        ErrorResponse(message=str(exc), code="invalid_design", correlation_id=get_correlation_id(request)),
        HTTP_400_BAD_REQUEST,
    )


def invalid_upload_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle InvalidUploadError exceptions."""
    filename = getattr(exc, "filename", None)
    logger.warning("Rejected upload", filename=filename, path=request.url.path)
    return _respond(
        ErrorResponse(
            message=str(exc),
            code="invalid_upload",
            correlation_id=get_correlation_id(request),
            details=[ErrorDetail(field="data", message=str(exc), code="unsupported_file")],
        ),
        HTTP_400_BAD_REQUEST,
    )


def generic_exception_handler(request: Request, exc: Exception) -> Response[dict[str, Any]]:
    """Handle unexpected exceptions.

    Logs the full exception but returns a safe message to the client.
    """
    logger.exception("Unhandled exception", path=request.url.path, method=request.method, exc_info=exc)
    return _respond(
        ErrorResponse(
            message="An unexpected error occurred. Please try again later.",
            code="internal_error",
            correlation_id=get_correlation_id(request),
        ),
        HTTP_500_INTERNAL_SERVER_ERROR,
    )


def get_exception_handlers() -> dict:
    """Get all exception handlers for the application.

    Returns:
        Dictionary mapping exception types to handler functions.
    """
    from litestar.exceptions import HTTPException, ValidationException

    from daf_invite.exceptions import EventNotFoundError, InvalidDesignError, InvalidUploadError

    return {
        ValidationException: validation_exception_handler,
        HTTPException: http_exception_handler,
        EventNotFoundError: event_not_found_handler,
        InvalidDesignError: invalid_design_handler,
        InvalidUploadError: invalid_upload_handler,
        Exception: generic_exception_handler,
    }
