"""Single translation point from raised failures to ErrorResponse bodies.

Every failure is classified into a closed FailureKind; UNCLASSIFIED is the
explicit default arm and never exposes exception details to the client.
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_tracker.core.domain.exceptions import ResourceNotFoundError, ValidationFailedError
from task_tracker.infrastructure.entrypoints.api.dtos.error_response_dto import ErrorResponse
from task_tracker.infrastructure.observability.logger_factory_service import get_logger
from task_tracker.infrastructure.observability.metrics_service import REQUEST_FAILURES_TOTAL

logger = get_logger(__name__)

VALIDATION_MESSAGE = "Input validation failed. Please check the errors."
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class FailureKind(Enum):
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    HTTP_ERROR = "http_error"
    UNCLASSIFIED = "unclassified"


def classify_failure(exc: Exception) -> FailureKind:
    if isinstance(exc, ResourceNotFoundError):
        return FailureKind.NOT_FOUND
    if isinstance(exc, (ValidationFailedError, RequestValidationError)):
        return FailureKind.VALIDATION_FAILED
    if isinstance(exc, StarletteHTTPException):
        return FailureKind.HTTP_ERROR
    return FailureKind.UNCLASSIFIED


def translate_failure(exc: Exception, path: str) -> ErrorResponse:
    kind = classify_failure(exc)
    match kind:
        case FailureKind.NOT_FOUND:
            return ErrorResponse(
                status=status.HTTP_404_NOT_FOUND,
                error="Not Found",
                message=str(exc),
                path=path,
            )
        case FailureKind.VALIDATION_FAILED:
            return ErrorResponse(
                status=status.HTTP_400_BAD_REQUEST,
                error="Validation Failed",
                message=VALIDATION_MESSAGE,
                path=path,
                validation_errors=_validation_messages(exc),
            )
        case FailureKind.HTTP_ERROR:
            phrase = HTTPStatus(exc.status_code).phrase
            return ErrorResponse(
                status=exc.status_code,
                error=phrase,
                message=exc.detail if isinstance(exc.detail, str) else phrase,
                path=path,
            )
        case _:
            return ErrorResponse(
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                error="Internal Server Error",
                message=INTERNAL_ERROR_MESSAGE,
                path=path,
            )


def _validation_messages(exc: Exception) -> list[str]:
    if isinstance(exc, ValidationFailedError):
        return exc.errors
    return [_format_pydantic_error(err) for err in exc.errors()]


def _format_pydantic_error(err: dict[str, Any]) -> str:
    # loc is ("body", "title") or ("path", "task_id"); a malformed document reports ("body", <offset>)
    if err.get("type") == "json_invalid":
        return f"body: {err.get('msg', 'Invalid JSON')}"
    loc = [str(part) for part in err.get("loc", ())]
    field = ".".join(loc[1:]) or ".".join(loc) or "request"
    return f"{field}: {err.get('msg', 'Invalid value')}"


async def handle_failure(request: Request, exc: Exception) -> JSONResponse:
    body = translate_failure(exc, request.url.path)
    kind = classify_failure(exc)
    REQUEST_FAILURES_TOTAL.labels(kind=kind.value).inc()

    if kind is FailureKind.UNCLASSIFIED:
        logger.error(
            "Unhandled failure",
            error_type=type(exc).__name__,
            error_details=str(exc),
            exc_info=exc,
        )
    else:
        logger.warning(
            "Request failed",
            error_type=type(exc).__name__,
            error_code=body.status,
            error_details=body.message,
            validation_errors=body.validation_errors or None,
        )

    return JSONResponse(
        status_code=body.status,
        content=body.model_dump(mode="json", by_alias=True),
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    for exc_class in (
        ResourceNotFoundError,
        ValidationFailedError,
        RequestValidationError,
        StarletteHTTPException,
        Exception,
    ):
        app.add_exception_handler(exc_class, handle_failure)
