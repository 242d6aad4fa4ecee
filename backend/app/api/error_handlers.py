"""Error Handlers: boundary mapping from failures to the JSON error envelope.

Invariants:
    - ErrorKind → HTTP status goes through ERROR_STATUS only
    - RequestValidationError → 400 validation envelope with per-field errors
    - StarletteHTTPException → envelope carrying the reason phrase
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Routes call render_service_error() for returned failures; the registered
      handlers cover failures raised by the framework or infrastructure
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.domain_types import ErrorKind
from app.core.errors import (
    VALIDATION_ERROR_TITLE, ErrorMessage, FieldError, ServiceError,
)
from app.core.validate_model import MODEL_OBJECT_NAME

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def render_service_error(request: Request, error: ServiceError) -> JSONResponse:
    """Render a failure returned by the service layer."""
    status_code = ERROR_STATUS[error.kind]
    logger.info(
        f"{error.kind.value} on {request.url.path}: {error.message}",
        extra={
            "error_code": error.kind.value,
            "path": request.url.path,
            "status": status_code,
        },
    )
    if error.kind is ErrorKind.VALIDATION:
        body = ErrorMessage(
            status=status_code,
            error=error.message,
            path=request.url.path,
            errors=error.field_errors,
        )
    else:
        body = ErrorMessage(
            status=status_code,
            error=_reason_phrase(status_code),
            message=error.message,
            path=request.url.path,
        )
    return JSONResponse(status_code=status_code, content=body.to_response())


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request-parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        body = ErrorMessage(
            status=status.HTTP_400_BAD_REQUEST,
            error=VALIDATION_ERROR_TITLE,
            path=request.url.path,
            errors=build_field_errors(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (unknown route, bad method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        phrase = _reason_phrase(exc.status_code)
        detail = exc.detail if isinstance(exc.detail, str) else None
        body = ErrorMessage(
            status=exc.status_code,
            error=phrase,
            message=detail if detail != phrase else None,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=body.to_response(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "path": request.url.path,
                "error_code": getattr(exc, "code", "INTERNAL_ERROR"),
            },
        )
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = ErrorMessage(
            status=status_code,
            error=_reason_phrase(status_code),
            path=request.url.path,
        )
        return JSONResponse(status_code=status_code, content=body.to_response())


def build_field_errors(exc: RequestValidationError) -> list[FieldError]:
    """Convert pydantic error entries into envelope field errors."""
    field_errors = []
    for e in exc.errors():
        loc = [str(part) for part in e.get("loc", ())]
        source = loc[0] if loc else ""
        invalid_value = e.get("input")
        if source == "body":
            obj = MODEL_OBJECT_NAME
            if isinstance(invalid_value, dict):
                invalid_value = None
        else:
            obj = source or MODEL_OBJECT_NAME
        field_errors.append(FieldError(
            object=obj,
            property=".".join(loc[1:]) or None,
            invalid_value=invalid_value,
            message=e.get("msg", "invalid value"),
        ))
    return field_errors
