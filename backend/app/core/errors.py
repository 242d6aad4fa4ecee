"""Error Model: result types, field errors and the JSON error envelope.

Invariants:
    - Domain failures (validation, not-found) travel as ServiceError values, never raised
    - Infrastructure failures (DatabaseError) are raised and rendered as 500
    - Envelope keys always ordered: timestamp, status, error, message, path, errors
    - Empty values (None, "", [], {}) are omitted from the envelope, never emitted as null

Design Decisions:
    - ServiceResult carries either a value or a ServiceError: the API layer maps
      ErrorKind to a status code through one dispatch table (api/error_handlers.py)
    - ErrorMessage renders itself; no serializer configuration involved
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from app.core.domain_types import ErrorKind

T = TypeVar("T")


MODEL_NOT_FOUND_MESSAGE = "Model with requested id was not found!"
VALIDATION_ERROR_TITLE = "Validation error!"


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def _without_empty(pairs: list[tuple[str, Any]]) -> dict:
    return {key: value for key, value in pairs if not _is_empty(value)}


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class FieldError:
    """One entry of the `errors` array in a validation envelope."""
    object: str
    message: str
    property: str | None = None
    invalid_value: Any = None

    def to_dict(self) -> dict:
        return _without_empty([
            ("object", self.object),
            ("property", self.property),
            ("invalidValue", self.invalid_value),
            ("message", self.message),
        ])


@dataclass(frozen=True)
class ErrorMessage:
    """JSON error envelope shared by every non-2xx response."""
    status: int
    error: str
    path: str
    message: str | None = None
    errors: list[FieldError] = field(default_factory=list)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    def to_response(self) -> dict:
        return _without_empty([
            ("timestamp", format_timestamp(self.timestamp)),
            ("status", self.status),
            ("error", self.error),
            ("message", self.message),
            ("path", self.path),
            ("errors", [e.to_dict() for e in self.errors]),
        ])


@dataclass(frozen=True)
class ServiceError:
    """Domain failure returned (not raised) by the service layer."""
    kind: ErrorKind
    message: str
    field_errors: list[FieldError] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a service operation: a value, or a ServiceError."""
    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        field_errors: list[FieldError] | None = None,
    ) -> "ServiceResult[T]":
        return cls(error=ServiceError(kind, message, field_errors or []))


def model_not_found() -> ServiceResult[Any]:
    return ServiceResult.failure(ErrorKind.NOT_FOUND, MODEL_NOT_FOUND_MESSAGE)


def validation_failed(field_errors: list[FieldError]) -> ServiceResult[Any]:
    return ServiceResult.failure(
        ErrorKind.VALIDATION, VALIDATION_ERROR_TITLE, field_errors,
    )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(Exception):
    """Database operation failed."""

    def __init__(self, message: str, operation: str):
        super().__init__(f"Database {operation} failed: {message}")
        self.message = message
        self.operation = operation
        self.code = "DATABASE_ERROR"
