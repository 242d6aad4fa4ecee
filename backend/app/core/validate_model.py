"""Model Validation: pure field checks for inbound Model payloads.

Invariants:
    - validate_model is PURE: returns a list of FieldError, never raises
    - An empty list means the payload may reach the service
    - name must be a string that is not empty and not whitespace-only

Design Decisions:
    - Explicit function over declarative constraints: the same check runs for
      POST and PATCH and is testable without a request
"""

from typing import Any

from app.core.errors import FieldError


MODEL_OBJECT_NAME = "model"
BLANK_MESSAGE = "may not be empty"


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_model(name: Any) -> list[FieldError]:
    """Validate a Model's fields. Pure: no IO."""
    errors: list[FieldError] = []
    if is_blank(name):
        errors.append(FieldError(
            object=MODEL_OBJECT_NAME,
            property="name",
            invalid_value=name,
            message=BLANK_MESSAGE,
        ))
    return errors
