"""Error Model: envelope rendering and service results.

Tests cover:
    - empty fields omitted from FieldError and ErrorMessage
    - envelope key order
    - timestamp rendered as ISO-8601 UTC with Z suffix
    - ServiceResult success/failure helpers
"""

from datetime import datetime, timedelta, timezone

from app.core.domain_types import ErrorKind
from app.core.errors import (
    MODEL_NOT_FOUND_MESSAGE,
    ErrorMessage,
    FieldError,
    ServiceResult,
    format_timestamp,
    model_not_found,
    validation_failed,
)


# ─── FieldError ──────────────────────────────────────────────────

def test_field_error_omits_none_and_empty_values():
    err = FieldError(object="model", property="name", invalid_value="", message="bad")
    assert err.to_dict() == {"object": "model", "property": "name", "message": "bad"}


def test_field_error_keeps_zero_and_false_values():
    assert FieldError(object="o", message="m", invalid_value=0).to_dict()["invalidValue"] == 0
    assert FieldError(object="o", message="m", invalid_value=False).to_dict()["invalidValue"] is False


def test_field_error_key_order():
    err = FieldError(object="model", property="name", invalid_value=" ", message="bad")
    assert list(err.to_dict()) == ["object", "property", "invalidValue", "message"]


# ─── ErrorMessage ────────────────────────────────────────────────

def test_error_message_omits_message_and_errors_when_empty():
    body = ErrorMessage(status=404, error="Not Found", path="/x").to_response()
    assert list(body) == ["timestamp", "status", "error", "path"]


def test_error_message_full_key_order():
    body = ErrorMessage(
        status=400, error="Validation error!", path="/models", message="m",
        errors=[FieldError(object="model", message="bad")],
    ).to_response()
    assert list(body) == ["timestamp", "status", "error", "message", "path", "errors"]
    assert body["errors"] == [{"object": "model", "message": "bad"}]


def test_format_timestamp_is_utc_with_z():
    moment = datetime(2018, 2, 4, 20, 37, 4, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(moment) == "2018-02-04T18:37:04.123Z"


# ─── ServiceResult ───────────────────────────────────────────────

def test_success_result_is_ok():
    result = ServiceResult.success("value")
    assert result.ok
    assert result.value == "value"
    assert result.error is None


def test_parametrized_result_builds_instances_of_the_base_class():
    result = ServiceResult[int].success(3)
    assert isinstance(result, ServiceResult)
    assert result.value == 3


def test_model_not_found_result():
    result = model_not_found()
    assert not result.ok
    assert result.error.kind is ErrorKind.NOT_FOUND
    assert result.error.message == MODEL_NOT_FOUND_MESSAGE


def test_validation_failed_carries_field_errors():
    errors = [FieldError(object="model", property="name", message="bad")]
    result = validation_failed(errors)
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.field_errors == errors
