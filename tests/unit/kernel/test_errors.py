"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from response_commons.kernel.errors import (
    BaseError,
    DatabaseError,
    DatabaseErrorKind,
    FieldConversionError,
    FieldError,
    HTTPError,
    TypeConversionError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "type": "BaseError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_empty_detail_omitted(self) -> None:
        assert "detail" not in BaseError("m").to_dict()
        assert repr(BaseError("m")) == "BaseError('m', code='base_error')"

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_to_json_is_valid(self) -> None:
        parsed = json.loads(BaseError("oops", code="oops").to_json())
        assert parsed["code"] == "oops"


class TestValidationError:
    def test_collects_field_errors(self) -> None:
        err = ValidationError(errors=[FieldError("name", "required"), FieldError("age", "min", "18")])
        assert len(err.errors) == 2
        assert err.code == "validation_error"

    def test_to_dict_includes_errors(self) -> None:
        err = ValidationError(errors=[FieldError("age", "min", "18")])
        assert err.to_dict()["errors"] == [{"field": "age", "constraint": "min", "parameter": "18"}]

    def test_field_error_is_frozen(self) -> None:
        fe = FieldError("a", "required")
        with pytest.raises((AttributeError, TypeError)):
            fe.field = "b"  # type: ignore[misc]


class TestTypeConversionError:
    def test_default_message(self) -> None:
        assert str(TypeConversionError("age", "int")) == "Invalid value for age. Expected int"

    def test_message_with_received(self) -> None:
        assert str(TypeConversionError("age", "int", "str")).endswith("got str")

    def test_field_conversion_error(self) -> None:
        err = FieldConversionError("page", "page", "abc", "integer", "invalid syntax")
        assert isinstance(err, TypeConversionError)
        assert str(err) == "error setting field page: invalid syntax"
        assert err.field == "page"
        assert err.expected == "integer"
        assert err.detail == {"param": "page", "value": "abc"}


class TestDatabaseError:
    def test_default_kind(self) -> None:
        assert DatabaseError().kind is DatabaseErrorKind.OTHER

    def test_sentinel_default_message(self) -> None:
        assert str(DatabaseError(DatabaseErrorKind.NO_ROWS)) == "no rows in result set"

    def test_custom_message(self) -> None:
        assert DatabaseError(message="boom").message == "boom"


class TestHTTPError:
    def test_attributes(self) -> None:
        inner = ValueError("inner")
        err = HTTPError(503, "down", internal=inner)
        assert err.status_code == 503
        assert err.message == "down"
        assert err.internal is inner
        assert err.__cause__ is inner
