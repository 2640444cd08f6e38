"""Unit tests for error classification, translation and response envelopes."""

from __future__ import annotations

import pytest

from response_commons.application.responses import translator
from response_commons.application.responses import (
    ErrorKind,
    SingleDataResponse,
    StandardErrorResponse,
    classify,
    default_message_for_status,
    generate_single_data_response,
    humanize_field_name,
    register_error_converter,
    status_for,
    to_snake_case,
    translate_persistence,
    translate_validation,
)
from response_commons.kernel.errors import (
    DatabaseError,
    DatabaseErrorKind,
    FieldConversionError,
    FieldError,
    HTTPError,
    TypeConversionError,
    ValidationError,
)

# ---------------------------------------------------------------------------
# Field names
# ---------------------------------------------------------------------------


class TestFieldNames:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("firstName", "first_name"),
            ("FirstName", "first_name"),
            ("email", "email"),
            ("userID", "user_i_d"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_to_snake_case(self, raw: str, expected: str) -> None:
        assert to_snake_case(raw) == expected

    def test_humanize(self) -> None:
        assert humanize_field_name("firstName") == "first name"
        assert humanize_field_name("DateOfBirth") == "date of birth"


# ---------------------------------------------------------------------------
# translate_validation
# ---------------------------------------------------------------------------


class TestTranslateValidation:
    @pytest.mark.parametrize(
        ("tag", "param", "expected"),
        [
            ("required", "", "Please provide first name"),
            ("email", "", "Please enter a valid email address for first name"),
            ("min", "3", "first name must be at least 3 characters"),
            ("max", "10", "first name cannot be longer than 10 characters"),
            ("gte", "18", "first name must be 18 or greater"),
            ("lte", "99", "first name must be 99 or less"),
            ("url", "", "Please enter a valid URL for first name"),
            ("datetime", "", "Please enter a valid date and time for first name"),
            ("oneof", "a b", "first name has an invalid value"),
        ],
    )
    def test_messages(self, tag: str, param: str, expected: str) -> None:
        assert translate_validation("firstName", tag, param) == expected


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    def test_validation(self) -> None:
        err = ValidationError(errors=[FieldError("name", "required")])
        assert classify(err) is ErrorKind.VALIDATION

    def test_type_conversion(self) -> None:
        assert classify(TypeConversionError("age", "int")) is ErrorKind.TYPE_CONVERSION

    def test_field_conversion_is_type_conversion(self) -> None:
        err = FieldConversionError("page", "page", "x", "integer", "invalid syntax")
        assert classify(err) is ErrorKind.TYPE_CONVERSION

    def test_no_rows(self) -> None:
        assert classify(DatabaseError(DatabaseErrorKind.NO_ROWS)) is ErrorKind.NOT_FOUND

    def test_connection_done(self) -> None:
        assert classify(DatabaseError(DatabaseErrorKind.CONNECTION_DONE)) is ErrorKind.CONNECTION

    def test_unique_constraint_message(self) -> None:
        err = DatabaseError(message='duplicate key value violates unique constraint "users_email_key"')
        assert classify(err) is ErrorKind.CONSTRAINT_VIOLATION

    def test_constraint_pattern_on_plain_exception(self) -> None:
        assert classify(RuntimeError("violates foreign key constraint")) is ErrorKind.CONSTRAINT_VIOLATION

    def test_unknown_database(self) -> None:
        assert classify(DatabaseError(message="deadlock detected")) is ErrorKind.UNKNOWN_DATABASE

    def test_general(self) -> None:
        assert classify(ValueError("boom")) is ErrorKind.GENERAL

    def test_http_error_is_general(self) -> None:
        assert classify(HTTPError(418, "teapot")) is ErrorKind.GENERAL

    def test_validation_wins_over_message_pattern(self) -> None:
        err = ValidationError("unique constraint", errors=[FieldError("email", "email")])
        assert classify(err) is ErrorKind.VALIDATION


# ---------------------------------------------------------------------------
# translate_persistence
# ---------------------------------------------------------------------------


class TestTranslatePersistence:
    def test_no_rows(self) -> None:
        assert translate_persistence(DatabaseError(DatabaseErrorKind.NO_ROWS)) == (
            404,
            "We couldn't find what you're looking for",
        )

    def test_connection(self) -> None:
        assert translate_persistence(DatabaseError(DatabaseErrorKind.CONNECTION_DONE)) == (
            500,
            "We're having trouble connecting to our database. Please try again",
        )

    def test_unique(self) -> None:
        err = DatabaseError(message="violates unique constraint")
        assert translate_persistence(err) == (409, "This information already exists in our system")

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("violates foreign key constraint", "This operation references invalid or non-existent data"),
            ("violates not-null constraint", "Required information is missing"),
            ("invalid input syntax for type uuid", "The provided data format is invalid"),
        ],
    )
    def test_other_constraints(self, message: str, expected: str) -> None:
        assert translate_persistence(DatabaseError(message=message)) == (400, expected)

    def test_unmatched(self) -> None:
        assert translate_persistence(DatabaseError(message="deadlock detected")) == (
            500,
            "An unexpected error occurred. Our team has been notified",
        )

    def test_non_database_error_is_total(self) -> None:
        status, message = translate_persistence(KeyError("x"))
        assert status == 500
        assert message


class TestStatusFor:
    def test_validation_is_400(self) -> None:
        assert status_for(ValidationError()) == 400

    def test_type_conversion_is_400(self) -> None:
        assert status_for(TypeConversionError("a", "int")) == 400

    def test_not_found_is_404(self) -> None:
        assert status_for(DatabaseError(DatabaseErrorKind.NO_ROWS)) == 404

    def test_general_is_500(self) -> None:
        assert status_for(RuntimeError("x")) == 500


class TestDefaultMessageForStatus:
    def test_friendly_messages(self) -> None:
        assert default_message_for_status(400) == "We couldn't process your request due to invalid input"
        assert default_message_for_status(404) == "The requested resource couldn't be found"
        assert default_message_for_status(503) == (
            "The service is temporarily unavailable. Please try again later"
        )

    def test_reason_phrase_fallback(self) -> None:
        assert default_message_for_status(418) == "I'm a Teapot"

    def test_unknown_code(self) -> None:
        assert default_message_for_status(799) == ""


class _DriverError(Exception):
    pass


class TestRegisterErrorConverter:
    @pytest.fixture(autouse=True)
    def _isolated_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(translator, "_CONVERTERS", [])

    def test_unregistered_library_error_is_general(self) -> None:
        assert classify(_DriverError("no rows")) is ErrorKind.GENERAL

    def test_registered_converter_is_used(self) -> None:
        def convert(err: BaseException) -> BaseException | None:
            if isinstance(err, _DriverError):
                return DatabaseError(DatabaseErrorKind.NO_ROWS, cause=err)
            return None

        register_error_converter(convert)
        assert classify(_DriverError("x")) is ErrorKind.NOT_FOUND
        assert status_for(_DriverError("x")) == 404
        assert classify(ValueError("x")) is ErrorKind.GENERAL

    def test_registering_twice_is_noop(self) -> None:
        def convert(err: BaseException) -> BaseException | None:
            return None

        register_error_converter(convert)
        register_error_converter(convert)
        assert translator._CONVERTERS == [convert]


# ---------------------------------------------------------------------------
# StandardErrorResponse
# ---------------------------------------------------------------------------


class TestStandardErrorResponse:
    def test_defaults(self) -> None:
        resp = StandardErrorResponse(404)
        assert resp.code == 404
        assert resp.message == "The requested resource couldn't be found"
        assert resp.errors == []
        assert resp.request_id is None

    def test_custom_message_kept(self) -> None:
        assert StandardErrorResponse(400, "nope").message == "nope"

    def test_add_validation_error(self) -> None:
        err = ValidationError(
            errors=[FieldError("firstName", "required"), FieldError("age", "gte", "18")]
        )
        resp = StandardErrorResponse(400).add_error(err)
        assert resp.errors == [
            {"field": "first_name", "message": "Please provide first name"},
            {"field": "age", "message": "age must be 18 or greater"},
        ]

    def test_add_type_conversion_error(self) -> None:
        resp = StandardErrorResponse(400).add_error(TypeConversionError("userAge", "int", "str"))
        assert resp.errors == [
            {"field": "user_age", "message": "Invalid value for userAge. Expected int"}
        ]

    def test_add_database_error(self) -> None:
        resp = StandardErrorResponse(404).add_error(DatabaseError(DatabaseErrorKind.NO_ROWS))
        assert resp.errors == [
            {"field": "database", "message": "We couldn't find what you're looking for"}
        ]

    def test_unknown_database_error_not_leaked(self) -> None:
        resp = StandardErrorResponse(500).add_error(DatabaseError(message="password=secret"))
        assert resp.errors[0]["field"] == "database"
        assert "secret" not in resp.errors[0]["message"]

    def test_add_general_error(self) -> None:
        resp = StandardErrorResponse(500).add_error(RuntimeError("kaput"))
        assert resp.errors == [{"field": "general", "message": "kaput"}]

    def test_add_message_error_chains(self) -> None:
        resp = (
            StandardErrorResponse(400)
            .add_message_error("page", "bad page")
            .add_message_error("limit", "bad limit")
        )
        assert [e["field"] for e in resp.errors] == ["page", "limit"]

    def test_reset_keeps_code(self) -> None:
        resp = StandardErrorResponse(409).add_message_error("a", "b")
        resp.reset_errors()
        assert resp.errors == []
        assert resp.code == 409

    def test_request_id_from_headers(self) -> None:
        resp = StandardErrorResponse(400).with_request_id({"X-Request-ID": "req-1"})
        assert resp.request_id == "req-1"

    def test_request_id_header_case_insensitive(self) -> None:
        resp = StandardErrorResponse(400).with_request_id({"x-request-id": "req-2"})
        assert resp.request_id == "req-2"

    def test_missing_request_id(self) -> None:
        resp = StandardErrorResponse(400).with_request_id({"Other": "x"})
        assert resp.request_id is None

    def test_to_dict_without_request_id(self) -> None:
        resp = StandardErrorResponse(400, "bad").add_message_error("f", "m")
        assert resp.to_dict() == {
            "code": 400,
            "message": "bad",
            "errors": [{"field": "f", "message": "m"}],
        }

    def test_to_dict_with_request_id(self) -> None:
        resp = StandardErrorResponse(400, "bad", request_id="r-9")
        assert resp.to_dict()["request_id"] == "r-9"


# ---------------------------------------------------------------------------
# SingleDataResponse
# ---------------------------------------------------------------------------


class TestSingleDataResponse:
    def test_defaults(self) -> None:
        resp = generate_single_data_response({"id": 1})
        assert resp == SingleDataResponse(code=200, message="Success", data={"id": 1})

    def test_explicit_values(self) -> None:
        resp = generate_single_data_response("x", "Created", 201)
        assert (resp.code, resp.message, resp.data) == (201, "Created", "x")

    def test_none_status_defaults(self) -> None:
        assert generate_single_data_response(None, status_code=None).code == 200

    def test_to_dict(self) -> None:
        assert generate_single_data_response([1]).to_dict() == {
            "code": 200,
            "message": "Success",
            "data": [1],
        }
