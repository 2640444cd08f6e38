"""Application responses – error and success envelopes, error translation."""
from response_commons.application.responses.errors import REQUEST_ID_HEADER, StandardErrorResponse
from response_commons.application.responses.single import SingleDataResponse, generate_single_data_response
from response_commons.application.responses.translator import (
    ErrorConverter,
    ErrorKind,
    classify,
    default_message_for_status,
    describe,
    humanize_field_name,
    register_error_converter,
    status_for,
    to_snake_case,
    translate_persistence,
    translate_validation,
)

__all__ = [
    "ErrorConverter",
    "ErrorKind",
    "REQUEST_ID_HEADER",
    "SingleDataResponse",
    "StandardErrorResponse",
    "classify",
    "default_message_for_status",
    "describe",
    "generate_single_data_response",
    "humanize_field_name",
    "register_error_converter",
    "status_for",
    "to_snake_case",
    "translate_persistence",
    "translate_validation",
]
