"""Application responses – error classification and user-facing translation.

Every function here is total: any exception maps to some
:class:`ErrorKind` and some message, and nothing is re-raised.
"""
from __future__ import annotations

from enum import Enum
from http import HTTPStatus
from typing import Callable

from response_commons.kernel.errors import (
    DatabaseError,
    DatabaseErrorKind,
    FieldError,
    TypeConversionError,
    ValidationError,
)


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    TYPE_CONVERSION = "type_conversion"
    NOT_FOUND = "not_found"
    CONNECTION = "connection"
    CONSTRAINT_VIOLATION = "constraint_violation"
    UNKNOWN_DATABASE = "unknown_database"
    GENERAL = "general"


PERSISTENCE_KINDS = frozenset(
    {
        ErrorKind.NOT_FOUND,
        ErrorKind.CONNECTION,
        ErrorKind.CONSTRAINT_VIOLATION,
        ErrorKind.UNKNOWN_DATABASE,
    }
)

NOT_FOUND_MESSAGE = "We couldn't find what you're looking for"
CONNECTION_MESSAGE = "We're having trouble connecting to our database. Please try again"
GENERIC_MESSAGE = "An unexpected error occurred. Our team has been notified"

# substring of the driver message -> (status, message); first match wins
_CONSTRAINT_PATTERNS: tuple[tuple[str, int, str], ...] = (
    ("unique constraint", 409, "This information already exists in our system"),
    ("foreign key constraint", 400, "This operation references invalid or non-existent data"),
    ("not-null constraint", 400, "Required information is missing"),
    ("invalid input syntax", 400, "The provided data format is invalid"),
)

_STATUS_MESSAGES: dict[int, str] = {
    400: "We couldn't process your request due to invalid input",
    401: "Please authenticate to access this resource",
    403: "You don't have permission to access this resource",
    404: "The requested resource couldn't be found",
    409: "This operation conflicts with an existing resource",
    422: "The submitted data failed validation",
    429: "You've exceeded the allowed number of requests. Please try again later",
    500: "An unexpected error occurred. Our team has been notified",
    503: "The service is temporarily unavailable. Please try again later",
}


# ---------------------------------------------------------------------------
# Field names
# ---------------------------------------------------------------------------


def to_snake_case(name: str) -> str:
    """``firstName`` -> ``first_name``; every upper-case letter starts a word."""
    chars = [f"_{c}" if i and "A" <= c <= "Z" else c for i, c in enumerate(name)]
    return "".join(chars).lower()


def humanize_field_name(name: str) -> str:
    """``firstName`` -> ``first name``."""
    return " ".join(to_snake_case(name).split("_"))


# ---------------------------------------------------------------------------
# Third-party errors
# ---------------------------------------------------------------------------


ErrorConverter = Callable[[BaseException], BaseException | None]

# Filled by the adapter packages when they are imported.
_CONVERTERS: list[ErrorConverter] = []


def register_error_converter(converter: ErrorConverter) -> ErrorConverter:
    """Add a third-party → kernel error converter; registering twice is a no-op.

    A converter returns the kernel equivalent of an exception it recognises
    and ``None`` otherwise. The first non-``None`` result wins.
    """
    if converter not in _CONVERTERS:
        _CONVERTERS.append(converter)
    return converter


def to_kernel_error(err: BaseException) -> BaseException:
    """Map third-party exceptions onto kernel errors; others pass through."""
    for convert in _CONVERTERS:
        converted = convert(err)
        if converted is not None:
            return converted
    return err


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _match_constraint(message: str) -> tuple[int, str] | None:
    for pattern, status, text in _CONSTRAINT_PATTERNS:
        if pattern in message:
            return status, text
    return None


def classify(err: BaseException) -> ErrorKind:
    """Return the single kind *err* belongs to; the first matching rule wins.

    Order: validation collection, type conversion, persistence sentinel,
    persistence message pattern, any other ``DatabaseError``, general.
    """
    err = to_kernel_error(err)
    if isinstance(err, ValidationError):
        return ErrorKind.VALIDATION
    if isinstance(err, TypeConversionError):
        return ErrorKind.TYPE_CONVERSION
    if isinstance(err, DatabaseError):
        if err.kind is DatabaseErrorKind.NO_ROWS:
            return ErrorKind.NOT_FOUND
        if err.kind is DatabaseErrorKind.CONNECTION_DONE:
            return ErrorKind.CONNECTION
    if _match_constraint(str(err)) is not None:
        return ErrorKind.CONSTRAINT_VIOLATION
    if isinstance(err, DatabaseError):
        return ErrorKind.UNKNOWN_DATABASE
    return ErrorKind.GENERAL


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def translate_validation(field: str, constraint: str, parameter: str = "") -> str:
    """Human-readable sentence for one validator rule violation."""
    name = humanize_field_name(field)
    if constraint == "required":
        return f"Please provide {name}"
    if constraint == "email":
        return f"Please enter a valid email address for {name}"
    if constraint == "min":
        return f"{name} must be at least {parameter} characters"
    if constraint == "max":
        return f"{name} cannot be longer than {parameter} characters"
    if constraint == "gte":
        return f"{name} must be {parameter} or greater"
    if constraint == "lte":
        return f"{name} must be {parameter} or less"
    if constraint == "url":
        return f"Please enter a valid URL for {name}"
    if constraint == "datetime":
        return f"Please enter a valid date and time for {name}"
    return f"{name} has an invalid value"


def translate_field_error(error: FieldError) -> dict[str, str]:
    return {
        "field": to_snake_case(error.field),
        "message": translate_validation(error.field, error.constraint, error.parameter),
    }


def translate_persistence(err: BaseException) -> tuple[int, str]:
    """``(http_status, message)`` for a persistence-layer failure."""
    kind = classify(err)
    if kind is ErrorKind.NOT_FOUND:
        return 404, NOT_FOUND_MESSAGE
    if kind is ErrorKind.CONNECTION:
        return 500, CONNECTION_MESSAGE
    if kind is ErrorKind.CONSTRAINT_VIOLATION:
        matched = _match_constraint(str(to_kernel_error(err)))
        if matched is not None:
            return matched
    return 500, GENERIC_MESSAGE


def describe(err: BaseException) -> list[dict[str, str]]:
    """The ``{field, message}`` entries :meth:`StandardErrorResponse.add_error` appends."""
    kind = classify(err)
    err = to_kernel_error(err)
    if kind is ErrorKind.VALIDATION:
        return [translate_field_error(e) for e in err.errors]  # type: ignore[attr-defined]
    if kind is ErrorKind.TYPE_CONVERSION:
        field = err.field  # type: ignore[attr-defined]
        return [
            {
                "field": to_snake_case(field),
                "message": f"Invalid value for {field}. Expected {err.expected}",  # type: ignore[attr-defined]
            }
        ]
    if kind in PERSISTENCE_KINDS:
        _, message = translate_persistence(err)
        return [{"field": "database", "message": message}]
    return [{"field": "general", "message": str(err)}]


def status_for(err: BaseException) -> int:
    """HTTP status a global error handler should answer *err* with."""
    kind = classify(err)
    if kind in (ErrorKind.VALIDATION, ErrorKind.TYPE_CONVERSION):
        return 400
    if kind in PERSISTENCE_KINDS:
        return translate_persistence(err)[0]
    return 500


def default_message_for_status(code: int) -> str:
    """Friendly text for common statuses, else the standard reason phrase."""
    if code in _STATUS_MESSAGES:
        return _STATUS_MESSAGES[code]
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


__all__ = [
    "ErrorConverter",
    "ErrorKind",
    "GENERIC_MESSAGE",
    "PERSISTENCE_KINDS",
    "classify",
    "default_message_for_status",
    "describe",
    "humanize_field_name",
    "register_error_converter",
    "status_for",
    "to_kernel_error",
    "to_snake_case",
    "translate_field_error",
    "translate_persistence",
    "translate_validation",
]
