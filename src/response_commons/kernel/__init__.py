"""Kernel – 100% framework-agnostic building blocks."""

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

__all__ = [
    "BaseError",
    "DatabaseError",
    "DatabaseErrorKind",
    "FieldConversionError",
    "FieldError",
    "HTTPError",
    "TypeConversionError",
    "ValidationError",
]
