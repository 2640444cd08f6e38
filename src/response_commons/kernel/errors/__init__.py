"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ValidationError          (validation.py)
    ├── TypeConversionError      (validation.py)
    │   └── FieldConversionError
    ├── DatabaseError            (infrastructure.py)
    └── HTTPError                (application.py)
"""

from response_commons.kernel.errors.application import HTTPError
from response_commons.kernel.errors.base import BaseError
from response_commons.kernel.errors.infrastructure import DatabaseError, DatabaseErrorKind
from response_commons.kernel.errors.validation import (
    FieldConversionError,
    FieldError,
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
