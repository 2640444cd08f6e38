"""Validation errors — rule violations and type-conversion failures."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from response_commons.kernel.errors.base import BaseError


@dataclasses.dataclass(frozen=True)
class FieldError:
    """A single rule violation reported by a validator.

    ``constraint`` is the rule tag (``required``, ``min``, ``email`` …) and
    ``parameter`` its argument, e.g. ``"3"`` for ``min=3``.
    """

    field: str
    constraint: str
    parameter: str = ""


class ValidationError(BaseError):
    """Input data does not meet validation rules.

    ``errors`` holds one :class:`FieldError` per violated rule.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        *,
        errors: Iterable[FieldError] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[FieldError] = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = [dataclasses.asdict(e) for e in self.errors]
        return base


class TypeConversionError(BaseError):
    """A decode step expected one type and received another."""

    default_code = "type_conversion_error"

    def __init__(
        self,
        field: str,
        expected: str,
        received: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = f"Invalid value for {field}. Expected {expected}"
            if received is not None:
                message = f"{message}, got {received}"
        super().__init__(message, **kwargs)
        self.field = field
        self.expected = expected
        self.received = received


class FieldConversionError(TypeConversionError):
    """A fixed filter attribute could not be parsed from its raw value."""

    default_code = "field_conversion_error"

    def __init__(
        self,
        attribute: str,
        param: str,
        value: str,
        expected: str,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            param,
            expected,
            message=f"error setting field {attribute}: {reason}",
            detail={"param": param, "value": value},
            **kwargs,
        )
        self.attribute = attribute
        self.param = param
        self.value = value
        self.reason = reason


__all__ = [
    "FieldConversionError",
    "FieldError",
    "TypeConversionError",
    "ValidationError",
]
