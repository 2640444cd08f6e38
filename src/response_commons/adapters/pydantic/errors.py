"""Pydantic adapter – map pydantic validation failures onto kernel errors."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from response_commons.kernel.errors import FieldError, TypeConversionError, ValidationError

# pydantic error type -> (constraint tag, ctx key holding the rule parameter)
_CONSTRAINTS: dict[str, tuple[str, str | None]] = {
    "missing": ("required", None),
    "string_too_short": ("min", "min_length"),
    "too_short": ("min", "min_length"),
    "string_too_long": ("max", "max_length"),
    "too_long": ("max", "max_length"),
    "greater_than_equal": ("gte", "ge"),
    "less_than_equal": ("lte", "le"),
}

# pydantic error type -> expected type name
_TYPE_ERRORS: dict[str, str] = {
    "int_parsing": "int",
    "int_type": "int",
    "float_parsing": "float",
    "float_type": "float",
    "bool_parsing": "bool",
    "bool_type": "bool",
    "string_type": "string",
    "list_type": "list",
    "dict_type": "object",
    "uuid_parsing": "uuid",
    "uuid_type": "uuid",
    "decimal_parsing": "decimal",
    "decimal_type": "decimal",
}

# location prefixes FastAPI adds in front of the field path
_SOURCES = frozenset({"body", "query", "path", "header", "cookie"})


def _require_pydantic() -> None:
    try:
        import pydantic  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'response-commons[pydantic]' to use the pydantic adapter") from exc


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _SOURCES:
        parts = parts[1:]
    return ".".join(parts)


def _constraint(item: Mapping[str, Any]) -> tuple[str, str]:
    error_type = str(item.get("type", ""))
    ctx = item.get("ctx") or {}
    if error_type in _CONSTRAINTS:
        tag, key = _CONSTRAINTS[error_type]
        return tag, str(ctx.get(key, "")) if key else ""
    if error_type.startswith("url_"):
        return "url", ""
    if error_type.startswith(("datetime_", "date_", "time_")):
        return "datetime", ""
    if error_type == "value_error" and "email" in str(item.get("msg", "")).lower():
        return "email", ""
    return error_type, ""


def kernel_error_from_error_items(
    items: Iterable[Mapping[str, Any]],
) -> ValidationError | TypeConversionError:
    """Translate pydantic-style error dicts (``type``, ``loc``, ``msg``, ``ctx``).

    A lone type mismatch becomes a :class:`TypeConversionError`; everything
    else becomes one :class:`ValidationError` with a ``FieldError`` per item.
    """
    items = list(items)
    if len(items) == 1 and items[0].get("type") in _TYPE_ERRORS:
        item = items[0]
        received = item.get("input")
        return TypeConversionError(
            _field_name(item.get("loc", ())),
            _TYPE_ERRORS[item["type"]],
            type(received).__name__ if received is not None else None,
        )
    errors = []
    for item in items:
        tag, parameter = _constraint(item)
        errors.append(FieldError(_field_name(item.get("loc", ())), tag, parameter))
    return ValidationError(errors=errors)


def kernel_error_from_pydantic(err: BaseException) -> ValidationError | TypeConversionError | None:
    """Return the kernel equivalent of a ``pydantic.ValidationError``, else ``None``."""
    _require_pydantic()
    from pydantic import ValidationError as PydanticValidationError

    if not isinstance(err, PydanticValidationError):
        return None
    return kernel_error_from_error_items(err.errors())


__all__ = ["kernel_error_from_error_items", "kernel_error_from_pydantic"]
