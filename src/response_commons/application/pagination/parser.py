"""Application pagination – parse multi-valued request parameters into FilterOptions."""
from __future__ import annotations

import re
import uuid
from typing import Any, Callable, Mapping, TypeVar

from response_commons.application.pagination.filter_options import (
    DynamicValue,
    FieldKind,
    FilterOptions,
    FixedAttribute,
)
from response_commons.kernel.errors import FieldConversionError
from response_commons.observability.logging import get_logger

F = TypeVar("F", bound=FilterOptions)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX32_RE = re.compile(r"[0-9a-fA-F]{32}")
_CANONICAL_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

_log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Scalar parsers
# ---------------------------------------------------------------------------


def parse_uuid(value: str) -> uuid.UUID:
    """Parse *value* as a UUID, accepting only the usual spellings.

    Accepted: ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``, the same wrapped in
    braces or prefixed with ``urn:uuid:``, and 32 bare hex digits.
    :class:`uuid.UUID` alone is more lenient (it ignores stray hyphens), so
    the shape is checked first.
    """
    candidate = value
    if candidate[:9].lower() == "urn:uuid:":
        candidate = candidate[9:]
    elif candidate.startswith("{") and candidate.endswith("}"):
        candidate = candidate[1:-1]
    if not (_CANONICAL_UUID_RE.fullmatch(candidate) or _HEX32_RE.fullmatch(candidate)):
        raise ValueError(f"invalid UUID format: {value!r}")
    return uuid.UUID(candidate)


def parse_int(value: str) -> int:
    """Base-10, 64-bit integer; no surrounding whitespace or digit separators."""
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid syntax: {value!r}")
    result = int(value)
    if not _INT64_MIN <= result <= _INT64_MAX:
        raise ValueError(f"value out of range: {value!r}")
    return result


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",")]


_COERCERS: dict[FieldKind, tuple[str, Callable[[str], Any]]] = {
    FieldKind.STR: ("string", lambda v: v),
    FieldKind.INT: ("integer", parse_int),
    FieldKind.OPTIONAL_INT: ("integer", parse_int),
    FieldKind.UUID: ("uuid", parse_uuid),
    FieldKind.STR_LIST: ("list of strings", _split),
    FieldKind.UUID_LIST: ("list of uuids", lambda v: [parse_uuid(p) for p in _split(v)]),
}


def coerce_fixed(attr: FixedAttribute, value: str) -> Any:
    """Convert the raw string for *attr*; raises :class:`FieldConversionError`."""
    expected, coerce = _COERCERS[attr.kind]
    try:
        return coerce(value)
    except ValueError as exc:
        raise FieldConversionError(
            attribute=attr.attribute,
            param=attr.param,
            value=value,
            expected=expected,
            reason=str(exc),
        ) from exc


def dynamic_value(values: list[str]) -> DynamicValue:
    """Type a dynamic parameter: UUID(s) when every value parses, else strings."""
    try:
        parsed = [parse_uuid(v) for v in values]
    except ValueError:
        return values[0] if len(values) == 1 else list(values)
    return parsed[0] if len(parsed) == 1 else parsed


# ---------------------------------------------------------------------------
# Raw parameter normalisation
# ---------------------------------------------------------------------------


def to_multi_dict(raw: Any) -> dict[str, list[str]]:
    """Flatten any query-parameter container into ``{name: [values...]}``.

    Supports objects exposing ``multi_items()`` (Starlette ``QueryParams``,
    ``FormData``), ``getlist()`` (werkzeug/Django ``MultiDict``) and plain
    mappings whose values are strings or sequences of strings.
    """
    result: dict[str, list[str]] = {}
    if hasattr(raw, "multi_items"):
        for key, value in raw.multi_items():
            result.setdefault(key, []).append(value)
        return result
    if hasattr(raw, "getlist"):
        return {key: list(raw.getlist(key)) for key in raw.keys()}
    for key, value in raw.items():
        if isinstance(value, str):
            result[key] = [value]
        elif value is None:
            result[key] = []
        else:
            result[key] = [str(v) for v in value]
    return result


# ---------------------------------------------------------------------------
# parse_parameters
# ---------------------------------------------------------------------------


def parse_parameters(
    raw: Mapping[str, Any] | Any,
    *,
    max_limit: int | None = None,
    options_class: type[F] = FilterOptions,  # type: ignore[assignment]
) -> F:
    """Build a validated filter from multi-valued request parameters.

    Fixed attributes take the first value of their parameter. Every other
    parameter becomes a dynamic field. The result has been through
    :meth:`FilterOptions.validate`.

    Raises
    ------
    FieldConversionError
        When a fixed attribute's value cannot be converted. No filter is
        returned in that case.
    """
    values = to_multi_dict(raw)
    options = options_class()
    known: set[str] = set()

    for attr in options_class.fixed_attributes:
        known.add(attr.param)
        given = values.get(attr.param)
        if not given or given[0] == "":
            continue
        setattr(options, attr.attribute, coerce_fixed(attr, given[0]))

    for name, given in values.items():
        if name in known or not given:
            continue
        options.dynamic_fields[name] = dynamic_value(given)

    options.validate(max_limit)
    _log.debug(
        "pagination.parsed",
        page=options.page,
        limit=options.limit,
        dynamic_fields=sorted(options.dynamic_fields),
    )
    return options


__all__ = [
    "coerce_fixed",
    "dynamic_value",
    "parse_int",
    "parse_parameters",
    "parse_uuid",
    "to_multi_dict",
]
