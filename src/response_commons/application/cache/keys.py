"""Application cache – CacheKey builder."""
from __future__ import annotations

import hashlib
import uuid
from typing import Any, Iterable

from response_commons.application.pagination.filter_options import FieldKind, FilterOptions
from response_commons.observability.logging import get_logger

__all__ = ["CacheKey", "generate_cache_key"]

_log = get_logger(__name__)


def _join_sorted(items: Iterable[Any]) -> str:
    return ",".join(sorted(str(item) for item in items))


def _fixed_value(kind: FieldKind, value: Any) -> str | None:
    """Canonical string of a fixed attribute, or ``None`` when absent.

    Zero integers count as absent, so an explicit ``0`` cannot be told
    apart from "unset". ``offset`` is the exception: it is optional, and any
    value other than ``None`` is present.
    """
    if value is None:
        return None
    if kind is FieldKind.INT:
        return str(value) if value != 0 else None
    if kind is FieldKind.OPTIONAL_INT:
        return str(value)
    if kind is FieldKind.UUID:
        return str(value) if value != uuid.UUID(int=0) else None
    if kind in (FieldKind.STR_LIST, FieldKind.UUID_LIST):
        return _join_sorted(value) if len(value) else None
    return value or None


def _dynamic_value(value: Any) -> str:
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return _join_sorted(value)
    return str(value)


class CacheKey:
    """Deterministic cache keys for list queries described by a FilterOptions."""

    @staticmethod
    def segments(filters: FilterOptions) -> list[str]:
        """Sorted ``name:value`` segments that make up a filter's fingerprint."""
        segments: list[str] = []
        for attr in filters.fixed_attributes:
            value = _fixed_value(attr.kind, getattr(filters, attr.attribute))
            if value is not None:
                segments.append(f"{attr.param}:{value}")
        for name, raw in filters.dynamic_fields.items():
            value = _dynamic_value(raw)
            if value:
                segments.append(f"{name}:{value}")
        segments.sort()
        return segments

    @staticmethod
    def for_filter(filters: FilterOptions, prefix: str = "") -> str:
        """Return ``<prefix>list:<sha256>`` for *filters*.

        Value-equal filters give the same key whatever the order of list
        elements or dynamic-field insertion.
        """
        joined = ":".join(CacheKey.segments(filters))
        digest = hashlib.sha256(joined.encode("utf-8")).hexdigest()
        key = f"{prefix}list:{digest}"
        _log.debug("cache.key_generated", key=key)
        return key


def generate_cache_key(filters: FilterOptions, prefix: str = "") -> str:
    return CacheKey.for_filter(filters, prefix)
