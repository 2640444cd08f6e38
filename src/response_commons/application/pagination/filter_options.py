"""Application pagination – FilterOptions, FixedAttribute, SortDirection."""
from __future__ import annotations

import dataclasses
import uuid
from enum import Enum
from typing import Any, ClassVar, Union

from response_commons.config.settings import DEFAULT_MAX_LIMIT, get_max_limit

DynamicValue = Union[str, uuid.UUID, list[str], list[uuid.UUID]]


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def normalize(cls, raw: str | None) -> "SortDirection":
        """Case-insensitive lookup; anything unrecognised is ``DESC``."""
        if raw and raw.lower() == "asc":
            return cls.ASC
        return cls.DESC


class FieldKind(str, Enum):
    """How a fixed attribute is parsed from, and rendered into, a string."""

    STR = "str"
    INT = "int"
    OPTIONAL_INT = "optional_int"
    UUID = "uuid"
    STR_LIST = "str_list"
    UUID_LIST = "uuid_list"


@dataclasses.dataclass(frozen=True)
class FixedAttribute:
    """A filter attribute with a declared external parameter name."""

    param: str
    attribute: str
    kind: FieldKind = FieldKind.STR


FIXED_ATTRIBUTES: tuple[FixedAttribute, ...] = (
    FixedAttribute("page", "page", FieldKind.INT),
    FixedAttribute("limit", "limit", FieldKind.INT),
    FixedAttribute("offset", "offset", FieldKind.OPTIONAL_INT),
    FixedAttribute("q", "search"),
    FixedAttribute("sort", "sort"),
    FixedAttribute("sort_by", "sort_by"),
    FixedAttribute("start_date", "start_date"),
    FixedAttribute("end_date", "end_date"),
    FixedAttribute("type", "type"),
    FixedAttribute("status", "status"),
    FixedAttribute("categories", "categories", FieldKind.STR_LIST),
)

_TRIMMED = ("search", "type", "status", "start_date", "end_date")


@dataclasses.dataclass
class FilterOptions:
    """Canonical list-query filter built from request parameters.

    Parameters that do not match a fixed attribute are kept in
    ``dynamic_fields``. Projects needing extra typed parameters subclass this
    class, add dataclass fields and extend ``fixed_attributes``::

        @dataclasses.dataclass
        class OrderFilter(FilterOptions):
            customer_id: uuid.UUID | None = None

            fixed_attributes = FIXED_ATTRIBUTES + (
                FixedAttribute("customer_id", "customer_id", FieldKind.UUID),
            )
    """

    fixed_attributes: ClassVar[tuple[FixedAttribute, ...]] = FIXED_ATTRIBUTES

    page: int = 0
    limit: int = 0
    offset: int | None = None
    search: str = ""
    sort: str = ""
    sort_by: str = ""
    start_date: str = ""
    end_date: str = ""
    type: str = ""
    status: str = ""
    categories: list[str] = dataclasses.field(default_factory=list)
    dynamic_fields: dict[str, DynamicValue] = dataclasses.field(default_factory=dict)

    def validate(self, max_limit: int | None = None) -> "FilterOptions":
        """Coerce every field into its valid range, in place.

        ``max_limit`` defaults to ``MAX_LIMIT_PAGINATE`` from the environment.
        Never raises, and a second call changes nothing.
        """
        if self.page < 1:
            self.page = 1

        if max_limit is None:
            max_limit = get_max_limit()
        elif max_limit < 1:
            max_limit = DEFAULT_MAX_LIMIT

        if self.limit < 1:
            self.limit = 1
        elif self.limit > max_limit:
            self.limit = max_limit

        self.sort = SortDirection.normalize(self.sort).value

        if self.offset is None:
            self.offset = (self.page - 1) * self.limit

        for name in _TRIMMED:
            setattr(self, name, getattr(self, name).strip())

        if self.categories:
            self.categories = [c.strip() for c in self.categories if c.strip()]

        return self

    @property
    def sort_direction(self) -> SortDirection:
        return SortDirection.normalize(self.sort)

    # ------------------------------------------------------------------
    # Dynamic fields
    # ------------------------------------------------------------------

    def get_dynamic_field(self, key: str, default: Any = None) -> Any:
        return self.dynamic_fields.get(key, default)

    def set_dynamic_field(self, key: str, value: DynamicValue) -> None:
        self.dynamic_fields[key] = value

    def get_dynamic_uuid(self, key: str) -> uuid.UUID | None:
        """Return the UUID stored under *key*, or ``None`` for any other value."""
        value = self.dynamic_fields.get(key)
        return value if isinstance(value, uuid.UUID) else None

    def get_dynamic_uuids(self, key: str) -> list[uuid.UUID] | None:
        """Return the UUID list stored under *key*, or ``None`` for any other value."""
        value = self.dynamic_fields.get(key)
        if isinstance(value, list) and value and all(isinstance(v, uuid.UUID) for v in value):
            return value
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """JSON form keyed by parameter name; empty values are omitted.

        Dynamic fields are not part of the serialised filter.
        """
        payload: dict[str, Any] = {}
        for attr in self.fixed_attributes:
            value = getattr(self, attr.attribute)
            if attr.kind is FieldKind.OPTIONAL_INT:
                if value is not None:
                    payload[attr.param] = value
            elif attr.kind is FieldKind.UUID:
                if value is not None:
                    payload[attr.param] = str(value)
            elif attr.kind is FieldKind.UUID_LIST:
                if value:
                    payload[attr.param] = [str(v) for v in value]
            elif value:
                payload[attr.param] = list(value) if isinstance(value, list) else value
        return payload


__all__ = [
    "DynamicValue",
    "FIXED_ATTRIBUTES",
    "FieldKind",
    "FilterOptions",
    "FixedAttribute",
    "SortDirection",
]
