"""Application pagination – PaginatedResponse envelope."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

from response_commons.application.pagination.filter_options import FilterOptions

T = TypeVar("T")


def total_pages(total_data: int, limit: int) -> int:
    if limit <= 0 or total_data <= 0:
        return 0
    return math.ceil(total_data / limit)


@dataclasses.dataclass
class PaginatedResponse(Generic[T]):
    """Offset-based page of results plus the filter that produced it."""

    total_data: int
    total_page: int
    current_page: int
    page_size: int
    data: T | None = None
    filters: FilterOptions | None = None

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_page

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def map(self, fn: Callable[[Any], Any]) -> "PaginatedResponse[list[Any]]":
        """Return a copy whose ``data`` items are transformed by *fn*."""
        return dataclasses.replace(self, data=[fn(item) for item in self.data or []])  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """JSON envelope; zero and empty values are omitted."""
        payload: dict[str, Any] = {}
        for key in ("total_data", "total_page", "current_page", "page_size"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        if self.data is not None:
            payload["data"] = self.data
        if self.filters is not None:
            payload["filters"] = self.filters.to_dict()
        return payload


def generate_paginated_response(
    data: T,
    total_data: int,
    filters: FilterOptions,
) -> PaginatedResponse[T]:
    """Wrap one page of *data*; ``total_page = ceil(total_data / limit)``."""
    return PaginatedResponse(
        total_data=total_data,
        total_page=total_pages(total_data, filters.limit),
        current_page=filters.page,
        page_size=filters.limit,
        data=data,
        filters=filters,
    )


__all__ = ["PaginatedResponse", "generate_paginated_response", "total_pages"]
