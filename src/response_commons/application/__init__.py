"""Application – pagination, cache keys and response envelopes (framework-agnostic)."""

from response_commons.application.cache import CacheKey, generate_cache_key
from response_commons.application.pagination import (
    FilterOptions,
    PaginatedResponse,
    SortDirection,
    generate_paginated_response,
    parse_parameters,
)
from response_commons.application.responses import (
    ErrorKind,
    SingleDataResponse,
    StandardErrorResponse,
    classify,
    generate_single_data_response,
)

__all__ = [
    "CacheKey",
    "ErrorKind",
    "FilterOptions",
    "PaginatedResponse",
    "SingleDataResponse",
    "SortDirection",
    "StandardErrorResponse",
    "classify",
    "generate_cache_key",
    "generate_paginated_response",
    "generate_single_data_response",
    "parse_parameters",
]
