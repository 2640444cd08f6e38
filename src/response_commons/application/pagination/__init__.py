"""Application pagination – filter parsing, normalisation and page envelopes."""
from response_commons.application.pagination.filter_options import (
    FIXED_ATTRIBUTES,
    DynamicValue,
    FieldKind,
    FilterOptions,
    FixedAttribute,
    SortDirection,
)
from response_commons.application.pagination.page import (
    PaginatedResponse,
    generate_paginated_response,
    total_pages,
)
from response_commons.application.pagination.parser import (
    parse_int,
    parse_parameters,
    parse_uuid,
    to_multi_dict,
)

__all__ = [
    "DynamicValue",
    "FIXED_ATTRIBUTES",
    "FieldKind",
    "FilterOptions",
    "FixedAttribute",
    "PaginatedResponse",
    "SortDirection",
    "generate_paginated_response",
    "parse_int",
    "parse_parameters",
    "parse_uuid",
    "to_multi_dict",
    "total_pages",
]
