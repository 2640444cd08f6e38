"""FastAPI adapter – filter dependency, exception mapper, JSON envelopes."""
from response_commons.adapters.fastapi.deps import FilterOptionsDep, make_filter_options_dep
from response_commons.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from response_commons.adapters.fastapi.middleware import FastAPIRequestIdMiddleware
from response_commons.adapters.fastapi.responses import (
    error_json_response,
    paginated_json_response,
    single_json_response,
)

__all__ = [
    "FastAPIExceptionMapper",
    "FastAPIRequestIdMiddleware",
    "FilterOptionsDep",
    "error_json_response",
    "make_filter_options_dep",
    "paginated_json_response",
    "single_json_response",
]
