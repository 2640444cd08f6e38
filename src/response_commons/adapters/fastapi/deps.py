"""FastAPI adapter – FilterOptions dependency."""
# No `from __future__ import annotations`: FastAPI inspects the dependency
# signature at runtime and needs the real Request class, not a string.
from typing import Annotated, Any, Callable

from response_commons.application.pagination import FilterOptions, parse_parameters


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'response-commons[fastapi]' to use the FastAPI adapter"
        ) from exc


def make_filter_options_dep(
    max_limit: int | None = None,
    options_class: type[FilterOptions] = FilterOptions,
) -> Callable[..., Any]:
    """Build a dependency that parses the query string into *options_class*.

    ``max_limit=None`` reads ``MAX_LIMIT_PAGINATE`` on every request. A
    malformed fixed parameter raises :class:`FieldConversionError`, which
    :class:`FastAPIExceptionMapper` renders as a 400 error envelope.
    """
    _require_fastapi()
    from fastapi import Request  # type: ignore[import-untyped]

    async def filter_options_dep(request: Request) -> FilterOptions:
        return parse_parameters(
            request.query_params,
            max_limit=max_limit,
            options_class=options_class,
        )

    return filter_options_dep


def _make_filter_options_dep():  # noqa: ANN202
    """Create ``FilterOptionsDep`` type alias, importing lazily."""
    try:
        from fastapi import Depends  # type: ignore[import-untyped]
    except ImportError:
        return None
    return Annotated[FilterOptions, Depends(make_filter_options_dep())]


# Build at import time (no-op if fastapi absent)
FilterOptionsDep = _make_filter_options_dep()


__all__ = ["FilterOptionsDep", "make_filter_options_dep"]
