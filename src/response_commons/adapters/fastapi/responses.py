"""FastAPI adapter – render response envelopes as ``JSONResponse``."""
from __future__ import annotations

from typing import Any

from response_commons.application.pagination import PaginatedResponse
from response_commons.application.responses import SingleDataResponse, StandardErrorResponse


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'response-commons[fastapi]' to use the FastAPI adapter"
        ) from exc


def _json(status_code: int, content: dict[str, Any]) -> Any:
    _require_fastapi()
    from fastapi.encoders import jsonable_encoder  # type: ignore[import-untyped]
    from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def error_json_response(resp: StandardErrorResponse, request: Any = None) -> Any:
    """Send *resp* with its own status, attaching ``X-Request-ID`` from *request*."""
    if request is not None:
        resp.with_request_id(request.headers)
    return _json(resp.code, resp.to_dict())


def single_json_response(resp: SingleDataResponse[Any]) -> Any:
    return _json(resp.code, resp.to_dict())


def paginated_json_response(resp: PaginatedResponse[Any], status_code: int = 200) -> Any:
    return _json(status_code, resp.to_dict())


__all__ = ["error_json_response", "paginated_json_response", "single_json_response"]
