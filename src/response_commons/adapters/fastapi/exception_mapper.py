"""FastAPI adapter – FastAPIExceptionMapper (global error handler)."""
from __future__ import annotations

from typing import Any

from response_commons.adapters.fastapi.responses import error_json_response
from response_commons.application.responses import (
    ErrorKind,
    StandardErrorResponse,
    classify,
    status_for,
)
from response_commons.kernel.errors import BaseError, HTTPError
from response_commons.observability.logging import get_logger

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

_log = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'response-commons[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIExceptionMapper:
    """Render every error raised by a route as a :class:`StandardErrorResponse`.

    Mappings
    --------
    ``HTTPError`` / Starlette ``HTTPException`` → own status, one ``error`` entry
    ``RequestValidationError``                  → 400, one entry per field
    ``ValidationError`` / ``TypeConversionError`` → 400, translated entries
    persistence errors (incl. SQLAlchemy)       → translated status, ``database`` entry
    anything else                               → 500, generic ``error`` entry

    Unhandled ``Exception`` subclasses go through Starlette's
    ``ServerErrorMiddleware``, which re-raises after responding.
    """

    def __init__(self) -> None:
        _require_fastapi()
        from fastapi.exceptions import RequestValidationError  # type: ignore[import-untyped]
        from starlette.exceptions import HTTPException as StarletteHTTPException

        # registers the pydantic error converter
        import response_commons.adapters.pydantic  # noqa: F401

        self._request_validation_error = RequestValidationError
        self._http_exception = StarletteHTTPException
        self._handled: list[type[BaseException]] = [
            HTTPError,
            BaseError,
            StarletteHTTPException,
            RequestValidationError,
        ]
        try:
            from sqlalchemy.exc import SQLAlchemyError  # type: ignore[import-untyped]

            import response_commons.adapters.sqlalchemy  # noqa: F401

            self._handled.append(SQLAlchemyError)
        except ImportError:
            pass
        self._handled.append(Exception)

    def build(self, exc: BaseException) -> StandardErrorResponse:
        """Return the error envelope for *exc* without sending it."""
        if isinstance(exc, HTTPError):
            return StandardErrorResponse(exc.status_code).add_message_error("error", exc.message)
        if isinstance(exc, self._http_exception):
            return StandardErrorResponse(exc.status_code).add_message_error("error", str(exc.detail))
        if isinstance(exc, self._request_validation_error):
            from response_commons.adapters.pydantic import kernel_error_from_error_items

            return StandardErrorResponse(400).add_error(kernel_error_from_error_items(exc.errors()))

        if classify(exc) is ErrorKind.GENERAL:
            _log.error("http.unhandled_error", error_type=type(exc).__name__, error=str(exc))
            return StandardErrorResponse(500).add_message_error("error", UNEXPECTED_ERROR_MESSAGE)
        return StandardErrorResponse(status_for(exc)).add_error(exc)

    async def handle(self, request: Any, exc: BaseException) -> Any:
        return error_json_response(self.build(exc), request)

    def register(self, app: Any) -> None:
        """Register the handler on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type in self._handled:
            app.add_exception_handler(exc_type, self.handle)


__all__ = ["FastAPIExceptionMapper", "UNEXPECTED_ERROR_MESSAGE"]
