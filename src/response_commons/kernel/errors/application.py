"""Application-layer errors — failures that already carry an HTTP status."""

from __future__ import annotations

from typing import Any

from response_commons.kernel.errors.base import BaseError


class HTTPError(BaseError):
    """An error raised by a handler with an explicit status and message.

    ``internal`` keeps the underlying exception for logging; it is never
    exposed in the response body.
    """

    default_code = "http_error"

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        internal: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, cause=internal, **kwargs)
        self.status_code = status_code
        self.internal = internal


__all__ = ["HTTPError"]
