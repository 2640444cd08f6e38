"""FastAPI adapter – request-id propagation middleware."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from response_commons.application.responses import REQUEST_ID_HEADER

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'response-commons[fastapi]' to use the FastAPI adapter"
        ) from exc


class FastAPIRequestIdMiddleware:
    """Bind the inbound ``X-Request-ID`` to structlog and echo it on the response.

    Requests without the header pass through untouched; no id is generated.
    """

    def __init__(self, app: "ASGIApp", header_name: str = REQUEST_ID_HEADER) -> None:
        _require_fastapi()
        self.app = app
        self._header = header_name.lower().encode()

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        request_id = headers.get(self._header, b"").decode("latin-1").strip()
        if not request_id:
            await self.app(scope, receive, send)
            return

        header = self._header
        encoded_id = request_id.encode("latin-1")

        async def send_with_header(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                if all(name.lower() != header for name, _ in headers_list):
                    headers_list.append((header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            await self.app(scope, receive, send_with_header)


__all__ = ["FastAPIRequestIdMiddleware"]
