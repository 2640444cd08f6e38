"""Application responses – StandardErrorResponse envelope."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from response_commons.application.responses.translator import (
    classify,
    default_message_for_status,
    describe,
)
from response_commons.observability.logging import get_logger

REQUEST_ID_HEADER = "X-Request-ID"

_log = get_logger(__name__)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value:
        return value
    wanted = name.lower()
    for key, candidate in headers.items():
        if key.lower() == wanted and candidate:
            return candidate
    return None


@dataclasses.dataclass
class StandardErrorResponse:
    """Error envelope: ``{code, message, errors: [{field, message}], request_id?}``.

    ``errors`` only grows until :meth:`reset_errors`; the mutators return
    ``self`` so calls can be chained::

        StandardErrorResponse(400).add_error(exc).add_message_error("page", "bad")
    """

    code: int
    message: str = ""
    errors: list[dict[str, str]] = dataclasses.field(default_factory=list)
    request_id: str | None = None

    def __post_init__(self) -> None:
        if not self.message:
            self.message = default_message_for_status(self.code)

    def add_error(self, err: BaseException) -> "StandardErrorResponse":
        """Classify *err*, translate it and append the resulting entries."""
        entries = describe(err)
        _log.debug("response.error_added", kind=classify(err).value, count=len(entries))
        self.errors.extend(entries)
        return self

    def add_message_error(self, field: str, message: str) -> "StandardErrorResponse":
        self.errors.append({"field": field, "message": message})
        return self

    def reset_errors(self) -> None:
        self.errors = []

    def with_request_id(self, headers: Mapping[str, str]) -> "StandardErrorResponse":
        """Copy the inbound ``X-Request-ID`` header, when present."""
        request_id = _header(headers, REQUEST_ID_HEADER)
        if request_id:
            self.request_id = request_id
        return self

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "errors": [dict(e) for e in self.errors],
        }
        if self.request_id:
            payload["request_id"] = self.request_id
        return payload


__all__ = ["REQUEST_ID_HEADER", "StandardErrorResponse"]
