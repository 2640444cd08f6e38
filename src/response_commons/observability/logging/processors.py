"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from response_commons.observability.logging.protocol import Logger


class RequestIdProcessor:
    """structlog processor that drops an empty ``request_id`` from the event.

    The FastAPI middleware binds the inbound ``X-Request-ID`` into the
    structlog context variables; requests without one log no such key.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        if not event_dict.get("request_id"):
            event_dict.pop("request_id", None)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Logger:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RequestIdProcessor", "get_logger"]
