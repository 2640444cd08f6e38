"""Infrastructure errors — persistence-layer failures."""

from __future__ import annotations

from enum import Enum
from typing import Any

from response_commons.kernel.errors.base import BaseError


class DatabaseErrorKind(str, Enum):
    """Driver sentinel conditions recognised by the translator."""

    NO_ROWS = "no_rows"
    CONNECTION_DONE = "connection_done"
    OTHER = "other"


class DatabaseError(BaseError):
    """A persistence failure, tagged with the sentinel it corresponds to.

    For ``OTHER`` the driver message is kept verbatim so constraint patterns
    (``unique constraint`` …) can still be matched against it.
    """

    default_code = "database_error"

    def __init__(
        self,
        kind: DatabaseErrorKind = DatabaseErrorKind.OTHER,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or _DEFAULT_MESSAGES[kind], **kwargs)
        self.kind = kind


_DEFAULT_MESSAGES: dict[DatabaseErrorKind, str] = {
    DatabaseErrorKind.NO_ROWS: "no rows in result set",
    DatabaseErrorKind.CONNECTION_DONE: "connection is already closed",
    DatabaseErrorKind.OTHER: "database error",
}


__all__ = ["DatabaseError", "DatabaseErrorKind"]
