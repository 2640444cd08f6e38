"""SQLAlchemy adapter – map SQLAlchemy exceptions onto DatabaseError."""
from __future__ import annotations

from response_commons.kernel.errors import DatabaseError, DatabaseErrorKind


def _require_sqlalchemy() -> None:
    try:
        import sqlalchemy  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'response-commons[sqlalchemy]' to use the SQLAlchemy adapter") from exc


def database_error_from_sqlalchemy(err: BaseException) -> DatabaseError | None:
    """Return the :class:`DatabaseError` equivalent of *err*, or ``None``.

    ``NoResultFound``                          → ``NO_ROWS``
    ``DisconnectionError`` / ``ResourceClosedError`` /
    a ``DBAPIError`` that invalidated its connection → ``CONNECTION_DONE``
    any other ``DBAPIError``                   → ``OTHER`` with the driver message
    """
    _require_sqlalchemy()
    from sqlalchemy import exc as sa_exc  # type: ignore[import-untyped]

    if isinstance(err, sa_exc.NoResultFound):
        return DatabaseError(DatabaseErrorKind.NO_ROWS, cause=err)
    if isinstance(err, (sa_exc.DisconnectionError, sa_exc.ResourceClosedError)):
        return DatabaseError(DatabaseErrorKind.CONNECTION_DONE, cause=err)
    if isinstance(err, sa_exc.DBAPIError):
        if err.connection_invalidated:
            return DatabaseError(DatabaseErrorKind.CONNECTION_DONE, cause=err)
        message = str(err.orig) if err.orig is not None else str(err)
        return DatabaseError(DatabaseErrorKind.OTHER, message, cause=err)
    return None


__all__ = ["database_error_from_sqlalchemy"]
