"""SQLAlchemy adapter – persistence error mapping.

Importing this package registers :func:`database_error_from_sqlalchemy`
with the error translator.
"""
from response_commons.adapters.sqlalchemy.errors import database_error_from_sqlalchemy
from response_commons.application.responses import register_error_converter

register_error_converter(database_error_from_sqlalchemy)

__all__ = ["database_error_from_sqlalchemy"]
