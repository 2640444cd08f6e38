"""Pydantic adapter – validation error mapping.

Importing this package registers :func:`kernel_error_from_pydantic` with the
error translator.
"""
from response_commons.adapters.pydantic.errors import (
    kernel_error_from_error_items,
    kernel_error_from_pydantic,
)
from response_commons.application.responses import register_error_converter

register_error_converter(kernel_error_from_pydantic)

__all__ = ["kernel_error_from_error_items", "kernel_error_from_pydantic"]
