"""Observability – structured logging helpers."""
from response_commons.observability.logging.protocol import Logger
from response_commons.observability.logging.factory import JsonLoggerFactory
from response_commons.observability.logging.processors import RequestIdProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "RequestIdProcessor",
    "get_logger",
]
