"""Observability – structured logging helpers."""
from adoptflow.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from adoptflow.observability.logging.factory import JsonLoggerFactory
from adoptflow.observability.logging.processors import get_logger, message_context

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "message_context",
]
