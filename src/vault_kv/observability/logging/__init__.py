"""Observability – structlog configuration, redaction and logger helper."""
from vault_kv.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from vault_kv.observability.logging.factory import JsonLoggerFactory
from vault_kv.observability.logging.processors import RedactionProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "RedactionProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
