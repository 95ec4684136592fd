"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from vault_kv.observability.logging.filters import SensitiveFieldsFilter


class RedactionProcessor:
    """structlog processor that masks sensitive keys in every event dict.

    Usage::

        structlog.configure(processors=[RedactionProcessor(), ...])
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._filter.redact_deep(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger that emits through stdlib ``logging``.

    Output honours stdlib levels and handlers, so library DEBUG events stay
    silent until the host configures logging (or calls
    :meth:`~vault_kv.observability.logging.factory.JsonLoggerFactory.configure`).

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


__all__ = ["RedactionProcessor", "get_logger"]
