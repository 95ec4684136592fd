"""Infrastructure errors — unexpected answers from the remote store."""

from __future__ import annotations

from typing import Any

from vault_kv.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class UnexpectedStatusError(InfrastructureError):
    """The remote store answered with a status outside the expected set.

    ``message`` is the literal text handed to callers, e.g.
    ``"Failed to persist with status code 500"``.
    """

    default_code = "unexpected_status"

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        if self.operation is not None:
            base["operation"] = self.operation
        return base

    def log_fields(self) -> dict[str, Any]:
        return {**super().log_fields(), "status_code": self.status_code}


class MalformedResponseError(InfrastructureError):
    """A successful response whose body is not the expected JSON envelope."""

    default_code = "malformed_response"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


__all__ = [
    "InfrastructureError",
    "MalformedResponseError",
    "UnexpectedStatusError",
]
