"""Kernel – framework-agnostic errors and result types."""

from vault_kv.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    MalformedResponseError,
    UnexpectedStatusError,
)
from vault_kv.kernel.types import Err, Ok, Result

__all__ = [
    "ApplicationError",
    "BaseError",
    "Err",
    "InfrastructureError",
    "MalformedResponseError",
    "Ok",
    "Result",
    "UnexpectedStatusError",
]
