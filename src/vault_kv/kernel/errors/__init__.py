"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        ├── UnexpectedStatusError
        └── MalformedResponseError

Transport failures (connection reset, DNS, timeouts) are not part of this
hierarchy: adapters hand the underlying ``httpx`` exception back unmodified.
"""

from vault_kv.kernel.errors.application import ApplicationError
from vault_kv.kernel.errors.base import BaseError
from vault_kv.kernel.errors.infrastructure import (
    InfrastructureError,
    MalformedResponseError,
    UnexpectedStatusError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "MalformedResponseError",
    "UnexpectedStatusError",
]
