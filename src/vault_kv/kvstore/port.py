"""Key-value store – KeyValueStore port."""
from __future__ import annotations

import abc

from vault_kv.kernel.types import Result


class KeyValueStore(abc.ABC):
    """Port: persist and retrieve one opaque string "state" per name.

    Implementations never raise for remote failures; they return ``Err``.
    A read of an absent name is ``Ok(None)``.
    """

    @abc.abstractmethod
    async def set_value(self, name: str, value: str) -> Result[None, Exception]: ...

    @abc.abstractmethod
    async def get_value(self, name: str) -> Result[str | None, Exception]: ...


__all__ = ["KeyValueStore"]
