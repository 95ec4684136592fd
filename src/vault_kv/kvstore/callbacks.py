"""Key-value store – CallbackKeyValueStore.

Host frameworks written against a ``(error, result)`` completion contract
expect ``set_value(name, value, cb)`` and ``get_value(name, cb)``.  This module
adapts any :class:`~vault_kv.kvstore.port.KeyValueStore` to that shape::

    store = CallbackKeyValueStore(new_vault_key_value_store(url, token))

    def on_read(err, state):
        if err is not None:
            ...
    await store.get_value("member1", on_read)
"""
from __future__ import annotations

from typing import Any, Callable

from vault_kv.kvstore.port import KeyValueStore

Completion = Callable[[BaseException | None, Any], Any]


class CallbackKeyValueStore:
    """Invoke ``callback(error, result)`` exactly once per call.

    ``error`` is ``None`` unless the call failed.  ``result`` is the stored
    string for a successful read, ``None`` for an absent name, and ``None``
    for every write.  Whatever the callback returns is handed back to the
    awaiting caller; if the callback raises, the exception propagates.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    async def set_value(self, name: str, value: str, callback: Completion) -> Any:
        result = await self._store.set_value(name, value)
        return callback(*result.as_completion())

    async def get_value(self, name: str, callback: Completion) -> Any:
        result = await self._store.get_value(name)
        return callback(*result.as_completion())


__all__ = ["CallbackKeyValueStore", "Completion"]
