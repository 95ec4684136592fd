"""Unit tests for the callback completion adapter."""
from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest
import respx

from vault_kv.adapters.vault import new_vault_key_value_store
from vault_kv.kernel.errors import UnexpectedStatusError
from vault_kv.kvstore import CallbackKeyValueStore, KeyValueStore
from vault_kv.testing.fakes import FakeKeyValueStore

BASE_URL = "http://host/v1/secret/app"


class Recorder:
    """Completion callback that records every invocation."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any]] = []

    def __call__(self, error: BaseException | None, result: Any = None) -> str:
        self.calls.append((error, result))
        return "done"


# ---------------------------------------------------------------------------
# With the in-memory fake
# ---------------------------------------------------------------------------

class TestCallbackContract:
    def test_write_success_calls_back_without_error(self) -> None:
        cb = Recorder()
        store = CallbackKeyValueStore(FakeKeyValueStore())

        asyncio.run(store.set_value("member1", "state", cb))

        assert cb.calls == [(None, None)]

    def test_read_success_passes_value(self) -> None:
        cb = Recorder()
        store = CallbackKeyValueStore(FakeKeyValueStore().seed("member1", "state"))

        asyncio.run(store.get_value("member1", cb))

        assert cb.calls == [(None, "state")]

    def test_absent_read_is_null_null(self) -> None:
        cb = Recorder()
        store = CallbackKeyValueStore(FakeKeyValueStore())

        asyncio.run(store.get_value("nobody", cb))

        assert cb.calls == [(None, None)]

    def test_failure_passes_error_only(self) -> None:
        cb = Recorder()
        boom = RuntimeError("kaboom")
        store = CallbackKeyValueStore(FakeKeyValueStore().fail_next(boom))

        asyncio.run(store.get_value("member1", cb))

        assert cb.calls == [(boom, None)]

    def test_returns_callback_result(self) -> None:
        store = CallbackKeyValueStore(FakeKeyValueStore())
        assert asyncio.run(store.set_value("member1", "s", Recorder())) == "done"

    def test_callback_exception_propagates(self) -> None:
        def explode(error: BaseException | None, result: Any = None) -> None:
            raise ValueError("callback failed")

        store = CallbackKeyValueStore(FakeKeyValueStore())
        with pytest.raises(ValueError, match="callback failed"):
            asyncio.run(store.set_value("member1", "s", explode))

    def test_exposes_wrapped_store(self) -> None:
        fake = FakeKeyValueStore()
        assert CallbackKeyValueStore(fake).store is fake
        assert isinstance(fake, KeyValueStore)


# ---------------------------------------------------------------------------
# With the Vault adapter
# ---------------------------------------------------------------------------

class TestCallbackOverVault:
    @respx.mock
    def test_member1_scenario(self) -> None:
        respx.post(f"{BASE_URL}/member1").mock(return_value=httpx.Response(204))
        respx.get(f"{BASE_URL}/member1").mock(
            return_value=httpx.Response(200, json={"data": {"state": '{"k":"v"}'}})
        )
        store = CallbackKeyValueStore(new_vault_key_value_store(BASE_URL, "T"))
        on_set, on_get = Recorder(), Recorder()

        async def run() -> None:
            await store.set_value("member1", '{"k":"v"}', on_set)
            await store.get_value("member1", on_get)

        asyncio.run(run())
        assert on_set.calls == [(None, None)]
        assert on_get.calls == [(None, '{"k":"v"}')]

    @respx.mock
    def test_status_error_reaches_error_slot(self) -> None:
        respx.get(f"{BASE_URL}/member3").mock(return_value=httpx.Response(500))
        cb = Recorder()

        asyncio.run(CallbackKeyValueStore(new_vault_key_value_store(BASE_URL, "T")).get_value("member3", cb))

        [(error, result)] = cb.calls
        assert isinstance(error, UnexpectedStatusError)
        assert "500" in str(error)
        assert result is None

    @respx.mock
    def test_transport_error_reaches_error_slot(self) -> None:
        respx.post(f"{BASE_URL}/member2").mock(side_effect=httpx.ConnectError("kaboom"))
        cb = Recorder()

        asyncio.run(
            CallbackKeyValueStore(new_vault_key_value_store(BASE_URL, "T")).set_value("member2", "s", cb)
        )

        [(error, _)] = cb.calls
        assert str(error) == "kaboom"
