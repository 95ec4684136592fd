"""HashiCorp Vault adapter – VaultKeyValueStore."""
from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from vault_kv.adapters.http import HttpxHttpClient, millis_to_timeout
from vault_kv.adapters.vault.envelope import StateEnvelope
from vault_kv.config.settings import DEFAULT_TIMEOUT_MS
from vault_kv.kernel.errors import MalformedResponseError, UnexpectedStatusError
from vault_kv.kernel.types import Err, Ok, Result
from vault_kv.kvstore.port import KeyValueStore
from vault_kv.observability.logging import get_logger

if TYPE_CHECKING:
    from vault_kv.config.settings import VaultKVSettings

logger = get_logger(__name__)

TOKEN_HEADER = "X-Vault-Token"

# InvalidURL is not an HTTPError subclass but is how httpx rejects a bad base URL.
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


class VaultKeyValueStore(KeyValueStore):
    """Store one string "state" per name under a Vault KV path.

    Each call opens a short-lived client, sends exactly one request and
    never retries::

        store = new_vault_key_value_store("http://vault:8200/v1/secret/app", token)
        result = await store.set_value("member1", state)
        if result.is_err():
            ...

    ``set_value`` succeeds only on 204.  ``get_value`` maps 200 to the stored
    state and 404 to ``Ok(None)``.  Other statuses become
    :class:`UnexpectedStatusError`; transport failures and timeouts come back
    as the raw ``httpx`` exception inside ``Err``.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._headers = {TOKEN_HEADER: auth_token}
        self._timeout_ms = timeout_ms
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: "VaultKVSettings",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "VaultKeyValueStore":
        return cls(settings.url, settings.token, settings.timeout_ms, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    def __repr__(self) -> str:
        return f"VaultKeyValueStore(base_url={self._base_url!r}, timeout_ms={self._timeout_ms!r})"

    def url_for(self, name: str) -> str:
        return f"{self._base_url}/{name}"

    def _client(self) -> HttpxHttpClient:
        return HttpxHttpClient(
            timeout=millis_to_timeout(self._timeout_ms),
            headers=self._headers,
            transport=self._transport,
        )

    async def set_value(self, name: str, value: str) -> Result[None, Exception]:
        logger.debug("vault_kv.set_value", name=name)
        body = StateEnvelope(state=value).to_request_body()
        try:
            async with self._client() as client:
                response = await client.post(self.url_for(name), json=body)
        except _TRANSPORT_ERRORS as exc:
            logger.debug("vault_kv.set_value_failed", name=name, exc=repr(exc))
            return Err(exc)

        logger.debug("vault_kv.set_value_response", name=name, status_code=response.status_code)
        if response.status_code != 204:
            return Err(
                UnexpectedStatusError(
                    f"Failed to persist with status code {response.status_code}",
                    status_code=response.status_code,
                    operation="set_value",
                )
            )
        return Ok(None)

    async def get_value(self, name: str) -> Result[str | None, Exception]:
        logger.debug("vault_kv.get_value", name=name)
        try:
            async with self._client() as client:
                response = await client.get(self.url_for(name))
        except _TRANSPORT_ERRORS as exc:
            logger.debug("vault_kv.get_value_failed", name=name, exc=repr(exc))
            return Err(exc)

        logger.debug("vault_kv.get_value_response", name=name, status_code=response.status_code)
        if response.status_code == 404:
            return Ok(None)
        if response.status_code != 200:
            return Err(
                UnexpectedStatusError(
                    f"Failed to read from vault with status code {response.status_code}",
                    status_code=response.status_code,
                    operation="get_value",
                )
            )
        try:
            envelope = StateEnvelope.from_response(response)
        except MalformedResponseError as exc:
            logger.debug("vault_kv.get_value_malformed", name=name, **exc.log_fields())
            return Err(exc)
        return Ok(envelope.state)


def new_vault_key_value_store(
    base_url: str,
    auth_token: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> VaultKeyValueStore:
    """Create a store rooted at *base_url*.

    Args:
        base_url: ``<scheme>://<host>:<port>/<path>``; entries live at
            ``<base_url>/<name>``.  Not validated until the first request.
        auth_token: sent as ``X-Vault-Token`` on every request.
        timeout_ms: per-request budget in milliseconds; ``0`` disables it.
    """
    return VaultKeyValueStore(base_url, auth_token, timeout_ms)


__all__ = ["DEFAULT_TIMEOUT_MS", "TOKEN_HEADER", "VaultKeyValueStore", "new_vault_key_value_store"]
