"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from vault_kv.observability.logging import get_logger

logger = get_logger(__name__)


def millis_to_timeout(timeout_ms: int) -> float | None:
    """Convert a millisecond budget to an httpx timeout; ``0`` disables it."""
    if not timeout_ms:
        return None
    return timeout_ms / 1000.0


class HttpxHttpClient:
    """Thin async httpx wrapper.

    Unlike a general-purpose client, status codes are left to the caller:
    every response, 2xx or not, is returned as-is.  Transport failures
    (``httpx.TransportError``, ``httpx.InvalidURL``, ...) propagate unmodified.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float | None = 10.0,
        *,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
            **kwargs,
        )

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.debug("http.request_failed", method=method, url=url, exc=repr(exc))
            raise
        logger.debug("http.response", method=method, url=url, status_code=response.status_code)
        return response


__all__ = ["HttpxHttpClient", "millis_to_timeout"]
