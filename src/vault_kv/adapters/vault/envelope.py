"""Vault adapter – request/response bodies of the KV endpoint."""
from __future__ import annotations

import dataclasses
import json
from typing import Any

import httpx

from vault_kv.kernel.errors import MalformedResponseError


@dataclasses.dataclass(frozen=True)
class StateEnvelope:
    """The ``{"data": {"state": ...}}`` body Vault returns for a stored entry.

    Writes send ``{"state": value}``; Vault echoes that object back under
    ``data`` on reads, next to lease metadata this adapter ignores.
    """

    state: str

    def to_request_body(self) -> dict[str, str]:
        return {"state": self.state}

    @classmethod
    def from_response(cls, response: httpx.Response) -> "StateEnvelope":
        """Decode a 200 read response.

        Raises:
            MalformedResponseError: the body is not JSON, or ``data.state`` is
                missing or not a string.
        """
        try:
            payload: Any = json.loads(response.content)
        except (ValueError, UnicodeDecodeError) as exc:
            raise MalformedResponseError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                cause=exc,
            ) from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise MalformedResponseError(
                "Response body has no 'data' object",
                status_code=response.status_code,
            )
        state = data.get("state")
        if not isinstance(state, str):
            raise MalformedResponseError(
                "Response body has no string 'data.state'",
                status_code=response.status_code,
                detail={"keys": sorted(data)},
            )
        return cls(state=state)


__all__ = ["StateEnvelope"]
