"""Config settings – VaultKVSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from vault_kv.config.settings.base import Settings
from vault_kv.config.validation import InvalidSettingValueError

DEFAULT_TIMEOUT_MS = 5000


@dataclasses.dataclass
class VaultKVSettings(Settings):
    """Connection settings for the Vault-backed key-value store.

    Read from ``VAULT_KV_URL``, ``VAULT_KV_TOKEN`` and ``VAULT_KV_TIMEOUT_MS``
    by :class:`~vault_kv.config.settings.loaders.EnvSettingsLoader`.
    ``url`` is the full base path entries live under, e.g.
    ``http://vault:8200/v1/secret/myinstance``.
    """

    _prefix: ClassVar[str] = "VAULT_KV"

    url: str
    token: str = dataclasses.field(repr=False)
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def _validate(self) -> None:
        if not self.url:
            raise InvalidSettingValueError(
                "url", self.url, "must not be empty",
                settings_class=type(self), env_key=self.env_key("url"),
            )
        if self.timeout_ms < 0:
            raise InvalidSettingValueError(
                "timeout_ms", self.timeout_ms, "must be >= 0",
                settings_class=type(self), env_key=self.env_key("timeout_ms"),
            )


__all__ = ["DEFAULT_TIMEOUT_MS", "VaultKVSettings"]
