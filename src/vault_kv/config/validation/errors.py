"""Config validation errors raised while building store settings."""
from __future__ import annotations

from typing import Any

from vault_kv.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed.

    ``settings_class`` names the dataclass being built (e.g.
    ``VaultKVSettings``) and is mirrored into ``detail["settings"]``.
    """

    default_code = "config_error"

    def __init__(
        self,
        message: str,
        *,
        settings_class: type | None = None,
        env_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.settings_class = settings_class
        self.env_key = env_key
        if settings_class is not None:
            self.detail.setdefault("settings", settings_class.__name__)
        if env_key is not None:
            self.detail.setdefault("env_key", env_key)


class MissingRequiredSettingError(ConfigError):
    """A required ``VAULT_KV_*`` variable is absent from the environment."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, settings_class: type | None = None) -> None:
        super().__init__(
            f"Required setting '{env_key}' is missing",
            settings_class=settings_class,
            env_key=env_key,
        )


class InvalidSettingValueError(ConfigError):
    """A field is present but out of range (empty URL, negative timeout).

    The offending value is kept on ``value`` but left out of ``detail`` so a
    logged error cannot carry a token.
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        field: str,
        value: object,
        reason: str,
        *,
        settings_class: type | None = None,
        env_key: str | None = None,
    ) -> None:
        super().__init__(
            f"Setting '{env_key or field}' is invalid: {reason}",
            settings_class=settings_class,
            env_key=env_key,
            detail={"field": field, "reason": reason},
        )
        self.field = field
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
