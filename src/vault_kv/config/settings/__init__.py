"""Config settings – env-based configuration of the Vault store."""
from vault_kv.config.settings.base import Settings
from vault_kv.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from vault_kv.config.settings.vault import DEFAULT_TIMEOUT_MS, VaultKVSettings

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "VaultKVSettings",
]
