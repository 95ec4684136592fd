"""HashiCorp Vault adapter – key-value "state" store."""
from vault_kv.adapters.vault.envelope import StateEnvelope
from vault_kv.adapters.vault.store import (
    DEFAULT_TIMEOUT_MS,
    VaultKeyValueStore,
    new_vault_key_value_store,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "StateEnvelope",
    "VaultKeyValueStore",
    "new_vault_key_value_store",
]
