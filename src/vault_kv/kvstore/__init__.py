"""Key-value store – port and host-framework callback adapter."""
from vault_kv.kvstore.port import KeyValueStore
from vault_kv.kvstore.callbacks import CallbackKeyValueStore, Completion

__all__ = ["CallbackKeyValueStore", "Completion", "KeyValueStore"]
