"""
vault_kv – key-value "state" store backed by a HashiCorp Vault KV endpoint.

Import path convention::

    from vault_kv.adapters.vault import new_vault_key_value_store
    from vault_kv.kvstore import CallbackKeyValueStore, KeyValueStore
    from vault_kv.kernel.types import Err, Ok
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
