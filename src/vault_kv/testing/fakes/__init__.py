"""Testing fakes – in-memory doubles for the key-value store port."""
from vault_kv.testing.fakes.kvstore import FakeKeyValueStore

__all__ = ["FakeKeyValueStore"]
