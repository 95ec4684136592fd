"""Testing support – in-memory doubles for host applications' tests."""

from vault_kv.testing.fakes import FakeKeyValueStore

__all__ = ["FakeKeyValueStore"]
