"""Kernel types – Result monad."""
from vault_kv.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
