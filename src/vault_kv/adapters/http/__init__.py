"""HTTP adapter – thin async httpx client wrapper."""
from vault_kv.adapters.http.client import HttpxHttpClient, millis_to_timeout

__all__ = ["HttpxHttpClient", "millis_to_timeout"]
