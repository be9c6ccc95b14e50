"""HTTP utilities package for the adapters.

Exposes pooled async httpx clients.
"""

from .client import get_async_httpx_client, aclose_all_clients

__all__ = ["get_async_httpx_client", "aclose_all_clients"]
