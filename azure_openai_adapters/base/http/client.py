"""Shared async HTTP client pool for the adapters.

Purpose:
    Provide a centralized pool of reusable ``httpx.AsyncClient`` instances
    handed to the OpenAI SDK, so adapters built against the same proxy share
    connections instead of allocating one pool per adapter.

External dependencies:
    - ``httpx`` for the underlying async HTTP client.

Lifecycle & cleanup:
    - Clients are cached by ``(proxy_url, purpose)``. Purposes keep distinct
      pools apart (e.g. "azure" vs "embeddings").
    - Async clients cannot be closed from an ``atexit`` hook; applications
      and tests call :func:`aclose_all_clients` on shutdown.
"""

from __future__ import annotations

import threading
from contextlib import suppress
from typing import Dict, Optional, Tuple

import httpx

from ...config.defaults import HTTP_DEFAULT_TIMEOUT_SECONDS
from ...config.env import ProxySettings

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.AsyncClient] = {}
_LOCK = threading.RLock()


def get_async_httpx_client(
    proxy: Optional[ProxySettings],
    purpose: str,
    *,
    timeout: float = HTTP_DEFAULT_TIMEOUT_SECONDS,
) -> httpx.AsyncClient:
    """Return a pooled ``httpx.AsyncClient`` routed through ``proxy``.

    Parameters:
        proxy: Outbound proxy; ``None`` connects directly.
        purpose: Short string discriminating separate pools. Keep stable to
            maximize reuse.
        timeout: Overall timeout applied when the client is first created.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant lock.
    """
    proxy_url = proxy.url if proxy is not None else None
    key = (proxy_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.AsyncClient(proxy=proxy_url, timeout=timeout) if proxy_url else httpx.AsyncClient(timeout=timeout)
        _CLIENTS[key] = client
        return client


async def aclose_all_clients() -> None:
    """Close and clear all pooled clients (best-effort)."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for c in clients:
        with suppress(Exception):  # nosec B110 - shutdown path
            await c.aclose()


__all__ = ["get_async_httpx_client", "aclose_all_clients"]
