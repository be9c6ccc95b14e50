"""azure_openai_adapters.config.env
===============================

Environment variable mapping and helpers for the Azure adapter.

Purpose
-------
- Single source of truth for the env var names the adapter reads
  (``ENV_MAP``), with aliases listed canonical-first in ``ENV_ALIASES``.
- Resolve the outbound HTTP proxy from ``HTTPS_PROXY`` / ``HTTP_PROXY``
  into a typed :class:`ProxySettings`.

Failure Modes
-------------
- Helpers return ``None`` when nothing is set; callers decide how to proceed.
- A proxy URL without a host is ignored rather than rejected.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote, unquote, urlsplit

from .defaults import PROXY_DEFAULT_PORT

# Config field -> canonical env var
ENV_MAP: Dict[str, str] = {
    "api_base": "AZURE_OPENAI_API_BASE",
    "api_version": "AZURE_OPENAI_API_VERSION",
    "api_key": "AZURE_OPENAI_API_KEY",  # pragma: allowlist secret - env var name
    "model": "AZURE_OPENAI_MODEL",
    "scope": "AZURE_OPENAI_SCOPE",
}

# Config field -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "api_base": ("AZURE_OPENAI_API_BASE", "AZURE_OPENAI_ENDPOINT"),
}

# Checked in order; the first non-empty value wins.
PROXY_ENV_VARS: Tuple[str, ...] = ("HTTPS_PROXY", "https_proxy", "HTTP_PROXY", "http_proxy")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. Case-insensitive.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield env var names for a config field, canonical first."""
    canonical = ENV_MAP.get(field)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(field, ()):
        if alias != canonical:
            yield alias


def resolve_env_value(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for ``field``; ``(None, None)`` when unset."""
    for name in get_env_var_candidates(field):
        if val := os.environ.get(name):
            return val, name
    return None, None


@dataclass(frozen=True)
class ProxySettings:
    """Outbound proxy parsed from the environment."""

    host: str
    port: int = PROXY_DEFAULT_PORT
    scheme: str = "http"
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def url(self) -> str:
        """Proxy URL suitable for ``httpx`` (credentials percent-encoded)."""
        auth = ""
        if self.username:
            auth = quote(self.username, safe="")
            if self.password:
                auth += ":" + quote(self.password, safe="")
            auth += "@"
        return f"{self.scheme}://{auth}{self.host}:{self.port}"


def parse_proxy_url(raw: str) -> Optional[ProxySettings]:
    """Parse a proxy URL; returns ``None`` when it has no host.

    A bare ``host:port`` is accepted and treated as ``http://host:port``.
    Percent-encoded credentials are decoded.
    """
    text = raw.strip()
    if "://" not in text:
        text = f"http://{text}"
    parts = urlsplit(text)
    if not parts.hostname:
        return None
    try:
        port = parts.port or PROXY_DEFAULT_PORT
    except ValueError:
        port = PROXY_DEFAULT_PORT
    return ProxySettings(
        host=parts.hostname,
        port=port,
        scheme=parts.scheme or "http",
        username=unquote(parts.username) if parts.username else None,
        password=unquote(parts.password) if parts.password else None,
    )


def resolve_proxy(environ: Optional[Mapping[str, str]] = None) -> Optional[ProxySettings]:
    """Return the configured proxy, ``HTTPS_PROXY`` taking precedence."""
    env = os.environ if environ is None else environ
    for name in PROXY_ENV_VARS:
        if raw := env.get(name):
            return parse_proxy_url(raw)
    return None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "PROXY_ENV_VARS",
    "ProxySettings",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_env_value",
    "parse_proxy_url",
    "resolve_proxy",
]
