"""Unified configuration layer for the Azure adapter.

Merge order (later wins)
------------------------
1. Built-in defaults (``config.defaults``)
2. Optional external config file (JSON or YAML) pointed to by
   ``ADAPTERS_CONFIG_FILE``
3. Environment variables (``AZURE_OPENAI_API_BASE``, ``AZURE_OPENAI_API_KEY``,
   ``AZURE_OPENAI_API_VERSION``, ``AZURE_OPENAI_MODEL``, ``AZURE_OPENAI_SCOPE``)
4. In-code overrides passed to the helper

A ``.env`` file (``DOTENV_FILE`` or ``./.env``) is loaded once before the
environment is read; it only fills variables that are unset or hold
placeholder values.

External config file example::

    azure:
      api_base: https://my-resource.openai.azure.com/
      model: gpt-4o

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    AZURE_DEFAULT_API_VERSION,
    AZURE_DEFAULT_MODEL,
    AZURE_DEFAULT_SCOPE,
    CONFIG_FILE_ENV,
    DOTENV_FILE_ENV,
)
from .env import ENV_MAP, is_placeholder, resolve_env_value

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "azure": {
        "api_version": AZURE_DEFAULT_API_VERSION,
        "model": AZURE_DEFAULT_MODEL,
        "scope": AZURE_DEFAULT_SCOPE,
    },
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables are only replaced when they look like placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _parse_config_text(text: str) -> Dict[str, Any]:
    """Parse JSON first, then YAML; anything but a mapping yields ``{}``."""
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    _FILE_CACHE = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    if provider not in DEFAULTS:
        return {}
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        val, _ = resolve_env_value(field)
        if val is not None:
            out[field] = val
    return out


def reset_config_cache() -> None:
    """Forget cached file/.env state so the next lookup re-reads sources."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
