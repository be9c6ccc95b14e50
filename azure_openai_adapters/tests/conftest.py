"""Pytest configuration for the adapters test suite.

Isolates every test from the host environment: Azure/proxy/pacing variables
are cleared and the config, pacing and dotenv caches are reset so tests can
set exactly what they need with ``monkeypatch``.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, List

import pytest

from azure_openai_adapters.base.streaming import reset_pacing_config
from azure_openai_adapters.config import reset_config_cache

_ISOLATED_ENV = (
    "AZURE_OPENAI_API_BASE",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_MODEL",
    "AZURE_OPENAI_SCOPE",
    "ADAPTERS_CONFIG_FILE",
    "ADAPTERS_LOG_LEVEL",
    "HTTPS_PROXY",
    "https_proxy",
    "HTTP_PROXY",
    "http_proxy",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear adapter env vars and point the dotenv loader at an empty path."""
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    for name in [n for n in os.environ if n.startswith("ADAPTERS_PACING_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    reset_pacing_config()
    yield
    reset_config_cache()
    reset_pacing_config()


@pytest.fixture()
def adapter_log_records(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[logging.LogRecord]]:
    """Capture records reaching the shared ``adapters`` logger (DEBUG and up)."""
    monkeypatch.setenv("ADAPTERS_LOG_LEVEL", "DEBUG")
    records: List[logging.LogRecord] = []
    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = lambda record: records.append(record)  # type: ignore[method-assign]
    base = logging.getLogger("adapters")
    base.setLevel(logging.DEBUG)
    base.addHandler(handler)
    try:
        yield records
    finally:
        base.removeHandler(handler)
