"""azure_openai_adapters.config.defaults
=====================================

Central place for small, stable default values used by the Azure adapter.
They can be overridden via environment variables or the external config
file, and provide fallbacks for local development and tests.

Only plain constants live here (no I/O, no imports from other adapter
modules) so any layer can import them without cycles.
"""

from __future__ import annotations

# ---- Azure OpenAI ----
# Data-plane API version sent with every request.
AZURE_DEFAULT_API_VERSION = "2025-01-01-preview"
# Azure AD scope requested for bearer tokens when no api key is configured.
AZURE_DEFAULT_SCOPE = "https://cognitiveservices.azure.com/.default"
# Deployment/model used when a request body names none.
AZURE_DEFAULT_MODEL = "gpt-4o"

# ---- HTTP ----
# Overall request timeout for the SDK transport (seconds); streams stay open
# as long as the upstream keeps sending.
HTTP_DEFAULT_TIMEOUT_SECONDS = 600.0

# ---- Proxy ----
# Port assumed when the proxy URL carries none.
PROXY_DEFAULT_PORT = 80

# ---- Config sources ----
# Env var pointing at an optional JSON/YAML config file.
CONFIG_FILE_ENV = "ADAPTERS_CONFIG_FILE"
# Env var overriding the .env file location.
DOTENV_FILE_ENV = "DOTENV_FILE"

__all__ = [
    "AZURE_DEFAULT_API_VERSION",
    "AZURE_DEFAULT_SCOPE",
    "AZURE_DEFAULT_MODEL",
    "HTTP_DEFAULT_TIMEOUT_SECONDS",
    "PROXY_DEFAULT_PORT",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
]
