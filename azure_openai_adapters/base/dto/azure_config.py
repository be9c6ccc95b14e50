"""Typed configuration for the Azure OpenAI adapter.

Purpose
-------
Carry the merged output of ``config.get_provider_config("azure")`` into the
adapter as a validated object.

Failure modes
-------------
- ``api_base`` is optional at this level; its absence is reported by the
  adapter as a ``CONFIGURATION`` error so callers see the adapter taxonomy
  rather than a pydantic error.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config.defaults import (
    AZURE_DEFAULT_API_VERSION,
    AZURE_DEFAULT_MODEL,
    AZURE_DEFAULT_SCOPE,
    HTTP_DEFAULT_TIMEOUT_SECONDS,
)


class AzureConfig(BaseModel):
    """Azure OpenAI connection settings.

    Attributes
    ----------
    api_base:
        Resource endpoint, used as the SDK ``base_url``.
    api_version:
        Data-plane API version.
    api_key:
        Static key. When unset, an Azure AD bearer token provider is used.
    model:
        Default deployment for bodies that name none.
    scope:
        Azure AD scope requested for bearer tokens.
    timeout_seconds:
        Overall HTTP timeout handed to the transport.
    extra:
        Free-form bag for settings not modelled here.
    """

    model_config = ConfigDict(extra="ignore")

    api_base: Optional[str] = None
    api_version: str = AZURE_DEFAULT_API_VERSION
    api_key: Optional[str] = None
    model: str = AZURE_DEFAULT_MODEL
    scope: str = AZURE_DEFAULT_SCOPE
    timeout_seconds: float = Field(default=HTTP_DEFAULT_TIMEOUT_SECONDS, gt=0)
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["AzureConfig"]
