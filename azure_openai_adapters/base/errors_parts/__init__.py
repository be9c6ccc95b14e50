"""Errors parts package public surface.

Prefer importing from `azure_openai_adapters.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError, unsupported
from .classification import classify_exception, wrap_exception

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "unsupported", "wrap_exception"]
