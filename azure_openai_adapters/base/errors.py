"""Unified adapter error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``azure_openai_adapters.base.errors_parts`` so callers keep a single stable
import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError, unsupported
from .errors_parts.classification import classify_exception, wrap_exception

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "unsupported", "wrap_exception"]
