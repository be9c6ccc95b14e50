"""
Structured adapter error exception type.

Wraps SDK and transport exceptions with a normalized `ErrorCode` so callers
can branch on the failure category instead of the SDK's class hierarchy.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"azure"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


def unsupported(provider: str, capability: str) -> ProviderError:
    """Build the error raised for operations the provider cannot perform."""
    return ProviderError(
        code=ErrorCode.UNSUPPORTED,
        message=f"{capability} is not supported by this provider",
        provider=provider,
    )


__all__ = ["ProviderError", "unsupported"]
