"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of adapter operations. Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from :class:`asyncio.CancelledError`: this one reports a caller
    request delivered through a :class:`CancellationToken`, while the asyncio
    variant reports task cancellation by the event loop.
    """

__all__ = ["CancelledError"]
