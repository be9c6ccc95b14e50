"""Finalize stream helper.

Emits the one consolidated log line that closes every paced stream,
whatever the outcome.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamMetrics

OUTCOME_EVENTS = {
    "ok": "stream.end",
    "error": "stream.error",
    "cancelled": "stream.cancelled",
}


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    outcome: str = "ok",
    error_code: Optional[str] = None,
    error: Optional[str] = None,
) -> None:
    """Log the terminal event of a stream with its metrics.

    ``outcome`` is one of ``"ok"``, ``"error"`` or ``"cancelled"``.
    """
    normalized_log_event(
        logger,
        OUTCOME_EVENTS.get(outcome, "stream.end"),
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=None,
        error_code=error_code,
        level=logging.WARNING if outcome == "error" else logging.INFO,
        error=error[:260] if error else None,
        **metrics.as_fields(),
    )


__all__ = ["finalize_stream", "OUTCOME_EVENTS"]
