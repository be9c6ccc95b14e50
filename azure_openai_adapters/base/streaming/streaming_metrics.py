"""Streaming metrics data structures for paced streams."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Collected metrics for a single paced stream.

    Fields:
      received: upstream events normalized and pushed to the backlog
      emitted: chunks released to the consumer
      released_chars: cumulative released content length
      liveness_waits: polls that found the backlog empty while upstream ran
      peak_depth: largest backlog depth observed
      discarded: buffered chunks dropped on failure or cancellation
      time_to_first_token_ms: delay between start and the first release
      total_duration_ms: wall time until the stream terminated
    """

    received: int = 0
    emitted: int = 0
    released_chars: int = 0
    liveness_waits: int = 0
    peak_depth: int = 0
    discarded: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def as_fields(self) -> Dict[str, Any]:
        return {
            "received_count": self.received,
            "emitted_count": self.emitted,
            "released_chars": self.released_chars,
            "liveness_waits": self.liveness_waits,
            "peak_depth": self.peak_depth,
            "discarded_count": self.discarded,
            "time_to_first_token_ms": self.time_to_first_token_ms,
            "total_duration_ms": self.total_duration_ms,
        }


__all__ = ["StreamMetrics"]
