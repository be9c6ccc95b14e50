"""ChatChoice value object for normalized chat chunks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .chunk_delta import ChunkDelta


@dataclass(frozen=True)
class ChatChoice:
    """One choice entry of a :class:`NormalizedChunk`.

    ``finish_reason`` and ``logprobs`` stay ``None`` on every mid-stream
    chunk; an intermediate chunk never claims completion.
    """

    index: int
    delta: ChunkDelta
    finish_reason: Optional[str] = None
    logprobs: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "delta": self.delta.to_dict(),
            "finish_reason": self.finish_reason,
            "logprobs": self.logprobs,
        }


__all__ = ["ChatChoice"]
