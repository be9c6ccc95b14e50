"""TextChoice value object for legacy text-completion chunks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

LEGACY_FINISH_REASON = "stop"


@dataclass(frozen=True)
class TextChoice:
    """Flat text delta of a legacy completion chunk."""

    index: int
    text: str
    finish_reason: str = LEGACY_FINISH_REASON
    logprobs: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "finish_reason": self.finish_reason,
            "logprobs": self.logprobs,
        }


__all__ = ["TextChoice", "LEGACY_FINISH_REASON"]
