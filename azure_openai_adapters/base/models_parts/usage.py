"""Token usage value object shared by chunk and response shapes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Usage:
    """Token accounting reported by the provider."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["Usage"]:
        """Build from an SDK usage object; ``None`` stays ``None``.

        Missing counters are zero-filled.
        """
        if raw is None:
            return None
        return cls(
            prompt_tokens=getattr(raw, "prompt_tokens", None) or 0,
            completion_tokens=getattr(raw, "completion_tokens", None) or 0,
            total_tokens=getattr(raw, "total_tokens", None) or 0,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "completion_tokens": self.completion_tokens,
            "prompt_tokens": self.prompt_tokens,
            "total_tokens": self.total_tokens,
        }


__all__ = ["Usage"]
