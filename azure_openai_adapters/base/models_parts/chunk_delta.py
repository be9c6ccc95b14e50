"""
ChunkDelta value object.

The ``delta`` carried by every choice of a normalized chat chunk. Both
fields are always populated: role defaults to ``"assistant"`` and content to
the empty string, so consumers never branch on absence.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_ROLE = "assistant"


@dataclass(frozen=True)
class ChunkDelta:
    """Role and text fragment of one streamed choice."""

    role: str = DEFAULT_ROLE
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


__all__ = ["ChunkDelta", "DEFAULT_ROLE"]
