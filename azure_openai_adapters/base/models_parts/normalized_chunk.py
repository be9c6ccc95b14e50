"""
NormalizedChunk: the provider-agnostic chat streaming record.

Every upstream event becomes exactly one ``NormalizedChunk``. The record is
immutable; pacing only decides *when* it is released.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .chat_choice import ChatChoice
from .usage import Usage

CHAT_CHUNK_OBJECT = "chat.completion.chunk"


@dataclass(frozen=True)
class NormalizedChunk:
    """Canonical chat chunk.

    Attributes:
        id: Upstream event identifier (empty when the provider sent none).
        model: Model name requested by the caller; fixed for the whole stream.
        created: Creation timestamp copied from the upstream event.
        choices: Ordered choice deltas.
        usage: Always ``None`` mid-stream.
        object: Kind discriminator, ``"chat.completion.chunk"``.
    """

    id: str
    model: str
    created: int
    choices: Tuple[ChatChoice, ...]
    usage: Optional[Usage] = None
    object: str = CHAT_CHUNK_OBJECT

    @property
    def content(self) -> str:
        """Text of the first choice; empty for choice-less chunks."""
        return self.choices[0].delta.content if self.choices else ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the OpenAI wire shape of this chunk."""
        return {
            "id": self.id,
            "object": self.object,
            "created": self.created,
            "model": self.model,
            "choices": [c.to_dict() for c in self.choices],
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = ["NormalizedChunk", "CHAT_CHUNK_OBJECT"]
