"""
TextChunk: legacy "text completion" view of a NormalizedChunk.

Holds no state of its own; it is derived one-to-one from a chat chunk by the
legacy stream adapter.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .text_choice import TextChoice
from .usage import Usage

TEXT_COMPLETION_OBJECT = "text_completion"


@dataclass(frozen=True)
class TextChunk:
    """Legacy completion chunk with flat ``text`` choices and a usage block."""

    id: str
    model: str
    created: int
    choices: Tuple[TextChoice, ...]
    usage: Usage
    object: str = TEXT_COMPLETION_OBJECT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "object": self.object,
            "created": self.created,
            "model": self.model,
            "choices": [c.to_dict() for c in self.choices],
            "usage": self.usage.to_dict(),
        }


__all__ = ["TextChunk", "TEXT_COMPLETION_OBJECT"]
