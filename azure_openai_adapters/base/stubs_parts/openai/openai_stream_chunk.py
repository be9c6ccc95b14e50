"""OpenAI chat streaming chunk protocol (the raw upstream event)."""

from __future__ import annotations

from typing import Protocol, Sequence

from .openai_stream_choice import OpenAIStreamChoice


class OpenAIStreamChunk(Protocol):
    """Raw partial-completion event as delivered by the SDK stream.

    Attributes:
        id: Event identifier.
        created: Unix creation timestamp.
        choices: Ordered choice deltas; Azure may send an empty list on its
            first (content filter) event.
    """

    id: str
    created: int
    choices: Sequence[OpenAIStreamChoice]
