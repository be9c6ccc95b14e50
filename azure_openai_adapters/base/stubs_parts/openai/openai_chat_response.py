"""OpenAI non-streaming chat completion protocol."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .openai_nonstream_choice import OpenAINonStreamChoice
from .openai_usage import OpenAIUsage


class OpenAIChatResponse(Protocol):
    """Chat completion returned by ``chat.completions.create`` without streaming."""

    id: str
    created: int
    choices: Sequence[OpenAINonStreamChoice]
    usage: Optional[OpenAIUsage]
