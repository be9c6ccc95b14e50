"""OpenAI streaming choice protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from .openai_choice_delta import OpenAIChoiceDelta


class OpenAIStreamChoice(Protocol):
    """One per-choice entry of a raw streaming event."""

    index: int
    delta: Optional[OpenAIChoiceDelta]
    finish_reason: Optional[str]
