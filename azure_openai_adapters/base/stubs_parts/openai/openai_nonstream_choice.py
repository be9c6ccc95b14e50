"""OpenAI non-streaming choice protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from .openai_message import OpenAIMessage


class OpenAINonStreamChoice(Protocol):
    index: int
    message: Optional[OpenAIMessage]
    finish_reason: Optional[str]
