"""OpenAI non-streaming assistant message protocol."""

from __future__ import annotations

from typing import Optional, Protocol


class OpenAIMessage(Protocol):
    content: Optional[str]
