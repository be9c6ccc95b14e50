"""OpenAI-style usage protocol."""

from __future__ import annotations

from typing import Optional, Protocol


class OpenAIUsage(Protocol):
    """Token counters; any of them may be missing."""

    prompt_tokens: Optional[int]
    completion_tokens: Optional[int]
    total_tokens: Optional[int]
