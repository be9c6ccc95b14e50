"""Typed protocol stubs for third-party SDK response shapes.

Preserves a single import surface while the concrete protocol definitions
live in ``stubs_parts/``.
"""

from .stubs_parts.openai import (
    OpenAIChoiceDelta,
    OpenAIStreamChoice,
    OpenAIStreamChunk,
    OpenAIUsage,
    OpenAIMessage,
    OpenAINonStreamChoice,
    OpenAIChatResponse,
    OpenAIEmbeddingItem,
    OpenAIEmbeddingResponse,
)

__all__ = [
    "OpenAIChoiceDelta",
    "OpenAIStreamChoice",
    "OpenAIStreamChunk",
    "OpenAIUsage",
    "OpenAIMessage",
    "OpenAINonStreamChoice",
    "OpenAIChatResponse",
    "OpenAIEmbeddingItem",
    "OpenAIEmbeddingResponse",
]
