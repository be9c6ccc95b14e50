"""OpenAI embeddings response protocols."""

from __future__ import annotations

from typing import Protocol, Sequence

from .openai_usage import OpenAIUsage


class OpenAIEmbeddingItem(Protocol):
    embedding: Sequence[float]


class OpenAIEmbeddingResponse(Protocol):
    data: Sequence[OpenAIEmbeddingItem]
    usage: OpenAIUsage
