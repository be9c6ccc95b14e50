"""OpenAI-shaped Protocols consumed by the Azure adapter.

The Azure deployment speaks the OpenAI wire format, so these structural
types describe what the SDK hands back without importing SDK classes at
runtime.
"""

from __future__ import annotations

from .openai_choice_delta import OpenAIChoiceDelta
from .openai_stream_choice import OpenAIStreamChoice
from .openai_stream_chunk import OpenAIStreamChunk
from .openai_usage import OpenAIUsage
from .openai_message import OpenAIMessage
from .openai_nonstream_choice import OpenAINonStreamChoice
from .openai_chat_response import OpenAIChatResponse
from .openai_embedding_response import OpenAIEmbeddingItem, OpenAIEmbeddingResponse

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
