"""
Chunk and response value objects for the adapter layer.

Public surface re-exporting the one-class-per-file modules under
``models_parts``. All records are frozen dataclasses and expose
``to_dict()`` returning the OpenAI wire shape.
"""

from .models_parts.chunk_delta import ChunkDelta, DEFAULT_ROLE
from .models_parts.chat_choice import ChatChoice
from .models_parts.usage import Usage
from .models_parts.normalized_chunk import NormalizedChunk, CHAT_CHUNK_OBJECT
from .models_parts.text_choice import TextChoice, LEGACY_FINISH_REASON
from .models_parts.text_chunk import TextChunk, TEXT_COMPLETION_OBJECT

__all__ = [
    "ChunkDelta",
    "DEFAULT_ROLE",
    "ChatChoice",
    "Usage",
    "NormalizedChunk",
    "CHAT_CHUNK_OBJECT",
    "TextChoice",
    "LEGACY_FINISH_REASON",
    "TextChunk",
    "TEXT_COMPLETION_OBJECT",
]
