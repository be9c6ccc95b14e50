"""
Adapters Base Package

Provider-agnostic building blocks shared by adapters:
- Models: immutable chunk and response records
- Streaming: backlog buffer, pacing policy, paced stream, legacy adapter
- Errors, cancellation and structured logging
- Interfaces and request DTOs
"""

from .cancellation import CancellationToken, CancelledError
from .errors import ErrorCode, ProviderError, classify_exception, wrap_exception
from .interfaces import BaseLlmApi
from .models import ChatChoice, ChunkDelta, NormalizedChunk, TextChoice, TextChunk, Usage
from .streaming import (
    BacklogBuffer,
    PacedStream,
    PacingConfig,
    StreamMetrics,
    choose_delay_ms,
    get_pacing_config,
    normalize_chunk,
    to_text_chunks,
)

__all__ = [
    # Models
    "ChunkDelta",
    "ChatChoice",
    "Usage",
    "NormalizedChunk",
    "TextChoice",
    "TextChunk",
    # Interfaces
    "BaseLlmApi",
    # Errors / cancellation
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "wrap_exception",
    "CancellationToken",
    "CancelledError",
    # Streaming
    "BacklogBuffer",
    "PacedStream",
    "PacingConfig",
    "StreamMetrics",
    "choose_delay_ms",
    "get_pacing_config",
    "normalize_chunk",
    "to_text_chunks",
]
