"""Streaming package for the adapter layer.

Exposes the pacing engine (backlog, policy, paced stream), the chunk
normalizer, the legacy adapter, metrics and finalize helpers under a single
namespace.
"""

from .backlog import BacklogBuffer
from .normalizer import normalize_chunk
from .pacing import PacingConfig, PacingState, choose_delay_ms, get_pacing_config, reset_pacing_config
from .streaming_metrics import StreamMetrics
from .streaming_finalize import finalize_stream
from .paced_stream import PacedStream, close_upstream
from .legacy_adapter import to_text_chunk, to_text_chunks

__all__ = [
    "BacklogBuffer",
    "normalize_chunk",
    "PacingConfig",
    "PacingState",
    "choose_delay_ms",
    "get_pacing_config",
    "reset_pacing_config",
    "StreamMetrics",
    "finalize_stream",
    "PacedStream",
    "close_upstream",
    "to_text_chunk",
    "to_text_chunks",
]
