"""Legacy text-completion view over a paced chat stream.

Each :class:`NormalizedChunk` maps to exactly one :class:`TextChunk`, in
order, with no added delay. Every adapted chunk carries
``finish_reason="stop"``, including intermediate ones; consumers of the
legacy shape detect completion by end of stream, not by finish reason.
"""
from __future__ import annotations

from typing import AsyncIterable, AsyncIterator

from ..models import LEGACY_FINISH_REASON, NormalizedChunk, TextChoice, TextChunk, Usage


def to_text_chunk(chunk: NormalizedChunk) -> TextChunk:
    """Map one chat chunk to its legacy completion shape."""
    return TextChunk(
        id=chunk.id,
        model=chunk.model,
        created=chunk.created,
        choices=tuple(
            TextChoice(index=c.index, text=c.delta.content, finish_reason=LEGACY_FINISH_REASON)
            for c in chunk.choices
        ),
        usage=chunk.usage or Usage(),
    )


async def to_text_chunks(stream: AsyncIterable[NormalizedChunk]) -> AsyncIterator[TextChunk]:
    """Adapt a paced chat stream element by element.

    Errors and cancellation raised by ``stream`` propagate unchanged.
    """
    async for chunk in stream:
        yield to_text_chunk(chunk)


__all__ = ["to_text_chunk", "to_text_chunks"]
