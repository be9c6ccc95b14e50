"""Chunk normalizer: raw upstream event -> :class:`NormalizedChunk`.

Pure function of its inputs. Missing fields are defaulted, never rejected:
role becomes ``"assistant"``, content becomes ``""``. Finish reasons and
usage are dropped because an intermediate chunk must not claim completion.
"""
from __future__ import annotations

from typing import Any, Tuple

from ..models import ChatChoice, ChunkDelta, DEFAULT_ROLE, NormalizedChunk
from ..stubs import OpenAIStreamChoice, OpenAIStreamChunk


def _normalize_choice(position: int, choice: OpenAIStreamChoice) -> ChatChoice:
    delta = getattr(choice, "delta", None)
    role = getattr(delta, "role", None) or DEFAULT_ROLE
    content = getattr(delta, "content", None) or ""
    index = getattr(choice, "index", None)
    return ChatChoice(
        index=index if isinstance(index, int) else position,
        delta=ChunkDelta(role=role, content=content),
    )


def normalize_chunk(raw: OpenAIStreamChunk | Any, model: str) -> NormalizedChunk:
    """Rewrite one upstream event into the canonical chat chunk.

    Parameters:
        raw: SDK streaming chunk (attribute access; see ``OpenAIStreamChunk``).
        model: Model name requested by the caller, stamped on every chunk.
    """
    choices: Tuple[ChatChoice, ...] = tuple(
        _normalize_choice(i, c) for i, c in enumerate(getattr(raw, "choices", None) or ())
    )
    return NormalizedChunk(
        id=getattr(raw, "id", None) or "",
        model=model,
        created=getattr(raw, "created", None) or 0,
        choices=choices,
        usage=None,
    )


__all__ = ["normalize_chunk"]
